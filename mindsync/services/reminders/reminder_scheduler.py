"""Reminder Scheduler - fires study reminders at their time of day"""
import asyncio
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Dict, List, Optional

from mindsync.config import REMINDER_COOLDOWN_SECONDS, REMINDER_POLL_SECONDS
from mindsync.models.reminder import StudyReminder
from mindsync.utils.datetime_helper import get_local_now, minute_of, weekday_name
from .notifier import ReminderNotifier

logger = logging.getLogger(__name__)

MAX_POLL_SECONDS = 60

ReminderSource = Callable[[], Awaitable[List[StudyReminder]]]


class ReminderScheduler:
    """
    Polls reminders against the wall clock.

    A reminder is Idle or Fired until its cooldown expires. A match fires only
    from Idle, so each reminder fires once per matching minute however often
    the poll runs. The scheduler never writes reminder records.
    """

    def __init__(
        self,
        source: ReminderSource,
        notifier: ReminderNotifier,
        clock: Optional[Callable[[], datetime]] = None,
        poll_interval: float = REMINDER_POLL_SECONDS,
        cooldown_seconds: int = REMINDER_COOLDOWN_SECONDS,
    ):
        if not 0 < poll_interval <= MAX_POLL_SECONDS:
            raise ValueError(f"poll_interval must be in (0, {MAX_POLL_SECONDS}] seconds")
        self._source = source
        self._notifier = notifier
        self._clock = clock or get_local_now
        self._poll_interval = poll_interval
        self._cooldown = timedelta(seconds=cooldown_seconds)
        self._cooldown_until: Dict[str, datetime] = {}
        self._reminders: List[StudyReminder] = []
        self._poll_task: Optional[asyncio.Task] = None

    @property
    def notifier(self) -> ReminderNotifier:
        return self._notifier

    @property
    def cooling_down_ids(self) -> List[str]:
        return list(self._cooldown_until)

    def is_cooling_down(self, reminder_id: str, now: datetime) -> bool:
        until = self._cooldown_until.get(reminder_id)
        if until is None:
            return False
        if now >= until:
            del self._cooldown_until[reminder_id]
            return False
        return True

    def _prune_cooldowns(self, now: datetime) -> None:
        """Drop expired cooldowns, including those of deleted or deactivated reminders"""
        self._cooldown_until = {
            reminder_id: until for reminder_id, until in self._cooldown_until.items() if until > now
        }

    def check_reminders(self, reminders: List[StudyReminder], now: datetime) -> List[StudyReminder]:
        """
        Evaluate reminders at ``now`` and fire the ones that are due.

        Returns:
            Reminders fired by this check
        """
        self._prune_cooldowns(now)
        current_minute = minute_of(now)
        current_day = weekday_name(now)
        fired: List[StudyReminder] = []

        for reminder in reminders:
            if not reminder.is_active:
                continue
            if current_day not in reminder.days_of_week:
                continue
            if reminder.minute != current_minute:
                continue
            if self.is_cooling_down(reminder.id, now):
                continue

            self._cooldown_until[reminder.id] = now + self._cooldown
            self._notifier.notify(reminder, now)
            fired.append(reminder)

        return fired

    async def poll_once(self) -> List[StudyReminder]:
        """Refresh reminder definitions and check them against the clock"""
        try:
            self._reminders = await self._source()
        except Exception as e:
            logger.error(f"Error fetching reminders, using last known list: {e}")
        return self.check_reminders(self._reminders, self._clock())

    def start(self) -> None:
        """Start polling on the running event loop; checks immediately"""
        if self._poll_task is not None and not self._poll_task.done():
            return
        self._poll_task = asyncio.get_running_loop().create_task(self._poll_loop())
        logger.info(f"Reminder scheduler started (every {self._poll_interval}s)")

    async def stop(self) -> None:
        """Cancel polling and wait for it to finish"""
        task, self._poll_task = self._poll_task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Reminder scheduler stopped")

    async def _poll_loop(self) -> None:
        while True:
            try:
                await self.poll_once()
            except Exception as e:
                logger.error(f"Error checking reminders: {e}")
            await asyncio.sleep(self._poll_interval)
