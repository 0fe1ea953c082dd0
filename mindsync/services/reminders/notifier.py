"""
Reminder notifications

In-app alerts are always recorded. OS-level desktop notifications are sent
only after the user explicitly granted permission, and are best effort.
"""
import asyncio
import functools
import logging
from collections import deque
from datetime import datetime
from typing import Deque, List, Optional
from uuid import uuid4

from plyer import notification as desktop_notification
from pydantic import BaseModel, Field

from mindsync.models.reminder import StudyReminder

logger = logging.getLogger(__name__)

APP_NAME = "MindSync"
REMINDER_BODY = "Time to start your study session!"
MAX_ALERTS = 100


class ReminderAlert(BaseModel):
    """In-app alert raised by a reminder"""
    id: str = Field(default_factory=lambda: uuid4().hex)
    reminder_id: str
    user_id: str
    title: str
    body: str = REMINDER_BODY
    fired_at: datetime


class AlertFeed:
    """Bounded list of in-app alerts waiting to be shown"""

    def __init__(self, max_alerts: int = MAX_ALERTS):
        self._alerts: Deque[ReminderAlert] = deque(maxlen=max_alerts)

    def push(self, alert: ReminderAlert) -> None:
        self._alerts.append(alert)

    def list(self, user_id: Optional[str] = None) -> List[ReminderAlert]:
        return [a for a in self._alerts if user_id is None or a.user_id == user_id]

    def dismiss(self, user_id: str, alert_id: Optional[str] = None) -> int:
        """
        Remove a user's alerts.

        Args:
            user_id: Owner of the alerts
            alert_id: Single alert to remove; all of the user's alerts if None

        Returns:
            Number of removed alerts
        """
        keep = [
            a for a in self._alerts
            if a.user_id != user_id or (alert_id is not None and a.id != alert_id)
        ]
        removed = len(self._alerts) - len(keep)
        self._alerts.clear()
        self._alerts.extend(keep)
        return removed


class ReminderNotifier:
    """Delivers a fired reminder as an in-app alert and, if allowed, a desktop notification"""

    def __init__(self, feed: Optional[AlertFeed] = None, desktop_enabled: bool = False):
        self.feed = feed or AlertFeed()
        self._desktop_enabled = desktop_enabled

    @property
    def desktop_permission_granted(self) -> bool:
        return self._desktop_enabled

    def request_permission(self) -> bool:
        """
        Explicit, user-triggered opt-in to desktop notifications.

        Returns:
            True once desktop notifications are enabled
        """
        self._desktop_enabled = True
        logger.info("Desktop notifications enabled")
        return True

    def revoke_permission(self) -> None:
        self._desktop_enabled = False

    def notify(self, reminder: StudyReminder, fired_at: datetime) -> ReminderAlert:
        alert = ReminderAlert(
            reminder_id=reminder.id,
            user_id=reminder.user_id,
            title=reminder.title,
            fired_at=fired_at,
        )
        self.feed.push(alert)
        logger.info(f"Reminder fired: {reminder.id} '{reminder.title}' for user {reminder.user_id}")

        if self._desktop_enabled:
            self._send_desktop(reminder)
        return alert

    def _send_desktop(self, reminder: StudyReminder) -> None:
        send = functools.partial(self._notify_desktop, reminder)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            send()
            return
        # plyer blocks on dbus / win32 calls
        loop.run_in_executor(None, send)

    def _notify_desktop(self, reminder: StudyReminder) -> None:
        try:
            desktop_notification.notify(
                title=reminder.title,
                message=REMINDER_BODY,
                app_name=APP_NAME,
                timeout=10,
            )
        except Exception as e:
            # Best effort: headless hosts have no notification backend
            logger.warning(f"Desktop notification failed for reminder {reminder.id}: {e}")
