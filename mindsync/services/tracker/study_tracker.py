"""Study tracker

Owns the durable timer and the bloom streak engine. Every elapsed-second
delta the timer emits is added to today's bloom progress; both objects
persist their own state independently.
"""
import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from pydantic import BaseModel

from mindsync.infra.storage import StateStore
from mindsync.infra.supabase.repositories import StudySessionRepository
from mindsync.models.session import StudySession, StudySessionCreate
from mindsync.services.bloom import BloomStreakEngine, BloomStreakState
from mindsync.services.timer import DurableTimer, TimerState
from mindsync.utils.datetime_helper import format_elapsed, get_local_now

logger = logging.getLogger(__name__)


class TrackerStatus(BaseModel):
    timer: TimerState
    formatted_time: str
    bloom: BloomStreakState


class StudyTracker:
    def __init__(
        self,
        store: StateStore,
        clock: Optional[Callable[[], datetime]] = None,
        tick_interval: float = 1.0,
    ):
        self._clock = clock or get_local_now
        self.bloom = BloomStreakEngine(store, clock=self._clock)
        self.timer = DurableTimer(store, clock=self._clock, tick_interval=tick_interval)
        self.timer.add_listener(self._on_elapsed)

    def _on_elapsed(self, seconds: int) -> None:
        self.bloom.add_study_time(seconds)

    def load(self) -> TrackerStatus:
        """Restore both engines; bloom first so timer catch-up lands on today"""
        self.bloom.load()
        self.timer.load()
        return self.status()

    def status(self) -> TrackerStatus:
        timer = self.timer.state
        return TrackerStatus(
            timer=timer,
            formatted_time=format_elapsed(timer.elapsed_seconds),
            bloom=self.bloom.state,
        )

    def start(self) -> None:
        """Start the tick loop (requires a running event loop)"""
        self.timer.start_ticking()

    async def shutdown(self) -> None:
        await self.timer.stop_ticking()

    async def end_session(
        self,
        sessions: Optional[StudySessionRepository] = None,
        user_id: Optional[str] = None,
        subjects: Optional[List[str]] = None,
        notes: Optional[str] = None,
    ) -> Optional[StudySession]:
        """
        Record the session, when a repository and user are given, then stop the timer.

        The timer is only cleared once the session row is stored; a failed
        insert propagates and leaves the running session untouched.

        Returns:
            The stored session, or None when nothing was recorded
        """
        elapsed = self.timer.elapsed_seconds
        if sessions is None or user_id is None or elapsed <= 0:
            self.timer.stop()
            return None

        ended_at = self._clock()
        session = await sessions.create(StudySessionCreate(
            user_id=user_id,
            login_timestamp=ended_at - timedelta(seconds=elapsed),
            logout_timestamp=ended_at,
            duration_seconds=elapsed,
            subjects_studied=subjects,
            notes=notes,
        ))
        self.timer.stop()
        logger.info(f"Study session {session.id} recorded for user {user_id}: {elapsed}s")
        return session
