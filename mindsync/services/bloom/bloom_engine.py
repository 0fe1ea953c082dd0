"""Bloom streak engine

Accumulates study time into today's goal progress. Reaching 100% of the
daily goal makes the day a "full bloom" day, which extends the streak.
"""
import logging
from datetime import date, datetime
from typing import Callable, Optional

from pydantic import ValidationError

from mindsync.config import DAILY_GOAL_SECONDS
from mindsync.infra.storage import StateStore
from mindsync.utils.datetime_helper import get_local_now, is_yesterday
from .models.bloom_state import BloomStreakState

logger = logging.getLogger(__name__)

BLOOM_STORAGE_KEY = "mindsync-bloom-streak"


def progress_for(study_seconds: int, goal_seconds: int = DAILY_GOAL_SECONDS) -> float:
    """Saturating progress percentage: min(100, 100 * s / goal)"""
    return min(study_seconds / goal_seconds * 100, 100.0)


class BloomStreakEngine:
    def __init__(
        self,
        store: StateStore,
        clock: Optional[Callable[[], datetime]] = None,
        goal_seconds: int = DAILY_GOAL_SECONDS,
    ):
        if goal_seconds <= 0:
            raise ValueError("goal_seconds must be positive")
        self._store = store
        self._clock = clock or get_local_now
        self._goal_seconds = goal_seconds
        self._state = BloomStreakState(last_recorded_date=self._today())

    def _today(self) -> date:
        return self._clock().date()

    @property
    def state(self) -> BloomStreakState:
        """Current state, moved onto today if the date changed since the last write"""
        self._roll_over(self._today())
        return self._state.model_copy()

    @property
    def goal_seconds(self) -> int:
        return self._goal_seconds

    def load(self) -> BloomStreakState:
        """
        Restore persisted state and reconcile it against today's date.

        Returns:
            The reconciled state (defaults when nothing usable is stored)
        """
        data = self._store.load(BLOOM_STORAGE_KEY)
        if data is not None:
            try:
                self._state = BloomStreakState(**data)
            except (ValidationError, TypeError) as e:
                logger.error(f"Failed to parse bloom streak state: {e}")
                self._state = BloomStreakState(last_recorded_date=self._today())

        self._roll_over(self._today())
        self._save()
        return self.state

    def _roll_over(self, today: date) -> None:
        """
        Move the state onto ``today``.

        A streak survives only when the previous recorded day was yesterday
        and reached full bloom. Lifetime full bloom days are never touched.
        """
        state = self._state
        if state.last_recorded_date == today:
            return

        if is_yesterday(state.last_recorded_date, today) and state.is_full_bloom:
            streak = state.streak_days
        else:
            streak = 0
            if state.streak_days:
                logger.info(
                    f"Bloom streak of {state.streak_days} day(s) broken "
                    f"(last recorded {state.last_recorded_date.isoformat()})"
                )

        self._state = BloomStreakState(
            today_progress_percent=0.0,
            today_study_seconds=0,
            streak_days=streak,
            full_bloom_days=state.full_bloom_days,
            last_recorded_date=today,
        )

    def _save(self) -> None:
        self._store.save(BLOOM_STORAGE_KEY, self._state.model_dump(mode="json"))

    def add_study_time(self, seconds: int) -> BloomStreakState:
        """
        Add study time to today's progress.

        Crossing 100% increments full bloom days and the streak once; further
        time on the same day does not count again.

        Args:
            seconds: Positive number of studied seconds

        Returns:
            Updated state
        """
        if seconds <= 0:
            raise ValueError("seconds must be positive")

        # The process may outlive midnight
        self._roll_over(self._today())

        state = self._state
        was_full_bloom = state.today_progress_percent >= 100

        state.today_study_seconds += seconds
        new_progress = progress_for(state.today_study_seconds, self._goal_seconds)

        if not was_full_bloom and new_progress >= 100:
            state.full_bloom_days += 1
            state.streak_days += 1
            logger.info(
                f"Full bloom reached: streak={state.streak_days}, "
                f"full_bloom_days={state.full_bloom_days}"
            )

        state.today_progress_percent = new_progress
        self._save()
        return self.state
