"""Study schedule service

One active schedule per user. Accepting a schedule inserts the new active
row first and then demotes every other active row of the user, so readers
never observe zero active schedules; a transient second active row is
resolved by reading the most recently created one.
"""
import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from mindsync.infra.supabase.repositories import (
    DuplicateCompletionError,
    SessionCompletionRepository,
    StudyScheduleRepository,
)
from mindsync.models.completion import (
    CompletionOutcome,
    CompletionResult,
    SessionCompletion,
    SessionCompletionCreate,
)
from mindsync.models.schedule import (
    DayPlan,
    ScheduleSession,
    ScheduleStatus,
    StudySchedule,
    StudyScheduleCreate,
    StudyScheduleUpdate,
    Subject,
)
from mindsync.services.inference import GeneratedSchedule
from mindsync.utils.datetime_helper import get_local_now, weekday_name

logger = logging.getLogger(__name__)


class TodaysSessions(BaseModel):
    day_index: int
    day: str
    sessions: List[ScheduleSession]


class SubjectProgress(BaseModel):
    name: str
    completed: bool


class DailyProgress(BaseModel):
    completed: int = 0
    total: int = 0
    subjects: List[SubjectProgress] = Field(default_factory=list)


class StudyScheduleService:
    def __init__(
        self,
        schedules: StudyScheduleRepository,
        completions: SessionCompletionRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._schedules = schedules
        self._completions = completions
        self._clock = clock or get_local_now

    def _today(self) -> date:
        return self._clock().date()

    async def get_active_schedule(self, user_id: str) -> Optional[StudySchedule]:
        """Expire ended schedules, then return the current active one"""
        today = self._today()
        expired = await self._schedules.expire_ended(user_id, today)
        if expired:
            logger.info(f"Expired {expired} schedule(s) for user {user_id}")
        return await self._schedules.find_active(user_id, today)

    async def get_completions(self, user_id: str, schedule_id: str) -> List[SessionCompletion]:
        return await self._completions.find_by_schedule(schedule_id, user_id)

    async def accept_schedule(
        self,
        user_id: str,
        subjects: List[Subject],
        generated: GeneratedSchedule,
        start_date: date,
        end_date: date,
    ) -> StudySchedule:
        """Store a generated plan as the user's single active schedule"""
        schedule = await self._schedules.create(StudyScheduleCreate(
            user_id=user_id,
            subjects=subjects,
            weekly_plan=generated.weekly_plan,
            total_hours=generated.total_hours,
            tips=generated.tips,
            priorities=generated.priorities,
            start_date=start_date,
            end_date=end_date,
            status=ScheduleStatus.ACTIVE,
        ))
        demoted = await self._schedules.demote_active_except(user_id, schedule.id)
        logger.info(f"Schedule {schedule.id} accepted for user {user_id} (demoted {demoted})")
        return schedule

    async def update_day_plan(
        self, user_id: str, day_index: int, sessions: List[ScheduleSession]
    ) -> Optional[StudySchedule]:
        """
        Replace one day's sessions in the active schedule.

        Returns:
            The updated schedule, or None if there is no active schedule

        Raises:
            IndexError: if day_index is outside the weekly plan
        """
        schedule = await self.get_active_schedule(user_id)
        if schedule is None:
            return None
        if not 0 <= day_index < len(schedule.weekly_plan):
            raise IndexError(f"day_index {day_index} out of range")

        weekly_plan = [plan.model_copy() for plan in schedule.weekly_plan]
        weekly_plan[day_index] = DayPlan(day=weekly_plan[day_index].day, sessions=sessions)

        updated = await self._schedules.update(
            schedule.id, StudyScheduleUpdate(weekly_plan=weekly_plan), user_id=user_id
        )
        if updated is not None:
            logger.info(f"Schedule {schedule.id}: {weekly_plan[day_index].day} has been modified")
        return updated

    async def mark_session_complete(
        self,
        user_id: str,
        day: str,
        session_index: int,
        subject: str,
        duration_seconds: int,
    ) -> Optional[CompletionResult]:
        """
        Record a completed scheduled session.

        Returns:
            CompletionResult (already_completed for repeats), or None without an active schedule
        """
        schedule = await self.get_active_schedule(user_id)
        if schedule is None:
            return None

        try:
            completion = await self._completions.create(SessionCompletionCreate(
                user_id=user_id,
                schedule_id=schedule.id,
                day=day,
                session_index=session_index,
                subject=subject,
                duration_seconds=duration_seconds,
            ))
        except DuplicateCompletionError:
            logger.info(f"Session {day}#{session_index} of schedule {schedule.id} already completed")
            return CompletionResult(outcome=CompletionOutcome.ALREADY_COMPLETED)

        return CompletionResult(outcome=CompletionOutcome.COMPLETED, completion=completion)

    @staticmethod
    def is_session_completed(completions: List[SessionCompletion], day: str, session_index: int) -> bool:
        return any(c.day == day and c.session_index == session_index for c in completions)

    def get_todays_sessions(self, schedule: Optional[StudySchedule]) -> Optional[TodaysSessions]:
        if schedule is None:
            return None
        today = weekday_name(self._clock()).lower()
        for index, plan in enumerate(schedule.weekly_plan):
            if plan.day.lower() == today:
                return TodaysSessions(day_index=index, day=plan.day, sessions=plan.sessions)
        return None

    def get_daily_progress(
        self, schedule: Optional[StudySchedule], completions: List[SessionCompletion]
    ) -> DailyProgress:
        todays = self.get_todays_sessions(schedule)
        if todays is None:
            return DailyProgress()

        today = weekday_name(self._clock())
        subjects = [
            SubjectProgress(
                name=session.subject,
                completed=self.is_session_completed(completions, today, index),
            )
            for index, session in enumerate(todays.sessions)
        ]
        return DailyProgress(
            completed=sum(1 for s in subjects if s.completed),
            total=len(subjects),
            subjects=subjects,
        )

    async def delete_active_schedule(self, user_id: str) -> bool:
        schedule = await self.get_active_schedule(user_id)
        if schedule is None:
            return False
        deleted = await self._schedules.delete(schedule.id, user_id=user_id)
        if deleted:
            logger.info(f"Schedule {schedule.id} deleted for user {user_id}")
        return deleted
