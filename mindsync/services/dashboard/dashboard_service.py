"""Dashboard statistics derived from the past week of activity"""
import logging
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from mindsync.config import WEEKLY_GOAL_HOURS
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.models.completion import SessionCompletion
from mindsync.models.emotion_log import EmotionLog
from mindsync.models.schedule import StudySchedule
from mindsync.models.session import StudySession
from mindsync.utils.datetime_helper import WEEKDAY_SHORT, format_duration, get_local_now, weekday_name
from mindsync.utils.numbers import round_half_up, round_int

logger = logging.getLogger(__name__)

DEFAULT_FOCUS_SCORE = 75  # sessions logged but no plan for today
MAX_SUBJECTS = 6
RECENT_ACTIVITY_LIMIT = 5


class SubjectHours(BaseModel):
    subject: str
    hours: float


class DayHours(BaseModel):
    day: str
    hours: float


class RecentActivity(BaseModel):
    subject: str
    duration: str
    time: str


class DashboardStats(BaseModel):
    focus_score: int = 0
    study_time_today: int = 0
    study_time_yesterday: int = 0
    weekly_study_time: int = 0
    weekly_goal: int = WEEKLY_GOAL_HOURS * 3600
    current_mood: Optional[str] = None
    completed_sessions_today: int = 0
    total_sessions_today: int = 0
    subject_breakdown: List[SubjectHours] = Field(default_factory=list)
    weekly_progress: List[DayHours] = Field(default_factory=list)
    recent_activity: List[RecentActivity] = Field(default_factory=list)

    @property
    def study_time_diff(self) -> str:
        diff = self.study_time_today - self.study_time_yesterday
        diff_minutes = abs(round_int(diff / 60))
        if diff_minutes == 0:
            return "Same as yesterday"
        sign = "+" if diff > 0 else "-"
        return f"{sign}{diff_minutes}min from yesterday"

    @property
    def study_time_today_label(self) -> str:
        return format_duration(self.study_time_today)

    @property
    def weekly_study_time_label(self) -> str:
        return format_duration(self.weekly_study_time)

    @property
    def weekly_progress_percentage(self) -> int:
        return min(round_int(self.weekly_study_time / self.weekly_goal * 100), 100)


def _to_local(dt: datetime, now: datetime) -> datetime:
    if dt.tzinfo is not None and now.tzinfo is not None:
        return dt.astimezone(now.tzinfo)
    return dt


def _local_date(dt: datetime, now: datetime) -> date:
    return _to_local(dt, now).date()


def _activity_duration(seconds: int) -> str:
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m" if hours > 0 else f"{minutes}m"


def build_dashboard_stats(
    now: datetime,
    sessions: List[StudySession],
    completions: List[SessionCompletion],
    latest_emotion: Optional[EmotionLog],
    schedule: Optional[StudySchedule],
) -> DashboardStats:
    """Pure computation of dashboard statistics"""
    today = now.date()
    yesterday = today - timedelta(days=1)

    study_time_today = 0
    study_time_yesterday = 0
    weekly_study_time = 0
    subject_hours: Dict[str, float] = {}
    daily_hours: Dict[str, float] = {}

    for session in sessions:
        session_date = _local_date(session.created_at, now)
        duration = session.duration_seconds or 0
        duration_hours = duration / 3600

        weekly_study_time += duration
        if session_date == today:
            study_time_today += duration
        if session_date == yesterday:
            study_time_yesterday += duration

        subjects = session.subjects_studied or []
        for subject in subjects:
            subject_hours[subject] = subject_hours.get(subject, 0) + duration_hours / len(subjects)

        day_name = WEEKDAY_SHORT[session_date.weekday()]
        daily_hours[day_name] = daily_hours.get(day_name, 0) + duration_hours

    recent_activity = [
        RecentActivity(
            subject=c.subject,
            duration=_activity_duration(c.duration_seconds),
            time=_to_local(c.completed_at, now).strftime("%H:%M"),
        )
        for c in completions[:RECENT_ACTIVITY_LIMIT]
    ]

    completed_today = 0
    total_today = 0
    if schedule is not None:
        today_name = weekday_name(now)
        plan = schedule.day_plan(today_name)
        if plan is not None:
            total_today = len(plan.sessions)
            completed_today = sum(
                1 for c in completions
                if c.day.lower() == today_name.lower()
                and _local_date(c.created_at or c.completed_at, now) == today
            )

    if total_today > 0:
        focus_score = round_int(completed_today / total_today * 100)
    else:
        focus_score = DEFAULT_FOCUS_SCORE if sessions else 0

    weekly_progress = [
        DayHours(day=day, hours=round_half_up(daily_hours.get(day, 0), 1)) for day in WEEKDAY_SHORT
    ]
    subject_breakdown = sorted(
        (SubjectHours(subject=s, hours=round_half_up(h, 1)) for s, h in subject_hours.items()),
        key=lambda item: item.hours,
        reverse=True,
    )[:MAX_SUBJECTS]

    return DashboardStats(
        focus_score=focus_score,
        study_time_today=study_time_today,
        study_time_yesterday=study_time_yesterday,
        weekly_study_time=weekly_study_time,
        current_mood=latest_emotion.emotion if latest_emotion else None,
        completed_sessions_today=completed_today,
        total_sessions_today=total_today,
        subject_breakdown=subject_breakdown,
        weekly_progress=weekly_progress,
        recent_activity=recent_activity,
    )


class DashboardService:
    def __init__(self, repos: RepositoryFactory, clock: Optional[Callable[[], datetime]] = None):
        self._repos = repos
        self._clock = clock or get_local_now

    async def get_stats(self, user_id: str) -> DashboardStats:
        now = self._clock()
        week_start = now.date() - timedelta(days=7)

        sessions = await self._repos.sessions.find_since(user_id, week_start)
        emotions = await self._repos.emotion_logs.find_recent(user_id, limit=1)
        completions = await self._repos.completions.find_since(user_id, week_start)
        schedule = await self._repos.schedules.find_active(user_id, now.date())

        return build_dashboard_stats(
            now=now,
            sessions=sessions,
            completions=completions,
            latest_emotion=emotions[0] if emotions else None,
            schedule=schedule,
        )
