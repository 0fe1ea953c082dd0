"""Domain models for the application"""
from .session import StudySession, StudySessionCreate, StudySessionUpdate
from .schedule import (
    DayPlan,
    ScheduleSession,
    ScheduleStatus,
    StudySchedule,
    StudyScheduleCreate,
    StudyScheduleUpdate,
    Subject,
)
from .completion import (
    CompletionOutcome,
    CompletionResult,
    SessionCompletion,
    SessionCompletionCreate,
    SessionCompletionUpdate,
)
from .reminder import StudyReminder, StudyReminderCreate, StudyReminderUpdate
from .emotion_log import Emotion, EmotionLog, EmotionLogCreate, EmotionLogUpdate, EmotionStats

__all__ = [
    'StudySession', 'StudySessionCreate', 'StudySessionUpdate',
    'DayPlan', 'ScheduleSession', 'ScheduleStatus', 'Subject',
    'StudySchedule', 'StudyScheduleCreate', 'StudyScheduleUpdate',
    'CompletionOutcome', 'CompletionResult',
    'SessionCompletion', 'SessionCompletionCreate', 'SessionCompletionUpdate',
    'StudyReminder', 'StudyReminderCreate', 'StudyReminderUpdate',
    'Emotion', 'EmotionLog', 'EmotionLogCreate', 'EmotionLogUpdate', 'EmotionStats',
]
