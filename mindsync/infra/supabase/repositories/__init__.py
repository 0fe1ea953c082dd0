"""Repository factory and exports"""
from supabase import Client
from .sessions import StudySessionRepository
from .schedules import StudyScheduleRepository
from .completions import SessionCompletionRepository, DuplicateCompletionError
from .reminders import StudyReminderRepository
from .emotion_logs import EmotionLogRepository


class RepositoryFactory:
    """Factory for creating repository instances"""

    def __init__(self, client: Client):
        self._client = client
        self._sessions: StudySessionRepository = None
        self._schedules: StudyScheduleRepository = None
        self._completions: SessionCompletionRepository = None
        self._reminders: StudyReminderRepository = None
        self._emotion_logs: EmotionLogRepository = None

    @property
    def sessions(self) -> StudySessionRepository:
        """Get study sessions repository"""
        if self._sessions is None:
            self._sessions = StudySessionRepository(self._client)
        return self._sessions

    @property
    def schedules(self) -> StudyScheduleRepository:
        """Get study schedules repository"""
        if self._schedules is None:
            self._schedules = StudyScheduleRepository(self._client)
        return self._schedules

    @property
    def completions(self) -> SessionCompletionRepository:
        """Get session completions repository"""
        if self._completions is None:
            self._completions = SessionCompletionRepository(self._client)
        return self._completions

    @property
    def reminders(self) -> StudyReminderRepository:
        """Get study reminders repository"""
        if self._reminders is None:
            self._reminders = StudyReminderRepository(self._client)
        return self._reminders

    @property
    def emotion_logs(self) -> EmotionLogRepository:
        """Get emotion logs repository"""
        if self._emotion_logs is None:
            self._emotion_logs = EmotionLogRepository(self._client)
        return self._emotion_logs


__all__ = [
    'RepositoryFactory',
    'StudySessionRepository',
    'StudyScheduleRepository',
    'SessionCompletionRepository',
    'DuplicateCompletionError',
    'StudyReminderRepository',
    'EmotionLogRepository',
]
