"""Study reminders repository"""
from typing import List

from supabase import Client  # type: ignore

from mindsync.models.reminder import StudyReminder, StudyReminderCreate, StudyReminderUpdate

from .base import BaseRepository


class StudyReminderRepository(BaseRepository[StudyReminder, StudyReminderCreate, StudyReminderUpdate]):
    """Repository for study reminder operations"""

    def __init__(self, client: Client):
        super().__init__(client, "study_reminders", StudyReminder)

    async def find_by_user(self, user_id: str) -> List[StudyReminder]:
        """All reminders for a user ordered by time of day"""
        return await self.find_by_filters({"user_id": user_id}, order_by="time")

    async def find_active(self) -> List[StudyReminder]:
        """Active reminders across all users"""
        return await self.find_by_filters({"is_active": True}, order_by="time")
