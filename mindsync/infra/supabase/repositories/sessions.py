"""Study sessions repository"""
from datetime import date
from typing import List

from supabase import Client  # type: ignore

from mindsync.models.session import StudySession, StudySessionCreate, StudySessionUpdate

from .base import BaseRepository


class StudySessionRepository(BaseRepository[StudySession, StudySessionCreate, StudySessionUpdate]):
    """Repository for study session operations"""

    def __init__(self, client: Client):
        super().__init__(client, "study_sessions", StudySession)

    async def find_since(self, user_id: str, since: date) -> List[StudySession]:
        """Sessions created on or after ``since``, newest first"""
        response = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .gte("created_at", since.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return self._to_models(response.data)
