"""Schedule session completions repository"""
from datetime import date
from typing import List, Optional

from postgrest.exceptions import APIError
from supabase import Client  # type: ignore

from mindsync.models.completion import (
    SessionCompletion,
    SessionCompletionCreate,
    SessionCompletionUpdate,
)

from .base import BaseRepository

UNIQUE_VIOLATION = "23505"


class DuplicateCompletionError(Exception):
    """The (schedule, day, session index) triple is already completed"""


class SessionCompletionRepository(
    BaseRepository[SessionCompletion, SessionCompletionCreate, SessionCompletionUpdate]
):
    """Repository for schedule session completion operations"""

    def __init__(self, client: Client):
        super().__init__(client, "schedule_session_completions", SessionCompletion)

    async def create(self, data: SessionCompletionCreate) -> SessionCompletion:
        """
        Insert a completion.

        Raises:
            DuplicateCompletionError: if the session was already completed
        """
        try:
            return await super().create(data)
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateCompletionError(
                    f"Session {data.day}#{data.session_index} already completed"
                ) from e
            raise

    async def find_by_schedule(self, schedule_id: str, user_id: str) -> List[SessionCompletion]:
        return await self.find_by_filters({"schedule_id": schedule_id, "user_id": user_id})

    async def find_since(self, user_id: str, since: date, limit: Optional[int] = None) -> List[SessionCompletion]:
        """Completions created on or after ``since``, newest first"""
        query = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .gte("created_at", since.isoformat())
            .order("completed_at", desc=True)
        )
        if limit:
            query = query.limit(limit)
        response = query.execute()
        return self._to_models(response.data)
