"""Emotion logs repository"""
from typing import List, Optional

from supabase import Client  # type: ignore

from mindsync.models.emotion_log import EmotionLog, EmotionLogCreate, EmotionLogUpdate

from .base import BaseRepository


class EmotionLogRepository(BaseRepository[EmotionLog, EmotionLogCreate, EmotionLogUpdate]):
    """Repository for emotion log operations (append-only)"""

    def __init__(self, client: Client):
        super().__init__(client, "emotion_logs", EmotionLog)

    async def find_recent(self, user_id: str, limit: Optional[int] = None) -> List[EmotionLog]:
        """Logs for a user, newest first"""
        return await self.find_by_filters(
            {"user_id": user_id}, limit=limit, order_by="created_at", desc=True
        )

    async def update(self, id, data, user_id=None):
        raise PermissionError("Emotion logs are append-only")

    async def delete(self, id, user_id=None):
        raise PermissionError("Emotion logs are append-only")
