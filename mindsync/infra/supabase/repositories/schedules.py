"""Study schedules repository"""
from datetime import date
from typing import Optional

from supabase import Client  # type: ignore

from mindsync.models.schedule import (
    ScheduleStatus,
    StudySchedule,
    StudyScheduleCreate,
    StudyScheduleUpdate,
)

from .base import BaseRepository


class StudyScheduleRepository(BaseRepository[StudySchedule, StudyScheduleCreate, StudyScheduleUpdate]):
    """Repository for study schedule operations"""

    def __init__(self, client: Client):
        super().__init__(client, "study_schedules", StudySchedule)

    async def expire_ended(self, user_id: str, today: date) -> int:
        """Mark active schedules whose end_date has passed as expired

        Returns:
            Number of expired schedules
        """
        response = (
            self._table()
            .update({"status": ScheduleStatus.EXPIRED.value})
            .eq("user_id", user_id)
            .eq("status", ScheduleStatus.ACTIVE.value)
            .lt("end_date", today.isoformat())
            .execute()
        )
        return len(response.data) if response.data else 0

    async def find_active(self, user_id: str, today: date) -> Optional[StudySchedule]:
        """Most recently created active schedule still valid today"""
        response = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .eq("status", ScheduleStatus.ACTIVE.value)
            .gte("end_date", today.isoformat())
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return self._to_model(response.data[0])

    async def demote_active_except(self, user_id: str, keep_id: str) -> int:
        """Mark every other active schedule of the user as completed

        Returns:
            Number of demoted schedules
        """
        response = (
            self._table()
            .update({"status": ScheduleStatus.COMPLETED.value})
            .eq("user_id", user_id)
            .eq("status", ScheduleStatus.ACTIVE.value)
            .neq("id", keep_id)
            .execute()
        )
        return len(response.data) if response.data else 0
