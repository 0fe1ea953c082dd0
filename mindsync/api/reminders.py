"""Study reminder endpoints"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from mindsync.api.deps import get_notifier, get_repositories
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.models.reminder import StudyReminder, StudyReminderCreate, StudyReminderUpdate
from mindsync.services.reminders import ReminderAlert, ReminderNotifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


class ReminderListResponse(BaseModel):
    reminders: List[StudyReminder]
    count: int


class DeleteResponse(BaseModel):
    success: bool
    message: str


class PermissionResponse(BaseModel):
    granted: bool


@router.get("", response_model=ReminderListResponse)
async def list_reminders(user_id: str, repos: RepositoryFactory = Depends(get_repositories)):
    reminders = await repos.reminders.find_by_user(user_id)
    return {"reminders": reminders, "count": len(reminders)}


@router.post("", response_model=StudyReminder)
async def create_reminder(
    request: StudyReminderCreate, repos: RepositoryFactory = Depends(get_repositories)
):
    reminder = await repos.reminders.create(request)
    logger.info(f"Reminder {reminder.id} created for user {reminder.user_id} at {reminder.time}")
    return reminder


@router.get("/alerts", response_model=List[ReminderAlert])
async def list_alerts(user_id: str, notifier: ReminderNotifier = Depends(get_notifier)):
    """In-app alerts raised by fired reminders"""
    return notifier.feed.list(user_id)


@router.delete("/alerts", response_model=DeleteResponse)
async def dismiss_alerts(
    user_id: str,
    alert_id: Optional[str] = None,
    notifier: ReminderNotifier = Depends(get_notifier),
):
    removed = notifier.feed.dismiss(user_id, alert_id)
    return {"success": removed > 0, "message": f"Dismissed {removed} alert(s)"}


@router.put("/{reminder_id}", response_model=StudyReminder)
async def update_reminder(
    reminder_id: str,
    user_id: str,
    request: StudyReminderUpdate,
    repos: RepositoryFactory = Depends(get_repositories),
):
    reminder = await repos.reminders.update(reminder_id, request, user_id=user_id)
    if not reminder:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder


@router.delete("/{reminder_id}", response_model=DeleteResponse)
async def delete_reminder(
    reminder_id: str, user_id: str, repos: RepositoryFactory = Depends(get_repositories)
):
    success = await repos.reminders.delete(reminder_id, user_id=user_id)
    if not success:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return {"success": True, "message": "Reminder deleted"}


@router.post("/notification-permission", response_model=PermissionResponse)
async def request_notification_permission(notifier: ReminderNotifier = Depends(get_notifier)):
    """Explicitly opt in to desktop notifications"""
    return {"granted": notifier.request_permission()}
