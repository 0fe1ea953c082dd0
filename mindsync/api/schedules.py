"""Study schedule endpoints"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from mindsync.api.deps import get_inference, get_repositories, inference_http_error
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.models.completion import CompletionResult, SessionCompletion
from mindsync.models.schedule import ScheduleSession, StudySchedule, Subject
from mindsync.services.inference import (
    GeneratedSchedule,
    InferenceError,
    InferenceService,
    ScheduleRequest,
)
from mindsync.services.schedule import DailyProgress, StudyScheduleService, TodaysSessions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedules", tags=["schedules"])


def get_schedule_service(repos: RepositoryFactory = Depends(get_repositories)) -> StudyScheduleService:
    return StudyScheduleService(repos.schedules, repos.completions)


class AcceptScheduleRequest(BaseModel):
    user_id: str
    subjects: List[Subject]
    schedule: GeneratedSchedule
    start_date: date
    end_date: date


class ActiveScheduleResponse(BaseModel):
    schedule: Optional[StudySchedule] = None
    completions: List[SessionCompletion] = []


class UpdateDayPlanRequest(BaseModel):
    sessions: List[ScheduleSession]


class CompleteSessionRequest(BaseModel):
    user_id: str
    day: str
    session_index: int
    subject: str
    duration_seconds: int


class DeleteResponse(BaseModel):
    success: bool
    message: str


@router.post("/generate", response_model=GeneratedSchedule)
async def generate_schedule(
    request: ScheduleRequest, inference: InferenceService = Depends(get_inference)
):
    """Generate a weekly plan with AI; nothing is stored until it is accepted"""
    try:
        return await inference.generate_schedule(request)
    except InferenceError as e:
        raise inference_http_error(e)


@router.post("/accept", response_model=StudySchedule)
async def accept_schedule(
    request: AcceptScheduleRequest,
    service: StudyScheduleService = Depends(get_schedule_service),
):
    """Save a generated plan as the user's active schedule"""
    if request.end_date < request.start_date:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")
    return await service.accept_schedule(
        user_id=request.user_id,
        subjects=request.subjects,
        generated=request.schedule,
        start_date=request.start_date,
        end_date=request.end_date,
    )


@router.get("/active", response_model=ActiveScheduleResponse)
async def get_active_schedule(
    user_id: str, service: StudyScheduleService = Depends(get_schedule_service)
):
    schedule = await service.get_active_schedule(user_id)
    if schedule is None:
        return {"schedule": None, "completions": []}
    completions = await service.get_completions(user_id, schedule.id)
    return {"schedule": schedule, "completions": completions}


@router.put("/active/days/{day_index}", response_model=StudySchedule)
async def update_day_plan(
    day_index: int,
    user_id: str,
    request: UpdateDayPlanRequest,
    service: StudyScheduleService = Depends(get_schedule_service),
):
    try:
        schedule = await service.update_day_plan(user_id, day_index, request.sessions)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if schedule is None:
        raise HTTPException(status_code=404, detail="No active schedule")
    return schedule


@router.post("/active/completions", response_model=CompletionResult)
async def complete_session(
    request: CompleteSessionRequest,
    service: StudyScheduleService = Depends(get_schedule_service),
):
    """Mark a scheduled session complete; repeats report already_completed"""
    result = await service.mark_session_complete(
        user_id=request.user_id,
        day=request.day,
        session_index=request.session_index,
        subject=request.subject,
        duration_seconds=request.duration_seconds,
    )
    if result is None:
        raise HTTPException(status_code=404, detail="No active schedule")
    return result


@router.get("/active/today", response_model=Optional[TodaysSessions])
async def get_todays_sessions(
    user_id: str, service: StudyScheduleService = Depends(get_schedule_service)
):
    schedule = await service.get_active_schedule(user_id)
    return service.get_todays_sessions(schedule)


@router.get("/active/progress", response_model=DailyProgress)
async def get_daily_progress(
    user_id: str, service: StudyScheduleService = Depends(get_schedule_service)
):
    schedule = await service.get_active_schedule(user_id)
    if schedule is None:
        return DailyProgress()
    completions = await service.get_completions(user_id, schedule.id)
    return service.get_daily_progress(schedule, completions)


@router.delete("/active", response_model=DeleteResponse)
async def delete_active_schedule(
    user_id: str, service: StudyScheduleService = Depends(get_schedule_service)
):
    success = await service.delete_active_schedule(user_id)
    if not success:
        raise HTTPException(status_code=404, detail="No active schedule")
    return {"success": True, "message": "Schedule deleted"}
