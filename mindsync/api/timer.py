"""Focus timer and bloom streak endpoints"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mindsync.api.deps import get_repositories, get_tracker
from mindsync.models.session import StudySession
from mindsync.services.bloom import BloomStreakState
from mindsync.services.tracker import StudyTracker, TrackerStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["timer"])


class StopTimerRequest(BaseModel):
    user_id: Optional[str] = None
    subjects: Optional[List[str]] = None
    notes: Optional[str] = None


class StopTimerResponse(BaseModel):
    elapsed_seconds: int
    session: Optional[StudySession] = None


@router.get("/timer", response_model=TrackerStatus)
async def get_timer(tracker: StudyTracker = Depends(get_tracker)):
    """Current timer and bloom state"""
    return tracker.status()


@router.post("/timer/start", response_model=TrackerStatus)
async def start_timer(tracker: StudyTracker = Depends(get_tracker)):
    tracker.timer.start()
    logger.info("Focus session started")
    return tracker.status()


@router.post("/timer/pause", response_model=TrackerStatus)
async def pause_timer(tracker: StudyTracker = Depends(get_tracker)):
    tracker.timer.pause()
    return tracker.status()


@router.post("/timer/resume", response_model=TrackerStatus)
async def resume_timer(tracker: StudyTracker = Depends(get_tracker)):
    tracker.timer.resume()
    return tracker.status()


@router.post("/timer/stop", response_model=StopTimerResponse)
async def stop_timer(
    request: Optional[StopTimerRequest] = None,
    tracker: StudyTracker = Depends(get_tracker),
):
    """
    End the focus session.

    When a user_id is given the session is recorded in study_sessions. If that
    write fails the timer keeps its time and the response is a 503.
    """
    request = request or StopTimerRequest()
    elapsed = tracker.timer.elapsed_seconds
    sessions = get_repositories().sessions if request.user_id and elapsed > 0 else None
    session = await tracker.end_session(
        sessions=sessions,
        user_id=request.user_id,
        subjects=request.subjects,
        notes=request.notes,
    )
    return {"elapsed_seconds": elapsed, "session": session}


@router.post("/timer/reset", response_model=TrackerStatus)
async def reset_timer(tracker: StudyTracker = Depends(get_tracker)):
    tracker.timer.reset()
    return tracker.status()


@router.get("/bloom", response_model=BloomStreakState)
async def get_bloom(tracker: StudyTracker = Depends(get_tracker)):
    """Daily goal progress, streak and full bloom days"""
    return tracker.bloom.state
