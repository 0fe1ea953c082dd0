"""Emotion analysis and log endpoints"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mindsync.api.deps import get_inference, get_repositories, inference_http_error
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.models.emotion_log import EmotionLog, EmotionLogCreate, EmotionStats
from mindsync.services.emotion import EmotionService
from mindsync.services.inference import EmotionAnalysis, InferenceError, InferenceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/emotions", tags=["emotions"])


def get_emotion_service(
    repos: RepositoryFactory = Depends(get_repositories),
    inference: InferenceService = Depends(get_inference),
) -> EmotionService:
    return EmotionService(repos.emotion_logs, inference)


class AnalyzeEmotionRequest(BaseModel):
    user_id: str
    text: Optional[str] = None
    image: Optional[str] = None  # data URL or https URL
    session_id: Optional[str] = None


class AnalyzeEmotionResponse(BaseModel):
    analysis: EmotionAnalysis
    log: EmotionLog


@router.post("/analyze", response_model=AnalyzeEmotionResponse)
async def analyze_emotion(
    request: AnalyzeEmotionRequest, service: EmotionService = Depends(get_emotion_service)
):
    """Classify text and/or image with AI and log the result"""
    try:
        analysis, log = await service.analyze_and_log(
            user_id=request.user_id,
            text=request.text,
            image=request.image,
            session_id=request.session_id,
        )
    except InferenceError as e:
        raise inference_http_error(e)
    return {"analysis": analysis, "log": log}


@router.post("/logs", response_model=EmotionLog)
async def log_emotion(request: EmotionLogCreate, service: EmotionService = Depends(get_emotion_service)):
    return await service.log_emotion(request)


@router.get("/logs", response_model=List[EmotionLog])
async def list_emotion_logs(
    user_id: str, limit: int = 50, service: EmotionService = Depends(get_emotion_service)
):
    return await service.get_logs(user_id, limit=limit)


@router.get("/stats", response_model=EmotionStats)
async def get_emotion_stats(user_id: str, service: EmotionService = Depends(get_emotion_service)):
    return await service.get_stats(user_id)


@router.get("/today", response_model=List[EmotionLog])
async def get_todays_emotions(user_id: str, service: EmotionService = Depends(get_emotion_service)):
    return await service.get_todays_emotions(user_id)
