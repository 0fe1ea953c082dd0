"""Emotion service: AI analysis, append-only logging, statistics"""
import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from mindsync.infra.supabase.repositories import EmotionLogRepository
from mindsync.models.emotion_log import EmotionLog, EmotionLogCreate, EmotionStats
from mindsync.services.inference import EmotionAnalysis, InferenceService
from mindsync.utils.datetime_helper import get_local_now
from mindsync.utils.numbers import round_int

logger = logging.getLogger(__name__)

AI_SOURCE = "ai_analysis"


def get_emotion_stats(logs: List[EmotionLog]) -> EmotionStats:
    """
    Summarize emotion logs (newest first).

    Focus and stress averages only consider logs that carry a value and are
    rounded to whole numbers.
    """
    if not logs:
        return EmotionStats()

    emotion_counts: Dict[str, int] = {}
    focus = [log.focus_level for log in logs if log.focus_level]
    stress = [log.stress_level for log in logs if log.stress_level]

    for log in logs:
        emotion_counts[log.emotion] = emotion_counts.get(log.emotion, 0) + 1

    return EmotionStats(
        latest_emotion=logs[0].emotion,
        avg_focus_level=round_int(sum(focus) / len(focus)) if focus else 0,
        avg_stress_level=round_int(sum(stress) / len(stress)) if stress else 0,
        emotion_counts=emotion_counts,
        total_logs=len(logs),
    )


class EmotionService:
    def __init__(
        self,
        logs: EmotionLogRepository,
        inference: InferenceService,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._logs = logs
        self._inference = inference
        self._clock = clock or get_local_now

    async def log_emotion(self, data: EmotionLogCreate) -> EmotionLog:
        log = await self._logs.create(data)
        logger.info(f"Emotion logged for user {data.user_id}: {data.emotion} ({data.source})")
        return log

    async def analyze_and_log(
        self,
        user_id: str,
        text: Optional[str] = None,
        image: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> Tuple[EmotionAnalysis, EmotionLog]:
        """
        Classify the input and store the result.

        Raises:
            InferenceError: propagated unchanged from the Inference Service
        """
        analysis = await self._inference.classify_emotion(text=text, image=image)
        log = await self.log_emotion(EmotionLogCreate(
            user_id=user_id,
            emotion=analysis.emotion.value,
            confidence=analysis.confidence,
            session_id=session_id,
            notes=text,
            source=AI_SOURCE,
        ))
        return analysis, log

    async def get_logs(self, user_id: str, limit: Optional[int] = 50) -> List[EmotionLog]:
        return await self._logs.find_recent(user_id, limit=limit)

    async def get_stats(self, user_id: str, limit: Optional[int] = 50) -> EmotionStats:
        return get_emotion_stats(await self.get_logs(user_id, limit=limit))

    async def get_todays_emotions(self, user_id: str, limit: Optional[int] = 50) -> List[EmotionLog]:
        now = self._clock()
        today = now.date()
        logs = await self.get_logs(user_id, limit=limit)
        return [log for log in logs if _local_date(log.created_at, now) == today]


def _local_date(dt: datetime, reference: datetime):
    if dt.tzinfo is not None and reference.tzinfo is not None:
        dt = dt.astimezone(reference.tzinfo)
    return dt.date()
