"""Inference Service backed by an OpenAI-compatible chat model"""
import logging
from typing import Any, Awaitable, Dict, List, Optional, TypeVar

import openai
from pydantic import BaseModel, ValidationError

from mindsync.services.llm.call_llm import LLMService
from .base import InferenceService
from .errors import InferenceError, InferenceServiceError, InvalidInputError, QuotaExceededError, error_for_status
from .models import EmotionAnalysis, GeneratedSchedule, ScheduleRequest
from .prompts import EMOTION_SYSTEM_PROMPT, schedule_prompt_template

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)


def translate_error(e: Exception) -> InferenceError:
    """Map an OpenAI / parsing failure to the inference error taxonomy"""
    if isinstance(e, InferenceError):
        return e
    if isinstance(e, openai.APIStatusError):
        # OpenAI reports exhausted credits as 429 insufficient_quota
        if getattr(e, "code", None) == "insufficient_quota":
            return QuotaExceededError()
        return error_for_status(e.status_code)
    if isinstance(e, openai.APIConnectionError):
        return InferenceServiceError("AI service unreachable. Please try again.", status_code=503)
    if isinstance(e, (ValidationError, ValueError)):
        return InferenceServiceError("Invalid AI response")
    return InferenceServiceError()


class LLMInferenceService(InferenceService):
    def __init__(self, llm: Optional[LLMService] = None):
        self._llm = llm or LLMService()

    async def _call(self, call: Awaitable[T], operation: str) -> T:
        try:
            return await call
        except Exception as e:
            error = translate_error(e)
            logger.error(f"{operation} failed ({error.status_code}): {e}")
            raise error from e

    async def classify_emotion(
        self, text: Optional[str] = None, image: Optional[str] = None
    ) -> EmotionAnalysis:
        text = text.strip() if text else None
        if not text and not image:
            raise InvalidInputError()

        content: List[Dict[str, Any]] = []
        if text:
            content.append({"type": "text", "text": text})
        if image:
            content.append({"type": "image_url", "image_url": {"url": image}})

        messages = [
            {"role": "system", "content": EMOTION_SYSTEM_PROMPT},
            {"role": "user", "content": content},
        ]

        if text:
            logger.info(f"Analyzing emotion for text: {text[:50]}...")
        else:
            logger.info("Analyzing emotion from image")

        result = await self._call(
            self._llm.structured_invoke(messages, EmotionAnalysis), "Emotion analysis"
        )
        logger.info(f"Emotion detected: {result.emotion.value} ({result.confidence})")
        return result

    async def generate_schedule(self, request: ScheduleRequest) -> GeneratedSchedule:
        subjects_info = "\n".join(
            f"- {s.name}: {s.hours_per_week}h/week"
            + (f", deadline {s.deadline}" if s.deadline else "")
            for s in request.subjects
        )
        variables = {
            "start_date": request.start_date.isoformat(),
            "end_date": request.end_date.isoformat(),
            "subjects_info": subjects_info,
            "available_hours": request.available_hours or "not specified",
            "preferences": request.preferences or "none",
            "constraints": request.constraints or "none",
        }

        logger.info(f"Generating schedule for {len(request.subjects)} subject(s)")
        result = await self._call(
            self._llm.structured_chain_invoke(schedule_prompt_template, variables, GeneratedSchedule),
            "Schedule generation",
        )
        logger.info(f"Schedule generated: {result.total_hours}h over {len(result.weekly_plan)} days")
        return result
