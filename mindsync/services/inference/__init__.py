"""Inference Service: emotion classification and schedule generation"""
from typing import Optional

from .base import InferenceService
from .errors import (
    InferenceError,
    InferenceServiceError,
    InvalidInputError,
    QuotaExceededError,
    RateLimitedError,
    error_for_status,
)
from .models import EmotionAnalysis, GeneratedSchedule, ScheduleRequest

_inference_service: Optional[InferenceService] = None


def get_inference_service() -> InferenceService:
    """Get or create the Inference Service singleton"""
    global _inference_service
    if _inference_service is None:
        from .llm_inference_service import LLMInferenceService
        _inference_service = LLMInferenceService()
    return _inference_service


def set_inference_service(service: Optional[InferenceService]) -> None:
    """Replace the Inference Service singleton (useful for testing)"""
    global _inference_service
    _inference_service = service


__all__ = [
    "InferenceService",
    "InferenceError",
    "InferenceServiceError",
    "InvalidInputError",
    "QuotaExceededError",
    "RateLimitedError",
    "error_for_status",
    "EmotionAnalysis",
    "GeneratedSchedule",
    "ScheduleRequest",
    "get_inference_service",
    "set_inference_service",
]
