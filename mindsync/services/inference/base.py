"""Inference Service interface"""
from abc import ABC, abstractmethod
from typing import Optional

from .models import EmotionAnalysis, GeneratedSchedule, ScheduleRequest


class InferenceService(ABC):
    """
    Remote AI operations. Implementations raise InferenceError subclasses
    and never retry.
    """

    @abstractmethod
    async def classify_emotion(
        self, text: Optional[str] = None, image: Optional[str] = None
    ) -> EmotionAnalysis:
        """
        Classify the primary emotion of a text and/or image.

        Args:
            text: Free text written by the student
            image: Image as a data URL or https URL

        Raises:
            InvalidInputError: if neither text nor image is given
        """

    @abstractmethod
    async def generate_schedule(self, request: ScheduleRequest) -> GeneratedSchedule:
        """Generate a 7-day study plan"""
