"""Emotion classification output schema"""
from typing import Optional

from pydantic import BaseModel, Field

from mindsync.models.emotion_log import Emotion


class EmotionAnalysis(BaseModel):
    """Detected emotion and confidence score"""
    emotion: Emotion = Field(description="The primary emotion detected in the input")
    confidence: float = Field(ge=0, le=100, description="Confidence score between 0-100")
    reasoning: str = Field(description="Brief explanation of why this emotion was detected")
    motivation: Optional[str] = Field(
        default=None,
        description="One short encouraging sentence for a student feeling this way",
    )
