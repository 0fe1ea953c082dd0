from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class Emotion(str, Enum):
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    SURPRISE = "surprise"
    NEUTRAL = "neutral"


class EmotionLogBase(BaseModel):
    """Base emotion log fields"""
    emotion: str
    confidence: float = Field(ge=0, le=100)
    session_id: Optional[str] = None
    focus_level: Optional[int] = Field(default=None, ge=1, le=10)
    stress_level: Optional[int] = Field(default=None, ge=1, le=10)
    mood: Optional[str] = None
    notes: Optional[str] = None
    source: Optional[str] = "manual"


class EmotionLogCreate(EmotionLogBase):
    """Emotion log creation model"""
    user_id: str


class EmotionLogUpdate(BaseModel):
    """Emotion logs are append-only"""
    pass


class EmotionLog(EmotionLogBase):
    """Complete emotion log model from database"""
    id: str
    user_id: str
    created_at: datetime


class EmotionStats(BaseModel):
    latest_emotion: Optional[str] = None
    avg_focus_level: int = 0
    avg_stress_level: int = 0
    emotion_counts: Dict[str, int] = Field(default_factory=dict)
    total_logs: int = 0
