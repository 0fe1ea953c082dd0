from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class StudySessionBase(BaseModel):
    """Base study session fields"""
    login_timestamp: datetime
    logout_timestamp: Optional[datetime] = None
    duration_seconds: Optional[int] = Field(default=None, ge=0)
    subjects_studied: Optional[List[str]] = None
    emotion_detected: Optional[str] = None
    notes: Optional[str] = None


class StudySessionCreate(StudySessionBase):
    """Study session creation model"""
    user_id: str


class StudySessionUpdate(BaseModel):
    """Study session update model - all fields optional"""
    logout_timestamp: Optional[datetime] = None
    duration_seconds: Optional[int] = Field(default=None, ge=0)
    subjects_studied: Optional[List[str]] = None
    emotion_detected: Optional[str] = None
    notes: Optional[str] = None


class StudySession(StudySessionBase):
    """Complete study session model from database"""
    id: str
    user_id: str
    created_at: datetime
