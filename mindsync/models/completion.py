from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SessionCompletionBase(BaseModel):
    """Base schedule session completion fields"""
    schedule_id: str
    day: str
    session_index: int = Field(ge=0)
    subject: str
    duration_seconds: int = Field(ge=0)


class SessionCompletionCreate(SessionCompletionBase):
    """Session completion creation model"""
    user_id: str


class SessionCompletionUpdate(BaseModel):
    """Completions are immutable once written"""
    pass


class SessionCompletion(SessionCompletionBase):
    """Complete session completion model from database"""
    id: str
    user_id: str
    completed_at: datetime
    created_at: Optional[datetime] = None


class CompletionOutcome(str, Enum):
    COMPLETED = "completed"
    ALREADY_COMPLETED = "already_completed"


class CompletionResult(BaseModel):
    outcome: CompletionOutcome
    completion: Optional[SessionCompletion] = None
