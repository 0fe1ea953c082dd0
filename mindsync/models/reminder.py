from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from mindsync.utils.datetime_helper import WEEKDAY_NAMES


def _check_time(value: str) -> str:
    # Supabase returns TIME columns as HH:MM:SS
    parts = value.split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() and len(p) == 2 for p in parts):
        raise ValueError("time must be HH:MM")
    if int(parts[0]) > 23 or int(parts[1]) > 59:
        raise ValueError("time must be HH:MM")
    return value


def _check_days(days: List[str]) -> List[str]:
    unknown = [d for d in days if d not in WEEKDAY_NAMES]
    if unknown:
        raise ValueError(f"Unknown weekday(s): {', '.join(unknown)}")
    return days


class StudyReminderBase(BaseModel):
    """Base study reminder fields"""
    title: str
    time: str  # HH:MM
    days_of_week: List[str] = Field(default_factory=list)
    is_active: bool = True

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return _check_time(v)

    @field_validator("days_of_week")
    @classmethod
    def validate_days(cls, v: List[str]) -> List[str]:
        return _check_days(v)


class StudyReminderCreate(StudyReminderBase):
    """Study reminder creation model"""
    user_id: str


class StudyReminderUpdate(BaseModel):
    """Study reminder update model - all fields optional"""
    title: Optional[str] = None
    time: Optional[str] = None
    days_of_week: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        return _check_time(v) if v is not None else v

    @field_validator("days_of_week")
    @classmethod
    def validate_days(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _check_days(v) if v is not None else v


class StudyReminder(StudyReminderBase):
    """Complete study reminder model from database"""
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def minute(self) -> str:
        """Reminder time at minute resolution (HH:MM)"""
        return self.time[:5]
