from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScheduleStatus(str, Enum):
    """Study schedule status"""
    ACTIVE = "active"
    COMPLETED = "completed"
    EXPIRED = "expired"


class Subject(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str
    hours_per_week: float = Field(alias="hoursPerWeek", ge=0)
    deadline: Optional[str] = None


class ScheduleSession(BaseModel):
    """One study slot within a day"""
    time: str
    subject: str
    topic: str
    type: str


class DayPlan(BaseModel):
    day: str
    sessions: List[ScheduleSession] = Field(default_factory=list)


class StudyScheduleBase(BaseModel):
    """Base study schedule fields"""
    subjects: List[Subject]
    weekly_plan: List[DayPlan]
    total_hours: float
    tips: Optional[List[str]] = None
    priorities: Optional[List[str]] = None
    start_date: date
    end_date: date
    status: ScheduleStatus = ScheduleStatus.ACTIVE


class StudyScheduleCreate(StudyScheduleBase):
    """Study schedule creation model"""
    user_id: str


class StudyScheduleUpdate(BaseModel):
    """Study schedule update model - all fields optional"""
    weekly_plan: Optional[List[DayPlan]] = None
    status: Optional[ScheduleStatus] = None


class StudySchedule(StudyScheduleBase):
    """Complete study schedule model from database"""
    id: str
    user_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    def day_plan(self, day: str) -> Optional[DayPlan]:
        """Find a day's plan by name, case-insensitive"""
        for plan in self.weekly_plan:
            if plan.day.lower() == day.lower():
                return plan
        return None
