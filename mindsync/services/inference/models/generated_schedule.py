"""Schedule generation input/output schemas"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from mindsync.models.schedule import DayPlan, Subject


class ScheduleRequest(BaseModel):
    subjects: List[Subject] = Field(min_length=1)
    start_date: date
    end_date: date
    available_hours: Optional[str] = None
    preferences: Optional[str] = None
    constraints: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class GeneratedSchedule(BaseModel):
    """A 7-day study plan"""
    weekly_plan: List[DayPlan] = Field(
        min_length=7,
        max_length=7,
        description="Exactly 7 entries, Monday to Sunday, each with ordered study sessions",
    )
    total_hours: float = Field(ge=0, description="Total planned study hours for the week")
    tips: List[str] = Field(default_factory=list, description="Short study tips")
    priorities: List[str] = Field(default_factory=list, description="What to focus on first")
