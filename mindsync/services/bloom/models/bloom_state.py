"""Bloom streak state model"""
from datetime import date

from pydantic import BaseModel, Field


class BloomStreakState(BaseModel):
    """Daily goal progress and streak counters stored under mindsync-bloom-streak"""
    today_progress_percent: float = Field(default=0.0, ge=0, le=100)
    today_study_seconds: int = Field(default=0, ge=0)
    streak_days: int = Field(default=0, ge=0)
    full_bloom_days: int = Field(default=0, ge=0)  # lifetime, never decreases
    last_recorded_date: date

    @property
    def is_full_bloom(self) -> bool:
        return self.today_progress_percent >= 100
