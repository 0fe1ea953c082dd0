"""Timer state models"""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class TimerStatus(str, Enum):
    """Timer status"""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class TimerState(BaseModel):
    """Timer snapshot stored under mindsync-timer-state"""
    elapsed_seconds: int = Field(default=0, ge=0)
    is_tracking: bool = False
    is_paused: bool = False  # only meaningful while tracking
    last_checkpoint: datetime

    @property
    def is_running(self) -> bool:
        return self.is_tracking and not self.is_paused

    @property
    def status(self) -> TimerStatus:
        if not self.is_tracking:
            return TimerStatus.IDLE
        return TimerStatus.PAUSED if self.is_paused else TimerStatus.RUNNING
