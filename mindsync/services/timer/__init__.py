"""Durable focus timer"""
from .timer_manager import DurableTimer, TIMER_STORAGE_KEY
from .models import TimerState, TimerStatus

__all__ = ["DurableTimer", "TIMER_STORAGE_KEY", "TimerState", "TimerStatus"]
