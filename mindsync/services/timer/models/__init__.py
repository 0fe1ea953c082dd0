from .timer_state import TimerState, TimerStatus

__all__ = ["TimerState", "TimerStatus"]
