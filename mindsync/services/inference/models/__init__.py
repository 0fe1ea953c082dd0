from .emotion_analysis import EmotionAnalysis
from .generated_schedule import GeneratedSchedule, ScheduleRequest

__all__ = ["EmotionAnalysis", "GeneratedSchedule", "ScheduleRequest"]
