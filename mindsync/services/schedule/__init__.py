"""Study schedule lifecycle"""
from .schedule_service import DailyProgress, StudyScheduleService, TodaysSessions

__all__ = ["DailyProgress", "StudyScheduleService", "TodaysSessions"]
