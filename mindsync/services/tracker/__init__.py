"""Study tracker: durable timer feeding the bloom streak engine"""
from .study_tracker import StudyTracker, TrackerStatus

__all__ = ["StudyTracker", "TrackerStatus"]
