"""Emotion logging and statistics"""
from .emotion_service import EmotionService, get_emotion_stats

__all__ = ["EmotionService", "get_emotion_stats"]
