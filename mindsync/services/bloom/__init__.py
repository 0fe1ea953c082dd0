"""Bloom streak engine (daily study goal and streaks)"""
from .bloom_engine import BloomStreakEngine, BLOOM_STORAGE_KEY, progress_for
from .models import BloomStreakState

__all__ = ["BloomStreakEngine", "BLOOM_STORAGE_KEY", "BloomStreakState", "progress_for"]
