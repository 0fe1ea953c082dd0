from .bloom_state import BloomStreakState

__all__ = ["BloomStreakState"]
