"""Emotion logging, statistics and AI analysis flow"""
import asyncio
from datetime import datetime, timezone

import pytest

from mindsync.models.emotion_log import EmotionLog, EmotionLogCreate
from mindsync.services.emotion import EmotionService, get_emotion_stats
from mindsync.services.emotion.emotion_service import AI_SOURCE
from mindsync.services.inference import InvalidInputError, RateLimitedError

from .conftest import StubInferenceService

USER = "user-1"


def log(emotion, focus=None, stress=None, created="2026-10-18T08:00:00+00:00"):
    return EmotionLog(
        id=f"log-{emotion}",
        user_id=USER,
        emotion=emotion,
        confidence=80,
        focus_level=focus,
        stress_level=stress,
        created_at=created,
    )


def test_stats_of_empty_logs():
    stats = get_emotion_stats([])
    assert stats.latest_emotion is None
    assert stats.total_logs == 0
    assert stats.emotion_counts == {}


def test_stats_average_only_present_levels():
    logs = [
        log("joy", focus=8, stress=3),
        log("neutral", focus=5),
        log("joy"),
        log("fear", stress=6),
    ]
    stats = get_emotion_stats(logs)
    assert stats.latest_emotion == "joy"
    assert stats.avg_focus_level == 7
    assert stats.avg_stress_level == 5
    assert stats.emotion_counts == {"joy": 2, "neutral": 1, "fear": 1}
    assert stats.total_logs == 4


def test_analyze_and_log_stores_ai_result(repos, clock, supabase_fake):
    service = EmotionService(repos.emotion_logs, StubInferenceService(), clock=clock)
    analysis, stored = asyncio.run(service.analyze_and_log(USER, text="I aced my quiz!"))

    assert analysis.emotion.value == "joy"
    assert stored.emotion == "joy"
    assert stored.source == AI_SOURCE
    assert stored.notes == "I aced my quiz!"
    assert len(supabase_fake.tables["emotion_logs"]) == 1


def test_analyze_requires_input(repos, clock, supabase_fake):
    service = EmotionService(repos.emotion_logs, StubInferenceService(), clock=clock)
    with pytest.raises(InvalidInputError):
        asyncio.run(service.analyze_and_log(USER))
    assert "emotion_logs" not in supabase_fake.tables


def test_inference_errors_propagate_without_logging(repos, clock, supabase_fake):
    inference = StubInferenceService(error=RateLimitedError())
    service = EmotionService(repos.emotion_logs, inference, clock=clock)
    with pytest.raises(RateLimitedError) as exc:
        asyncio.run(service.analyze_and_log(USER, text="hi"))
    assert exc.value.status_code == 429
    assert len(inference.calls) == 1
    assert "emotion_logs" not in supabase_fake.tables


def test_manual_log_defaults_source(repos, clock):
    service = EmotionService(repos.emotion_logs, StubInferenceService(), clock=clock)
    stored = asyncio.run(service.log_emotion(EmotionLogCreate(
        user_id=USER, emotion="sadness", confidence=60, stress_level=7,
    )))
    assert stored.source == "manual"
    assert stored.stress_level == 7


def test_todays_emotions(repos, clock, supabase_fake):
    supabase_fake.seed("emotion_logs", {
        "user_id": USER, "emotion": "joy", "confidence": 90,
        "created_at": "2026-10-18T07:00:00+00:00",
    })
    supabase_fake.seed("emotion_logs", {
        "user_id": USER, "emotion": "fear", "confidence": 70,
        "created_at": "2026-10-17T22:00:00+00:00",
    })
    service = EmotionService(repos.emotion_logs, StubInferenceService(), clock=clock)
    today = asyncio.run(service.get_todays_emotions(USER))
    assert [entry.emotion for entry in today] == ["joy"]


def test_focus_level_bounds():
    with pytest.raises(ValueError):
        EmotionLogCreate(user_id=USER, emotion="joy", confidence=50, focus_level=11)


def test_logs_are_append_only(repos, supabase_fake):
    supabase_fake.seed("emotion_logs", {"id": "e1", "user_id": USER, "emotion": "joy", "confidence": 80})
    with pytest.raises(PermissionError):
        asyncio.run(repos.emotion_logs.update("e1", EmotionLogCreate(user_id=USER, emotion="fear", confidence=1)))
    with pytest.raises(PermissionError):
        asyncio.run(repos.emotion_logs.delete("e1", user_id=USER))
    assert supabase_fake.tables["emotion_logs"][0]["emotion"] == "joy"
