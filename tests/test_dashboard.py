"""Dashboard statistics"""
import asyncio
from datetime import datetime, timezone

from mindsync.models.completion import SessionCompletion
from mindsync.models.emotion_log import EmotionLog
from mindsync.models.session import StudySession
from mindsync.services.dashboard import DashboardService, DashboardStats, build_dashboard_stats

from .conftest import make_weekly_plan

NOW = datetime(2026, 10, 18, 18, 0, tzinfo=timezone.utc)  # Sunday
USER = "user-1"


def session(created, seconds, subjects=None):
    return StudySession(
        id=f"s-{created}",
        user_id=USER,
        login_timestamp=created,
        duration_seconds=seconds,
        subjects_studied=subjects,
        created_at=created,
    )


def completion(day, index, created, seconds=1800, subject="Math"):
    return SessionCompletion(
        id=f"c-{day}-{index}",
        user_id=USER,
        schedule_id="sched-1",
        day=day,
        session_index=index,
        subject=subject,
        duration_seconds=seconds,
        completed_at=created,
        created_at=created,
    )


def test_empty_dashboard():
    stats = build_dashboard_stats(NOW, [], [], None, None)
    assert stats.focus_score == 0
    assert stats.weekly_goal == 40 * 3600
    assert [d.day for d in stats.weekly_progress] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert stats.study_time_diff == "Same as yesterday"
    assert stats.weekly_progress_percentage == 0


def test_study_time_and_breakdown():
    sessions = [
        session("2026-10-18T10:00:00+00:00", 3600, ["Math", "Physics"]),
        session("2026-10-18T08:00:00+00:00", 1800, ["Math"]),
        session("2026-10-17T09:00:00+00:00", 3600, ["Chemistry"]),
    ]
    stats = build_dashboard_stats(NOW, sessions, [], None, None)

    assert stats.study_time_today == 5400
    assert stats.study_time_yesterday == 3600
    assert stats.weekly_study_time == 9000
    assert stats.focus_score == 75
    assert stats.study_time_diff == "+30min from yesterday"

    breakdown = {s.subject: s.hours for s in stats.subject_breakdown}
    assert breakdown == {"Math": 1.0, "Physics": 0.5, "Chemistry": 1.0}
    daily = {d.day: d.hours for d in stats.weekly_progress}
    assert daily["Sun"] == 1.5
    assert daily["Sat"] == 1.0


def test_focus_score_from_todays_plan():
    from mindsync.models.schedule import StudySchedule

    schedule = StudySchedule(
        id="sched-1",
        user_id=USER,
        subjects=[],
        weekly_plan=make_weekly_plan(sessions_per_day=4),
        total_hours=10,
        start_date="2026-10-12",
        end_date="2026-10-25",
        created_at="2026-10-12T00:00:00+00:00",
    )
    completions = [
        completion("Sunday", 0, "2026-10-18T09:00:00+00:00"),
        completion("Sunday", 1, "2026-10-18T11:00:00+00:00", seconds=5400),
        completion("Sunday", 2, "2026-10-11T11:00:00+00:00"),  # last week's Sunday
    ]
    stats = build_dashboard_stats(NOW, [], completions, None, schedule)
    assert stats.total_sessions_today == 4
    assert stats.completed_sessions_today == 2
    assert stats.focus_score == 50
    assert stats.recent_activity[1].duration == "1h 30m"
    assert stats.recent_activity[0].duration == "30m"
    assert stats.recent_activity[0].time == "09:00"


def test_current_mood_and_weekly_percentage():
    mood = EmotionLog(id="e1", user_id=USER, emotion="joy", confidence=90, created_at=NOW)
    sessions = [session("2026-10-15T10:00:00+00:00", 50 * 3600)]
    stats = build_dashboard_stats(NOW, sessions, [], mood, None)
    assert stats.current_mood == "joy"
    assert stats.weekly_progress_percentage == 100


def test_study_time_diff_negative():
    stats = DashboardStats(study_time_today=600, study_time_yesterday=3600)
    assert stats.study_time_diff == "-50min from yesterday"


def test_service_reads_repositories(repos, supabase_fake):
    supabase_fake.seed("study_sessions", {
        "user_id": USER,
        "login_timestamp": "2026-10-18T08:00:00+00:00",
        "duration_seconds": 2400,
        "subjects_studied": ["Math"],
        "created_at": "2026-10-18T08:40:00+00:00",
    })
    supabase_fake.seed("study_sessions", {
        "user_id": USER,
        "login_timestamp": "2026-09-01T08:00:00+00:00",
        "duration_seconds": 9999,
        "created_at": "2026-09-01T08:40:00+00:00",
    })
    supabase_fake.seed("emotion_logs", {"user_id": USER, "emotion": "neutral", "confidence": 55})

    stats = asyncio.run(DashboardService(repos, clock=lambda: NOW).get_stats(USER))
    assert stats.study_time_today == 2400
    assert stats.weekly_study_time == 2400
    assert stats.current_mood == "neutral"


def test_duration_labels():
    stats = DashboardStats(study_time_today=2700, weekly_study_time=9000)
    assert stats.study_time_today_label == "45m"
    assert stats.weekly_study_time_label == "2.5h"
    assert DashboardStats(weekly_study_time=7200).weekly_study_time_label == "2h"
