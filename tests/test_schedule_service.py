"""Schedule lifecycle against the in-memory Supabase fake"""
import asyncio
from datetime import date, datetime, timezone

import pytest

from mindsync.models.completion import CompletionOutcome
from mindsync.models.schedule import ScheduleSession, ScheduleStatus, Subject
from mindsync.services.schedule import StudyScheduleService

from .conftest import StubInferenceService

USER = "user-1"
SUBJECTS = [Subject(name="Math", hours_per_week=6), Subject(name="Physics", hoursPerWeek=4)]


@pytest.fixture
def service(repos, clock):
    return StudyScheduleService(repos.schedules, repos.completions, clock=clock)


def generated():
    return asyncio.run(StubInferenceService().generate_schedule(None))


def accept(service, start=date(2026, 10, 12), end=date(2026, 10, 25)):
    return asyncio.run(service.accept_schedule(USER, SUBJECTS, generated(), start, end))


def statuses(supabase_fake):
    return [row["status"] for row in supabase_fake.tables["study_schedules"]]


def test_accept_stores_active_schedule(service, supabase_fake):
    schedule = accept(service)
    assert schedule.status == ScheduleStatus.ACTIVE
    assert len(schedule.weekly_plan) == 7
    assert schedule.subjects[1].hours_per_week == 4
    assert statuses(supabase_fake) == ["active"]


def test_accept_demotes_previous_active(service, supabase_fake):
    first = accept(service)
    second = accept(service)
    assert statuses(supabase_fake) == ["completed", "active"]

    active = asyncio.run(service.get_active_schedule(USER))
    assert active.id == second.id != first.id


def test_accept_does_not_touch_other_users(service, supabase_fake):
    supabase_fake.seed("study_schedules", {
        "user_id": "someone-else",
        "subjects": [],
        "weekly_plan": [],
        "total_hours": 1,
        "start_date": "2026-10-12",
        "end_date": "2026-10-25",
        "status": "active",
    })
    accept(service)
    assert statuses(supabase_fake) == ["active", "active"]


def test_ended_schedules_expire_on_fetch(service, supabase_fake):
    accept(service, start=date(2026, 10, 1), end=date(2026, 10, 17))
    assert asyncio.run(service.get_active_schedule(USER)) is None
    assert statuses(supabase_fake) == ["expired"]


def test_schedule_ending_today_is_still_active(service):
    accept(service, start=date(2026, 10, 12), end=date(2026, 10, 18))
    assert asyncio.run(service.get_active_schedule(USER)) is not None


def test_mark_session_complete_and_duplicate(service):
    accept(service)
    first = asyncio.run(service.mark_session_complete(USER, "Sunday", 0, "Math", 1800))
    assert first.outcome == CompletionOutcome.COMPLETED
    assert first.completion.session_index == 0

    again = asyncio.run(service.mark_session_complete(USER, "Sunday", 0, "Math", 1800))
    assert again.outcome == CompletionOutcome.ALREADY_COMPLETED
    assert again.completion is None


def test_mark_complete_without_schedule(service):
    assert asyncio.run(service.mark_session_complete(USER, "Sunday", 0, "Math", 60)) is None


def test_todays_sessions_and_daily_progress(service, clock):
    schedule = accept(service)
    todays = service.get_todays_sessions(schedule)
    assert todays.day == "Sunday"
    assert todays.day_index == 6
    assert len(todays.sessions) == 2

    asyncio.run(service.mark_session_complete(USER, "Sunday", 1, "Math", 3600))
    completions = asyncio.run(service.get_completions(USER, schedule.id))
    assert service.is_session_completed(completions, "Sunday", 1)
    assert not service.is_session_completed(completions, "Sunday", 0)

    progress = service.get_daily_progress(schedule, completions)
    assert progress.completed == 1
    assert progress.total == 2
    assert [s.completed for s in progress.subjects] == [False, True]


def test_daily_progress_without_schedule(service):
    progress = service.get_daily_progress(None, [])
    assert progress.total == 0
    assert progress.subjects == []


def test_update_day_plan(service):
    accept(service)
    sessions = [ScheduleSession(time="18:00", subject="Physics", topic="Optics", type="review")]
    updated = asyncio.run(service.update_day_plan(USER, 2, sessions))
    assert updated.weekly_plan[2].day == "Wednesday"
    assert updated.weekly_plan[2].sessions[0].topic == "Optics"
    assert len(updated.weekly_plan[1].sessions) == 2


def test_update_day_plan_out_of_range(service):
    accept(service)
    with pytest.raises(IndexError):
        asyncio.run(service.update_day_plan(USER, 7, []))


def test_delete_active_schedule(service, supabase_fake):
    accept(service)
    assert asyncio.run(service.delete_active_schedule(USER)) is True
    assert supabase_fake.tables["study_schedules"] == []
    assert asyncio.run(service.delete_active_schedule(USER)) is False
