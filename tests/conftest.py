"""Shared fixtures: controllable clock, in-memory Supabase fake, stub inference"""
import itertools
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

import pytest
from postgrest.exceptions import APIError

from mindsync.infra.storage import InMemoryStateStore
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.models.schedule import DayPlan, ScheduleSession
from mindsync.services.inference import (
    EmotionAnalysis,
    GeneratedSchedule,
    InferenceService,
    InvalidInputError,
)
from mindsync.utils.datetime_helper import WEEKDAY_NAMES


class FakeClock:
    """Callable clock that only moves when told to"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now


# ---- Supabase fake ----

UNIQUE_KEYS = {
    "schedule_session_completions": ("schedule_id", "day", "session_index"),
}


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload: Optional[Dict[str, Any]] = None
        self._filters: List[Tuple[str, str, Any]] = []
        self._order: Optional[Tuple[str, bool]] = None
        self._limit: Optional[int] = None

    # operations
    def select(self, *columns, count=None):
        self._op = "select"
        return self

    def insert(self, payload: Dict[str, Any]):
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload: Dict[str, Any]):
        self._op = "update"
        self._payload = payload
        return self

    def delete(self):
        self._op = "delete"
        return self

    # filters
    def eq(self, column, value):
        self._filters.append(("eq", column, value))
        return self

    def neq(self, column, value):
        self._filters.append(("neq", column, value))
        return self

    def lt(self, column, value):
        self._filters.append(("lt", column, value))
        return self

    def gte(self, column, value):
        self._filters.append(("gte", column, value))
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        for op, column, value in self._filters:
            current = row.get(column)
            if op == "eq" and current != value:
                return False
            if op == "neq" and current == value:
                return False
            if op == "lt" and not (current is not None and str(current) < str(value)):
                return False
            if op == "gte" and not (current is not None and str(current) >= str(value)):
                return False
        return True

    def execute(self):
        self._db.calls.append((self._table, self._op, list(self._filters)))
        rows = self._db.tables.setdefault(self._table, [])

        if self._op == "insert":
            return SimpleNamespace(data=[self._db.insert_row(self._table, dict(self._payload))], count=None)

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(self._payload)
                row["updated_at"] = self._db.now().isoformat()
            return SimpleNamespace(data=[dict(r) for r in matched], count=None)

        if self._op == "delete":
            self._db.tables[self._table] = [r for r in rows if r not in matched]
            return SimpleNamespace(data=[dict(r) for r in matched], count=None)

        if self._order:
            column, desc = self._order
            matched = sorted(matched, key=lambda r: str(r.get(column)), reverse=desc)
        if self._limit:
            matched = matched[:self._limit]
        return SimpleNamespace(data=[dict(r) for r in matched], count=len(matched))


class FakeSupabase:
    """Minimal stand-in for the supabase Client query builder"""

    def __init__(self, now: Optional[datetime] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[Tuple[str, str, list]] = []
        self._ids = itertools.count(1)
        self._now = now or datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
        self._tick = itertools.count()

    def now(self) -> datetime:
        # Strictly increasing timestamps keep created_at ordering deterministic
        return self._now + timedelta(seconds=next(self._tick))

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def insert_row(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        rows = self.tables.setdefault(table, [])
        unique = UNIQUE_KEYS.get(table)
        if unique and any(all(r.get(k) == row.get(k) for k in unique) for r in rows):
            raise APIError({
                "code": "23505",
                "message": "duplicate key value violates unique constraint",
                "details": None,
                "hint": None,
            })
        stamp = self.now().isoformat()
        row.setdefault("id", f"{table}-{next(self._ids)}")
        row.setdefault("created_at", stamp)
        row.setdefault("updated_at", stamp)
        if table == "schedule_session_completions":
            row.setdefault("completed_at", stamp)
        rows.append(row)
        return dict(row)

    def seed(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        return self.insert_row(table, dict(row))


# ---- Inference stub ----

def make_weekly_plan(sessions_per_day: int = 2) -> List[DayPlan]:
    return [
        DayPlan(
            day=day,
            sessions=[
                ScheduleSession(time=f"{9 + i:02d}:00", subject="Math", topic=f"Topic {i}", type="study")
                for i in range(sessions_per_day)
            ],
        )
        for day in WEEKDAY_NAMES
    ]


class StubInferenceService(InferenceService):
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.calls: List[Tuple[str, Any]] = []

    async def classify_emotion(self, text=None, image=None) -> EmotionAnalysis:
        self.calls.append(("classify_emotion", (text, image)))
        if self.error:
            raise self.error
        if not text and not image:
            raise InvalidInputError()
        return EmotionAnalysis(emotion="joy", confidence=87, reasoning="Upbeat wording", motivation="Keep going!")

    async def generate_schedule(self, request) -> GeneratedSchedule:
        self.calls.append(("generate_schedule", request))
        if self.error:
            raise self.error
        return GeneratedSchedule(
            weekly_plan=make_weekly_plan(),
            total_hours=14,
            tips=["Take breaks"],
            priorities=["Math"],
        )


# ---- fixtures ----

@pytest.fixture
def clock():
    # Sunday 2026-10-18, 09:00 UTC
    return FakeClock(datetime(2026, 10, 18, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store():
    return InMemoryStateStore()


@pytest.fixture
def supabase_fake():
    return FakeSupabase()


@pytest.fixture
def repos(supabase_fake):
    return RepositoryFactory(supabase_fake)


@pytest.fixture
def inference():
    return StubInferenceService()
