"""Timer Manager - focus timer that survives process restarts"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pydantic import ValidationError

from mindsync.infra.storage import StateStore
from mindsync.utils.datetime_helper import whole_seconds_between
from .models.timer_state import TimerState

logger = logging.getLogger(__name__)

TIMER_STORAGE_KEY = "mindsync-timer-state"
TICK_INTERVAL_SECONDS = 1.0

Clock = Callable[[], datetime]
ElapsedListener = Callable[[int], None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DurableTimer:
    """
    Tracks elapsed focus seconds.

    Every state change, including each tick, writes the full snapshot with a
    fresh checkpoint. On load, a running timer catches up on the whole seconds
    that passed since its last checkpoint. Elapsed-second deltas (ticks and
    catch-up) are reported to listeners.
    """

    def __init__(
        self,
        store: StateStore,
        clock: Optional[Clock] = None,
        tick_interval: float = TICK_INTERVAL_SECONDS,
    ):
        self._store = store
        self._clock = clock or _utc_now
        self._tick_interval = tick_interval
        self._state = TimerState(last_checkpoint=self._clock())
        self._listeners: List[ElapsedListener] = []
        self._tick_task: Optional[asyncio.Task] = None

    # ---- observation ----

    @property
    def state(self) -> TimerState:
        return self._state.model_copy()

    @property
    def elapsed_seconds(self) -> int:
        return self._state.elapsed_seconds

    @property
    def is_tracking(self) -> bool:
        return self._state.is_tracking

    @property
    def is_paused(self) -> bool:
        return self._state.is_paused

    def add_listener(self, listener: ElapsedListener) -> None:
        """Register a callback receiving elapsed-second deltas"""
        self._listeners.append(listener)

    def _emit(self, delta: int) -> None:
        if delta <= 0:
            return
        for listener in self._listeners:
            listener(delta)

    # ---- persistence ----

    def load(self) -> TimerState:
        """
        Restore persisted state.

        Returns:
            The restored state (defaults when nothing usable is stored)
        """
        data = self._store.load(TIMER_STORAGE_KEY)
        if data is None:
            return self.state

        try:
            saved = TimerState(**data)
        except (ValidationError, TypeError) as e:
            logger.error(f"Failed to parse timer state: {e}")
            return self.state

        now = self._clock()
        caught_up = 0
        if saved.is_running:
            caught_up = whole_seconds_between(saved.last_checkpoint, now)

        self._state = TimerState(
            elapsed_seconds=saved.elapsed_seconds + caught_up,
            is_tracking=saved.is_tracking,
            is_paused=saved.is_paused if saved.is_tracking else False,
            last_checkpoint=now,
        )
        logger.info(
            f"Timer restored: {self._state.elapsed_seconds}s, status={self._state.status.value}"
            f" (caught up {caught_up}s)"
        )
        self._persist()
        self._emit(caught_up)
        return self.state

    def _persist(self) -> None:
        self._state.last_checkpoint = self._clock()
        self._store.save(TIMER_STORAGE_KEY, self._state.model_dump(mode="json"))

    # ---- transitions ----

    def start(self) -> TimerState:
        """Start tracking; restarting a running timer keeps its elapsed time"""
        self._state.is_tracking = True
        self._state.is_paused = False
        self._persist()
        return self.state

    def pause(self) -> TimerState:
        if not self._state.is_tracking:
            return self.state
        self._state.is_paused = True
        self._persist()
        return self.state

    def resume(self) -> TimerState:
        if not self._state.is_tracking:
            return self.state
        self._state.is_paused = False
        self._persist()
        return self.state

    def stop(self) -> int:
        """
        End the session and clear persisted state.

        Returns:
            Elapsed seconds of the session that just ended
        """
        ended = self._state.elapsed_seconds
        self._clear()
        logger.info(f"Timer stopped after {ended}s")
        return ended

    def reset(self) -> None:
        """Zero the timer and clear persisted state without ending a session"""
        self._clear()
        logger.info("Timer reset")

    def _clear(self) -> None:
        self._state = TimerState(last_checkpoint=self._clock())
        self._store.remove(TIMER_STORAGE_KEY)

    def tick(self) -> bool:
        """
        Advance one second if running.

        Returns:
            True if elapsed time advanced
        """
        if not self._state.is_running:
            return False
        self._state.elapsed_seconds += 1
        self._persist()
        self._emit(1)
        return True

    # ---- tick loop ----

    def start_ticking(self) -> None:
        """Start the 1 Hz tick loop on the running event loop"""
        if self._tick_task is not None and not self._tick_task.done():
            return
        self._tick_task = asyncio.get_running_loop().create_task(self._tick_loop())

    async def stop_ticking(self) -> None:
        """Cancel the tick loop and wait for it to finish"""
        task, self._tick_task = self._tick_task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _tick_loop(self) -> None:
        while True:
            await asyncio.sleep(self._tick_interval)
            try:
                self.tick()
            except Exception as e:
                logger.error(f"Error during timer tick: {e}")
