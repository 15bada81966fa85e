"""Cancellable timers and the debounced search box built on them."""

import threading
from typing import Any, Callable, Iterable, Optional, Protocol

from backend.app.core.settings import get_settings
from backend.app.schemas.student import StatusFilter, StudentRecord
from backend.app.services.student_filters import filter_students


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingScheduler:
    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer:
    """Runs callback once calls stop arriving for `wait` seconds.

    Each call cancels whatever was pending, so only the last call's
    arguments are ever delivered.
    """

    def __init__(self, callback: Callable[..., Any], wait: float, scheduler: Optional[Scheduler] = None):
        self.callback = callback
        self.wait = wait
        self.scheduler = scheduler or ThreadingScheduler()
        self._pending: Optional[TimerHandle] = None
        self._generation = 0
        self._lock = threading.Lock()

    def __call__(self, *args: Any) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = self.scheduler.schedule(self.wait, lambda: self._fire(generation, args))

    def _fire(self, generation: int, args: tuple) -> None:
        with self._lock:
            # a timer that was already running when it got cancelled
            if generation != self._generation:
                return
            self._pending = None
        self.callback(*args)

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def cancel(self) -> None:
        with self._lock:
            self._generation += 1
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None


class SearchBox:
    """Keeps raw keystroke text apart from the committed search term."""

    def __init__(self, scheduler: Optional[Scheduler] = None, wait: Optional[float] = None):
        if wait is None:
            wait = get_settings().search_debounce_ms / 1000
        self.raw_text = ""
        self.committed_term = ""
        self._debouncer = Debouncer(self._commit, wait, scheduler)

    def _commit(self, text: str) -> None:
        self.committed_term = text

    def type(self, text: str) -> None:
        self.raw_text = text
        self._debouncer(text)

    def close(self) -> None:
        self._debouncer.cancel()

    def visible(self, records: Iterable[StudentRecord], status: StatusFilter = "all") -> list[StudentRecord]:
        return filter_students(records, self.committed_term, status)
