"""Timer scheduling for the tick and clock loops."""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class TimerHandle(Protocol):
    """A cancellable timer returned by a :class:`Scheduler`."""

    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Arms periodic and one-shot timers. Intervals are in milliseconds."""

    def call_every(self, interval_ms: int, callback: Callback) -> TimerHandle: ...

    def call_later(self, delay_ms: int, callback: Callback) -> TimerHandle: ...


class AsyncioTimer:
    """Timer backed by an asyncio task."""

    def __init__(self, task: asyncio.Task) -> None:
        self._task = task
        self._cancelled = False

    @property
    def active(self) -> bool:
        return not self._cancelled and not self._task.done()

    def cancel(self) -> None:
        self._cancelled = True
        if not self._task.done():
            self._task.cancel()


class AsyncioScheduler:
    """Runs timers as tasks on the running event loop.

    Must be used from inside a running loop. A callback that raises is
    logged and ends its timer.
    """

    def call_every(self, interval_ms: int, callback: Callback) -> AsyncioTimer:
        return self._schedule(interval_ms, callback, repeat=True)

    def call_later(self, delay_ms: int, callback: Callback) -> AsyncioTimer:
        return self._schedule(delay_ms, callback, repeat=False)

    def _schedule(
        self, delay_ms: int, callback: Callback, repeat: bool,
    ) -> AsyncioTimer:
        if delay_ms <= 0:
            raise ValueError("Timer delay must be positive.")
        task = asyncio.create_task(self._run(delay_ms / 1000.0, callback, repeat))
        return AsyncioTimer(task)

    @staticmethod
    async def _run(delay: float, callback: Callback, repeat: bool) -> None:
        try:
            while True:
                await asyncio.sleep(delay)
                callback()
                if not repeat:
                    return
        except asyncio.CancelledError:
            logger.debug("Timer %r cancelled.", callback)
        except Exception:
            logger.exception("Timer callback %r failed.", callback)


class ManualTimer:
    """Timer driven by a :class:`ManualScheduler`."""

    __slots__ = ("due_ms", "interval_ms", "callback", "repeat", "seq", "_active")

    def __init__(
        self,
        due_ms: int,
        interval_ms: int,
        callback: Callback,
        repeat: bool,
        seq: int,
    ) -> None:
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.callback = callback
        self.repeat = repeat
        self.seq = seq
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class ManualScheduler:
    """Deterministic scheduler with an explicitly advanced clock.

    Nothing fires until :meth:`advance` is called. Due timers fire in
    due-time order, ties broken by creation order, and timers armed by a
    callback fire within the same call once they come due.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._timers: list[ManualTimer] = []
        self._seq = itertools.count()

    def call_every(self, interval_ms: int, callback: Callback) -> ManualTimer:
        return self._schedule(interval_ms, callback, repeat=True)

    def call_later(self, delay_ms: int, callback: Callback) -> ManualTimer:
        return self._schedule(delay_ms, callback, repeat=False)

    def _schedule(self, delay_ms: int, callback: Callback, repeat: bool) -> ManualTimer:
        if delay_ms <= 0:
            raise ValueError("Timer delay must be positive.")
        timer = ManualTimer(
            self.now_ms + delay_ms, delay_ms, callback, repeat, next(self._seq),
        )
        self._timers.append(timer)
        return timer

    @property
    def active_timers(self) -> list[ManualTimer]:
        return [t for t in self._timers if t.active]

    def advance(self, ms: int) -> None:
        """Move the clock forward by *ms*, firing every timer that comes due."""
        target = self.now_ms + ms
        while True:
            due = [t for t in self._timers if t.active and t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self.now_ms = timer.due_ms
            if timer.repeat:
                timer.due_ms += timer.interval_ms
            else:
                timer.cancel()
            timer.callback()
        self.now_ms = target
        self._timers = self.active_timers
