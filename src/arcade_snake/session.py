"""Timer-driven game session binding an engine to a scheduler."""

from __future__ import annotations

import logging
from collections.abc import Callable

from arcade_snake.engine import GameEngine
from arcade_snake.events import FoodEaten, GameEvent
from arcade_snake.scheduler import Scheduler, TimerHandle
from arcade_snake.snake import Direction, Position
from arcade_snake.state import GamePhase, GameState

logger = logging.getLogger(__name__)

FrameListener = Callable[[GameState], None]


class GameSession:
    """Runs a :class:`GameEngine` in real time.

    Owns two periodic timers: the tick timer, re-armed whenever the tick
    interval changes, and the one-second clock timer. Both stop on pause,
    on game over and on :meth:`close`. Eaten-food positions are kept as
    short-lived particles for the renderer.
    """

    def __init__(self, engine: GameEngine, scheduler: Scheduler) -> None:
        self.engine = engine
        self.scheduler = scheduler
        self._tick_timer: TimerHandle | None = None
        self._clock_timer: TimerHandle | None = None
        self._armed_interval_ms: int | None = None
        self._particles: list[tuple[Position, TimerHandle]] = []
        self._frame_listeners: list[FrameListener] = []
        self._closed = False
        self.engine.events.subscribe(self._on_event)

    @property
    def state(self) -> GameState:
        return self.engine.state

    @property
    def particles(self) -> list[Position]:
        """Positions of food eaten within the particle lifetime."""
        return [pos for pos, _ in self._particles]

    @property
    def tick_timer_active(self) -> bool:
        return self._tick_timer is not None and self._tick_timer.active

    @property
    def clock_timer_active(self) -> bool:
        return self._clock_timer is not None and self._clock_timer.active

    @property
    def armed_interval_ms(self) -> int | None:
        """Interval of the live tick timer, or ``None`` when stopped."""
        return self._armed_interval_ms if self.tick_timer_active else None

    def add_frame_listener(self, listener: FrameListener) -> None:
        self._frame_listeners.append(listener)

    # --- commands ---

    def start(self) -> None:
        """Start a new game, replacing whatever was running."""
        if self._closed:
            logger.warning("Ignoring start on a closed session.")
            return
        self._stop_timers()
        self._clear_particles()
        self.engine.start()
        self._arm_timers()
        self._publish()

    def set_direction(self, direction: Direction) -> None:
        self.engine.set_direction(direction)

    def toggle_pause(self) -> None:
        if self._closed:
            return
        phase = self.engine.toggle_pause()
        if phase == GamePhase.PAUSED:
            self._stop_timers()
        elif phase == GamePhase.RUNNING and not self.tick_timer_active:
            self._arm_timers()
        self._publish()

    def close(self) -> None:
        """Cancel every timer and detach from the engine."""
        if self._closed:
            return
        self._closed = True
        self._stop_timers()
        self._clear_particles()
        self.engine.events.unsubscribe(self._on_event)
        logger.info("Game session closed.")

    # --- timers ---

    def _arm_timers(self) -> None:
        self._arm_tick_timer()
        self._clock_timer = self.scheduler.call_every(
            self.engine.config.clock_interval_ms, self._on_clock,
        )

    def _arm_tick_timer(self) -> None:
        interval = self.engine.state.tick_interval_ms
        self._tick_timer = self.scheduler.call_every(interval, self._on_tick)
        self._armed_interval_ms = interval

    def _stop_timers(self) -> None:
        for timer in (self._tick_timer, self._clock_timer):
            if timer is not None:
                timer.cancel()
        self._tick_timer = None
        self._clock_timer = None
        self._armed_interval_ms = None

    def _on_tick(self) -> None:
        state = self.engine.tick()
        if state.phase != GamePhase.RUNNING:
            self._stop_timers()
        elif state.tick_interval_ms != self._armed_interval_ms:
            logger.debug(
                "Re-arming tick timer: %s ms -> %d ms.",
                self._armed_interval_ms, state.tick_interval_ms,
            )
            if self._tick_timer is not None:
                self._tick_timer.cancel()
            self._arm_tick_timer()
        self._publish()

    def _on_clock(self) -> None:
        self.engine.advance_clock()

    # --- particles ---

    def _on_event(self, event: GameEvent) -> None:
        if isinstance(event, FoodEaten):
            self._add_particle(event.position)

    def _add_particle(self, position: Position) -> None:
        timer = self.scheduler.call_later(
            self.engine.config.particle_lifetime_ms,
            lambda: self._expire_particle(timer),
        )
        self._particles.append((position, timer))

    def _expire_particle(self, timer: TimerHandle) -> None:
        self._particles = [p for p in self._particles if p[1] is not timer]

    def _clear_particles(self) -> None:
        for _, timer in self._particles:
            timer.cancel()
        self._particles.clear()

    def _publish(self) -> None:
        state = self.engine.state
        for listener in list(self._frame_listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Frame listener %r failed.", listener)
