"""TraceSession - the game state machine driving tracker and clock."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from tick_trace import signals, vec
from tick_trace.config import TraceConfig
from tick_trace.curve import Curve, sample
from tick_trace.schedule import Scheduler, TaskHandle, TickCallback
from tick_trace.scoring import ResultSummary, display_percent, score_tier
from tick_trace.signals import SignalBus
from tick_trace.tracker import evaluate
from tick_trace.types import FinishReason, Point, ScoreTier, SessionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    state: SessionState
    generation: int
    remaining_time: int
    countdown_value: int
    progress: float
    progress_percent: int
    player_position: Point
    grabbing: bool
    finish_reason: FinishReason | None
    score_tier: ScoreTier | None
    result_visible: bool


class TraceSession:
    """One player's run along a sampled curve.

    All entry points run to completion and flush queued signals before
    returning. Scheduled callbacks carry the generation they were created
    for; a restart bumps the generation so stale callbacks are dropped.
    """

    def __init__(
        self,
        config: TraceConfig | None = None,
        curve: Curve | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else TraceConfig()
        if curve is None:
            curve = sample(
                self._config.path_data,
                self._config.resolution,
                self._config.flatten_steps,
            )
        self._curve = curve
        self._bus = bus if bus is not None else SignalBus()
        self._scheduler = Scheduler()
        self._countdown_task: TaskHandle | None = None
        self._clock_task: TaskHandle | None = None
        self._generation = 0
        self._state = SessionState.IDLE
        self._reset()

    # --- Accessors ---

    @property
    def config(self) -> TraceConfig:
        return self._config

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def remaining_time(self) -> int:
        return self._remaining_time

    @property
    def countdown_value(self) -> int:
        return self._countdown_value

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def progress_index(self) -> int:
        return self._progress_index

    @property
    def progress_percent(self) -> int:
        return display_percent(self._progress)

    @property
    def player_position(self) -> Point:
        return self._player_position

    @property
    def grabbing(self) -> bool:
        return self._grabbing

    @property
    def finish_reason(self) -> FinishReason | None:
        return self._finish_reason

    @property
    def score_tier(self) -> ScoreTier | None:
        if self._state is not SessionState.FINISHED:
            return None
        return score_tier(self._progress)

    @property
    def result_visible(self) -> bool:
        return self._result_visible

    def result(self) -> ResultSummary | None:
        if self._finish_reason is None:
            return None
        return ResultSummary.build(self._progress, self._finish_reason)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            generation=self._generation,
            remaining_time=self._remaining_time,
            countdown_value=self._countdown_value,
            progress=self._progress,
            progress_percent=self.progress_percent,
            player_position=self._player_position,
            grabbing=self._grabbing,
            finish_reason=self._finish_reason,
            score_tier=self.score_tier,
            result_visible=self._result_visible,
        )

    # --- Commands ---

    def start_session(self) -> bool:
        """Enter the countdown from IDLE or FINISHED. Ignored otherwise."""
        if self._state in (SessionState.COUNTDOWN, SessionState.ACTIVE):
            logger.debug("start_session ignored while %s", self._state.value)
            return False
        self._begin()
        self._bus.flush()
        return True

    def restart_session(self) -> None:
        """Discard the current run from any state and count down again."""
        self._begin()
        self._bus.flush()

    def dismiss_result(self) -> None:
        self._result_visible = False

    def show_result(self) -> bool:
        if self._state is not SessionState.FINISHED:
            logger.debug("show_result ignored while %s", self._state.value)
            return False
        self._result_visible = True
        return True

    # --- Input ---

    def on_pointer_down(self, point: Point) -> bool:
        if self._state is not SessionState.ACTIVE:
            logger.debug("pointer down ignored while %s", self._state.value)
            return False
        gap = vec.distance(point, self._player_position)
        if gap >= self._config.pickup_distance:
            logger.debug("pointer down %.1f from marker, not grabbed", gap)
            return False
        self._grabbing = True
        self._track(point)
        self._bus.flush()
        return True

    def on_pointer_move(self, point: Point) -> bool:
        if self._state is not SessionState.ACTIVE or not self._grabbing:
            return False
        self._track(point)
        self._bus.flush()
        return True

    def on_pointer_up(self) -> None:
        self._grabbing = False

    # --- Clock ---

    def on_clock_tick(self) -> None:
        """Advance one second: drives the countdown, then the game clock."""
        self._scheduler.advance()
        self._bus.flush()

    # --- Internals ---

    def _reset(self) -> None:
        self._remaining_time = self._config.time_limit
        self._countdown_value = self._config.countdown_ticks
        self._progress = 0.0
        self._progress_index = 0
        self._player_position = self._curve.start()
        self._grabbing = False
        self._finish_reason: FinishReason | None = None
        self._result_visible = False

    def _cancel_tasks(self) -> None:
        for handle in (self._countdown_task, self._clock_task):
            if handle is not None and handle.active:
                handle.cancel()
        self._countdown_task = None
        self._clock_task = None

    def _guarded(self, fn: Callable[[int], None]) -> TickCallback:
        generation = self._generation

        def callback(tick_number: int) -> None:
            if generation != self._generation:
                logger.debug(
                    "Dropping stale tick %d from generation %d (current %d)",
                    tick_number, generation, self._generation,
                )
                return
            fn(tick_number)

        return callback

    def _set_state(self, state: SessionState) -> None:
        previous = self._state
        self._state = state
        self._bus.publish(
            signals.STATE_CHANGED, previous=previous, state=state,
            generation=self._generation,
        )

    def _begin(self) -> None:
        self._cancel_tasks()
        self._generation += 1
        self._reset()
        self._set_state(SessionState.COUNTDOWN)
        self._bus.publish(signals.COUNTDOWN, value=self._countdown_value)
        self._countdown_task = self._scheduler.every(
            "countdown", 1, self._guarded(self._countdown_step)
        )
        logger.info("Session %d counting down", self._generation)
        logger.debug("Scheduled tasks: %s", self._scheduler.pending())

    def _countdown_step(self, tick_number: int) -> None:
        self._countdown_value -= 1
        if self._countdown_value > 0:
            self._bus.publish(signals.COUNTDOWN, value=self._countdown_value)
            return
        if self._countdown_task is not None:
            self._countdown_task.cancel()
            self._countdown_task = None
        self._set_state(SessionState.ACTIVE)
        self._clock_task = self._scheduler.every(
            "clock", 1, self._guarded(self._clock_step)
        )
        logger.info(
            "Session %d active with %ds on the clock",
            self._generation, self._remaining_time,
        )

    def _clock_step(self, tick_number: int) -> None:
        if self._state is not SessionState.ACTIVE:
            return
        self._remaining_time = max(0, self._remaining_time - 1)
        self._bus.publish(signals.TIME_CHANGED, remaining=self._remaining_time)
        if self._remaining_time == 0:
            self._finish(FinishReason.TIMED_OUT)

    def _track(self, point: Point) -> None:
        cfg = self._config
        match = evaluate(
            point, self._progress_index, self._curve, cfg.backtrack, cfg.lookahead
        )
        if not match.within(cfg.safe_radius):
            logger.info(
                "Pointer %.1f from track (limit %.1f) at sample %d",
                match.best_distance, cfg.safe_radius, match.best_index,
            )
            self._finish(FinishReason.OUT_OF_BOUNDS)
            return

        self._player_position = point
        candidate = self._curve.index_to_percent(match.best_index)
        if candidate > self._progress:
            self._progress = candidate
            self._progress_index = match.best_index
            self._bus.publish(
                signals.PROGRESS_CHANGED,
                progress=self._progress, index=self._progress_index,
            )

        if self._progress >= cfg.completion_threshold:
            self._progress = 100.0
            self._progress_index = self._curve.resolution
            self._bus.publish(
                signals.PROGRESS_CHANGED,
                progress=self._progress, index=self._progress_index,
            )
            self._finish(FinishReason.COMPLETED)

    def _finish(self, reason: FinishReason) -> None:
        self._cancel_tasks()
        self._grabbing = False
        self._finish_reason = reason
        self._result_visible = True
        self._set_state(SessionState.FINISHED)
        tier = score_tier(self._progress)
        self._bus.publish(
            signals.FINISHED, reason=reason, progress=self._progress,
            percent=self.progress_percent, tier=tier,
        )
        logger.info(
            "Session %d finished: %s at %.1f%% (tier %d)",
            self._generation, reason.value, self._progress, tier,
        )
