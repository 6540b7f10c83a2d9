from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from ball_clock.engine import BallClockEngine, InvalidBallCount, initialize, is_initial_order
from ball_clock.event_sink import EventSink
from ball_clock.models import ClockState
from ball_clock.snapshots import ClockSnapshot

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


class InvalidTimeLimit(ValueError):
    """Raised when a negative minute limit is requested."""

    def __init__(self, time_limit: object):
        super().__init__("Error - invalid timeLimit specified for simulation")
        self.time_limit = time_limit


@dataclass(frozen=True)
class SimulationResult:
    ball_count: int
    minutes_elapsed: int
    duration_seconds: float
    # Set only for fixed-horizon runs.
    snapshot: ClockSnapshot | None = None

    @property
    def days(self) -> int:
        return self.minutes_elapsed // MINUTES_PER_HOUR // HOURS_PER_DAY

    @property
    def message(self) -> str:
        if self.snapshot is not None:
            return self.snapshot.to_json()
        return f"{self.ball_count} balls cycle after {self.days} days."


def cycle_complete(state: ClockState, minutes_elapsed: int) -> bool:
    """
    Cycle-length completion check.

    The starting configuration can only recur with every indicator track
    empty, so the ordering check runs on hour boundaries only.
    """
    if minutes_elapsed <= 0 or minutes_elapsed % MINUTES_PER_HOUR != 0:
        return False
    return is_initial_order(state)


def limit_reached(minutes_elapsed: int, time_limit: int) -> bool:
    return minutes_elapsed >= time_limit


def _validate_time_limit(time_limit: object) -> None:
    if not isinstance(time_limit, int) or time_limit < 0:
        raise InvalidTimeLimit(time_limit)


def run_cycle(ball_count: int, event_sink: EventSink | None = None) -> SimulationResult:
    """Tick until the balls return to their starting order."""
    engine = BallClockEngine(ball_count)
    logger.info("BallClock simulation configured for Mode 1 (Cycle Days), %d balls", ball_count)

    start = time.perf_counter()
    while True:
        engine.tick(event_sink=event_sink)
        if cycle_complete(engine.state, engine.minutes_elapsed):
            break
    duration = time.perf_counter() - start

    logger.debug("cycle found after %d minutes", engine.minutes_elapsed)
    return SimulationResult(
        ball_count=ball_count,
        minutes_elapsed=engine.minutes_elapsed,
        duration_seconds=duration,
    )


def run_for(ball_count: int, time_limit: int, event_sink: EventSink | None = None) -> SimulationResult:
    """Tick exactly time_limit minutes and capture the final tracks."""
    engine = BallClockEngine(ball_count)
    _validate_time_limit(time_limit)
    logger.info(
        "BallClock simulation configured for Mode 2 (Clock State), %d balls, %d minutes",
        ball_count,
        time_limit,
    )

    start = time.perf_counter()
    while not limit_reached(engine.minutes_elapsed, time_limit):
        engine.tick(event_sink=event_sink)
    duration = time.perf_counter() - start

    return SimulationResult(
        ball_count=ball_count,
        minutes_elapsed=engine.minutes_elapsed,
        duration_seconds=duration,
        snapshot=engine.snapshot(),
    )


def simulate(ball_count: int, time_limit: int = 0, event_sink: EventSink | None = None) -> SimulationResult:
    """
    Validate inputs and run the selected mode.

    A positive time_limit selects the fixed-horizon snapshot; zero selects
    the cycle-length search. A zero-minute snapshot cannot be requested.
    """
    # Validate both before any ticking so a bad limit never starts a run.
    initialize(ball_count)
    _validate_time_limit(time_limit)

    if time_limit > 0:
        return run_for(ball_count, time_limit, event_sink=event_sink)
    return run_cycle(ball_count, event_sink=event_sink)


def run_sim(ball_count: int, time_limit: int = 0) -> tuple[bool, str]:
    """
    Caller-facing entry point.

    Returns (success, message). Invalid inputs are reported in the message,
    never raised.
    """
    try:
        result = simulate(ball_count, time_limit)
    except (InvalidBallCount, InvalidTimeLimit) as e:
        logger.warning("simulation rejected: %s", e)
        return False, str(e)
    return True, result.message
