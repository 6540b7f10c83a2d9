from __future__ import annotations

from collections import deque

from ball_clock.event_sink import EventSink
from ball_clock.events import EventType
from ball_clock.models import ClockState
from ball_clock.snapshots import ClockSnapshot, snapshot

MIN_BALLS = 27
MAX_BALLS = 127

MINUTE_CAPACITY = 4
FIVE_MINUTE_CAPACITY = 11
HOUR_CAPACITY = 11


class InvalidBallCount(ValueError):
    """Raised when a ball count falls outside [MIN_BALLS, MAX_BALLS]."""

    def __init__(self, ball_count: object):
        super().__init__("Error - invalid ballCount specified for simulation")
        self.ball_count = ball_count


class InternalConsistencyError(RuntimeError):
    """Raised when the tracks no longer hold the balls they started with."""


def initialize(ball_count: int) -> ClockState:
    """
    Build the starting state: Main holds 1..ball_count in ascending order,
    all indicator tracks empty.
    """
    if not isinstance(ball_count, int) or not MIN_BALLS <= ball_count <= MAX_BALLS:
        raise InvalidBallCount(ball_count)
    return ClockState(main=deque(range(1, ball_count + 1)))


def _flush(track: list[int], name: str, main: deque[int], event_sink: EventSink | None) -> None:
    # Last ball in is the first to fall back out.
    returned = track[::-1]
    main.extend(returned)
    track.clear()
    if event_sink is not None:
        event_sink.emit(EventType.TRACK_FLUSHED, track=name, balls=returned)


def step_tick(state: ClockState, event_sink: EventSink | None = None) -> None:
    """
    Advance the clock by one minute.

    Rules:
    - The front ball of Main is released onto the Minute track.
    - A track that is already full flushes its balls back onto Main in
      reverse arrival order; the released ball then moves on to the next
      track instead of resting on the full one.
    - Minute -> FiveMinute -> Hour; if Hour is full too, the released ball
      follows the flushed balls home onto Main.
    """
    if event_sink is not None:
        event_sink.start_tick()
        event_sink.emit(EventType.TICK_START)

    if not state.main:
        raise InternalConsistencyError("Main track is empty; balls were lost between tracks.")

    ball = state.main.popleft()
    if event_sink is not None:
        event_sink.emit(EventType.BALL_RELEASED, ball=ball)

    for name, track, capacity in (
        ("Min", state.minute, MINUTE_CAPACITY),
        ("FiveMin", state.five_minute, FIVE_MINUTE_CAPACITY),
        ("Hour", state.hour, HOUR_CAPACITY),
    ):
        if len(track) < capacity:
            track.append(ball)
            if event_sink is not None:
                event_sink.emit(EventType.BALL_PLACED, ball=ball, track=name)
            return
        _flush(track, name, state.main, event_sink)

    # 12 o'clock rolled over: the released ball has no track left to rest on.
    state.main.append(ball)
    if event_sink is not None:
        event_sink.emit(EventType.BALL_RETURNED, ball=ball)


def is_initial_order(state: ClockState) -> bool:
    """
    True when the clock is back in its starting configuration.

    Balls are distinct and start in ascending order, so a strictly ascending
    Main with every indicator track empty is the starting configuration.
    Only meaningful on 60-minute boundaries; scheduling is up to the caller.
    """
    if state.minute or state.five_minute or state.hour:
        return False
    main = state.main
    return all(main[i] < main[i + 1] for i in range(len(main) - 1))


class BallClockEngine:
    """Owns a single ClockState and the count of minutes it has ticked."""

    def __init__(self, ball_count: int):
        self.state = initialize(ball_count)
        self.ball_count = ball_count
        self.minutes_elapsed = 0

    def tick(self, event_sink: EventSink | None = None) -> None:
        step_tick(self.state, event_sink=event_sink)
        self.minutes_elapsed += 1

    def is_initial_order(self) -> bool:
        return is_initial_order(self.state)

    def snapshot(self) -> ClockSnapshot:
        return snapshot(self.state)
