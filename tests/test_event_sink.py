import pytest

from ball_clock.engine import initialize, step_tick
from ball_clock.event_sink import InMemoryEventSink
from ball_clock.events import EventType


def test_event_order_on_first_minute_flush():
    """
    On tick 5 the Minute track is full, so:
      TICK_START -> BALL_RELEASED -> TRACK_FLUSHED(Min) -> BALL_PLACED(FiveMin)
    """
    state = initialize(30)
    sink = InMemoryEventSink()

    for _ in range(5):
        step_tick(state, event_sink=sink)

    tick5 = sink.events_for_tick(5)
    assert [e.type for e in tick5] == [
        EventType.TICK_START,
        EventType.BALL_RELEASED,
        EventType.TRACK_FLUSHED,
        EventType.BALL_PLACED,
    ]
    assert tick5[1].ball == 5
    assert tick5[2].data == {"track": "Min", "balls": [4, 3, 2, 1]}
    assert tick5[3].ball == 5
    assert tick5[3].data["track"] == "FiveMin"
    assert [e.seq for e in tick5] == [1, 2, 3, 4]


def test_quiet_tick_places_ball_on_minute_track():
    state = initialize(30)
    sink = InMemoryEventSink()
    step_tick(state, event_sink=sink)

    assert sink.current_tick == 1
    assert [e.type for e in sink.events] == [
        EventType.TICK_START,
        EventType.BALL_RELEASED,
        EventType.BALL_PLACED,
    ]
    assert sink.events[2].data["track"] == "Min"


def test_twelve_hour_rollover_emits_ball_returned():
    state = initialize(30)
    sink = InMemoryEventSink()
    for _ in range(12 * 60):
        step_tick(state, event_sink=sink)

    last = sink.events_for_tick(720)
    flushed = [e.data["track"] for e in last if e.type == EventType.TRACK_FLUSHED]
    assert flushed == ["Min", "FiveMin", "Hour"]
    assert last[-1].type == EventType.BALL_RETURNED
    assert list(state.main)[-1] == last[-1].ball


def test_emit_before_start_tick_is_rejected():
    sink = InMemoryEventSink()
    with pytest.raises(RuntimeError):
        sink.emit(EventType.TICK_START)
