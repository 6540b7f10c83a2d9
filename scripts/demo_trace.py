from __future__ import annotations

from ball_clock.engine import BallClockEngine
from ball_clock.event_sink import InMemoryEventSink
from ball_clock.events import EventType


def main() -> None:
    engine = BallClockEngine(30)
    sink = InMemoryEventSink()

    # Long enough to show a Minute and a FiveMinute flush.
    for _ in range(60):
        engine.tick(event_sink=sink)

    for tick in range(1, sink.current_tick + 1):
        parts: list[str] = []
        for e in sink.events_for_tick(tick):
            if e.type == EventType.BALL_RELEASED:
                parts.append(f"ball={e.ball:3d}")
            elif e.type == EventType.TRACK_FLUSHED:
                parts.append(f"flush {e.data['track']}->{e.data['balls']}")
            elif e.type == EventType.BALL_PLACED:
                parts.append(f"rests on {e.data['track']}")
            elif e.type == EventType.BALL_RETURNED:
                parts.append("returns to Main")
        print(f"Tick {tick:3d} | " + " | ".join(parts))

    snap = engine.snapshot()
    print(f"\nClock reads {snap.clock_time()}")
    print(snap.to_json())


if __name__ == "__main__":
    main()
