from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ball_clock.models import ClockState


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """
    Read-only copy of the four tracks.

    Field order (Min, FiveMin, Hour, Main) is part of the serialized
    contract and must not change.
    """

    minute: tuple[int, ...]
    five_minute: tuple[int, ...]
    hour: tuple[int, ...]
    main: tuple[int, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "Min": list(self.minute),
            "FiveMin": list(self.five_minute),
            "Hour": list(self.hour),
            "Main": list(self.main),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def clock_time(self) -> str:
        """
        Time shown by the indicator tracks as "H:MM".

        The hour track has a fixed ball that reads 1 o'clock when it is empty.
        """
        hours = len(self.hour) + 1
        minutes = 5 * len(self.five_minute) + len(self.minute)
        return f"{hours}:{minutes:02d}"

    def __str__(self) -> str:
        return self.to_json()


def snapshot(state: ClockState) -> ClockSnapshot:
    """Capture the tracks without modifying them."""
    return ClockSnapshot(
        minute=tuple(state.minute),
        five_minute=tuple(state.five_minute),
        hour=tuple(state.hour),
        main=tuple(state.main),
    )
