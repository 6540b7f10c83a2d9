from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """
    Event vocabulary for observing ball movement during a tick.
    The engine emits these only when an event sink is supplied.
    """

    TICK_START = "TICK_START"
    BALL_RELEASED = "BALL_RELEASED"
    BALL_PLACED = "BALL_PLACED"
    TRACK_FLUSHED = "TRACK_FLUSHED"
    BALL_RETURNED = "BALL_RETURNED"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A structured, orderable fact emitted by the engine (optionally).

    tick and seq are owned by the sink (so the engine remains stateless).
    """

    tick: int
    seq: int
    type: EventType
    ball: int | None = None
    data: dict[str, Any] = field(default_factory=dict)
