from collections import deque
from dataclasses import dataclass, field


@dataclass
class ClockState:
    # Reservoir; FIFO, balls leave from the left and return on the right.
    main: deque[int] = field(default_factory=deque)
    # Indicator tracks are append-only until they flush.
    minute: list[int] = field(default_factory=list)
    five_minute: list[int] = field(default_factory=list)
    hour: list[int] = field(default_factory=list)

    @property
    def ball_count(self) -> int:
        return len(self.main) + len(self.minute) + len(self.five_minute) + len(self.hour)
