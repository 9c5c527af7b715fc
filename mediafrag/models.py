"""Shared data types used across mediafrag."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TemporalWindow:
    """A start/end playback window in seconds. Either bound may be absent."""

    start: float | None = None
    end: float | None = None

    @property
    def duration(self) -> float | None:
        if self.start is None or self.end is None:
            return None
        return self.end - self.start

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


class BoundaryState(Enum):
    """Latch owned by the boundary enforcer for one registered window."""

    UNARMED = "unarmed"
    ARMED = "armed"
    FIRED = "fired"
