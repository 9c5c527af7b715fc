"""Media element collaborator and a simulated implementation."""

import logging
import math
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

TimeUpdateListener = Callable[[], None]


class MediaElement(Protocol):
    """Readable/writable position, a pause action and a position feed."""

    current_time: float

    @property
    def paused(self) -> bool: ...

    def pause(self) -> None: ...

    def play(self) -> None: ...

    def seek(self, position: float) -> None: ...

    def add_time_update_listener(self, listener: TimeUpdateListener) -> None: ...

    def remove_time_update_listener(self, listener: TimeUpdateListener) -> None: ...


class SimulatedMedia:
    """A clock-free media element driven by explicit ``advance`` calls.

    Position-changed notifications are emitted every
    ``time_update_interval`` seconds of simulated playback, the way a real
    element reports on a fixed cadence rather than at exact instants.
    """

    def __init__(self, duration: float, time_update_interval: float = 0.25) -> None:
        if not math.isfinite(duration) or duration <= 0:
            raise ValueError("duration must be a positive finite number")
        if not math.isfinite(time_update_interval) or time_update_interval <= 0:
            raise ValueError("time_update_interval must be a positive finite number")
        self.duration = duration
        self.time_update_interval = time_update_interval
        self.current_time = 0.0
        self._paused = True
        self._listeners: list[TimeUpdateListener] = []
        self.pause_calls = 0

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def ended(self) -> bool:
        return self.current_time >= self.duration

    def play(self) -> None:
        self._paused = False

    def pause(self) -> None:
        self.pause_calls += 1
        self._paused = True

    def add_time_update_listener(self, listener: TimeUpdateListener) -> None:
        self._listeners.append(listener)

    def remove_time_update_listener(self, listener: TimeUpdateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def seek(self, position: float) -> None:
        self.current_time = min(max(position, 0.0), self.duration)
        self._emit()

    def advance(self, seconds: float) -> float:
        """Play forward up to *seconds*, stopping early if paused or ended.

        Returns the number of seconds actually played.
        """
        if math.isnan(seconds):
            raise ValueError("seconds must be a number")
        played = 0.0
        while not self._paused and played < seconds and not self.ended:
            step = min(self.time_update_interval, seconds - played, self.duration - self.current_time)
            self.current_time += step
            played += step
            if self.ended:
                logger.debug("Simulated media reached its duration (%.3fs)", self.duration)
                self._paused = True
            self._emit()
        return played

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener()
