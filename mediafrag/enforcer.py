"""Boundary enforcer — pauses playback once when a window's end is reached."""

import logging
from typing import Callable

from mediafrag.events import EventBus, FragmentEvent
from mediafrag.models import BoundaryState, TemporalWindow

logger = logging.getLogger(__name__)


class BoundaryEnforcer:
    """Watch a position feed against ``window.end`` and stop playback once.

    Position updates arrive on a fixed cadence, so the observed position is
    usually past the boundary rather than exactly on it. Comparing with
    ``>=`` and latching into ``FIRED`` keeps later ticks from pausing again.
    """

    def __init__(self, pause: Callable[[], None], bus: EventBus) -> None:
        self._pause = pause
        self._bus = bus
        self._window: TemporalWindow | None = None
        self._state = BoundaryState.UNARMED

    @property
    def state(self) -> BoundaryState:
        return self._state

    @property
    def window(self) -> TemporalWindow | None:
        return self._window

    def register(self, window: TemporalWindow | None) -> None:
        """Replace the latch for a newly loaded window."""
        self._window = window
        if window is not None and window.end is not None:
            self._state = BoundaryState.ARMED
            logger.info("Boundary armed at %.3fs", window.end)
        else:
            self._state = BoundaryState.UNARMED

    def on_position_update(self, position: float, paused: bool) -> bool:
        """Check one position notification. Returns True if it paused playback."""
        if self._state is not BoundaryState.ARMED:
            return False
        # ARMED implies a window with an end bound.
        end = self._window.end
        if not position >= end:
            return False

        if paused:
            self._state = BoundaryState.FIRED
            logger.debug("Boundary %.3fs passed while already paused", end)
            return False

        self._pause()
        self._state = BoundaryState.FIRED
        logger.info("Boundary reached at %.3fs (end %.3fs); playback paused", position, end)
        self._bus.publish(FragmentEvent.FRAGMENT_END, self._window)
        return True
