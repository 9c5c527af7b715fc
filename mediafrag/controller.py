"""Session controller — wires parser, seed config, enforcer and event bus."""

import logging

from mediafrag.config import PlayerConfig
from mediafrag.enforcer import BoundaryEnforcer
from mediafrag.events import EventBus, FragmentEvent
from mediafrag.fragment import parse_media_fragment
from mediafrag.media import MediaElement
from mediafrag.models import BoundaryState, TemporalWindow

logger = logging.getLogger(__name__)


class FragmentController:
    """Owns the temporal window and boundary latch of one playback session.

    Loading a new source replaces both wholesale; nothing is shared between
    controllers.
    """

    def __init__(self, config: PlayerConfig, bus: EventBus) -> None:
        self.config = config
        self.bus = bus
        self._window: TemporalWindow | None = None
        self._media: MediaElement | None = None
        self._enforcer = BoundaryEnforcer(pause=self._pause_media, bus=bus)

    @property
    def window(self) -> TemporalWindow | None:
        return self._window

    @property
    def boundary_state(self) -> BoundaryState:
        return self._enforcer.state

    @property
    def media(self) -> MediaElement | None:
        return self._media

    def load_source(self, url: str) -> TemporalWindow | None:
        """Parse *url*, publish the result and seed the start position."""
        if not self.config.enable_media_fragments:
            self._window = None
            self._enforcer.register(None)
            return None

        window = parse_media_fragment(url)
        self._window = window
        logger.info("Temporal fragment for %s: %s", url, window)
        self.bus.publish(FragmentEvent.FRAGMENT_PARSED, window)

        if window is not None and window.start is not None:
            self.config.start_position = window.start
        self._enforcer.register(window)
        return window

    def attach_media(self, media: MediaElement) -> None:
        if self._media is not None:
            self.detach_media()
        self._media = media
        media.add_time_update_listener(self._on_time_update)
        if self._window is not None and self._window.start is not None:
            media.seek(self._window.start)

    def detach_media(self) -> None:
        if self._media is None:
            return
        self._media.remove_time_update_listener(self._on_time_update)
        self._media = None

    def destroy(self) -> None:
        self.detach_media()
        self._window = None
        self._enforcer.register(None)

    def _on_time_update(self) -> None:
        media = self._media
        if media is None:
            return
        self._enforcer.on_position_update(media.current_time, media.paused)

    def _pause_media(self) -> None:
        if self._media is not None:
            self._media.pause()
