"""Read-only interface to the host engine.

The touch API never polls devices or owns map data itself. It reads the current
pointer sample, the map's scroll offset, tile size and event positions through
the protocols below, and swaps the host's click-to-move handler through a
NavigationSlot.

Any object with matching methods satisfies the protocols. An arcade binding is
provided in touchapi.arcade_host.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from touchapi.types import EventPosition, MapScrollOffset, PointerSample

logger = logging.getLogger(__name__)

NavigationHandler = Callable[[], None]


class PointerInput(Protocol):
    """Source of pointer samples."""

    def sample(self) -> PointerSample:
        """Return the pointer state for the current frame."""
        ...


class MapView(Protocol):
    """Accessor for the currently loaded map."""

    def tile_width(self) -> int:
        """Tile width in pixels."""
        ...

    def tile_height(self) -> int:
        """Tile height in pixels."""
        ...

    def scroll_offset(self) -> MapScrollOffset:
        """Current display offset, in tiles."""
        ...

    def event_position(self, event_id: int) -> EventPosition:
        """Tile position of the event with the given id."""
        ...


class NavigationSlot:
    """Replaceable per-frame click-to-move handler.

    The host calls process() once per frame while the map view handles pointer
    input. Whatever handler is installed at that moment runs.

    Example:
        slot = NavigationSlot(player_manager.move_towards_pointer)

        # In the view's on_update()
        slot.process()
    """

    def __init__(self, handler: NavigationHandler | None = None) -> None:
        """Initialize the slot.

        Args:
            handler: Initial navigation handler. Defaults to a no-op.
        """
        self._handler: NavigationHandler = handler or _no_navigation

    def get_handler(self) -> NavigationHandler:
        """Return the currently installed handler."""
        return self._handler

    def set_handler(self, handler: NavigationHandler) -> None:
        """Install a new handler."""
        self._handler = handler
        logger.debug("NavigationSlot: handler set to %r", handler)

    def process(self) -> None:
        """Run the installed handler for this frame."""
        self._handler()


def _no_navigation() -> None:
    """Navigation handler that does nothing."""
