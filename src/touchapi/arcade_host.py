"""Arcade binding for the host interface.

Feeds the touch API from an arcade game: mouse callbacks and the frame update
drive ArcadePointerInput, and ArcadeMapView exposes a loaded arcade.TileMap.

Arcade reports mouse y from the bottom of the window. The touch API works in
top-down screen pixels, the way map rows are numbered, so y is flipped using the
window height: arcade's top pixel row becomes row 0.

Usage Example:
    class MapView(arcade.View):
        def setup(self):
            self.pointer = ArcadePointerInput(self.window)
            self.map_view = ArcadeMapView(arcade.load_tilemap(map_path))
            self.navigation = NavigationSlot(self.move_player_to_pointer)
            self.touch = install_touch_api(self.pointer, self.map_view, self.navigation)

        def on_mouse_press(self, x, y, button, modifiers):
            self.pointer.on_mouse_press(x, y, button, modifiers)

        def on_mouse_release(self, x, y, button, modifiers):
            self.pointer.on_mouse_release(x, y, button, modifiers)

        def on_mouse_motion(self, x, y, dx, dy):
            self.pointer.on_mouse_motion(x, y, dx, dy)

        def on_update(self, delta_time):
            self.pointer.update()
            self.navigation.process()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from touchapi.conf import settings
from touchapi.types import EventPosition, MapScrollOffset, PointerSample

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class ArcadePointerInput:
    """Pointer accessor fed by arcade mouse events.

    The press counter is 0 while released. While the button is held, update()
    advances it once per frame, so the first frame after a press reads 1. A
    press is latched until the next update(), so a tap released within the
    same frame still reads 1 for one frame.

    Attributes:
        window: Window used to flip y coordinates.
        button: Mouse button that counts as a touch.
        x: Last pointer x in screen pixels.
        y: Last pointer y in top-down screen pixels.
        pressed: Whether the button is currently held.
        frames_pressed: Frames the button has been held.
    """

    def __init__(self, window: arcade.Window, button: int | None = None) -> None:
        """Initialize the pointer input.

        Args:
            window: The arcade window receiving mouse events.
            button: Mouse button that counts as a touch. Defaults to
                settings.POINTER_BUTTON.
        """
        self.window = window
        self.button = button if button is not None else settings.POINTER_BUTTON
        self.x: float = 0
        self.y: float = 0
        self.pressed = False
        self.frames_pressed = 0
        self._pending_press = False

    def _move(self, x: float, y: float) -> None:
        self.x = x
        self.y = self.window.height - 1 - y

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:  # noqa: ARG002
        """Start a press if the touch button went down."""
        if button != self.button:
            return
        self._move(x, y)
        self.pressed = True
        self._pending_press = True

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:  # noqa: ARG002
        """End the current press."""
        if button != self.button:
            return
        self._move(x, y)
        self.pressed = False

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:  # noqa: ARG002
        """Track the pointer position."""
        self._move(x, y)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int) -> None:  # noqa: ARG002
        """Track the pointer position while a button is held."""
        self._move(x, y)

    def update(self) -> None:
        """Advance the press counter. Call once per frame before reading samples."""
        if self._pending_press:
            self._pending_press = False
            self.frames_pressed = 1
        elif self.pressed:
            self.frames_pressed += 1
        else:
            self.frames_pressed = 0

    def sample(self) -> PointerSample:
        """Return the pointer state for the current frame."""
        return PointerSample(self.x, self.y, self.frames_pressed)


class ArcadeMapView:
    """Map accessor over a loaded arcade.TileMap.

    Tile size comes from the tile map unless settings.TILE_WIDTH or
    settings.TILE_HEIGHT override it. Both are read on every call so a later
    override takes effect immediately.

    Attributes:
        tile_map: The loaded tile map.
        display_x: Horizontal display offset in tiles.
        display_y: Vertical display offset in tiles.
        events: Tile positions of map events, by event id.
    """

    def __init__(
        self,
        tile_map: arcade.TileMap,
        events: Mapping[int, EventPosition] | None = None,
    ) -> None:
        """Initialize the map view.

        Args:
            tile_map: The loaded tile map.
            events: Initial event positions by id.
        """
        self.tile_map = tile_map
        self.display_x: float = 0
        self.display_y: float = 0
        self.events: dict[int, EventPosition] = dict(events or {})

    def tile_width(self) -> int:
        """Tile width in pixels."""
        return settings.TILE_WIDTH or self.tile_map.tile_width

    def tile_height(self) -> int:
        """Tile height in pixels."""
        return settings.TILE_HEIGHT or self.tile_map.tile_height

    def scroll_offset(self) -> MapScrollOffset:
        """Current display offset, in tiles."""
        return MapScrollOffset(self.display_x, self.display_y)

    def scroll_to(self, x: float, y: float) -> None:
        """Set the display offset, in tiles."""
        self.display_x = x
        self.display_y = y

    def place_event(self, event_id: int, tile_x: int, tile_y: int) -> None:
        """Record the tile position of an event."""
        self.events[event_id] = EventPosition(tile_x, tile_y)
        logger.debug("Event %d placed at tile (%d, %d)", event_id, tile_x, tile_y)

    def event_position(self, event_id: int) -> EventPosition:
        """Tile position of the event with the given id.

        Raises:
            KeyError: If no event with that id has been placed.
        """
        return self.events[event_id]
