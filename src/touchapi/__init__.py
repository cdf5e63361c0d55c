"""touchapi - Touch and click helpers for tile-based RPG maps.

This package lets scripted game content react to touches and clicks:
- Clickable screen areas, independent of map scroll
- Clickable map hotspots, anchored to map content
- Clickable tiles
- Tile size, scroll offset and event position lookups
- Enabling and disabling the default click-to-move navigation

Quick start:
    from touchapi import CommandDispatcher, NavigationSlot, install_touch_api

    navigation = NavigationSlot(move_player_to_pointer)
    dispatcher = CommandDispatcher()
    touch = install_touch_api(pointer, map_view, navigation, dispatcher)

    # In a parallel event, every frame
    if touch.hit_test.screen_hit(100, 100, 50, 50):
        open_menu()

    # From a plugin command
    dispatcher.dispatch("disableTtm", [])

Configuration:
    # In your project's settings.py
    TOUCH_TO_MOVE_DISABLED_BY_DEFAULT = True
"""

__version__ = "0.1.0"

from touchapi.actions import Action, ActionRegistry
from touchapi.commands import CommandDispatcher, TouchGateCommands
from touchapi.conditions import ConditionRegistry
from touchapi.conf import settings
from touchapi.context import TouchContext
from touchapi.helpers import install_touch_api, setup_logging
from touchapi.host import MapView, NavigationSlot, PointerInput
from touchapi.touch import (
    DisableTouchToMoveAction,
    EnableTouchToMoveAction,
    HitTestService,
    TouchGate,
)
from touchapi.types import (
    CommandResult,
    EventPosition,
    GateState,
    MapScrollOffset,
    PointerSample,
    TileGeometry,
)

__all__ = [
    "Action",
    "ActionRegistry",
    "CommandDispatcher",
    "CommandResult",
    "ConditionRegistry",
    "DisableTouchToMoveAction",
    "EnableTouchToMoveAction",
    "EventPosition",
    "GateState",
    "HitTestService",
    "MapScrollOffset",
    "MapView",
    "NavigationSlot",
    "PointerInput",
    "PointerSample",
    "TileGeometry",
    "TouchContext",
    "TouchGate",
    "TouchGateCommands",
    "__version__",
    "install_touch_api",
    "settings",
    "setup_logging",
]
