"""Touch system for clickable screen areas, map hotspots and tiles.

This package provides:
- HitTestService: Touch predicates and coordinate helpers
- TouchGate: Switch for the host's click-to-move navigation
- Actions: Script actions that toggle the gate
- Conditions: Script conditions for touched areas and gate state
"""

from touchapi.touch.actions import DisableTouchToMoveAction, EnableTouchToMoveAction
from touchapi.touch.conditions import (
    check_map_touched,
    check_screen_touched,
    check_tile_touched,
    check_touch_to_move_enabled,
)
from touchapi.touch.gate import TouchGate, blocked_navigation
from touchapi.touch.hit_test import HitTestService

__all__ = [
    "DisableTouchToMoveAction",
    "EnableTouchToMoveAction",
    "HitTestService",
    "TouchGate",
    "blocked_navigation",
    "check_map_touched",
    "check_screen_touched",
    "check_tile_touched",
    "check_touch_to_move_enabled",
]
