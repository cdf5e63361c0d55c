"""Conditions module for touch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from touchapi.conditions.registry import ConditionRegistry

if TYPE_CHECKING:
    from touchapi.context import TouchContext

logger = logging.getLogger(__name__)

RECT_FIELDS = ("x", "y", "width", "height")


def _rect(condition: dict[str, Any], check_name: str) -> tuple[float, float, float, float] | None:
    missing = [field for field in RECT_FIELDS if field not in condition]
    if missing:
        logger.warning("%s condition missing fields: %s", check_name, ", ".join(missing))
        return None
    return condition["x"], condition["y"], condition["width"], condition["height"]


@ConditionRegistry.register("screen_touched")
def check_screen_touched(condition: dict[str, Any], context: TouchContext) -> bool:
    """Check if a screen rectangle was just touched.

    Condition format:
        {"check": "screen_touched", "x": 100, "y": 100, "width": 50, "height": 50}
    """
    rect = _rect(condition, "screen_touched")
    if rect is None:
        return False
    return context.hit_test.screen_hit(*rect)


@ConditionRegistry.register("map_touched")
def check_map_touched(condition: dict[str, Any], context: TouchContext) -> bool:
    """Check if a map-pixel rectangle was just touched.

    With an "event" id, x and y are offsets from that event's pixel position.
    This makes tall graphics clickable, e.g. a crystal two tiles high:

        {"check": "map_touched", "event": 4, "x": 0, "y": -48, "width": 48, "height": 96}

    Args:
        condition: Condition data with "x", "y", "width", "height" and optional "event".
        context: Touch context for service access.

    Returns:
        True if the rectangle was touched on this frame.
    """
    rect = _rect(condition, "map_touched")
    if rect is None:
        return False
    x, y, width, height = rect
    event_id = condition.get("event")
    if event_id is not None:
        event_x, event_y = context.hit_test.event_pixel(event_id)
        x += event_x
        y += event_y
    return context.hit_test.map_hit(x, y, width, height)


@ConditionRegistry.register("tile_touched")
def check_tile_touched(condition: dict[str, Any], context: TouchContext) -> bool:
    """Check if a map tile was just touched.

    Condition format:
        {"check": "tile_touched", "tile_x": 3, "tile_y": 5}
        {"check": "tile_touched", "event": 4}

    With "event", the event's own tile is tested.
    """
    event_id = condition.get("event")
    if event_id is not None:
        position = context.map_view.event_position(event_id)
        return context.hit_test.tile_hit(position.tile_x, position.tile_y)

    if "tile_x" not in condition or "tile_y" not in condition:
        logger.warning("tile_touched condition missing 'tile_x'/'tile_y' or 'event' field")
        return False
    return context.hit_test.tile_hit(condition["tile_x"], condition["tile_y"])


@ConditionRegistry.register("touch_to_move_enabled")
def check_touch_to_move_enabled(_condition: dict[str, Any], context: TouchContext) -> bool:
    """Check if click-to-move navigation is enabled."""
    return context.gate.is_enabled
