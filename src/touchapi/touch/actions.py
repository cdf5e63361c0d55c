"""Actions for the touch-to-move gate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from touchapi.actions import Action
from touchapi.actions.registry import ActionRegistry

if TYPE_CHECKING:
    from touchapi.context import TouchContext

logger = logging.getLogger(__name__)


@ActionRegistry.register("disable_touch_to_move")
class DisableTouchToMoveAction(Action):
    """Disable click-to-move navigation.

    Script equivalent of the disable command. Useful for games without a
    playable character, where the map is only used for clickable pictures and
    events. The action completes immediately.

    Example usage:
        {
            "type": "disable_touch_to_move"
        }
    """

    def __init__(self) -> None:
        """Initialize disable action."""
        self.executed = False

    def execute(self, context: TouchContext) -> bool:
        """Disable touch-to-move."""
        if not self.executed:
            context.gate.disable()
            logger.debug("DisableTouchToMoveAction: touch-to-move disabled")
            self.executed = True

        return True

    def reset(self) -> None:
        """Reset the action."""
        self.executed = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:  # noqa: ARG003
        """Create DisableTouchToMoveAction from a dictionary."""
        return cls()


@ActionRegistry.register("enable_touch_to_move")
class EnableTouchToMoveAction(Action):
    """Re-enable click-to-move navigation.

    Restores the navigation handler captured when the touch API was installed,
    not any handler installed in between. The action completes immediately.

    Example - block movement during a puzzle:
        [
            {"type": "disable_touch_to_move"},
            {"type": "wait_for_puzzle_solved"},
            {"type": "enable_touch_to_move"}
        ]
    """

    def __init__(self) -> None:
        """Initialize enable action."""
        self.executed = False

    def execute(self, context: TouchContext) -> bool:
        """Enable touch-to-move."""
        if not self.executed:
            context.gate.enable()
            logger.debug("EnableTouchToMoveAction: touch-to-move enabled")
            self.executed = True

        return True

    def reset(self) -> None:
        """Reset the action."""
        self.executed = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:  # noqa: ARG003
        """Create EnableTouchToMoveAction from a dictionary."""
        return cls()
