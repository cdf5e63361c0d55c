"""Registry for script actions.

Actions register themselves under the "type" name used in JSON scripts using
the @ActionRegistry.register decorator.

Example:
    @ActionRegistry.register("disable_touch_to_move")
    class DisableTouchToMoveAction(Action):
        ...

    action = ActionRegistry.parse_action({"type": "disable_touch_to_move"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from touchapi.actions.base import Action

logger = logging.getLogger(__name__)


class ActionRegistry:
    """Central registry for action classes.

    Class Attributes:
        _actions: Dictionary mapping action type names to their classes.
    """

    _actions: ClassVar[dict[str, type[Action]]] = {}

    @classmethod
    def register(cls, action_type: str) -> Callable[[type[Action]], type[Action]]:
        """Register an action class under a type name.

        Args:
            action_type: The "type" value used in script action dictionaries.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If action_type is empty.
        """
        if not action_type:
            msg = "Action type name must not be empty"
            raise ValueError(msg)

        def decorator(action_class: type[Action]) -> type[Action]:
            if action_type in cls._actions:
                logger.warning(
                    "Action '%s' is being re-registered (was %s, now %s)",
                    action_type,
                    cls._actions[action_type].__name__,
                    action_class.__name__,
                )
            cls._actions[action_type] = action_class
            logger.debug("Registered action: %s -> %s", action_type, action_class.__name__)
            return action_class

        return decorator

    @classmethod
    def get(cls, action_type: str) -> type[Action] | None:
        """Get a registered action class by type name."""
        return cls._actions.get(action_type)

    @classmethod
    def get_all(cls) -> dict[str, type[Action]]:
        """Get all registered action classes."""
        return cls._actions.copy()

    @classmethod
    def is_registered(cls, action_type: str) -> bool:
        """Check if an action type is registered."""
        return action_type in cls._actions

    @classmethod
    def parse_action(cls, data: dict[str, Any]) -> Action | None:
        """Create an action from its script dictionary.

        Args:
            data: Action dictionary with a "type" key.

        Returns:
            The action instance, or None if the type is missing or unknown.
        """
        action_type = data.get("type", "")
        action_class = cls._actions.get(action_type)
        if action_class is None:
            logger.warning("Unknown action type: %s", action_type)
            return None
        return action_class.from_dict(data)
