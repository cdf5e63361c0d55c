"""Registry for script conditions.

Conditions are plain functions that take the condition dictionary from a script
and the touch context, and return a bool. They register under the "check" name
used in JSON scripts.

Example:
    @ConditionRegistry.register("tile_touched")
    def check_tile_touched(condition, context):
        return context.hit_test.tile_hit(condition["tile_x"], condition["tile_y"])

    # In a script
    {"check": "tile_touched", "tile_x": 3, "tile_y": 5}
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from touchapi.context import TouchContext

logger = logging.getLogger(__name__)


ConditionFunc = Callable[[dict[str, Any], "TouchContext"], bool]


class ConditionRegistry:
    """Central registry for condition check functions.

    Class Attributes:
        _conditions: Dictionary mapping check names to functions.
    """

    _conditions: ClassVar[dict[str, ConditionFunc]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[ConditionFunc], ConditionFunc]:
        """Register a condition function under a check name.

        Args:
            name: The "check" value used in script condition dictionaries.

        Returns:
            Decorator that registers the function and returns it unchanged.

        Raises:
            ValueError: If name is empty.
        """
        if not name:
            msg = "Condition check name must not be empty"
            raise ValueError(msg)

        def decorator(func: ConditionFunc) -> ConditionFunc:
            if name in cls._conditions:
                logger.warning("Condition '%s' is being re-registered", name)
            cls._conditions[name] = func
            logger.debug("Registered condition: %s", name)
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> ConditionFunc | None:
        """Get a registered condition function by check name."""
        return cls._conditions.get(name)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a condition is registered."""
        return name in cls._conditions

    @classmethod
    def check(cls, condition: dict[str, Any], context: TouchContext) -> bool:
        """Evaluate a condition dictionary.

        The result of the check function is compared with the optional
        "equals" key, which defaults to True.

        Args:
            condition: Condition dictionary with a "check" key.
            context: Touch context for service access.

        Returns:
            True if the condition is satisfied, False otherwise.
        """
        check_type = condition.get("check", "")
        func = cls._conditions.get(check_type)
        if func is None:
            logger.warning("Unknown condition type: %s", check_type)
            return False
        expected = condition.get("equals", True)
        return func(condition, context) == expected

    @classmethod
    def check_all(cls, conditions: list[dict[str, Any]], context: TouchContext) -> bool:
        """Check if all conditions are satisfied."""
        return all(cls.check(condition, context) for condition in conditions)
