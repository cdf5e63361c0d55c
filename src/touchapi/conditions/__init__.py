"""Module for conditions."""

from touchapi.conditions.registry import ConditionRegistry

__all__ = ["ConditionRegistry"]
