"""Module for actions."""

from touchapi.actions.base import Action
from touchapi.actions.registry import ActionRegistry

__all__ = ["Action", "ActionRegistry"]
