"""Command dispatch for host plugin commands.

The host delivers named commands with string arguments. Instead of each plugin
wrapping the previous dispatch function, handlers register in order on a
CommandDispatcher. Each handler reports whether it handled the command or let
it pass. Every handler sees every command, in registration order, so no
plugin can swallow a command meant for another.

Example:
    dispatcher = CommandDispatcher()
    dispatcher.register(other_plugin_handler)
    dispatcher.register(TouchGateCommands(gate))

    dispatcher.dispatch("disableTtm", [])
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from touchapi.conf import settings
from touchapi.types import CommandResult

if TYPE_CHECKING:
    from touchapi.touch.gate import TouchGate

logger = logging.getLogger(__name__)

CommandHandler = Callable[[str, list[str]], CommandResult]


class CommandDispatcher:
    """Ordered chain of command handlers.

    Handlers registered first are consulted first. A command is offered to
    every handler even after one of them has handled it.
    """

    def __init__(self) -> None:
        """Initialize an empty dispatcher."""
        self._handlers: list[CommandHandler] = []

    def register(self, handler: CommandHandler) -> None:
        """Append a handler to the chain."""
        if handler in self._handlers:
            logger.warning("Command handler %r is already registered", handler)
            return
        self._handlers.append(handler)
        logger.debug("Registered command handler: %r", handler)

    def unregister(self, handler: CommandHandler) -> None:
        """Remove a handler from the chain if present."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def get_handlers(self) -> list[CommandHandler]:
        """Get the registered handlers in dispatch order."""
        return self._handlers.copy()

    def dispatch(self, command: str, args: list[str] | None = None) -> CommandResult:
        """Offer a command to every handler in order.

        Args:
            command: Command name.
            args: Command arguments.

        Returns:
            HANDLED if some handler handled the command, PASS_THROUGH otherwise.
        """
        args = args or []
        result = CommandResult.PASS_THROUGH
        for handler in self._handlers:
            if handler(command, args) is CommandResult.HANDLED:
                logger.debug("Command '%s' handled by %r", command, handler)
                result = CommandResult.HANDLED
        if result is CommandResult.PASS_THROUGH:
            logger.debug("Command '%s' not handled", command)
        return result


class TouchGateCommands:
    """Command handler that toggles touch-to-move.

    Recognizes exactly two command names and passes every other command on.

    Attributes:
        gate: Gate toggled by the commands.
        enable_command: Name of the command that enables touch-to-move.
        disable_command: Name of the command that disables touch-to-move.
    """

    def __init__(
        self,
        gate: TouchGate,
        enable_command: str | None = None,
        disable_command: str | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            gate: Gate toggled by the commands.
            enable_command: Defaults to settings.ENABLE_TOUCH_TO_MOVE_COMMAND.
            disable_command: Defaults to settings.DISABLE_TOUCH_TO_MOVE_COMMAND.
        """
        self.gate = gate
        self.enable_command = enable_command or settings.ENABLE_TOUCH_TO_MOVE_COMMAND
        self.disable_command = disable_command or settings.DISABLE_TOUCH_TO_MOVE_COMMAND

    def __call__(self, command: str, args: list[str]) -> CommandResult:  # noqa: ARG002
        """Handle the enable/disable commands."""
        if command == self.disable_command:
            self.gate.disable()
            return CommandResult.HANDLED
        if command == self.enable_command:
            self.gate.enable()
            return CommandResult.HANDLED
        return CommandResult.PASS_THROUGH
