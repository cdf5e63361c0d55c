"""Unit tests for command dispatch."""

import unittest
from unittest.mock import MagicMock

from touchapi.commands import CommandDispatcher, TouchGateCommands
from touchapi.conf import settings
from touchapi.types import CommandResult


class TestCommandDispatcher(unittest.TestCase):
    """Test CommandDispatcher."""

    def test_dispatch_without_handlers(self) -> None:
        """Test commands pass through an empty dispatcher."""
        dispatcher = CommandDispatcher()

        assert dispatcher.dispatch("anything", ["a"]) is CommandResult.PASS_THROUGH

    def test_handlers_called_in_registration_order(self) -> None:
        """Test earlier handlers are consulted first."""
        calls: list[str] = []
        first = MagicMock(side_effect=lambda cmd, args: calls.append("first") or CommandResult.PASS_THROUGH)
        second = MagicMock(side_effect=lambda cmd, args: calls.append("second") or CommandResult.PASS_THROUGH)
        dispatcher = CommandDispatcher()
        dispatcher.register(first)
        dispatcher.register(second)

        result = dispatcher.dispatch("ShowGab", ["hello"])

        assert result is CommandResult.PASS_THROUGH
        assert calls == ["first", "second"]
        first.assert_called_once_with("ShowGab", ["hello"])

    def test_dispatch_continues_after_handled(self) -> None:
        """Test later handlers still see a command an earlier one handled."""
        first = MagicMock(return_value=CommandResult.HANDLED)
        second = MagicMock(return_value=CommandResult.PASS_THROUGH)
        dispatcher = CommandDispatcher()
        dispatcher.register(first)
        dispatcher.register(second)

        assert dispatcher.dispatch("ShowGab") is CommandResult.HANDLED
        first.assert_called_once_with("ShowGab", [])
        second.assert_called_once_with("ShowGab", [])

    def test_register_twice_is_ignored(self) -> None:
        """Test a handler is only registered once."""
        handler = MagicMock(return_value=CommandResult.PASS_THROUGH)
        dispatcher = CommandDispatcher()

        dispatcher.register(handler)
        dispatcher.register(handler)

        assert dispatcher.get_handlers() == [handler]

    def test_unregister(self) -> None:
        """Test removing a handler."""
        handler = MagicMock(return_value=CommandResult.HANDLED)
        dispatcher = CommandDispatcher()
        dispatcher.register(handler)

        dispatcher.unregister(handler)
        dispatcher.unregister(handler)

        assert dispatcher.dispatch("x") is CommandResult.PASS_THROUGH
        handler.assert_not_called()


class TestTouchGateCommands(unittest.TestCase):
    """Test TouchGateCommands."""

    def setUp(self) -> None:
        """Create a handler over a mock gate."""
        self.gate = MagicMock()
        self.commands = TouchGateCommands(self.gate)

    def test_disable_command(self) -> None:
        """Test disableTtm disables the gate."""
        result = self.commands("disableTtm", [])

        assert result is CommandResult.HANDLED
        self.gate.disable.assert_called_once()
        self.gate.enable.assert_not_called()

    def test_enable_command(self) -> None:
        """Test enableTtm enables the gate."""
        result = self.commands("enableTtm", [])

        assert result is CommandResult.HANDLED
        self.gate.enable.assert_called_once()

    def test_other_commands_pass_through(self) -> None:
        """Test unrelated commands are left for other handlers."""
        for command in ("ShowGab", "enablettm", "", "disableTtm2"):
            assert self.commands(command, ["1"]) is CommandResult.PASS_THROUGH
        self.gate.enable.assert_not_called()
        self.gate.disable.assert_not_called()

    def test_names_from_settings(self) -> None:
        """Test command names are read from settings."""
        settings.configure(
            ENABLE_TOUCH_TO_MOVE_COMMAND="TouchOn",
            DISABLE_TOUCH_TO_MOVE_COMMAND="TouchOff",
        )
        commands = TouchGateCommands(self.gate)

        assert commands("TouchOff", []) is CommandResult.HANDLED
        assert commands("disableTtm", []) is CommandResult.PASS_THROUGH
        self.gate.disable.assert_called_once()

    def test_explicit_names(self) -> None:
        """Test command names passed to the constructor win."""
        commands = TouchGateCommands(self.gate, enable_command="on", disable_command="off")

        assert commands("on", []) is CommandResult.HANDLED
        self.gate.enable.assert_called_once()

    def test_other_plugin_sees_touch_commands_first(self) -> None:
        """Test a handler registered earlier still receives the touch commands."""
        other = MagicMock(return_value=CommandResult.PASS_THROUGH)
        dispatcher = CommandDispatcher()
        dispatcher.register(other)
        dispatcher.register(self.commands)

        assert dispatcher.dispatch("disableTtm", []) is CommandResult.HANDLED
        other.assert_called_once_with("disableTtm", [])
        self.gate.disable.assert_called_once()


    def test_later_plugin_sees_touch_commands(self) -> None:
        """Test a handler registered after the touch handler still receives its commands."""
        later = MagicMock(return_value=CommandResult.PASS_THROUGH)
        dispatcher = CommandDispatcher()
        dispatcher.register(self.commands)
        dispatcher.register(later)

        assert dispatcher.dispatch("disableTtm", []) is CommandResult.HANDLED
        self.gate.disable.assert_called_once()
        later.assert_called_once_with("disableTtm", [])

    def test_gate_toggles_when_earlier_plugin_handles_same_name(self) -> None:
        """Test the gate still toggles when an earlier handler claims the command."""
        earlier = MagicMock(return_value=CommandResult.HANDLED)
        dispatcher = CommandDispatcher()
        dispatcher.register(earlier)
        dispatcher.register(self.commands)

        assert dispatcher.dispatch("disableTtm", []) is CommandResult.HANDLED
        earlier.assert_called_once_with("disableTtm", [])
        self.gate.disable.assert_called_once()

if __name__ == "__main__":
    unittest.main()
