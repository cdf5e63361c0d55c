"""Unit tests for the settings proxy."""

import unittest

import arcade

from touchapi.conf import LazySettings, settings


class TestSettings(unittest.TestCase):
    """Test LazySettings."""

    def test_pointer_button_default(self) -> None:
        """Test the touch button defaults to the left mouse button."""
        assert LazySettings().POINTER_BUTTON == arcade.MOUSE_BUTTON_LEFT

    def test_defaults_loaded_lazily(self) -> None:
        """Test defaults are available without configure()."""
        lazy = LazySettings()

        assert lazy.ENABLE_TOUCH_TO_MOVE_COMMAND == "enableTtm"
        assert lazy.TOUCH_TO_MOVE_DISABLED_BY_DEFAULT is False

    def test_attribute_assignment_overrides(self) -> None:
        """Test assigning a setting on the proxy overrides it."""
        settings.TILE_WIDTH = 64

        assert settings.TILE_WIDTH == 64

    def test_reset_restores_defaults(self) -> None:
        """Test clearing the wrapped settings reloads the defaults."""
        settings.configure(DISABLE_TOUCH_TO_MOVE_COMMAND="TouchOff")

        settings._wrapped = None

        assert settings.DISABLE_TOUCH_TO_MOVE_COMMAND == "disableTtm"


if __name__ == "__main__":
    unittest.main()
