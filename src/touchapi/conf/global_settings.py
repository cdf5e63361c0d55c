"""Default settings for touchapi.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    TOUCH_TO_MOVE_DISABLED_BY_DEFAULT = True
    ENABLE_TOUCH_TO_MOVE_COMMAND = "enableTtm"
"""

import arcade

# Navigation settings
TOUCH_TO_MOVE_DISABLED_BY_DEFAULT = False
"""Disable click-to-move navigation at startup. It can be re-enabled later."""

# Command settings
ENABLE_TOUCH_TO_MOVE_COMMAND = "enableTtm"
"""Command name that re-enables click-to-move navigation."""

DISABLE_TOUCH_TO_MOVE_COMMAND = "disableTtm"
"""Command name that disables click-to-move navigation."""

# Map settings
TILE_WIDTH = None
"""Tile width in pixels. None uses the width declared by the loaded tile map."""

TILE_HEIGHT = None
"""Tile height in pixels. None uses the height declared by the loaded tile map."""

# Input settings
POINTER_BUTTON = arcade.MOUSE_BUTTON_LEFT
"""Mouse button that counts as a touch."""

# Logging settings
LOG_LEVEL = "INFO"
"""Level passed to setup_logging() by install_touch_api()."""
