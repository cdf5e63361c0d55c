"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from touchapi.conf import global_settings, settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        TOUCH_TO_MOVE_DISABLED_BY_DEFAULT=False,
        ENABLE_TOUCH_TO_MOVE_COMMAND="enableTtm",
        DISABLE_TOUCH_TO_MOVE_COMMAND="disableTtm",
        TILE_WIDTH=None,
        TILE_HEIGHT=None,
        POINTER_BUTTON=global_settings.POINTER_BUTTON,
        LOG_LEVEL="INFO",
    )
    yield
    settings._wrapped = None
