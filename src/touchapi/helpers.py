"""Helper functions for installing the touch API into a game.

install_touch_api() wires everything together: it builds the hit-test service
and the touch-to-move gate, applies the startup setting and registers the
command handler on the host's dispatcher.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from touchapi.commands import TouchGateCommands
from touchapi.conf import settings
from touchapi.context import TouchContext
from touchapi.touch import HitTestService, TouchGate

if TYPE_CHECKING:
    from touchapi.commands import CommandDispatcher
    from touchapi.host import MapView, NavigationSlot, PointerInput

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "DEBUG") -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def install_touch_api(
    pointer: PointerInput,
    map_view: MapView,
    navigation: NavigationSlot,
    dispatcher: CommandDispatcher | None = None,
    *,
    configure_logging: bool = False,
) -> TouchContext:
    """Create the touch services and hook them into the host.

    Call this once at startup, after any other plugin that changes the
    navigation handler: the handler installed at this point is the one that
    enabling touch-to-move restores.

    Args:
        pointer: Host pointer accessor.
        map_view: Host map accessor.
        navigation: Slot holding the host's click-to-move handler.
        dispatcher: Host command dispatcher. If given, the enable/disable
            commands are registered on it.
        configure_logging: Also call setup_logging() with settings.LOG_LEVEL.

    Returns:
        TouchContext to pass to script conditions and actions.

    Example:
        >>> context = install_touch_api(pointer, map_view, navigation, dispatcher)
        >>> context.hit_test.tile_hit(3, 5)
        False
    """
    if configure_logging:
        setup_logging(settings.LOG_LEVEL)

    hit_test = HitTestService(pointer, map_view)
    gate = TouchGate(navigation)
    gate.initialize(disabled_by_default=settings.TOUCH_TO_MOVE_DISABLED_BY_DEFAULT)

    commands = None
    if dispatcher is not None:
        commands = TouchGateCommands(gate)
        dispatcher.register(commands)

    logger.info(
        "Touch API installed (touch-to-move %s)",
        "enabled" if gate.is_enabled else "disabled",
    )
    return TouchContext(
        hit_test=hit_test,
        gate=gate,
        pointer=pointer,
        map_view=map_view,
        navigation=navigation,
        dispatcher=dispatcher,
        commands=commands,
    )
