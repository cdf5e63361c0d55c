"""Switch for the host's default click-to-move navigation.

The gate captures whatever navigation handler is installed when it is
initialized, which includes changes made by other plugins loaded earlier, and
swaps between that handler and a no-op.

State machine:
    ENABLED <-> DISABLED, only through enable() and disable(). The initial
    state comes from configuration. There is no terminal state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from touchapi.types import GateState

if TYPE_CHECKING:
    from touchapi.host import NavigationHandler, NavigationSlot

logger = logging.getLogger(__name__)


def blocked_navigation() -> None:
    """Navigation handler installed while touch-to-move is disabled."""


class TouchGate:
    """Enables or disables click-to-move by swapping the navigation handler.

    Attributes:
        navigation: The host's navigation slot.
        state: Current gate state.
    """

    def __init__(self, navigation: NavigationSlot) -> None:
        """Initialize the gate.

        Args:
            navigation: Slot holding the host's per-frame navigation handler.
        """
        self.navigation = navigation
        self.state = GateState.ENABLED
        self._captured: NavigationHandler | None = None

    @property
    def is_enabled(self) -> bool:
        """True while click-to-move is active."""
        return self.state is GateState.ENABLED

    @property
    def captured_handler(self) -> NavigationHandler | None:
        """Handler captured by initialize(), or None before initialization."""
        return self._captured

    def initialize(self, *, disabled_by_default: bool) -> None:
        """Capture the current navigation handler and apply the startup state.

        Args:
            disabled_by_default: If True, disable click-to-move right away.
        """
        self._captured = self.navigation.get_handler()
        self.state = GateState.ENABLED
        logger.debug("TouchGate: captured navigation handler %r", self._captured)
        if disabled_by_default:
            self.disable()

    def disable(self) -> None:
        """Replace navigation with a no-op. Calling it again has no further effect."""
        self.navigation.set_handler(blocked_navigation)
        if self.state is not GateState.DISABLED:
            logger.info("Touch-to-move disabled")
        self.state = GateState.DISABLED

    def enable(self) -> None:
        """Restore the handler captured at initialization.

        Raises:
            RuntimeError: If initialize() has not been called.
        """
        if self._captured is None:
            msg = "TouchGate.enable() called before initialize()"
            raise RuntimeError(msg)
        self.navigation.set_handler(self._captured)
        if self.state is not GateState.ENABLED:
            logger.info("Touch-to-move enabled")
        self.state = GateState.ENABLED
