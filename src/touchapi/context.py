"""Touch context passed to script conditions and actions.

The context is the explicit handle that replaces a process-wide singleton: it is
built once by install_touch_api() and handed to whatever evaluates scripts.

Example usage:
    context = install_touch_api(pointer, map_view, navigation, dispatcher)

    if context.hit_test.tile_hit(3, 5):
        context.gate.disable()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from touchapi.commands import CommandDispatcher, TouchGateCommands
    from touchapi.host import MapView, NavigationSlot, PointerInput
    from touchapi.touch.gate import TouchGate
    from touchapi.touch.hit_test import HitTestService


class TouchContext:
    """Holds the touch services and the host collaborators they read from.

    Attributes:
        hit_test: Touch predicates and coordinate helpers.
        gate: Touch-to-move switch.
        pointer: Host pointer accessor.
        map_view: Host map accessor.
        navigation: Host navigation slot.
        dispatcher: Host command dispatcher, if commands are wired.
        commands: The registered touch command handler, if any.
    """

    def __init__(
        self,
        hit_test: HitTestService,
        gate: TouchGate,
        pointer: PointerInput,
        map_view: MapView,
        navigation: NavigationSlot,
        dispatcher: CommandDispatcher | None = None,
        commands: TouchGateCommands | None = None,
    ) -> None:
        """Initialize the context."""
        self.hit_test = hit_test
        self.gate = gate
        self.pointer = pointer
        self.map_view = map_view
        self.navigation = navigation
        self.dispatcher = dispatcher
        self.commands = commands

    def close(self) -> None:
        """Detach the touch command handler from the dispatcher."""
        if self.dispatcher and self.commands:
            self.dispatcher.unregister(self.commands)
            self.commands = None
