"""Custom types and enumerations."""

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class PointerSample:
    """Snapshot of the pointer for the current frame.

    Attributes:
        x: Horizontal position in screen pixels.
        y: Vertical position in screen pixels, growing downwards.
        frames_pressed: Number of frames the pointer has been held. A value of 1
            marks the press edge.
    """

    x: float
    y: float
    frames_pressed: int

    @property
    def is_press_edge(self) -> bool:
        """True on the single frame that starts a press."""
        return self.frames_pressed == 1


@dataclass(frozen=True)
class MapScrollOffset:
    """Display offset of the map, in tiles."""

    x: float
    y: float


@dataclass(frozen=True)
class TileGeometry:
    """Tile size in pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class EventPosition:
    """Tile position of a map event."""

    tile_x: int
    tile_y: int


class GateState(Enum):
    """Touch-to-move gate states."""

    ENABLED = auto()
    DISABLED = auto()


class CommandResult(Enum):
    """Outcome reported by a command handler."""

    HANDLED = auto()
    PASS_THROUGH = auto()
