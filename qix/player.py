"""
Player state and the move-attempt state machine.

The player is either traversing safe cells or drawing a line through empty
territory. ``PlayerState.attempt_move`` applies one unit step and reports
what happened; consequences such as losing a life are left to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from qix.grid import CellGrid, Point


class Direction(IntEnum):
    """Cardinal movement directions."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class PlayerMode(Enum):
    """Whether the player is on safe ground or drawing a line."""
    TRAVERSE = "traverse"
    DRAW = "draw"


@dataclass
class MoveResult:
    """Outcome of a single move attempt."""
    moved: bool = False
    completed_shape: bool = False
    died: bool = False
    game_over: bool = False
    captured_path: Optional[List[Point]] = None


# ============================================================================
# PLAYER STATE MACHINE
# ============================================================================

@dataclass
class PlayerState:
    """
    Represents the player on the grid.

    The player moves along safe cells and can draw a line into empty
    territory while the draw modifier is held. Reaching any non-empty
    cell while drawing completes the shape.
    """

    x: int
    y: int
    mode: PlayerMode = PlayerMode.TRAVERSE
    facing: Direction = Direction.UP
    line_path: List[Point] = field(default_factory=list)

    @classmethod
    def spawn(cls, grid: CellGrid) -> "PlayerState":
        """Create a player at the bottom-center of the grid."""
        return cls(x=grid.width // 2, y=grid.height - 1)

    @property
    def position(self) -> Point:
        return self.x, self.y

    @property
    def is_drawing(self) -> bool:
        return self.mode == PlayerMode.DRAW

    def attempt_move(self, direction: Direction, grid: CellGrid,
                     draw_modifier_held: bool) -> MoveResult:
        """
        Try to move one cell in the given direction.

        Args:
            direction: Requested direction
            grid: Grid the player moves on; line cells are written to it
            draw_modifier_held: Whether the draw key is held

        Returns:
            MoveResult describing the transition
        """
        dx, dy = direction.delta
        nx, ny = self.x + dx, self.y + dy

        if not grid.in_bounds(nx, ny):
            return MoveResult()

        # A line may never turn straight back on itself
        if self.is_drawing and direction == self.facing.opposite:
            return MoveResult()

        self.facing = direction

        if self.is_drawing and grid.is_on_line(nx, ny, self.line_path):
            return MoveResult(died=True)

        if self.mode == PlayerMode.TRAVERSE:
            return self._traverse(nx, ny, grid, draw_modifier_held)
        return self._draw(nx, ny, grid)

    def _traverse(self, nx: int, ny: int, grid: CellGrid,
                  draw_modifier_held: bool) -> MoveResult:
        if grid.is_traversable(nx, ny):
            self.x, self.y = nx, ny
            return MoveResult(moved=True)

        if grid.is_empty(nx, ny):
            if not draw_modifier_held:
                return MoveResult()
            self.mode = PlayerMode.DRAW
            self.x, self.y = nx, ny
            self.line_path = [(nx, ny)]
            grid.set_line(nx, ny)
            return MoveResult(moved=True)

        return MoveResult()

    def _draw(self, nx: int, ny: int, grid: CellGrid) -> MoveResult:
        if grid.is_empty(nx, ny):
            self.x, self.y = nx, ny
            self.line_path.append((nx, ny))
            grid.set_line(nx, ny)
            return MoveResult(moved=True)

        if grid.can_complete_shape(nx, ny):
            self.x, self.y = nx, ny
            self.mode = PlayerMode.TRAVERSE
            captured = list(self.line_path)
            self.line_path = []
            return MoveResult(moved=True, completed_shape=bool(captured),
                              captured_path=captured)

        return MoveResult()

