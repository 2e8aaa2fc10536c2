"""
Tick-driven simulation.

``Simulation.update`` is the single entry point that advances the game. It
is fed timestamps by an external scheduler (the pygame loop, or a test), so
the whole session can be replayed deterministically.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from qix.config import GameConfig
from qix.grid import CellGrid
from qix.player import Direction, MoveResult, PlayerMode, PlayerState

if TYPE_CHECKING:
    from qix.input import InputProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerSnapshot:
    x: int
    y: int
    mode: PlayerMode
    facing: Direction


@dataclass(frozen=True)
class SessionSnapshot:
    coverage: float
    level: int
    lives: int
    game_over: bool


class Simulation:
    """
    Owns the grid, the player and the session counters.

    Each processed tick samples input, attempts at most one move, applies
    its consequences (capture, death, level advance) and recomputes
    coverage. Ticks are ignored until ``start`` is called, after ``stop``,
    and once the game is over.
    """

    def __init__(self, input_provider: "InputProvider", config: Optional[GameConfig] = None):
        """
        Args:
            input_provider: Source of direction and draw-modifier state
            config: Game settings, defaults to GameConfig()

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or GameConfig()
        self.config.validate()
        self.input = input_provider
        self.running = False
        self._new_session()

    def _new_session(self):
        self.level = 1
        self.lives = self.config.STARTING_LIVES
        self.game_over = False
        self.grid = CellGrid(self.config.GRID_WIDTH, self.config.GRID_HEIGHT)
        self.player = PlayerState.spawn(self.grid)
        self.coverage = self.grid.get_coverage()
        self.last_move_time: Optional[float] = None

    # ========================================================================
    # LIFECYCLE
    # ========================================================================

    def start(self):
        """Begin accepting ticks."""
        self.running = True
        self.last_move_time = None
        logger.info("Level %d started, %d lives", self.level, self.lives)

    def stop(self):
        """Stop accepting ticks; state is kept."""
        self.running = False

    def reset(self):
        """Discard the session and start over at level 1 with full lives."""
        self._new_session()
        logger.info("Session reset")

    @property
    def is_running(self) -> bool:
        return self.running and not self.game_over

    # ========================================================================
    # TICKS
    # ========================================================================

    def update(self, timestamp: float) -> Optional[MoveResult]:
        """
        Advance the simulation by one tick.

        Args:
            timestamp: Milliseconds, monotonically non-decreasing

        Returns:
            The MoveResult of the move processed this tick, or None if no
            move was due or no direction was held
        """
        if not self.is_running:
            return None

        interval = self.config.move_interval(self.player.is_drawing)
        if self.last_move_time is not None and timestamp - self.last_move_time < interval:
            return None

        direction = self.input.sample_direction()
        if direction is None:
            return None

        self.last_move_time = timestamp
        result = self.player.attempt_move(
            direction, self.grid, self.input.is_draw_modifier_active()
        )

        if result.died:
            self._handle_player_death()
            if self.game_over:
                result.game_over = True
                return result
        elif result.completed_shape and result.captured_path:
            self._complete_shape(result.captured_path)

        self.coverage = self.grid.get_coverage()
        if self.coverage >= self.config.TARGET_COVERAGE:
            self._next_level()

        return result

    def _complete_shape(self, path):
        captured = self.grid.capture_territory(path)
        logger.info("Shape completed: line of %d, captured %d cells", len(path), captured)

    def _handle_player_death(self):
        """Remove a life; respawn, or end the game when none are left."""
        self.lives -= 1
        if self.lives <= 0:
            self.lives = 0
            self.game_over = True
            logger.info("Game over on level %d at %.1f%%", self.level, self.coverage)
            return

        logger.info("Player crossed own line, %d lives left", self.lives)
        self.grid.clear_lines()
        self.player = PlayerState.spawn(self.grid)

    def _next_level(self):
        logger.info("Level %d cleared at %.1f%%", self.level, self.coverage)
        self.level += 1
        self.grid = CellGrid(self.config.GRID_WIDTH, self.config.GRID_HEIGHT)
        self.player = PlayerState.spawn(self.grid)
        self.coverage = self.grid.get_coverage()

    # ========================================================================
    # SNAPSHOTS
    # ========================================================================

    def player_snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(self.player.x, self.player.y,
                              self.player.mode, self.player.facing)

    def session_snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(self.coverage, self.level, self.lives, self.game_over)
