"""
Game configuration.

All tunables for the simulation core and the pygame front end live on a
single dataclass so a session can be built from defaults or overridden
field by field.
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """Configuration settings for grid dimensions, timing and rules."""

    # Grid settings
    GRID_WIDTH: int = 100
    GRID_HEIGHT: int = 100

    # Game mechanics
    TARGET_COVERAGE: float = 75.0  # Level-up threshold (percent)
    STARTING_LIVES: int = 3

    # Milliseconds between processed moves
    MOVE_INTERVAL_TRAVERSE: int = 50
    MOVE_INTERVAL_DRAW: int = 30

    # Display settings
    TILE_SIZE: int = 8
    FPS: int = 60
    HUD_HEIGHT: int = 20
    WINDOW_SCALE: float = 1.0

    @property
    def start_position(self):
        """Bottom-center cell where the player spawns."""
        return self.GRID_WIDTH // 2, self.GRID_HEIGHT - 1

    @property
    def screen_width(self) -> int:
        """Calculate scaled screen width."""
        return int(self.GRID_WIDTH * self.TILE_SIZE * self.WINDOW_SCALE)

    @property
    def screen_height(self) -> int:
        """Calculate scaled screen height."""
        return int(self.GRID_HEIGHT * self.TILE_SIZE * self.WINDOW_SCALE)

    @property
    def scaled_hud_height(self) -> int:
        """Calculate scaled HUD height."""
        return int(self.HUD_HEIGHT * self.WINDOW_SCALE)

    def move_interval(self, drawing: bool) -> int:
        """Minimum milliseconds between moves for the current player mode."""
        return self.MOVE_INTERVAL_DRAW if drawing else self.MOVE_INTERVAL_TRAVERSE

    def validate(self):
        """
        Reject settings the simulation cannot run with.

        Raises:
            ValueError: If any setting is out of range
        """
        if self.GRID_WIDTH < 3 or self.GRID_HEIGHT < 3:
            raise ValueError(
                f"Grid must be at least 3x3, got {self.GRID_WIDTH}x{self.GRID_HEIGHT}"
            )
        if self.MOVE_INTERVAL_TRAVERSE < 0 or self.MOVE_INTERVAL_DRAW < 0:
            raise ValueError("Move intervals must not be negative")
        if self.STARTING_LIVES < 1:
            raise ValueError(f"Starting lives must be positive, got {self.STARTING_LIVES}")
        if not 0 < self.TARGET_COVERAGE <= 100:
            raise ValueError(
                f"Target coverage must be in (0, 100], got {self.TARGET_COVERAGE}"
            )
