"""
pygame renderer.

Draws the grid, the player and a HUD line from the simulation's read-only
state. It never mutates the simulation.
"""

import pygame

from qix.config import GameConfig
from qix.grid import Cell
from qix.player import PlayerMode
from qix.simulation import Simulation

BACKGROUND = (26, 26, 46)
CELL_COLORS = {
    Cell.FILLED: (22, 33, 62),
    Cell.BORDER: (15, 52, 96),
    Cell.LINE: (233, 69, 96),
}
PLAYER_COLORS = {
    PlayerMode.TRAVERSE: (0, 255, 136),
    PlayerMode.DRAW: (255, 200, 0),
}
HUD_BACKGROUND = (10, 10, 20)
HUD_TEXT = (230, 230, 230)


class Renderer:
    """Renders a Simulation onto a pygame surface."""

    def __init__(self, screen: pygame.Surface, config: GameConfig):
        """
        Args:
            screen: Target surface, sized for the grid plus HUD
            config: Display settings
        """
        self.screen = screen
        self.config = config
        self._update_fonts()

    def _update_fonts(self):
        """Initialize fonts with proper scaling."""
        scale = self.config.WINDOW_SCALE
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont("consolas", int(18 * scale), bold=True)
        self.title_font = pygame.font.SysFont("consolas", int(42 * scale), bold=True)

    @property
    def cell_size(self) -> int:
        return max(1, int(self.config.TILE_SIZE * self.config.WINDOW_SCALE))

    def render(self, simulation: Simulation):
        """Render the grid, player and HUD."""
        size = self.cell_size
        self.screen.fill(BACKGROUND)

        for x, y, cell in simulation.grid.iter_cells():
            color = CELL_COLORS.get(cell)
            if color is not None:
                pygame.draw.rect(self.screen, color,
                                 pygame.Rect(x * size, y * size, size, size))

        player = simulation.player_snapshot()
        center = ((player.x + 0.5) * size, (player.y + 0.5) * size)
        pygame.draw.circle(self.screen, PLAYER_COLORS[player.mode], center, size * 0.6)

        self._render_hud(simulation)
        if simulation.game_over:
            self._render_game_over(simulation)

    def _render_hud(self, simulation: Simulation):
        session = simulation.session_snapshot()
        hud_y = self.config.screen_height
        pygame.draw.rect(
            self.screen, HUD_BACKGROUND,
            pygame.Rect(0, hud_y, self.config.screen_width, self.config.scaled_hud_height),
        )
        hud_text = self.font.render(
            f"Level: {session.level}  Lives: {session.lives}  "
            f"Filled: {session.coverage:.1f}% / {self.config.TARGET_COVERAGE:.0f}%",
            True,
            HUD_TEXT,
        )
        self.screen.blit(hud_text, (4, hud_y + 2))

    def _render_game_over(self, simulation: Simulation):
        """Dim the playfield and show the game over message."""
        overlay = pygame.Surface((self.config.screen_width, self.config.screen_height),
                                 pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.screen.blit(overlay, (0, 0))

        center_x = self.config.screen_width // 2
        center_y = self.config.screen_height // 2
        title = self.title_font.render("GAME OVER", True, CELL_COLORS[Cell.LINE])
        self.screen.blit(title, title.get_rect(center=(center_x, center_y)))

        cont = self.font.render("Press ENTER to restart", True, HUD_TEXT)
        scale = self.config.WINDOW_SCALE
        self.screen.blit(cont, cont.get_rect(center=(center_x, center_y + int(50 * scale))))
