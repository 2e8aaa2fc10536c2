"""
Real-time pygame front end.

``QixApp`` is the scheduler around the simulation: it pumps window events,
feeds ``pygame.time.get_ticks()`` into ``Simulation.update`` and renders a
frame at the configured FPS.
"""

import logging
from typing import Optional

import pygame

from qix.config import GameConfig
from qix.input import KeyboardInput
from qix.renderer import Renderer
from qix.simulation import Simulation

logger = logging.getLogger(__name__)


class QixApp:
    """
    Window, event handling and the main loop.

    ESC or closing the window quits; ENTER restarts after game over.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

        # Initialize Pygame
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.screen_width,
             self.config.screen_height + self.config.scaled_hud_height)
        )
        pygame.display.set_caption("Qix")
        self.clock = pygame.time.Clock()

        self.input = KeyboardInput()
        self.simulation = Simulation(self.input, self.config)
        self.renderer = Renderer(self.screen, self.config)
        self.running = True

    def handle_events(self):
        """Process window and key events that are not movement."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_RETURN and self.simulation.game_over:
                    self.simulation.reset()
                    self.simulation.start()

    def run(self):
        """
        Main game loop.

        Processes events, delivers one tick to the simulation and renders,
        until the window is closed.
        """
        self.simulation.start()
        try:
            while self.running:
                self.clock.tick(self.config.FPS)
                self.handle_events()
                self.simulation.update(pygame.time.get_ticks())
                self.renderer.render(self.simulation)
                pygame.display.flip()
        finally:
            self.simulation.stop()
            pygame.quit()
            session = self.simulation.session_snapshot()
            logger.info("Exited on level %d with %.1f%% filled", session.level, session.coverage)
