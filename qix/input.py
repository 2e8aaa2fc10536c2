"""
Input providers.

The simulation polls one direction and the draw-modifier state per tick.
``KeyboardInput`` reads the pygame keyboard; ``ScriptedInput`` holds key
state set by code, for tests and replays.
"""

from typing import Callable, Dict, Optional, Protocol, Sequence, Set

import pygame

from qix.player import Direction

# Checked in this order when several direction keys are held
DIRECTION_PRIORITY = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


class InputProvider(Protocol):
    def sample_direction(self) -> Optional[Direction]:
        ...

    def is_draw_modifier_active(self) -> bool:
        ...


class ScriptedInput:
    """Key-state input driven by code instead of a keyboard."""

    def __init__(self):
        self._held: Set[Direction] = set()
        self._draw = False

    def hold(self, *directions: Direction, draw: Optional[bool] = None):
        """Press direction keys, optionally changing the draw modifier."""
        self._held.update(directions)
        if draw is not None:
            self._draw = draw

    def release(self, *directions: Direction, draw: Optional[bool] = None):
        """Release direction keys, optionally changing the draw modifier."""
        self._held.difference_update(directions)
        if draw is not None:
            self._draw = draw

    def release_all(self):
        self._held.clear()
        self._draw = False

    def sample_direction(self) -> Optional[Direction]:
        for direction in DIRECTION_PRIORITY:
            if direction in self._held:
                return direction
        return None

    def is_draw_modifier_active(self) -> bool:
        return self._draw


class KeyboardInput:
    """
    Polls the pygame keyboard for arrow keys and the draw key.

    The last pressed arrow key stays selected while it is held, so turning
    by pressing a second key before releasing the first works as expected.
    """

    KEY_MAPPING: Dict[int, Direction] = {
        pygame.K_UP: Direction.UP,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
    }

    def __init__(self, draw_key: int = pygame.K_SPACE,
                 get_pressed: Callable[[], Sequence[bool]] = pygame.key.get_pressed):
        """
        Args:
            draw_key: Key that must be held to draw
            get_pressed: Key-state source, pygame.key.get_pressed by default
        """
        self.draw_key = draw_key
        self.last_key: Optional[int] = None
        self._get_pressed = get_pressed

    def sample_direction(self) -> Optional[Direction]:
        keys = self._get_pressed()

        # Track last pressed key for continuous movement
        for key in self.KEY_MAPPING:
            if keys[key]:
                if self.last_key is None or not keys[self.last_key]:
                    self.last_key = key
                break

        if self.last_key is None:
            return None
        if not keys[self.last_key]:
            self.last_key = None
            return None
        return self.KEY_MAPPING[self.last_key]

    def is_draw_modifier_active(self) -> bool:
        return bool(self._get_pressed()[self.draw_key])
