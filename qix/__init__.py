"""
Qix-like territory capture: grid, player state machine and tick simulation.
"""

from qix.config import GameConfig
from qix.grid import Cell, CellGrid
from qix.player import Direction, MoveResult, PlayerMode, PlayerState
from qix.simulation import Simulation

__all__ = [
    "Cell",
    "CellGrid",
    "Direction",
    "GameConfig",
    "MoveResult",
    "PlayerMode",
    "PlayerState",
    "Simulation",
]
