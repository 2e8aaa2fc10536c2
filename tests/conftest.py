import pytest

from qix.config import GameConfig
from qix.grid import CellGrid
from qix.input import ScriptedInput
from qix.simulation import Simulation
from tests.utils import Driver


@pytest.fixture
def grid():
    """Factory fixture for fresh grids, 10x10 unless told otherwise."""

    def _builder(width=10, height=10):
        return CellGrid(width, height)

    return _builder


@pytest.fixture
def driver():
    """Factory fixture for a started simulation driven by scripted input."""

    def _builder(**overrides):
        settings = {"GRID_WIDTH": 10, "GRID_HEIGHT": 10}
        settings.update(overrides)
        keys = ScriptedInput()
        simulation = Simulation(keys, GameConfig(**settings))
        simulation.start()
        return Driver(simulation, keys)

    return _builder
