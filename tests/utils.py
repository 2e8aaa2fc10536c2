from dataclasses import dataclass, field
from typing import Callable, List, Optional

from qix.input import ScriptedInput
from qix.player import Direction, MoveResult
from qix.simulation import Simulation

# Long enough for a move in either mode with the default intervals
TIME_STEP = 50


@dataclass
class Driver:
    """Feeds synthetic timestamps and key presses into a simulation."""

    simulation: Simulation
    keys: ScriptedInput
    now: int = 0
    results: List[Optional[MoveResult]] = field(default_factory=list)

    def tick(self, count: int = 1) -> Optional[MoveResult]:
        result = None
        for _ in range(count):
            self.now += TIME_STEP
            result = self.simulation.update(self.now)
            self.results.append(result)
        return result

    def step(self, direction: Direction, draw: bool = False) -> Optional[MoveResult]:
        """Hold exactly one direction for a single tick."""
        self.keys.release_all()
        self.keys.hold(direction, draw=draw)
        result = self.tick()
        self.keys.release_all()
        return result

    def run_until(self, condition: Callable[[], bool], max_ticks: int = 700) -> bool:
        for _ in range(max_ticks):
            self.tick()
            if condition():
                return True
        return False

    @property
    def player(self):
        return self.simulation.player

    @property
    def grid(self):
        return self.simulation.grid
