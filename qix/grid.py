"""
Cell grid and territory capture.

The grid is a fixed rectangle with a one-cell border ring. Cells are stored
in a flat list indexed by ``y * width + x``; every public accessor is bounds
checked and treats coordinates outside the grid as border.
"""

import logging
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

NEIGHBORS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Cell(IntEnum):
    """Represents the state of a grid cell."""
    EMPTY = 0      # Uncaptured territory
    FILLED = 1     # Captured territory
    BORDER = 2     # Initial outer ring
    LINE = 3       # Player's in-progress line


# ============================================================================
# GRID MANAGEMENT
# ============================================================================

class CellGrid:
    """
    Manages the cell matrix and territory calculations.

    The grid tracks which cells are empty, filled, border, or line, and
    converts regions enclosed by a finished line into filled territory.
    """

    __slots__ = ['_width', '_height', '_cells']

    def __init__(self, width: int, height: int):
        """
        Initialize grid with a border around the perimeter.

        Args:
            width: Grid width in cells
            height: Grid height in cells
        """
        self._width = width
        self._height = height
        self._cells = [Cell.EMPTY] * (width * height)
        self._initialize_borders()

    def _initialize_borders(self):
        """Set up border cells around the perimeter."""
        for x in range(self._width):
            self._cells[x] = Cell.BORDER
            self._cells[(self._height - 1) * self._width + x] = Cell.BORDER

        for y in range(self._height):
            self._cells[y * self._width] = Cell.BORDER
            self._cells[y * self._width + self._width - 1] = Cell.BORDER

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within grid bounds."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get_cell(self, x: int, y: int) -> Cell:
        """
        Get cell state at coordinates.

        Returns BORDER if out of bounds to simplify collision logic.
        """
        if not self.in_bounds(x, y):
            return Cell.BORDER
        return self._cells[y * self._width + x]

    def set_cell(self, x: int, y: int, cell: Cell):
        """Set cell state; ignored when out of bounds."""
        if self.in_bounds(x, y):
            self._cells[y * self._width + x] = cell

    def is_empty(self, x: int, y: int) -> bool:
        return self.get_cell(x, y) == Cell.EMPTY

    def can_complete_shape(self, x: int, y: int) -> bool:
        """A drawn line ends on any cell that is not empty."""
        return self.get_cell(x, y) != Cell.EMPTY

    def is_traversable(self, x: int, y: int) -> bool:
        """
        Check if a player in traverse mode may stand on a cell.

        Border and line cells are always walkable. Filled cells are walkable
        only on the frontier, i.e. with at least one empty 4-neighbor; the
        interior of captured territory is not.
        """
        cell = self.get_cell(x, y)
        if cell in (Cell.BORDER, Cell.LINE):
            return True
        if cell == Cell.FILLED:
            return any(self.is_empty(x + dx, y + dy) for dx, dy in NEIGHBORS)
        return False

    def set_line(self, x: int, y: int):
        self.set_cell(x, y, Cell.LINE)

    def clear_lines(self):
        """Remove the in-progress line, restoring empty cells."""
        self._replace(Cell.LINE, Cell.EMPTY)

    def convert_lines_to_filled(self):
        """Make the in-progress line permanent territory."""
        self._replace(Cell.LINE, Cell.FILLED)

    def _replace(self, old: Cell, new: Cell):
        cells = self._cells
        for i, cell in enumerate(cells):
            if cell == old:
                cells[i] = new

    def is_on_line(self, x: int, y: int, path: Iterable[Point]) -> bool:
        """Check if a point is part of the given line path."""
        return (x, y) in path

    def count(self, cell: Cell) -> int:
        return self._cells.count(cell)

    def get_coverage(self) -> float:
        """
        Calculate percentage of all cells (border included) that are not empty.

        Returns:
            Float between 0.0 and 100.0
        """
        total = len(self._cells)
        return 100.0 * (total - self.count(Cell.EMPTY)) / total

    def perimeter_coverage(self) -> float:
        """Coverage of a freshly created grid, where only the border ring is set."""
        ring = 2 * self._width + 2 * self._height - 4
        return 100.0 * ring / (self._width * self._height)

    def find_empty_regions(self, cells: Optional[Sequence[Cell]] = None) -> List[List[Point]]:
        """
        Find all disconnected empty regions.

        Uses an iterative stack-based flood fill; a visited marker with one
        slot per cell guarantees every cell is examined once.

        Args:
            cells: Flat cell array to scan, defaults to the live grid

        Returns:
            List of regions, each a list of (x, y) coordinates
        """
        if cells is None:
            cells = self._cells
        width, height = self._width, self._height
        visited = bytearray(width * height)
        regions = []

        for start, cell in enumerate(cells):
            if cell != Cell.EMPTY or visited[start]:
                continue

            region = []
            visited[start] = 1
            stack = [start]

            while stack:
                index = stack.pop()
                y, x = divmod(index, width)
                region.append((x, y))

                # Check 4-directional neighbors
                for dx, dy in NEIGHBORS:
                    nx, ny = x + dx, y + dy
                    if not (0 <= nx < width and 0 <= ny < height):
                        continue
                    neighbor = ny * width + nx
                    if visited[neighbor] or cells[neighbor] != Cell.EMPTY:
                        continue
                    visited[neighbor] = 1
                    stack.append(neighbor)

            regions.append(region)

        return regions

    def capture_territory(self, line_path: Sequence[Point]) -> int:
        """
        Fill every region enclosed by a finished line.

        The line is treated as a wall, the remaining empty area is split into
        regions, and all regions except the largest are filled. The largest
        region is assumed to be the open exterior. Line cells become filled.

        Args:
            line_path: Cells of the line that was just completed

        Returns:
            Number of previously empty cells that were captured
        """
        if not line_path:
            return 0

        # Line becomes a wall for region detection
        working = list(self._cells)
        for x, y in line_path:
            if self.in_bounds(x, y):
                working[y * self._width + x] = Cell.FILLED

        regions = self.find_empty_regions(working)
        if not regions:
            self.convert_lines_to_filled()
            logger.debug("Line closed off the last empty area")
            return 0

        regions.sort(key=len)
        captured = 0
        for region in regions[:-1]:
            for x, y in region:
                self.set_cell(x, y, Cell.FILLED)
            captured += len(region)

        self.convert_lines_to_filled()
        logger.debug(
            "Captured %d cells in %d region(s), exterior keeps %d",
            captured, len(regions) - 1, len(regions[-1]),
        )
        return captured

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (x, y, cell) for every cell, row by row."""
        width = self._width
        for index, cell in enumerate(self._cells):
            y, x = divmod(index, width)
            yield x, y, cell

    def snapshot(self) -> List[List[Cell]]:
        """Copy of the grid as a list of rows."""
        width = self._width
        return [self._cells[y * width:(y + 1) * width] for y in range(self._height)]
