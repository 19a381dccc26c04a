"""Conway's Game of Life generation engine."""

from typing import Iterable, Sequence, Tuple
import logging

import numpy as np

from .errors import InvalidCoordinate
from .grid import Grid

logger = logging.getLogger(__name__)


def next_state(alive: bool, neighbors: int) -> bool:
    """Apply Conway's rules to a single cell.

    Args:
        alive: Whether the cell is currently alive
        neighbors: Number of living neighbors (0-8)

    Returns:
        Whether the cell is alive in the next generation
    """
    if alive:
        # Survival with 2 or 3 neighbors, under/overpopulation otherwise
        return neighbors in (2, 3)
    return neighbors == 3


class GenerationEngine:
    """Advances a bounded Game of Life grid one generation at a time.

    The engine owns two grids of identical size: ``current``, which is the
    authoritative state, and ``next``, a scratch buffer written during a
    step. Every neighbor count for a step is taken from the ``current``
    snapshot; ``next`` is copied back into ``current`` only once it has
    been fully written, so views handed out by current_grid() stay live
    across steps.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, rows: int, columns: int, alive_cells: Iterable[Tuple[int, int]] = ()) -> None:
        """Initialize the engine with an initial generation.

        Args:
            rows: Number of grid rows
            columns: Number of grid columns
            alive_cells: (row, column) pairs of the initially living cells

        Raises:
            InvalidDimension: If rows or columns is not positive
            InvalidCoordinate: If any pair lies outside the grid
        """
        self._current = Grid(rows, columns)
        self._next = Grid(rows, columns)
        self._generation = 0

        for row, column in alive_cells:
            try:
                self._current.set_cell(row, column, True)
            except InvalidCoordinate:
                logger.debug("Rejected initial cell (%s, %s) for %dx%d grid", row, column, rows, columns)
                raise

        logger.debug(
            "Created %dx%d engine with %d living cells",
            self._current.rows,
            self._current.columns,
            self._current.population,
        )

    @classmethod
    def from_flat(cls, rows: int, columns: int, values: Sequence[int]) -> "GenerationEngine":
        """Create an engine from a flat sequence of row/column values.

        Args:
            rows: Number of grid rows
            columns: Number of grid columns
            values: Integers laid out as row0, column0, row1, column1, ...

        Returns:
            New GenerationEngine instance

        Raises:
            InvalidCoordinate: If the sequence has odd length or a pair is out of bounds
        """
        values = list(values)
        if len(values) % 2 != 0:
            raise InvalidCoordinate(
                f"Expected row/column pairs, got {len(values)} values",
                rows=rows,
                columns=columns,
            )

        return cls(rows, columns, zip(values[0::2], values[1::2]))

    @property
    def rows(self) -> int:
        """Number of grid rows."""
        return self._current.rows

    @property
    def columns(self) -> int:
        """Number of grid columns."""
        return self._current.columns

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, columns)."""
        return self._current.shape

    @property
    def generation(self) -> int:
        """Number of completed advance() calls."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._current.population

    @property
    def grid(self) -> Grid:
        """The current generation as a Grid."""
        return self._current

    def current_grid(self) -> np.ndarray:
        """Get a read-only view of the current generation.

        Returns:
            Non-writeable boolean array indexed [row, column]
        """
        return self._current.view()

    def advance(self) -> None:
        """Advance the simulation by one generation."""
        cells = self._current.cells
        neighbor_counts = self._current.count_all_neighbors()

        # Birth on exactly 3, survival on 2 or 3
        survive = cells & ((neighbor_counts == 2) | (neighbor_counts == 3))
        birth = ~cells & (neighbor_counts == 3)
        np.logical_or(survive, birth, out=self._next.cells)

        self._current.copy_from(self._next)
        self._generation += 1

    def run(self, steps: int) -> None:
        """Advance the simulation a fixed number of generations.

        Args:
            steps: Number of generations to advance

        Raises:
            ValueError: If steps is negative
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        for _ in range(steps):
            self.advance()
