"""Fixed-size bounded grid of boolean cells."""

from typing import List, Tuple
import numbers

import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidCoordinate, InvalidDimension


# Relative (row, column) offsets of the eight adjacent cells.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Grid:
    """A rows x columns grid of alive/dead cells with non-wrapping edges.

    Cells are stored in a numpy boolean array indexed ``[row, column]``.
    The dimensions are fixed at construction; positions outside the grid
    never wrap around and count as dead when tallying neighbors.
    """

    def __init__(self, rows: int, columns: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            rows: Number of rows (vertical size)
            columns: Number of columns (horizontal size)

        Raises:
            InvalidDimension: If either dimension is not a positive integer
        """
        if not _is_positive_int(rows) or not _is_positive_int(columns):
            raise InvalidDimension(rows, columns)

        self._rows = int(rows)
        self._columns = int(columns)
        self._cells = np.zeros((self._rows, self._columns), dtype=bool)

        # Keep the convolution on one thread
        torch.set_num_threads(1)

        # Reused input tensor and 3x3 neighborhood kernel
        self._torch_input = torch.zeros(1, 1, self._rows, self._columns, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, columns)."""
        return (self._rows, self._columns)

    @property
    def cells(self) -> np.ndarray:
        """The writable cell array, indexed [row, column]."""
        return self._cells

    def view(self) -> np.ndarray:
        """Get a read-only view of the cells.

        The view shares memory with the grid, so it reflects later changes,
        but assigning through it raises ValueError.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def contains(self, row: int, column: int) -> bool:
        """Whether (row, column) are integer indices inside the grid."""
        if not _is_index(row) or not _is_index(column):
            return False
        return 0 <= row < self._rows and 0 <= column < self._columns

    def _check(self, row: int, column: int) -> None:
        if not self.contains(row, column):
            raise InvalidCoordinate(
                f"Coordinates ({row!r}, {column!r}) are not a cell of the {self._rows}x{self._columns} grid",
                row=row,
                column=column,
                rows=self._rows,
                columns=self._columns,
            )

    def get_cell(self, row: int, column: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            InvalidCoordinate: If coordinates are out of bounds
        """
        self._check(row, column)
        return bool(self._cells[row, column])

    def set_cell(self, row: int, column: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            column: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            InvalidCoordinate: If coordinates are out of bounds
        """
        self._check(row, column)
        self._cells[row, column] = bool(alive)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def copy_from(self, other: "Grid") -> None:
        """Copy cell states from another grid.

        Args:
            other: Source grid to copy from

        Raises:
            ValueError: If grids have different dimensions
        """
        if other.shape != self.shape:
            raise ValueError(f"Grid dimensions don't match: {other.shape} vs {self.shape}")

        self._cells[:] = other._cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def alive_cells(self) -> List[Tuple[int, int]]:
        """Get coordinates of all living cells in row-major order."""
        rows, columns = np.nonzero(self._cells)
        return [(int(r), int(c)) for r, c in zip(rows, columns)]

    def count_neighbors(self, row: int, column: int) -> int:
        """Count living neighbors of a single cell.

        Offsets that fall outside the grid are skipped, so corner cells
        have at most 3 neighbors, edge cells 5, and cells of a one-row or
        one-column grid 2.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        self._check(row, column)

        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, column + dc
            if 0 <= nr < self._rows and 0 <= nc < self._columns:
                count += int(self._cells[nr, nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding stands in for the area outside the grid, which gives
        the same counts as count_neighbors() without any wraparound.

        Returns:
            int8 array of shape (rows, columns) with neighbor counts
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def to_list(self) -> list:
        """Convert grid to nested list of booleans, one list per row."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if alive else "." for alive in row) for row in self._cells)


def _is_index(value: object) -> bool:
    # bool is Integral, but numpy treats it as a mask
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_positive_int(value: object) -> bool:
    return _is_index(value) and value > 0
