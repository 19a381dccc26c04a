"""Exceptions raised by the lifegrid package."""

from typing import Optional


class LifeGridError(ValueError):
    """Base class for all lifegrid errors."""


class InvalidDimension(LifeGridError):
    """Raised when a grid is requested with a non-positive size."""

    def __init__(self, rows: object, columns: object) -> None:
        self.rows = rows
        self.columns = columns
        super().__init__(f"Grid dimensions must be positive integers, got {rows}x{columns}")


class InvalidCoordinate(LifeGridError, IndexError):
    """Raised when a cell coordinate lies outside the grid.

    Also raised for a flat coordinate sequence of odd length, where the
    final row has no matching column.
    """

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        column: Optional[int] = None,
        rows: Optional[int] = None,
        columns: Optional[int] = None,
    ) -> None:
        self.row = row
        self.column = column
        self.rows = rows
        self.columns = columns
        super().__init__(message)


class InvalidInput(LifeGridError):
    """Raised by frontends when raw initial-state input is rejected."""

    def __init__(self, reason: str, rows: int, columns: int) -> None:
        self.reason = reason
        self.rows = rows
        self.columns = columns
        super().__init__(reason)

    def describe_ranges(self) -> str:
        """Describe the valid coordinate ranges for the user.

        Returns:
            Multi-line message naming the allowed row and column ranges
        """
        return "\n".join(
            [
                "The input is invalid!",
                f"The y position for a cell should be between 0 and {self.rows - 1}.",
                f"The x position for a cell should be between 0 and {self.columns - 1}.",
            ]
        )
