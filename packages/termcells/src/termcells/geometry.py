"""Grid geometry: positions, dimensions, regions and row-major cell iteration.

All coordinates are zero-indexed and never negative.  ``Position``
subtraction saturates at zero instead of going negative, which lets callers
compute offsets near the top-left corner without guarding every call.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """Extent of a grid or region, in rows and columns."""

    rows: int
    columns: int

    @classmethod
    def from_position(cls, position: Position) -> Dimensions:
        return cls(position.row, position.column)

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns


@dataclass(frozen=True)
class Position:
    """A single cell address on the grid."""

    row: int
    column: int

    @classmethod
    def from_dimensions(cls, dimensions: Dimensions) -> Position:
        return cls(dimensions.rows, dimensions.columns)

    def within(self, dimensions: Dimensions) -> Position | None:
        """Return this position if it lies inside *dimensions*, else ``None``."""
        if 0 <= self.row < dimensions.rows and 0 <= self.column < dimensions.columns:
            return self
        return None

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.row + other.row, self.column + other.column)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(
            max(self.row - other.row, 0),
            max(self.column - other.column, 0),
        )


@dataclass(frozen=True)
class Region:
    """A rectangle of cells given by its top-left origin and its extent."""

    origin: Position
    dimensions: Dimensions

    @property
    def end(self) -> Position:
        """Exclusive bottom-right corner in absolute coordinates."""
        return self.origin + Position.from_dimensions(self.dimensions)

    def contains(self, position: Position) -> bool:
        return (
            self.origin.row <= position.row < self.origin.row + self.dimensions.rows
            and self.origin.column
            <= position.column
            < self.origin.column + self.dimensions.columns
        )

    def cells(self) -> CellIterator:
        return CellIterator(self)


class CellIterator:
    """Walks the cells of a region left-to-right, top-to-bottom.

    The iterator is single-pass: once exhausted it stays exhausted.
    """

    def __init__(self, region: Region) -> None:
        self._bounds = Dimensions.from_position(region.end)
        self._width = region.dimensions.columns
        self._next: Position | None = region.origin.within(self._bounds)

    def __iter__(self) -> CellIterator:
        return self

    def __next__(self) -> Position:
        current = self._next
        if current is None:
            raise StopIteration
        self._next = self._advance(current)
        return current

    def _advance(self, cell: Position) -> Position | None:
        step_right = (cell + Position(0, 1)).within(self._bounds)
        if step_right is not None:
            return step_right
        # Back to the region's first column, one row down.
        next_row = cell - Position(0, self._width - 1) + Position(1, 0)
        return next_row.within(self._bounds)
