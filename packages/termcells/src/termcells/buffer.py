"""Previous-frame cache used to suppress redundant terminal writes.

``ScreenBuffer`` mirrors what is known to be on the terminal, one entry per
cell in row-major order.  A glyph that spans several columns is stored as one
``(glyph, fg, bg)`` entry followed by ``None`` in each column it covers.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from termcells.color import Color
from termcells.geometry import Dimensions, Position
from termcells.utils import glyph_width

CellContent = Tuple[str, Color, Color]
CacheEntry = Optional[CellContent]


class ScreenBuffer:
    """Row-major record of the last content drawn at each cell.

    Parameters
    ----------
    width_fn:
        Maps a glyph to its display width in columns.  Results below 1
        (control characters, unmeasurable input) are treated as 1.
    """

    def __init__(self, width_fn: Callable[[str], int] | None = None) -> None:
        self._cells: list[CacheEntry] = []
        self._rows: int = 0
        self._width: int = 0
        self._width_fn: Callable[[str], int] = width_fn or glyph_width

    # -- extent -------------------------------------------------------------

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self._rows, self._width)

    def __len__(self) -> int:
        return len(self._cells)

    def resize(self, dimensions: Dimensions) -> None:
        """Grow or truncate the cache to exactly ``rows * columns`` entries.

        Surviving entries keep their linear index; no re-layout happens when
        the width changes.
        """
        current = len(self._cells)
        target = dimensions.cell_count
        if target > current:
            self._cells.extend([None] * (target - current))
        elif target < current:
            del self._cells[target:]
        self._rows = dimensions.rows
        self._width = dimensions.columns

    # -- content ------------------------------------------------------------

    def clear(self) -> None:
        """Forget everything; does not touch the terminal."""
        for i in range(len(self._cells)):
            self._cells[i] = None

    def get(self, position: Position) -> CacheEntry:
        return self._cells[self._index(position)]

    def invalidate(self, position: Position) -> None:
        """Forget the entry at *position* so the next update there is a change."""
        self._cells[self._index(position)] = None

    def update(self, position: Position, glyph: str, fg: Color, bg: Color) -> bool:
        """Record *glyph* at *position* and report whether anything changed.

        The columns a wide glyph covers are reset to ``None`` so that a later
        narrower glyph drawn over them registers as a change.  Covered columns
        are clipped at the end of the glyph's row.
        """
        entry: CellContent = (glyph, fg, bg)
        idx = self._index(position)
        covered = self._covered(idx, position, glyph)

        changed = self._cells[idx] != entry or any(
            self._cells[i] is not None for i in covered
        )
        if changed:
            self._cells[idx] = entry
            for i in covered:
                self._cells[i] = None
        return changed

    # -- helpers ------------------------------------------------------------

    def _index(self, position: Position) -> int:
        return position.row * self._width + position.column

    def _covered(self, idx: int, position: Position, glyph: str) -> range:
        width = max(self._width_fn(glyph), 1)
        row_end = idx + (self._width - position.column)
        end = min(idx + width, row_end, len(self._cells))
        return range(idx + 1, max(end, idx + 1))
