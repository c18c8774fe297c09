"""Board - mark placement on an N×N grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from gridtac.core.types import MAX_COLUMNS, Cell

EMPTY_PLACEHOLDER = "."

Grid = list[list[str | None]]


class Board:
    """Mutable square grid; each cell holds ``None`` or a player symbol."""

    __slots__ = ("_size", "_cells", "_filled")

    def __init__(self, size: int) -> None:
        if not 1 <= size <= MAX_COLUMNS:
            raise ValueError(f"Unsupported board size: {size}")
        self._size = size
        self._cells: Grid = [[None] * size for _ in range(size)]
        self._filled = 0

    # -- Element access -----------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    def __getitem__(self, cell: tuple[int, int]) -> str | None:
        row, col = cell
        return self._cells[row][col]

    def __setitem__(self, cell: tuple[int, int], symbol: str | None) -> None:
        row, col = cell
        old = self._cells[row][col]
        if old is None and symbol is not None:
            self._filled += 1
        elif old is not None and symbol is None:
            self._filled -= 1
        self._cells[row][col] = symbol

    def is_empty(self, cell: tuple[int, int]) -> bool:
        row, col = cell
        return self._cells[row][col] is None

    # -- Query helpers ------------------------------------------------------

    def cells(self) -> Iterator[Cell]:
        """All coordinates in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield Cell(row, col)

    def empty_cells(self) -> list[Cell]:
        return [c for c in self.cells() if self._cells[c.row][c.col] is None]

    @property
    def filled_count(self) -> int:
        return self._filled

    @property
    def empty_count(self) -> int:
        return self._size * self._size - self._filled

    @property
    def is_full(self) -> bool:
        return self.empty_count == 0

    def counts(self, players: Sequence[str]) -> dict[str, int]:
        """Marks per player, configured players first (zero if absent)."""
        result = {p: 0 for p in players}
        for row in self._cells:
            for symbol in row:
                if symbol is not None:
                    result[symbol] = result.get(symbol, 0) + 1
        return result

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._size)
        b._cells = [row.copy() for row in self._cells]
        b._filled = self._filled
        return b

    def clear(self) -> None:
        self._cells = [[None] * self._size for _ in range(self._size)]
        self._filled = 0

    def to_rows(self) -> Grid:
        """Nested-list copy of the grid; never aliases internal storage."""
        return [row.copy() for row in self._cells]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str | None]]) -> Board:
        """Build a board from a square nested sequence.

        Only the shape is checked here; symbol validity belongs to callers.
        """
        size = len(rows)
        b = cls(size)
        for row_idx, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Row {row_idx} has {len(row)} cells, expected {size}"
                )
            for col_idx, symbol in enumerate(row):
                b[row_idx, col_idx] = symbol
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self, placeholder: str = EMPTY_PLACEHOLDER) -> str:
        """Text grid: column letters header, then 1-based numbered rows."""
        width = max(
            [len(placeholder)]
            + [len(s) for row in self._cells for s in row if s is not None]
        )
        gutter = len(str(self._size))
        letters = [chr(ord("a") + col).ljust(width) for col in range(self._size)]
        lines = [" " * gutter + " " + " ".join(letters).rstrip()]
        for row_idx, row in enumerate(self._cells):
            marks = [(s if s is not None else placeholder).ljust(width) for s in row]
            label = str(row_idx + 1).rjust(gutter)
            lines.append(f"{label} {' '.join(marks).rstrip()}")
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return self.render()
