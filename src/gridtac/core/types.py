"""Cell type and coordinate helpers.

Board layout (row-major, algebraic names):
    (0, 0)=a1, (0, 1)=b1, ..., (0, n-1)
    (1, 0)=a2, ...

Columns map to letters starting at ``a``; rows map to 1-based numbers.
"""

from __future__ import annotations

from typing import NamedTuple

from gridtac.core.errors import InvalidMoveError

MAX_COLUMNS = 26


class Cell(NamedTuple):
    """A ``(row, col)`` coordinate on the board."""

    row: int
    col: int

    @property
    def algebraic(self) -> str:
        return to_algebraic(self.row, self.col)

    def to_dict(self) -> dict[str, int]:
        return {"row": self.row, "col": self.col}


def in_bounds(row: int, col: int, board_size: int) -> bool:
    """Whether ``(row, col)`` lies on a ``board_size`` × ``board_size`` board."""
    return 0 <= row < board_size and 0 <= col < board_size


def to_algebraic(row: int, col: int) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (2, 1) → 'b3'."""
    if not 0 <= col < MAX_COLUMNS:
        raise InvalidMoveError(f"Column index out of notation range: {col}")
    return chr(ord("a") + col) + str(row + 1)


def parse_algebraic(text: str, board_size: int) -> Cell:
    """Parse a cell name such as 'c2' into ``Cell(row=1, col=2)``."""
    name = text.strip().lower()
    if len(name) < 2:
        raise InvalidMoveError(f"Invalid algebraic notation: {text!r}")

    letter, digits = name[0], name[1:]
    if not ("a" <= letter <= "z"):
        raise InvalidMoveError(
            f"Invalid algebraic notation (column must be a letter): {text!r}"
        )
    # "0" and "00" name no row.
    significant = digits.lstrip("0") if digits.isascii() and digits.isdigit() else ""
    if not significant:
        raise InvalidMoveError(
            f"Invalid algebraic notation (row must be a positive number): {text!r}"
        )
    # A row number never has more digits than the board size.
    if len(significant) > len(str(board_size)):
        raise InvalidMoveError(
            f"Notation {text!r} is outside the {board_size}x{board_size} board"
        )

    cell = Cell(int(significant) - 1, ord(letter) - ord("a"))
    if not in_bounds(cell.row, cell.col, board_size):
        raise InvalidMoveError(
            f"Notation {text!r} is outside the {board_size}x{board_size} board"
        )
    return cell
