"""Win and draw detection for configurable run lengths."""

from __future__ import annotations

from typing import NamedTuple

from gridtac.core.board import Board
from gridtac.core.enums import GameStatus
from gridtac.core.types import Cell, in_bounds

# Scan order decides which line is reported when several exist.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),  # horizontal
    (1, 0),  # vertical
    (1, 1),  # diagonal down-right
    (1, -1),  # diagonal down-left
)


class Evaluation(NamedTuple):
    """Outcome of evaluating a board."""

    status: GameStatus
    winner: str | None = None
    winning_line: tuple[Cell, ...] | None = None


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def line_from(
        start: Cell, direction: tuple[int, int], length: int, board_size: int
    ) -> tuple[Cell, ...] | None:
        """Exactly *length* cells from *start*, or None if the run leaves the board."""
        d_row, d_col = direction
        line: list[Cell] = []
        for step in range(length):
            row = start.row + step * d_row
            col = start.col + step * d_col
            if not in_bounds(row, col, board_size):
                return None
            line.append(Cell(row, col))
        return tuple(line)

    @staticmethod
    def find_winning_line(
        board: Board, win_length: int
    ) -> tuple[str, tuple[Cell, ...]] | None:
        """First run of *win_length* equal marks (row-major, then direction order)."""
        size = board.size
        for start in board.cells():
            player = board[start]
            if player is None:
                continue
            for direction in DIRECTIONS:
                line = Rules.line_from(start, direction, win_length, size)
                if line is not None and all(board[c] == player for c in line):
                    return player, line
        return None

    @staticmethod
    def evaluate(board: Board, win_length: int) -> Evaluation:
        """Determine the status; a completed line is checked before a full board."""
        found = Rules.find_winning_line(board, win_length)
        if found is not None:
            winner, line = found
            return Evaluation(GameStatus.FINISHED, winner, line)
        if board.is_full:
            return Evaluation(GameStatus.DRAW)
        return Evaluation(GameStatus.ONGOING)
