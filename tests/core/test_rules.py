"""Tests for win/draw detection."""

from gridtac.core.board import Board
from gridtac.core.enums import GameStatus
from gridtac.core.rules import Rules
from gridtac.core.types import Cell


def _board(size: int, marks: dict[tuple[int, int], str]) -> Board:
    board = Board(size)
    for cell, symbol in marks.items():
        board[cell] = symbol
    return board


class TestLineFrom:
    def test_full_line(self) -> None:
        line = Rules.line_from(Cell(0, 0), (1, 1), 3, 3)
        assert line == ((0, 0), (1, 1), (2, 2))

    def test_line_running_off_edge_is_discarded(self) -> None:
        assert Rules.line_from(Cell(0, 1), (0, 1), 3, 3) is None

    def test_anti_diagonal(self) -> None:
        line = Rules.line_from(Cell(0, 2), (1, -1), 3, 3)
        assert line == ((0, 2), (1, 1), (2, 0))

    def test_anti_diagonal_off_left_edge(self) -> None:
        assert Rules.line_from(Cell(0, 1), (1, -1), 3, 3) is None


class TestWinDetection:
    def test_row(self) -> None:
        board = _board(3, {(0, 0): "X", (0, 1): "X", (0, 2): "X"})
        assert Rules.find_winning_line(board, 3) == ("X", ((0, 0), (0, 1), (0, 2)))

    def test_column(self) -> None:
        board = _board(3, {(0, 1): "O", (1, 1): "O", (2, 1): "O"})
        assert Rules.find_winning_line(board, 3) == ("O", ((0, 1), (1, 1), (2, 1)))

    def test_diagonal(self) -> None:
        board = _board(3, {(0, 0): "X", (1, 1): "X", (2, 2): "X"})
        assert Rules.find_winning_line(board, 3) == ("X", ((0, 0), (1, 1), (2, 2)))

    def test_anti_diagonal(self) -> None:
        board = _board(3, {(0, 2): "O", (1, 1): "O", (2, 0): "O"})
        assert Rules.find_winning_line(board, 3) == ("O", ((0, 2), (1, 1), (2, 0)))

    def test_mixed_line_is_not_a_win(self) -> None:
        board = _board(3, {(0, 0): "X", (0, 1): "O", (0, 2): "X"})
        assert Rules.find_winning_line(board, 3) is None

    def test_short_win_length_on_large_board(self) -> None:
        board = _board(7, {(3, 3): "X", (4, 4): "X", (5, 5): "X"})
        winner, line = Rules.find_winning_line(board, 3)  # type: ignore[misc]
        assert winner == "X"
        assert line == ((3, 3), (4, 4), (5, 5))

    def test_longer_run_reports_first_window(self) -> None:
        board = _board(5, {(2, c): "X" for c in range(5)})
        _, line = Rules.find_winning_line(board, 3)  # type: ignore[misc]
        assert line == ((2, 0), (2, 1), (2, 2))

    def test_row_major_order_decides_between_lines(self) -> None:
        # Column starting at (0, 4) is reached before the row starting at (2, 0).
        marks = {(r, 4): "O" for r in range(3)}
        marks.update({(2, c): "X" for c in range(3)})
        board = _board(5, marks)
        assert Rules.find_winning_line(board, 3) == ("O", ((0, 4), (1, 4), (2, 4)))

    def test_direction_order_decides_from_same_cell(self) -> None:
        # Horizontal is checked before vertical from (0, 0).
        marks = {(0, c): "X" for c in range(3)}
        marks.update({(r, 0): "X" for r in range(3)})
        board = _board(3, marks)
        _, line = Rules.find_winning_line(board, 3)  # type: ignore[misc]
        assert line == ((0, 0), (0, 1), (0, 2))


class TestEvaluate:
    def test_empty_board_ongoing(self) -> None:
        assert Rules.evaluate(Board(3), 3).status is GameStatus.ONGOING

    def test_full_board_without_line_is_draw(self) -> None:
        rows = [["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]]
        evaluation = Rules.evaluate(Board.from_rows(rows), 3)
        assert evaluation.status is GameStatus.DRAW
        assert evaluation.winner is None
        assert evaluation.winning_line is None

    def test_win_on_full_board_beats_draw(self) -> None:
        rows = [["X", "O", "X"], ["O", "X", "O"], ["O", "X", "X"]]
        evaluation = Rules.evaluate(Board.from_rows(rows), 3)
        assert evaluation.status is GameStatus.FINISHED
        assert evaluation.winner == "X"
        assert evaluation.winning_line == ((0, 0), (1, 1), (2, 2))
