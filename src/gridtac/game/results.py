"""Result values returned by the engine's mutating operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gridtac.core.enums import ErrorKind, GameStatus
from gridtac.core.errors import GridTacError
from gridtac.core.move import MoveRecord
from gridtac.core.types import Cell


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of ``move`` / ``redo``; never raised, always returned."""

    success: bool
    status: GameStatus
    move: MoveRecord | None = None
    winner: str | None = None
    winning_line: tuple[Cell, ...] | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def game_over(self) -> bool:
        return self.status.is_over

    @classmethod
    def failure(cls, exc: GridTacError, status: GameStatus) -> MoveResult:
        return cls(success=False, status=status, error=str(exc), error_kind=exc.kind)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "move": self.move.to_dict() if self.move is not None else None,
            "status": str(self.status),
            "winner": self.winner,
            "winningLine": _line_to_list(self.winning_line),
            "gameOver": self.game_over,
            "error": self.error,
            "errorKind": str(self.error_kind) if self.error_kind else None,
        }


@dataclass(frozen=True, slots=True)
class UndoResult:
    """Outcome of ``undo``."""

    success: bool
    status: GameStatus
    move: MoveRecord | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def failure(cls, exc: GridTacError, status: GameStatus) -> UndoResult:
        return cls(success=False, status=status, error=str(exc), error_kind=exc.kind)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "move": self.move.to_dict() if self.move is not None else None,
            "status": str(self.status),
            "error": self.error,
            "errorKind": str(self.error_kind) if self.error_kind else None,
        }


@dataclass(frozen=True, slots=True)
class GameStats:
    """Aggregate counters for display panels."""

    move_count: int
    empty_cells: int
    player_counts: dict[str, int]
    status: GameStatus
    winner: str | None
    current_player: str
    board_size: int
    win_length: int
    can_undo: bool
    can_redo: bool
    legal_move_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "moveCount": self.move_count,
            "emptyCells": self.empty_cells,
            "playerCounts": dict(self.player_counts),
            "status": str(self.status),
            "winner": self.winner,
            "currentPlayer": self.current_player,
            "boardSize": self.board_size,
            "winLength": self.win_length,
            "canUndo": self.can_undo,
            "canRedo": self.can_redo,
            "legalMoveCount": self.legal_move_count,
        }


def _line_to_list(line: tuple[Cell, ...] | None) -> list[dict[str, int]] | None:
    if line is None:
        return None
    return [cell.to_dict() for cell in line]
