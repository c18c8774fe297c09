"""Core rules layer — board, notation and win detection, no external dependencies.

Quick start::

    from gridtac.core import Board, Rules, parse_algebraic

    board = Board(3)
    for name in ("a1", "b1", "c1"):
        board[parse_algebraic(name, 3)] = "X"
    print(Rules.evaluate(board, win_length=3))
"""

from gridtac.core.board import Board
from gridtac.core.config import DEFAULT_CONFIG, GameConfig
from gridtac.core.enums import ErrorKind, GameStatus
from gridtac.core.errors import (
    ConfigurationError,
    GameStateError,
    GridTacError,
    InvalidMoveError,
)
from gridtac.core.move import LegalMove, MoveRecord
from gridtac.core.rules import DIRECTIONS, Evaluation, Rules
from gridtac.core.targets import TargetKind, classify_target, resolve_target
from gridtac.core.types import Cell, in_bounds, parse_algebraic, to_algebraic

__all__ = [
    # Enums
    "ErrorKind",
    "GameStatus",
    "TargetKind",
    # Errors
    "ConfigurationError",
    "GameStateError",
    "GridTacError",
    "InvalidMoveError",
    # Types / helpers
    "Cell",
    "in_bounds",
    "parse_algebraic",
    "to_algebraic",
    "classify_target",
    "resolve_target",
    # Domain objects
    "Board",
    "DEFAULT_CONFIG",
    "DIRECTIONS",
    "Evaluation",
    "GameConfig",
    "LegalMove",
    "MoveRecord",
    "Rules",
]
