"""Generalised N×N tic-tac-toe rules engine.

Quick start::

    from gridtac import GameEngine

    game = GameEngine(board_size=4, win_length=3)
    game.move("a1")
    game.move(1, 1)
    print(game)
"""

from gridtac.core.config import GameConfig
from gridtac.core.enums import ErrorKind, GameStatus
from gridtac.core.errors import (
    ConfigurationError,
    GameStateError,
    GridTacError,
    InvalidMoveError,
)
from gridtac.game.engine import GameEngine
from gridtac.game.results import GameStats, MoveResult, UndoResult

__all__ = [
    "ConfigurationError",
    "ErrorKind",
    "GameConfig",
    "GameEngine",
    "GameStateError",
    "GameStats",
    "GameStatus",
    "GridTacError",
    "InvalidMoveError",
    "MoveResult",
    "UndoResult",
]
