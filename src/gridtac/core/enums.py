"""Core enumerations for the rules layer."""

from __future__ import annotations

from enum import StrEnum


class GameStatus(StrEnum):
    """Lifecycle of a single game."""

    ONGOING = "ongoing"
    FINISHED = "finished"
    DRAW = "draw"

    @property
    def is_over(self) -> bool:
        return self is not GameStatus.ONGOING


class ErrorKind(StrEnum):
    """Tag carried by failed results, one per error class."""

    CONFIGURATION = "ConfigurationError"
    INVALID_MOVE = "InvalidMoveError"
    GAME_STATE = "GameStateError"
