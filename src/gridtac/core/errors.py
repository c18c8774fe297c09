"""Exception hierarchy shared by the core and game layers."""

from __future__ import annotations

from typing import ClassVar

from gridtac.core.enums import ErrorKind


class GridTacError(Exception):
    """Base class for every error raised by the engine."""

    kind: ClassVar[ErrorKind]


class ConfigurationError(GridTacError, ValueError):
    """Invalid construction parameters or a malformed state payload."""

    kind = ErrorKind.CONFIGURATION


class InvalidMoveError(GridTacError):
    """Malformed move input, out-of-bounds target or occupied cell."""

    kind = ErrorKind.INVALID_MOVE


class GameStateError(GridTacError):
    """Operation not allowed in the current game status."""

    kind = ErrorKind.GAME_STATE
