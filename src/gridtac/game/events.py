"""Observable engine callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gridtac.core.enums import GameStatus
from gridtac.core.move import MoveRecord

if TYPE_CHECKING:
    from gridtac.game.engine import GameEngine

MoveCallback = Callable[[MoveRecord, "GameEngine"], None]
GameOverCallback = Callable[[GameStatus, "str | None"], None]  # status, winner
EngineCallback = Callable[["GameEngine"], None]


@dataclass
class GameEvents:
    """Multiple handlers per event; fired after the state change completes."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[EngineCallback] = field(default_factory=list)
    on_import: list[EngineCallback] = field(default_factory=list)
