"""Game layer — the engine, its result values, events and state snapshots."""

from gridtac.game.engine import GameEngine
from gridtac.game.events import GameEvents
from gridtac.game.results import GameStats, MoveResult, UndoResult
from gridtac.game.serialize import (
    STATE_FORMAT,
    STATE_VERSION,
    GameSnapshot,
    from_json,
    snapshot_from_dict,
    snapshot_to_dict,
    to_json,
)

__all__ = [
    "STATE_FORMAT",
    "STATE_VERSION",
    "GameEngine",
    "GameEvents",
    "GameSnapshot",
    "GameStats",
    "MoveResult",
    "UndoResult",
    "from_json",
    "snapshot_from_dict",
    "snapshot_to_dict",
    "to_json",
]
