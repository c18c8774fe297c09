"""Game state snapshots: export to and import from JSON-friendly dicts.

Exported layout::

    {
        "format": "gridtac.state",
        "version": 1,
        "board": [[None | symbol, ...], ...],
        "currentPlayer": "X",
        "moveHistory": [{"row", "col", "player", "algebraic", "moveNumber", "timestamp"}],
        "status": "ongoing" | "finished" | "draw",
        "winner": None | symbol,
        "winningLine": None | [{"row", "col"}, ...],
        "moveCount": 0,
        "config": {"boardSize", "winLength", "players", "startingPlayer"},
    }

Payloads from the JavaScript library carry no ``format``/``version`` and
name the status field ``gameStatus``; both are accepted on import.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from gridtac.core.board import Board
from gridtac.core.config import GameConfig
from gridtac.core.enums import GameStatus
from gridtac.core.errors import ConfigurationError
from gridtac.core.move import MoveRecord
from gridtac.core.rules import Rules
from gridtac.core.types import Cell

STATE_FORMAT = "gridtac.state"
STATE_VERSION = 1

REQUIRED_FIELDS: tuple[str, ...] = (
    "board",
    "currentPlayer",
    "moveHistory",
    "status",
    "config",
)

# Key and status names written by the JavaScript library's exportState().
_LEGACY_FIELDS: dict[str, str] = {"status": "gameStatus"}
_LEGACY_STATUS: dict[str, GameStatus] = {"checkmate": GameStatus.FINISHED}


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Detached copy of everything needed to restore a game."""

    config: GameConfig
    board: Board
    current_player: str
    history: tuple[MoveRecord, ...]
    status: GameStatus
    winner: str | None
    winning_line: tuple[Cell, ...] | None

    @property
    def move_count(self) -> int:
        return len(self.history)


# ── Export ───────────────────────────────────────────────────────────────────


def snapshot_to_dict(snapshot: GameSnapshot) -> dict[str, Any]:
    """Serialise a snapshot into plain lists/dicts (no shared references)."""
    line = snapshot.winning_line
    return {
        "format": STATE_FORMAT,
        "version": STATE_VERSION,
        "board": snapshot.board.to_rows(),
        "currentPlayer": snapshot.current_player,
        "moveHistory": [record.to_dict() for record in snapshot.history],
        "status": str(snapshot.status),
        "winner": snapshot.winner,
        "winningLine": [c.to_dict() for c in line] if line is not None else None,
        "moveCount": snapshot.move_count,
        "config": snapshot.config.to_dict(),
    }


def to_json(state: Mapping[str, Any], *, indent: int | None = None) -> str:
    return json.dumps(state, indent=indent)


def from_json(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid game state JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError("Game state JSON must be an object")
    return data


# ── Import ───────────────────────────────────────────────────────────────────


def snapshot_from_dict(data: Mapping[str, Any], base: GameConfig) -> GameSnapshot:
    """Parse and fully validate an exported state.

    *base* is the configuration the payload's ``config`` is merged over.
    Raises :class:`ConfigurationError` (or the ``ValueError``/``KeyError``/
    ``TypeError`` of a malformed field) without touching any live engine.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Game state must be a mapping, got {type(data).__name__}"
        )
    _check_header(data)

    data = _with_current_keys(data)
    missing = [name for name in REQUIRED_FIELDS if name not in data]
    if missing:
        raise ConfigurationError(f"Missing required state fields: {', '.join(missing)}")

    config = base.merged(data["config"])
    board = _parse_board(data["board"], config)

    current_player = data["currentPlayer"]
    if current_player not in config.players:
        raise ConfigurationError(
            f"Current player {current_player!r} is not a configured player"
        )

    status = _parse_status(data["status"])
    history = _parse_history(data["moveHistory"], board, config)

    move_count = data.get("moveCount")
    if move_count is not None and move_count != len(history):
        raise ConfigurationError(
            f"moveCount {move_count!r} does not match {len(history)} recorded moves"
        )

    evaluation = Rules.evaluate(board, config.win_length)
    if evaluation.status is not status:
        raise ConfigurationError(
            f"Status {status} does not match the board (expected {evaluation.status})"
        )
    if data.get("winner") is not None and data["winner"] != evaluation.winner:
        raise ConfigurationError(
            f"Winner {data['winner']!r} does not match the board"
        )
    line = data.get("winningLine")
    if line is not None and _parse_line(line) != evaluation.winning_line:
        raise ConfigurationError("Winning line does not match the board")

    return GameSnapshot(
        config=config,
        board=board,
        current_player=current_player,
        history=history,
        status=status,
        winner=evaluation.winner,
        winning_line=evaluation.winning_line,
    )


def _with_current_keys(data: Mapping[str, Any]) -> Mapping[str, Any]:
    renamed = {
        name: data[legacy]
        for name, legacy in _LEGACY_FIELDS.items()
        if name not in data and legacy in data
    }
    if not renamed:
        return data
    return {**data, **renamed}


def _check_header(data: Mapping[str, Any]) -> None:
    fmt = data.get("format", STATE_FORMAT)
    if fmt != STATE_FORMAT:
        raise ConfigurationError(f"Unsupported state format: {fmt!r}")
    version = data.get("version", STATE_VERSION)
    if not isinstance(version, int) or isinstance(version, bool) or version < 1:
        raise ConfigurationError(f"Invalid state version: {version!r}")
    if version > STATE_VERSION:
        raise ConfigurationError(
            f"State version {version} is newer than supported ({STATE_VERSION})"
        )


def _parse_board(rows: Any, config: GameConfig) -> Board:
    size = config.board_size
    if (
        isinstance(rows, (str, bytes))
        or not isinstance(rows, Sequence)
        or len(rows) != size
    ):
        raise ConfigurationError(f"Board must have {size} rows")
    for row in rows:
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise ConfigurationError("Board rows must be sequences")
        for symbol in row:
            if symbol is not None and symbol not in config.players:
                raise ConfigurationError(
                    f"Board contains unknown symbol {symbol!r}"
                )
    try:
        return Board.from_rows(rows)
    except ValueError as exc:
        raise ConfigurationError(f"Board must be {size}x{size}: {exc}") from exc


def _parse_status(value: Any) -> GameStatus:
    if isinstance(value, GameStatus):
        return value
    if isinstance(value, str):
        legacy = _LEGACY_STATUS.get(value)
        if legacy is not None:
            return legacy
        try:
            return GameStatus(value)
        except ValueError:
            pass
    raise ConfigurationError(f"Unknown game status: {value!r}")


def _parse_history(
    entries: Any, board: Board, config: GameConfig
) -> tuple[MoveRecord, ...]:
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        raise ConfigurationError("moveHistory must be a list")

    records = tuple(MoveRecord.from_dict(entry) for entry in entries)
    seen: set[Cell] = set()
    for expected_number, record in enumerate(records, start=1):
        cell = record.cell
        if not (0 <= cell.row < config.board_size and 0 <= cell.col < config.board_size):
            raise ConfigurationError(f"Recorded move {record} is off the board")
        if cell in seen:
            raise ConfigurationError(f"Cell {cell.algebraic} is recorded twice")
        seen.add(cell)
        if board[cell] != record.player:
            raise ConfigurationError(
                f"Recorded move {record} does not match the board"
            )
        if record.move_number != expected_number:
            raise ConfigurationError(
                f"Move numbers must be sequential from 1, got {record.move_number}"
            )
    if len(records) != board.filled_count:
        raise ConfigurationError(
            f"{len(records)} recorded moves but {board.filled_count} occupied cells"
        )
    return records


def _parse_line(cells: Any) -> tuple[Cell, ...]:
    if isinstance(cells, (str, bytes)) or not isinstance(cells, Sequence):
        raise ConfigurationError("winningLine must be a list of cells")
    line: list[Cell] = []
    for item in cells:
        if isinstance(item, Mapping):
            line.append(Cell(item["row"], item["col"]))
        else:
            row, col = item
            line.append(Cell(row, col))
    return tuple(line)
