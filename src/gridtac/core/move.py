"""Move value objects."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from gridtac.core.types import Cell, to_algebraic


def now_ms() -> int:
    """Wall-clock timestamp in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Immutable entry in the move history."""

    row: int
    col: int
    player: str
    algebraic: str
    move_number: int
    timestamp: int | None = None

    @classmethod
    def create(
        cls, cell: Cell, player: str, move_number: int, timestamp: int | None = None
    ) -> MoveRecord:
        return cls(
            row=cell.row,
            col=cell.col,
            player=player,
            algebraic=to_algebraic(cell.row, cell.col),
            move_number=move_number,
            timestamp=now_ms() if timestamp is None else timestamp,
        )

    @property
    def cell(self) -> Cell:
        return Cell(self.row, self.col)

    # ── Serialisation ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "col": self.col,
            "player": self.player,
            "algebraic": self.algebraic,
            "moveNumber": self.move_number,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MoveRecord:
        """Rebuild a record; ``algebraic`` is recomputed when absent."""
        row, col = data["row"], data["col"]
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)):
            raise ValueError(f"Move coordinates must be integers: {data!r}")
        player = data["player"]
        if not isinstance(player, str) or not player:
            raise ValueError(f"Move player must be a non-empty string: {data!r}")
        move_number = data.get("moveNumber", data.get("move_number"))
        if not isinstance(move_number, int) or isinstance(move_number, bool):
            raise ValueError(f"Move number must be an integer: {data!r}")
        timestamp = data.get("timestamp")
        if timestamp is not None and not isinstance(timestamp, (int, float)):
            raise ValueError(f"Move timestamp must be numeric: {data!r}")
        return cls(
            row=row,
            col=col,
            player=player,
            algebraic=data.get("algebraic") or to_algebraic(row, col),
            move_number=move_number,
            timestamp=None if timestamp is None else int(timestamp),
        )

    def __str__(self) -> str:
        return f"{self.move_number}. {self.player} {self.algebraic}"


@dataclass(frozen=True, slots=True)
class LegalMove:
    """An empty cell the side to move may mark."""

    row: int
    col: int
    algebraic: str
    player: str

    @property
    def cell(self) -> Cell:
        return Cell(self.row, self.col)
