"""Move-target resolution.

A move target arrives in one of three shapes and is resolved to a single
canonical ``(row, col)`` before any validation happens:

* ``STRUCTURED`` - a mapping with ``row``/``col`` keys or an object with
  ``row``/``col`` attributes (:class:`Cell`, :class:`MoveRecord`, ...);
* ``ALGEBRAIC`` - a string such as ``"b2"``;
* ``COORDINATES`` - ``(row, col)`` passed as two arguments or as a pair.

Shapes are tried in that order.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum, auto
from typing import NamedTuple

from gridtac.core.board import Board
from gridtac.core.errors import InvalidMoveError
from gridtac.core.types import Cell, in_bounds, parse_algebraic


class TargetKind(Enum):
    STRUCTURED = auto()
    ALGEBRAIC = auto()
    COORDINATES = auto()


class RawTarget(NamedTuple):
    """Resolved but not yet validated coordinates."""

    kind: TargetKind
    row: object
    col: object


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify_target(target: object, col: object = None) -> TargetKind:
    """Tag *target* with the shape it was given in.

    A separate *col* belongs only to the two-argument coordinate form.
    """
    kind: TargetKind | None = None
    if isinstance(target, Mapping):
        if "row" in target and "col" in target:
            kind = TargetKind.STRUCTURED
    elif hasattr(target, "row") and hasattr(target, "col"):
        kind = TargetKind.STRUCTURED
    if kind is None and isinstance(target, str):
        kind = TargetKind.ALGEBRAIC
    if kind is not None:
        if col is not None:
            raise InvalidMoveError(
                f"Invalid move format: {target!r} does not take a column ({col!r})"
            )
        return kind
    if _is_number(target) and _is_number(col):
        return TargetKind.COORDINATES
    if (
        col is None
        and isinstance(target, (tuple, list))
        and len(target) == 2
        and all(_is_number(v) for v in target)
    ):
        return TargetKind.COORDINATES
    raise InvalidMoveError(f"Invalid move format: {target!r}")


def _structured(target: object, _col: object, _size: int) -> tuple[object, object]:
    if isinstance(target, Mapping):
        return target["row"], target["col"]
    return getattr(target, "row"), getattr(target, "col")


def _algebraic(target: object, _col: object, size: int) -> tuple[object, object]:
    return parse_algebraic(str(target), size)


def _coordinates(target: object, col: object, _size: int) -> tuple[object, object]:
    if col is None:
        row, col = target  # type: ignore[misc]
        return row, col
    return target, col


_RESOLVERS: dict[TargetKind, Callable[[object, object, int], tuple[object, object]]] = {
    TargetKind.STRUCTURED: _structured,
    TargetKind.ALGEBRAIC: _algebraic,
    TargetKind.COORDINATES: _coordinates,
}


def resolve_target(target: object, col: object, board_size: int) -> RawTarget:
    """Reduce any accepted target shape to raw ``(row, col)`` values."""
    kind = classify_target(target, col)
    row, column = _RESOLVERS[kind](target, col, board_size)
    return RawTarget(kind, row, column)


def validate_placement(raw: RawTarget, board: Board) -> Cell:
    """Check type, bounds and occupancy, in that order."""
    row, col = raw.row, raw.col
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)):
        raise InvalidMoveError("Row and column must be integers")
    assert isinstance(row, int) and isinstance(col, int)
    size = board.size
    if not in_bounds(row, col, size):
        raise InvalidMoveError(f"Move out of bounds. Board size is {size}x{size}")
    cell = Cell(row, col)
    occupant = board[cell]
    if occupant is not None:
        raise InvalidMoveError(
            f"Square {cell.algebraic} is already occupied by {occupant}"
        )
    return cell
