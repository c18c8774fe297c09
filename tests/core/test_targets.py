"""Tests for move-target resolution and placement checks."""

from dataclasses import dataclass

import pytest

from gridtac.core.board import Board
from gridtac.core.errors import InvalidMoveError
from gridtac.core.targets import (
    RawTarget,
    TargetKind,
    classify_target,
    resolve_target,
    validate_placement,
)
from gridtac.core.types import Cell


@dataclass
class _Point:
    row: object
    col: object


class TestClassify:
    def test_mapping_is_structured(self) -> None:
        assert classify_target({"row": 0, "col": 1}) is TargetKind.STRUCTURED

    def test_object_with_attributes_is_structured(self) -> None:
        assert classify_target(_Point(0, 1)) is TargetKind.STRUCTURED

    def test_cell_is_structured(self) -> None:
        assert classify_target(Cell(0, 1)) is TargetKind.STRUCTURED

    def test_string_is_algebraic(self) -> None:
        assert classify_target("b2") is TargetKind.ALGEBRAIC

    def test_two_numbers(self) -> None:
        assert classify_target(0, 1) is TargetKind.COORDINATES

    def test_pair(self) -> None:
        assert classify_target((0, 1)) is TargetKind.COORDINATES

    @pytest.mark.parametrize(
        "target,col",
        [(None, None), (1, None), ({"row": 0}, None), ([0, 1, 2], None), (True, False)],
    )
    def test_unrecognised_shapes(self, target: object, col: object) -> None:
        with pytest.raises(InvalidMoveError, match="Invalid move format"):
            classify_target(target, col)

    @pytest.mark.parametrize(
        "target", ["a1", {"row": 0, "col": 0}, _Point(0, 0), Cell(0, 0)]
    )
    def test_column_only_with_coordinates(self, target: object) -> None:
        with pytest.raises(InvalidMoveError, match="does not take a column"):
            classify_target(target, 5)


class TestResolve:
    def test_all_shapes_agree(self) -> None:
        expected = (1, 2)
        for target, col in [
            ("c2", None),
            ({"row": 1, "col": 2}, None),
            (_Point(1, 2), None),
            (1, 2),
            ((1, 2), None),
        ]:
            raw = resolve_target(target, col, 3)
            assert (raw.row, raw.col) == expected

    def test_structured_values_are_not_coerced(self) -> None:
        raw = resolve_target({"row": "1", "col": 0}, None, 3)
        assert raw == RawTarget(TargetKind.STRUCTURED, "1", 0)

    def test_bad_notation_raises(self) -> None:
        with pytest.raises(InvalidMoveError):
            resolve_target("z9", None, 3)


class TestValidatePlacement:
    def test_valid_cell(self) -> None:
        raw = RawTarget(TargetKind.COORDINATES, 2, 0)
        assert validate_placement(raw, Board(3)) == Cell(2, 0)

    def test_non_integer_rejected(self) -> None:
        raw = RawTarget(TargetKind.COORDINATES, 1.5, 0)
        with pytest.raises(InvalidMoveError, match="integers"):
            validate_placement(raw, Board(3))

    def test_out_of_bounds_mentions_dimensions(self) -> None:
        raw = RawTarget(TargetKind.COORDINATES, 3, 0)
        with pytest.raises(InvalidMoveError, match="3x3"):
            validate_placement(raw, Board(3))

    def test_negative_index_out_of_bounds(self) -> None:
        raw = RawTarget(TargetKind.COORDINATES, 0, -1)
        with pytest.raises(InvalidMoveError, match="out of bounds"):
            validate_placement(raw, Board(3))

    def test_occupied_names_player(self) -> None:
        board = Board(3)
        board[0, 0] = "O"
        raw = RawTarget(TargetKind.COORDINATES, 0, 0)
        with pytest.raises(InvalidMoveError, match="occupied by O"):
            validate_placement(raw, board)

    def test_type_checked_before_bounds(self) -> None:
        raw = RawTarget(TargetKind.STRUCTURED, "99", 0)
        with pytest.raises(InvalidMoveError, match="integers"):
            validate_placement(raw, Board(3))
