"""Tests for the Qt engine bridge."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from gridtac.game.engine import GameEngine
from gridtac.qt.bridge import EngineBridge


@pytest.fixture
def bridge(qapp: object) -> EngineBridge:
    del qapp
    return EngineBridge()


class TestEngineBridge:
    def test_wraps_given_engine(self, qapp: object) -> None:
        del qapp
        engine = GameEngine(board_size=4)
        assert EngineBridge(engine).engine is engine

    def test_request_move_emits_move_made(self, bridge: EngineBridge) -> None:
        made = QSignalSpy(bridge.move_made)
        changed = QSignalSpy(bridge.board_changed)
        rejected = QSignalSpy(bridge.move_rejected)

        bridge.request_move("b2")

        assert len(made) == 1
        assert made[0][0].algebraic == "b2"
        assert len(changed) == 1
        assert len(rejected) == 0

    def test_request_cell(self, bridge: EngineBridge) -> None:
        made = QSignalSpy(bridge.move_made)
        bridge.request_cell(2, 0)
        assert len(made) == 1
        assert bridge.engine.board[2][0] == "X"

    def test_rejected_move(self, bridge: EngineBridge) -> None:
        rejected = QSignalSpy(bridge.move_rejected)
        bridge.request_cell(0, 0)
        bridge.request_cell(0, 0)
        assert len(rejected) == 1
        assert rejected[0][1] == "InvalidMoveError"

    def test_undo_and_redo(self, bridge: EngineBridge) -> None:
        undone = QSignalSpy(bridge.move_undone)
        made = QSignalSpy(bridge.move_made)
        bridge.request_move("a1")
        bridge.undo()
        bridge.redo()
        assert len(undone) == 1
        assert len(made) == 2

    def test_undo_with_empty_history(self, bridge: EngineBridge) -> None:
        rejected = QSignalSpy(bridge.move_rejected)
        bridge.undo()
        assert len(rejected) == 1
        assert rejected[0][1] == "GameStateError"

    def test_game_over(self, bridge: EngineBridge) -> None:
        over = QSignalSpy(bridge.game_over)
        for name in ("a1", "a2", "b1", "b2", "c1"):
            bridge.request_move(name)
        assert len(over) == 1
        assert over[0][0] == "finished"
        assert over[0][1] == "X"

    def test_reset_emits_board_changed(self, bridge: EngineBridge) -> None:
        bridge.request_move("a1")
        changed = QSignalSpy(bridge.board_changed)
        bridge.reset()
        assert len(changed) == 1
        assert bridge.engine.move_count == 0
