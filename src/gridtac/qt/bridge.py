"""Qt bridge that lets a widget drive a game engine via signals/slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from gridtac.core.enums import GameStatus
from gridtac.core.move import MoveRecord
from gridtac.game.engine import GameEngine
from gridtac.game.results import MoveResult


class EngineBridge(QObject):
    """GUI-thread adapter around a :class:`GameEngine`.

    Slots never raise into the event loop: rejected requests are reported
    through ``move_rejected`` with the error message and kind.
    """

    move_made = pyqtSignal(object)  # MoveRecord
    move_undone = pyqtSignal(object)  # MoveRecord
    move_rejected = pyqtSignal(str, str)  # message, error kind
    game_over = pyqtSignal(str, object)  # status, winner (str | None)
    board_changed = pyqtSignal()

    __slots__ = ("_engine",)

    def __init__(self, engine: GameEngine | None = None) -> None:
        super().__init__()
        self._engine = engine if engine is not None else GameEngine()
        events = self._engine.events
        events.on_move.append(self._on_move)
        events.on_undo.append(self._on_undo)
        events.on_game_over.append(self._on_game_over)
        events.on_reset.append(self._on_replaced)
        events.on_import.append(self._on_replaced)

    @property
    def engine(self) -> GameEngine:
        return self._engine

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(str)
    def request_move(self, notation: str) -> None:
        """Play the cell named in algebraic notation, e.g. ``"b2"``."""
        self._report(self._engine.move(notation))

    @pyqtSlot(int, int)
    def request_cell(self, row: int, col: int) -> None:
        """Play the cell at *row*, *col* (e.g. from a board click)."""
        self._report(self._engine.move(row, col))

    @pyqtSlot()
    def undo(self) -> None:
        result = self._engine.undo()
        if not result.success:
            self.move_rejected.emit(result.error or "", str(result.error_kind))

    @pyqtSlot()
    def redo(self) -> None:
        self._report(self._engine.redo())

    @pyqtSlot()
    def reset(self) -> None:
        self._engine.reset()

    # ── Engine callbacks ─────────────────────────────────────────────────

    def _report(self, result: MoveResult) -> None:
        if not result.success:
            self.move_rejected.emit(result.error or "", str(result.error_kind))

    def _on_move(self, record: MoveRecord, _engine: GameEngine) -> None:
        self.move_made.emit(record)
        self.board_changed.emit()

    def _on_undo(self, record: MoveRecord, _engine: GameEngine) -> None:
        self.move_undone.emit(record)
        self.board_changed.emit()

    def _on_game_over(self, status: GameStatus, winner: str | None) -> None:
        self.game_over.emit(str(status), winner)

    def _on_replaced(self, _engine: GameEngine) -> None:
        self.board_changed.emit()
