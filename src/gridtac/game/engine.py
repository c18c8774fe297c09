"""GameEngine — board, turn order, history and state for one game.

Every mutating operation (``move``, ``undo``, ``redo``) returns a result
value instead of raising; a failed call leaves board, turn and history
exactly as they were.  Only construction and :meth:`GameEngine.import_state`
raise, since there is no valid object to hand back.

Single-threaded: callers sharing an engine must serialise access.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from gridtac.core.board import Board, Grid
from gridtac.core.config import GameConfig
from gridtac.core.enums import GameStatus
from gridtac.core.errors import (
    ConfigurationError,
    GameStateError,
    GridTacError,
)
from gridtac.core.move import LegalMove, MoveRecord
from gridtac.core.rules import Rules
from gridtac.core.targets import resolve_target, validate_placement
from gridtac.core.types import Cell, to_algebraic
from gridtac.game.events import GameEvents
from gridtac.game.results import GameStats, MoveResult, UndoResult
from gridtac.game.serialize import GameSnapshot, snapshot_from_dict, snapshot_to_dict

_LOGGER = logging.getLogger(__name__)


def _build_config(
    config: GameConfig | Mapping[str, Any] | None, overrides: Mapping[str, Any]
) -> GameConfig:
    if config is None:
        base = GameConfig()
    elif isinstance(config, GameConfig):
        base = config
    elif isinstance(config, Mapping):
        base = GameConfig.from_mapping(config)
    else:
        raise ConfigurationError(
            f"Configuration must be a GameConfig or mapping, got {type(config).__name__}"
        )
    return base.merged(overrides)


class GameEngine:
    """Generalised N×N tic-tac-toe with undo/redo and state export."""

    __slots__ = (
        "_config",
        "_board",
        "_current_player",
        "_history",
        "_redo_stack",
        "_status",
        "_winner",
        "_winning_line",
        "events",
    )

    def __init__(
        self,
        config: GameConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        self._config = _build_config(config, overrides)
        self.events = GameEvents()
        self._board = Board(self._config.board_size)
        self._current_player = self._config.starting_player
        self._history: list[MoveRecord] = []
        self._redo_stack: list[MoveRecord] = []
        self._status = GameStatus.ONGOING
        self._winner: str | None = None
        self._winning_line: tuple[Cell, ...] | None = None

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> GameEngine:
        """Empty the board and history; the first turn goes to the starting player."""
        self._board = Board(self._config.board_size)
        self._current_player = self._config.starting_player
        self._history = []
        self._redo_stack = []
        self._status = GameStatus.ONGOING
        self._winner = None
        self._winning_line = None
        _LOGGER.debug("Game reset (%dx%d)", self._config.board_size, self._config.board_size)
        self._emit(self.events.on_reset, self)
        return self

    # ── Moves ────────────────────────────────────────────────────────────

    def move(self, target: object, col: object = None) -> MoveResult:
        """Mark a cell for the side to move.

        *target* is a ``Cell``/mapping/object with ``row`` and ``col``, an
        algebraic string such as ``"b2"``, or a row index with *col*.
        """
        try:
            cell = self._checked_cell(target, col)
        except GridTacError as exc:
            _LOGGER.debug("Move %r rejected: %s", target, exc)
            return MoveResult.failure(exc, self._status)
        return self._apply(cell)

    def is_legal_move(self, target: object, col: object = None) -> bool:
        """Whether ``move(target, col)`` would succeed; never mutates."""
        try:
            self._checked_cell(target, col)
        except GridTacError:
            return False
        return True

    def legal_moves(self) -> list[LegalMove]:
        """Empty cells in row-major order; none once the game is over."""
        if self._status is not GameStatus.ONGOING:
            return []
        player = self._current_player
        return [
            LegalMove(c.row, c.col, to_algebraic(c.row, c.col), player)
            for c in self._board.empty_cells()
        ]

    # ── History ──────────────────────────────────────────────────────────

    def undo(self) -> UndoResult:
        """Take back the last move; the turn returns to whoever made it."""
        if not self._history:
            return UndoResult.failure(GameStateError("No moves to undo"), self._status)

        record = self._history.pop()
        self._board[record.cell] = None
        self._current_player = record.player
        self._refresh_status()
        self._redo_stack.append(record)

        _LOGGER.debug("Undid %s", record)
        self._emit(self.events.on_undo, record, self)
        return UndoResult(success=True, status=self._status, move=record)

    def redo(self) -> MoveResult:
        """Replay the most recently undone move through full validation."""
        if not self._redo_stack:
            return MoveResult.failure(GameStateError("No moves to redo"), self._status)

        record = self._redo_stack.pop()
        try:
            cell = self._checked_cell(record.cell)
        except GridTacError as exc:
            self._redo_stack.append(record)
            _LOGGER.debug("Redo of %s rejected: %s", record, exc)
            return MoveResult.failure(exc, self._status)
        return self._apply(cell, timestamp=record.timestamp, from_redo=True)

    # ── State export / import ────────────────────────────────────────────

    def export_state(self) -> dict[str, Any]:
        """Self-contained, JSON-friendly snapshot of the whole game."""
        return snapshot_to_dict(self._snapshot())

    def import_state(self, state: Mapping[str, Any]) -> GameEngine:
        """Replace the game with *state*; undo/redo history starts empty.

        The payload is validated completely before anything is assigned,
        so a rejected import leaves the engine untouched.
        """
        try:
            snapshot = snapshot_from_dict(state, self._config)
        except (GridTacError, ValueError, KeyError, TypeError) as exc:
            _LOGGER.warning("Rejected game state import: %s", exc)
            raise ConfigurationError(f"Invalid game state: {exc}") from exc

        self._config = snapshot.config
        self._board = snapshot.board
        self._current_player = snapshot.current_player
        self._history = list(snapshot.history)
        self._redo_stack = []
        self._status = snapshot.status
        self._winner = snapshot.winner
        self._winning_line = snapshot.winning_line

        _LOGGER.info(
            "Imported game state: %d moves, status %s", len(self._history), self._status
        )
        self._emit(self.events.on_import, self)
        return self

    # ── Read-only queries ────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Grid:
        return self._board.to_rows()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status.is_over

    @property
    def is_draw(self) -> bool:
        return self._status is GameStatus.DRAW

    @property
    def winner(self) -> str | None:
        return self._winner

    @property
    def winning_line(self) -> tuple[Cell, ...] | None:
        return self._winning_line

    @property
    def current_player(self) -> str:
        return self._current_player

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def cell(self, row: int, col: int) -> str | None:
        return self._board[row, col]

    def stats(self) -> GameStats:
        return GameStats(
            move_count=self.move_count,
            empty_cells=self._board.empty_count,
            player_counts=self._board.counts(self._config.players),
            status=self._status,
            winner=self._winner,
            current_player=self._current_player,
            board_size=self._config.board_size,
            win_length=self._config.win_length,
            can_undo=self.can_undo,
            can_redo=self.can_redo,
            legal_move_count=len(self.legal_moves()),
        )

    def render(self) -> str:
        return self._board.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        cfg = self._config
        return (
            f"GameEngine(size={cfg.board_size}, win_length={cfg.win_length}, "
            f"moves={self.move_count}, status={self._status})"
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _checked_cell(self, target: object, col: object = None) -> Cell:
        raw = resolve_target(target, col, self._config.board_size)
        cell = validate_placement(raw, self._board)
        if self._status is not GameStatus.ONGOING:
            raise GameStateError(f"Game is over. Status: {self._status}")
        return cell

    def _apply(
        self, cell: Cell, *, timestamp: int | None = None, from_redo: bool = False
    ) -> MoveResult:
        player = self._current_player
        self._board[cell] = player
        # A direct move invalidates everything that was undone.
        if not from_redo:
            self._redo_stack.clear()
        record = MoveRecord.create(cell, player, len(self._history) + 1, timestamp)
        self._history.append(record)
        self._refresh_status()
        if self._status is GameStatus.ONGOING:
            self._current_player = self._config.next_player(player)

        _LOGGER.debug("Played %s", record)
        self._emit(self.events.on_move, record, self)
        if self._status.is_over:
            _LOGGER.info("Game over: %s (winner: %s)", self._status, self._winner)
            self._emit(self.events.on_game_over, self._status, self._winner)

        return MoveResult(
            success=True,
            status=self._status,
            move=record,
            winner=self._winner,
            winning_line=self._winning_line,
        )

    @staticmethod
    def _emit(callbacks: Iterable[Callable[..., None]], *args: Any) -> None:
        # Listeners run after the state change is committed; a failing one
        # is logged and the rest still run.
        for cb in callbacks:
            try:
                cb(*args)
            except Exception:
                _LOGGER.exception("Event callback %r failed", cb)

    def _refresh_status(self) -> None:
        evaluation = Rules.evaluate(self._board, self._config.win_length)
        self._status = evaluation.status
        self._winner = evaluation.winner
        self._winning_line = evaluation.winning_line

    def _snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            config=self._config,
            board=self._board.copy(),
            current_player=self._current_player,
            history=tuple(self._history),
            status=self._status,
            winner=self._winner,
            winning_line=self._winning_line,
        )
