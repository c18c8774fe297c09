"""Game configuration value object."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from gridtac.core.errors import ConfigurationError

MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 10
MIN_WIN_LENGTH = 3
MIN_PLAYERS = 2

# Exported-state key -> field name
_CAMEL_KEYS: dict[str, str] = {
    "boardSize": "board_size",
    "winLength": "win_length",
    "players": "players",
    "startingPlayer": "starting_player",
}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable, validated board/player configuration.

    Construction validates every field; an invalid combination raises
    :class:`ConfigurationError` and no instance is produced.
    """

    board_size: int = 3
    win_length: int = 3
    players: tuple[str, ...] = field(default=("X", "O"))
    starting_player: str = "X"

    def __post_init__(self) -> None:
        # Lists (e.g. from JSON) are normalised to a tuple.
        if isinstance(self.players, (list, tuple)):
            object.__setattr__(self, "players", tuple(self.players))
        self.validate()

    def validate(self) -> None:
        size, win = self.board_size, self.win_length
        if not _is_int(size) or not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            raise ConfigurationError(
                f"Board size must be an integer between {MIN_BOARD_SIZE} "
                f"and {MAX_BOARD_SIZE}, got {size!r}"
            )
        if not _is_int(win) or not MIN_WIN_LENGTH <= win <= size:
            raise ConfigurationError(
                f"Win length must be an integer between {MIN_WIN_LENGTH} "
                f"and board size ({size}), got {win!r}"
            )

        players = self.players
        if not isinstance(players, tuple) or len(players) < MIN_PLAYERS:
            raise ConfigurationError(f"Must have at least {MIN_PLAYERS} players")
        for symbol in players:
            if not isinstance(symbol, str) or not symbol:
                raise ConfigurationError(
                    f"Player symbols must be non-empty strings, got {symbol!r}"
                )
        if len(set(players)) != len(players):
            raise ConfigurationError(f"Player symbols must be unique: {players!r}")
        if self.starting_player not in players:
            raise ConfigurationError(
                f"Starting player {self.starting_player!r} must be one of "
                f"the configured players {players!r}"
            )

    # ── Derived helpers ──────────────────────────────────────────────────

    @property
    def cell_count(self) -> int:
        return self.board_size * self.board_size

    def next_player(self, symbol: str) -> str:
        """Player after *symbol* in configured order (wraps around)."""
        idx = self.players.index(symbol)
        return self.players[(idx + 1) % len(self.players)]

    # ── Construction / merge ─────────────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> GameConfig:
        """Build a config from snake_case or exported camelCase keys."""
        return cls().merged(data)

    def merged(self, overrides: Mapping[str, Any] | None) -> GameConfig:
        """Return a new validated config with *overrides* applied on top."""
        if not overrides:
            return self
        if not isinstance(overrides, Mapping):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(overrides).__name__}"
            )

        names = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in names:
                raise ConfigurationError(f"Unknown configuration option: {key!r}")
            changes[name] = _coerce_players(value) if name == "players" else value

        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly mapping using exported-state key names."""
        return {
            "boardSize": self.board_size,
            "winLength": self.win_length,
            "players": list(self.players),
            "startingPlayer": self.starting_player,
        }


def _coerce_players(value: object) -> object:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ConfigurationError(
            f"Players must be a sequence of symbols, got {value!r}"
        )
    return tuple(value)


DEFAULT_CONFIG = GameConfig()
