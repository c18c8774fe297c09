"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from gridtac.game.engine import GameEngine

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def engine() -> GameEngine:
    """Fresh default 3×3 game."""
    return GameEngine()


def _play(game: GameEngine, *targets: object) -> None:
    for target in targets:
        result = game.move(target)
        assert result.success, f"move {target!r} rejected: {result.error}"


@pytest.fixture
def play() -> Callable[..., None]:
    """Play targets in order, failing the test on the first rejected move."""
    return _play
