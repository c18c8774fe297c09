"""Qt integration — exposes a :class:`GameEngine` through signals and slots."""

from gridtac.qt.bridge import EngineBridge

__all__ = ["EngineBridge"]
