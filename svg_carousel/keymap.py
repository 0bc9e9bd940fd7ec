"""Keyboard bindings for the carousel window.

Keep this module free of widget code so the bindings can be tested without a
window.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

from .carousel import Command

_LEFT_KEYS = (Qt.Key.Key_Left, Qt.Key.Key_H)
_RIGHT_KEYS = (Qt.Key.Key_Right, Qt.Key.Key_L)
_CLOSE_KEYS = (Qt.Key.Key_Escape, Qt.Key.Key_Q)


def _has_shift(modifiers: Qt.KeyboardModifier) -> bool:
    return bool(modifiers & Qt.KeyboardModifier.ShiftModifier)


def command_for_key(
    key: Qt.Key | int,
    modifiers: Qt.KeyboardModifier = Qt.KeyboardModifier.NoModifier,
) -> Command | None:
    """Map a key press to a carousel command.

    Shift turns Left/H into a jump to the first item and Right/L into a jump to
    the last one. Returns None for keys that have no binding.
    """
    if key in _LEFT_KEYS:
        return Command.CHANGE_TO_START if _has_shift(modifiers) else Command.CHANGE_LEFT
    if key in _RIGHT_KEYS:
        return Command.CHANGE_TO_END if _has_shift(modifiers) else Command.CHANGE_RIGHT
    if key in _CLOSE_KEYS:
        return Command.REQUEST_CLOSE
    return None
