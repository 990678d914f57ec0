"""Normalized key identifiers consumed by the typing game."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt

BACKSPACE = "Backspace"


def is_deletion(key: str) -> bool:
    """True for the backspace marker."""
    return key == BACKSPACE


def is_character(key: str) -> bool:
    """True for exactly one printable character (space included)."""
    return isinstance(key, str) and len(key) == 1 and key.isprintable()


def normalize_qt_key(key: int, text: str) -> Optional[str]:
    """Map a Qt key event's ``key()`` and ``text()`` to a game key, or None."""
    if key == Qt.Key.Key_Backspace:
        return BACKSPACE
    if text and is_character(text):
        return text
    return None
