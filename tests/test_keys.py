"""Tests for keyrush.core.keys – key normalization."""

from __future__ import annotations

from PySide6.QtCore import Qt

from keyrush.core.keys import BACKSPACE, is_character, is_deletion, normalize_qt_key


class TestIsDeletion:
    def test_backspace(self):
        assert is_deletion(BACKSPACE)

    def test_other_keys(self):
        assert not is_deletion("b")
        assert not is_deletion("Delete")


class TestIsCharacter:
    def test_letter(self):
        assert is_character("a")

    def test_space(self):
        assert is_character(" ")

    def test_punctuation(self):
        assert is_character("?")

    def test_named_keys_rejected(self):
        assert not is_character("Shift")
        assert not is_character("ArrowLeft")
        assert not is_character(BACKSPACE)

    def test_empty(self):
        assert not is_character("")

    def test_control_characters_rejected(self):
        assert not is_character("\t")
        assert not is_character("\n")


class TestNormalizeQtKey:
    def test_backspace(self):
        assert normalize_qt_key(Qt.Key.Key_Backspace, "\b") == BACKSPACE

    def test_letter(self):
        assert normalize_qt_key(Qt.Key.Key_A, "a") == "a"

    def test_shifted_letter(self):
        assert normalize_qt_key(Qt.Key.Key_A, "A") == "A"

    def test_modifier_ignored(self):
        assert normalize_qt_key(Qt.Key.Key_Shift, "") is None

    def test_tab_ignored(self):
        assert normalize_qt_key(Qt.Key.Key_Tab, "\t") is None
