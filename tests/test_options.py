"""Tests for keyrush.core.options – game configuration."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from keyrush.core.options import GameOptions, load_options


# ---------------------------------------------------------------------------
# GameOptions defaults
# ---------------------------------------------------------------------------

class TestGameOptions:
    def test_defaults(self):
        opts = GameOptions()
        assert opts.text is None
        assert opts.approximate_text_length == 300
        assert opts.generate_uppercase_letters is True
        assert opts.generate_special_characters is True

    def test_frozen(self):
        opts = GameOptions()
        with pytest.raises(AttributeError):
            opts.text = "x"


# ---------------------------------------------------------------------------
# GameOptions.from_mapping
# ---------------------------------------------------------------------------

class TestFromMapping:
    def test_empty_mapping(self):
        assert GameOptions.from_mapping({}) == GameOptions()

    def test_all_fields(self):
        opts = GameOptions.from_mapping(
            {
                "text": "hello",
                "approximate_text_length": 50,
                "generate_uppercase_letters": False,
                "generate_special_characters": False,
            }
        )
        assert opts == GameOptions("hello", 50, False, False)

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown"):
            GameOptions.from_mapping({"colour": "red"})

    def test_text_must_be_string(self):
        with pytest.raises(ValueError):
            GameOptions.from_mapping({"text": 12})

    def test_length_must_be_int(self):
        with pytest.raises(ValueError):
            GameOptions.from_mapping({"approximate_text_length": "long"})

    def test_length_bool_rejected(self):
        with pytest.raises(ValueError):
            GameOptions.from_mapping({"approximate_text_length": True})

    def test_negative_length(self):
        with pytest.raises(ValueError):
            GameOptions.from_mapping({"approximate_text_length": -1})

    def test_flag_must_be_bool(self):
        with pytest.raises(ValueError):
            GameOptions.from_mapping({"generate_special_characters": "yes please"})


# ---------------------------------------------------------------------------
# load_options
# ---------------------------------------------------------------------------

class TestLoadOptions:
    def test_loads_yaml(self, tmp_path: Path):
        f = tmp_path / "game.yaml"
        f.write_text(
            textwrap.dedent(
                """\
                approximate_text_length: 120
                generate_uppercase_letters: false
                """
            ),
            encoding="utf-8",
        )
        opts = load_options(f)
        assert opts.approximate_text_length == 120
        assert opts.generate_uppercase_letters is False
        assert opts.generate_special_characters is True

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        f = tmp_path / "game.yaml"
        f.write_text("", encoding="utf-8")
        assert load_options(f) == GameOptions()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_options(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path: Path):
        f = tmp_path / "game.yaml"
        f.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_options(f)
