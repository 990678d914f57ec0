from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml


@dataclass(frozen=True)
class GameOptions:
    """Per-game configuration.

    When ``text`` is supplied it is used verbatim and the generation options
    are ignored.
    """

    text: Optional[str] = None
    approximate_text_length: int = 300
    generate_uppercase_letters: bool = True
    generate_special_characters: bool = True

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> GameOptions:
        """Build options from a plain dict such as parsed YAML, validating types."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown game option(s): {', '.join(unknown)}")

        text = raw.get("text")
        if text is not None and not isinstance(text, str):
            raise ValueError("'text' must be a string")

        length = raw.get("approximate_text_length", cls.approximate_text_length)
        # bool is an int subclass
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError("'approximate_text_length' must be an integer")
        if length < 0:
            raise ValueError("'approximate_text_length' must not be negative")

        flags = {}
        for name in ("generate_uppercase_letters", "generate_special_characters"):
            value = raw.get(name, getattr(cls, name))
            if not isinstance(value, bool):
                raise ValueError(f"'{name}' must be true or false")
            flags[name] = value

        return cls(text=text, approximate_text_length=length, **flags)


def load_options(path: Path) -> GameOptions:
    """Read game options from a YAML mapping. An empty file gives the defaults."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return GameOptions()
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a YAML mapping of game options")
    return GameOptions.from_mapping(raw)
