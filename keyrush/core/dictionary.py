from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml

DEFAULT_DICTIONARY = Path(__file__).resolve().parent.parent / "data" / "dictionary.yaml"


def load_dictionary(path: Optional[Path] = None) -> List[str]:
    """Load an ordered list of lowercase words from YAML.

    The file holds either a plain list or a mapping with a ``words`` list.
    Entries are stripped and lower-cased, blanks are dropped and the original
    order (including duplicates) is kept.
    """
    path = Path(path) if path is not None else DEFAULT_DICTIONARY
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("words")
    if not isinstance(raw, list):
        raise ValueError(f"{path.name}: expected a list of words or a mapping with 'words'")

    words = [str(item).strip().lower() for item in raw if item is not None and str(item).strip()]
    if not words:
        raise ValueError(f"{path.name}: dictionary has no words")
    return words
