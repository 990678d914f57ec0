from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

# Average English word length, the usual WPM denominator.
CHARACTERS_PER_WORD = 5


@dataclass(frozen=True)
class Metrics:
    """Derived scores for a game at one instant."""

    wpm: float
    cps: float
    accuracy: Optional[int]
    mistakes: int
    cursor_character: Optional[str]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _round_one_decimal(value: float) -> float:
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def cursor_character(text: str, cursor: int) -> Optional[str]:
    """Character the user has to type next; None once the text is done."""
    if 0 <= cursor < len(text):
        return text[cursor]
    return None


def mistake_count(mistake_positions: Sequence[int]) -> int:
    """Number of mistakes made, repeated attempts at one index included."""
    return len(mistake_positions)


def accuracy(typed_characters: int, mistakes: int) -> Optional[int]:
    """Percentage of keystrokes without a mistake, or None before any typing."""
    if typed_characters == 0:
        return None
    return _round_half_up((typed_characters - mistakes) / typed_characters * 100)


def _net_speed(
    amount: float,
    elapsed: float,
    mistakes: int,
    corrected_mistakes: int,
) -> float:
    if elapsed <= 0:
        return 0.0
    gross = amount / elapsed
    error_rate = (mistakes - corrected_mistakes) / elapsed
    return _round_one_decimal(gross - error_rate)


def words_per_minute(
    typed_characters: int,
    start_time: Optional[float],
    end_time: Optional[float],
    mistakes: int,
    corrected_mistakes: int,
) -> float:
    """Net WPM: gross words per minute minus uncorrected mistakes per minute.

    Times are in milliseconds. Returns 0.0 until both timestamps exist.
    """
    if start_time is None or end_time is None:
        return 0.0
    elapsed_minutes = (end_time - start_time) / 60000
    return _net_speed(
        typed_characters / CHARACTERS_PER_WORD, elapsed_minutes, mistakes, corrected_mistakes
    )


def characters_per_second(
    typed_characters: int,
    start_time: Optional[float],
    end_time: Optional[float],
    mistakes: int,
    corrected_mistakes: int,
) -> float:
    """Net CPS, shaped like :func:`words_per_minute` but per second and per character."""
    if start_time is None or end_time is None:
        return 0.0
    elapsed_seconds = (end_time - start_time) / 1000
    return _net_speed(typed_characters, elapsed_seconds, mistakes, corrected_mistakes)


def compute_metrics(
    text: str,
    cursor: int,
    mistake_positions: Sequence[int],
    corrected_mistakes: int,
    typed_characters: int,
    start_time: Optional[float],
    end_time: Optional[float],
) -> Metrics:
    mistakes = mistake_count(mistake_positions)
    return Metrics(
        wpm=words_per_minute(typed_characters, start_time, end_time, mistakes, corrected_mistakes),
        cps=characters_per_second(typed_characters, start_time, end_time, mistakes, corrected_mistakes),
        accuracy=accuracy(typed_characters, mistakes),
        mistakes=mistakes,
        cursor_character=cursor_character(text, cursor),
    )
