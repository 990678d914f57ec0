from __future__ import annotations

import enum
import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from keyrush.core import metrics
from keyrush.core.dictionary import load_dictionary
from keyrush.core.keys import is_character, is_deletion
from keyrush.core.options import GameOptions
from keyrush.core.textgen import TextGenerator

logger = logging.getLogger(__name__)


class CharacterState(enum.Enum):
    Unreached = 0
    Correct = 1
    Incorrect = 2


class GameState(enum.Enum):
    NotStarted = 0
    Started = 1
    Ended = 2


def _monotonic_ms() -> float:
    """Milliseconds from a clock that never goes backwards."""
    return time.monotonic() * 1000


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game and its derived scores at one instant."""

    text: str
    character_states: Tuple[CharacterState, ...]
    cursor_position: int
    mistake_positions: Tuple[int, ...]
    corrected_mistakes: int
    typed_characters: int
    game_state: GameState
    start_time: Optional[float]
    end_time: Optional[float]
    metrics: metrics.Metrics


class TypingGame(QObject):
    """Tracks one pass of typing a practice text.

    ``handle_key`` is the only way to change the game. Everything else is a
    read-only view; derived scores are recomputed on each read. Signals fire
    after a key has been fully applied.
    """

    characterStateChanged = Signal(int, object)
    cursorMoved = Signal(int)
    gameStateChanged = Signal(object)
    mistakeMade = Signal(int)
    changed = Signal()

    def __init__(
        self,
        options: Optional[GameOptions] = None,
        words: Optional[Sequence[str]] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._options = options if options is not None else GameOptions()
        self._clock = clock if clock is not None else _monotonic_ms

        if self._options.text is not None:
            text = self._options.text
        else:
            generator = TextGenerator(words if words is not None else load_dictionary(), rng=rng)
            text = generator.generate(
                self._options.approximate_text_length,
                uppercase=self._options.generate_uppercase_letters,
                special=self._options.generate_special_characters,
            )
        if not text:
            raise ValueError("Practice text must not be empty")

        self._text = text
        self._character_states: List[CharacterState] = [CharacterState.Unreached] * len(text)
        self._cursor = 0
        self._game_state = GameState.NotStarted
        self._mistake_positions: List[int] = []
        self._corrected_mistakes = 0
        self._typed_characters = 0
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None

    # -- state ---------------------------------------------------------------

    @property
    def options(self) -> GameOptions:
        """Configuration this game was created with."""
        return self._options

    @property
    def text(self) -> str:
        """The practice text being typed."""
        return self._text

    @property
    def character_states(self) -> Tuple[CharacterState, ...]:
        """State of every character, index-aligned with the text."""
        return tuple(self._character_states)

    @property
    def cursor_position(self) -> int:
        """Index of the next character to type (0-based)."""
        return self._cursor

    @property
    def mistake_positions(self) -> Tuple[int, ...]:
        """Indices of wrong keystrokes, in order, repeats included."""
        return tuple(self._mistake_positions)

    @property
    def corrected_mistakes(self) -> int:
        """Number of mistakes later retyped correctly."""
        return self._corrected_mistakes

    @property
    def typed_characters(self) -> int:
        """Number of forward keystrokes, right or wrong."""
        return self._typed_characters

    @property
    def game_state(self) -> GameState:
        """Whether the game has not started, is running or has ended."""
        return self._game_state

    @property
    def start_time(self) -> Optional[float]:
        """Clock reading in milliseconds at the first keystroke."""
        return self._start_time

    @property
    def end_time(self) -> Optional[float]:
        """Clock reading in milliseconds when the last character was typed."""
        return self._end_time

    # -- derived -------------------------------------------------------------

    @property
    def cursor_character(self) -> Optional[str]:
        """Character under the cursor, None once the text is done."""
        return metrics.cursor_character(self._text, self._cursor)

    @property
    def mistakes(self) -> int:
        """Total number of wrong keystrokes."""
        return metrics.mistake_count(self._mistake_positions)

    @property
    def accuracy(self) -> Optional[int]:
        """Accuracy percentage, None until something has been typed."""
        return metrics.accuracy(self._typed_characters, self.mistakes)

    @property
    def wpm(self) -> float:
        """Net words per minute, 0.0 until the game has ended."""
        return metrics.words_per_minute(
            self._typed_characters,
            self._start_time,
            self._end_time,
            self.mistakes,
            self._corrected_mistakes,
        )

    @property
    def cps(self) -> float:
        """Net characters per second, 0.0 until the game has ended."""
        return metrics.characters_per_second(
            self._typed_characters,
            self._start_time,
            self._end_time,
            self.mistakes,
            self._corrected_mistakes,
        )

    def current_metrics(self) -> metrics.Metrics:
        """All derived scores at this instant."""
        return metrics.compute_metrics(
            self._text,
            self._cursor,
            self._mistake_positions,
            self._corrected_mistakes,
            self._typed_characters,
            self._start_time,
            self._end_time,
        )

    def snapshot(self) -> GameSnapshot:
        """Frozen copy of every piece of game state plus the current scores."""
        return GameSnapshot(
            text=self._text,
            character_states=self.character_states,
            cursor_position=self._cursor,
            mistake_positions=self.mistake_positions,
            corrected_mistakes=self._corrected_mistakes,
            typed_characters=self._typed_characters,
            game_state=self._game_state,
            start_time=self._start_time,
            end_time=self._end_time,
            metrics=self.current_metrics(),
        )

    # -- input ---------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        """Apply one normalized key: a single printable character or ``BACKSPACE``."""
        if self._game_state is GameState.Ended:
            logger.debug("Ignoring key %r after game ended", key)
            return

        if is_deletion(key):
            self._remove_character()
        elif is_character(key):
            self._type_character(key)
        else:
            logger.debug("Ignoring key %r", key)

    def _remove_character(self) -> None:
        if self._cursor == 0:
            return
        self._cursor -= 1
        self._character_states[self._cursor] = CharacterState.Unreached

        self.characterStateChanged.emit(self._cursor, CharacterState.Unreached)
        self.cursorMoved.emit(self._cursor)
        self.changed.emit()

    def _type_character(self, character: str) -> None:
        started = self._game_state is GameState.NotStarted
        if started:
            self._start_time = self._clock()
            self._game_state = GameState.Started
            logger.info("Game started (%d characters)", len(self._text))

        position = self._cursor
        mistake = character != self._text[position]
        if mistake:
            self._character_states[position] = CharacterState.Incorrect
            self._mistake_positions.append(position)
        else:
            if position in self._mistake_positions:
                self._corrected_mistakes += 1
            self._character_states[position] = CharacterState.Correct

        self._typed_characters += 1
        self._cursor += 1

        ended = self._cursor == len(self._text)
        if ended:
            self._end_time = self._clock()
            self._game_state = GameState.Ended
            logger.info(
                "Game ended: %.1f wpm, %.1f cps, %s%% accuracy",
                self.wpm,
                self.cps,
                self.accuracy,
            )

        if started:
            self.gameStateChanged.emit(GameState.Started)
        self.characterStateChanged.emit(position, self._character_states[position])
        if mistake:
            self.mistakeMade.emit(position)
        self.cursorMoved.emit(self._cursor)
        if ended:
            self.gameStateChanged.emit(GameState.Ended)
        self.changed.emit()
