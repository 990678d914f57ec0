from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence

MIN_SENTENCE_WORDS = 10
MAX_SENTENCE_WORDS = 20


class TextGenerator:
    """Builds practice paragraphs from a word list.

    All randomness goes through the injected ``rng`` so a seeded
    ``random.Random`` always produces the same paragraph.
    """

    def __init__(self, words: Sequence[str], rng: Optional[random.Random] = None) -> None:
        if not words:
            raise ValueError("Text generator needs a non-empty word list")
        for word in words:
            if not isinstance(word, str) or not word.strip():
                raise ValueError(f"Text generator word list contains a blank word: {word!r}")
        self._words: List[str] = list(words)
        self._rng = rng if rng is not None else random.Random()

    @property
    def words(self) -> List[str]:
        """Copy of the word list sentences are drawn from."""
        return list(self._words)

    def random_integer(self, low: float, high: float) -> int:
        """Draw an integer in ``[low, high]``; bounds may be fractional."""
        return math.floor(self._rng.random() * (high - low + 1) + low)

    def generate_sentence(self, uppercase: bool = True, special: bool = True) -> str:
        """Build one sentence of 10 to 20 words."""
        word_count = self.random_integer(MIN_SENTENCE_WORDS, MAX_SENTENCE_WORDS)

        has_comma = special and self.random_integer(0, 5) == 0
        has_hyphen = special and not has_comma and self.random_integer(0, 100) == 0

        # somewhere in the middle half of the sentence
        extra_position = self.random_integer(word_count * 0.25, word_count * 0.75)

        words: List[str] = []
        for i in range(word_count):
            word = self._words[self.random_integer(0, len(self._words) - 1)]

            if uppercase:
                if self.random_integer(0, 200) == 0:
                    word = word.upper()
                elif i == 0 or self.random_integer(0, 50) == 0:
                    word = word[0].upper() + word[1:]

            if has_comma and i == extra_position:
                word += ","

            words.append(word)

            if has_hyphen and i == extra_position:
                words.append("-")

        sentence = " ".join(words)

        if special:
            chance = self.random_integer(0, 10)
            if chance <= 5:
                sentence += "."
            elif chance <= 7:
                sentence += "?"
            else:
                sentence += "!"

        return sentence

    def generate(self, approximate_length: int, uppercase: bool = True, special: bool = True) -> str:
        """Join sentences until the paragraph reaches ``approximate_length``.

        At least one sentence is always produced, and the result may overshoot
        the target by up to one sentence.
        """
        sentences: List[str] = []
        while True:
            sentences.append(self.generate_sentence(uppercase, special))
            if len(" ".join(sentences)) >= approximate_length:
                break
        return " ".join(sentences)


def generate_text(
    words: Sequence[str],
    approximate_length: int,
    uppercase: bool = True,
    special: bool = True,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate a paragraph with a throwaway :class:`TextGenerator`."""
    return TextGenerator(words, rng=rng).generate(approximate_length, uppercase, special)
