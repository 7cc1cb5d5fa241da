"""WordList — the "is this a word" oracle plus ordered enumeration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class WordList:
    """Case-insensitive word set that remembers insertion order.

    Iteration order matters: the automated player breaks score ties in
    favour of the word it sees first.
    """

    def __init__(self, words: Iterable[str]) -> None:
        ordered: dict[str, None] = {}
        for w in words:
            w = w.strip().upper()
            if w:
                ordered[w] = None
        self._words = tuple(ordered)
        self._lookup = frozenset(self._words)

    @classmethod
    def from_file(cls, path: Path) -> WordList:
        """Load one word per line. Raises if the file has no words."""
        with open(path, encoding="utf-8") as f:
            wl = cls(f)
        if not wl._words:
            raise ValueError(f"Dictionary file is empty: {path}")
        logger.info("Loaded %d words from %s", wl.word_count, path)
        return wl

    def is_valid_word(self, word: str) -> bool:
        if not word or not word.strip():
            return False
        return word.strip().upper() in self._lookup

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @property
    def word_count(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __iter__(self):
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)
