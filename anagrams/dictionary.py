"""Word dictionary grouped by letter-occurrence signature."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from anagrams.constants import DEFAULT_WORDLIST
from anagrams.occurrences import Occurrences, word_occurrences

logger = logging.getLogger(__name__)


class Dictionary:
    """Ordered word list with an index from occurrences to matching words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: list[str] = []
        self._by_occurrences: dict[Occurrences, tuple[str, ...]] = {}
        self.add_words(words)

    def load(self, path: str | Path) -> None:
        """Load words from a file (one word per line).

        A missing, unreadable or non-UTF-8 file is logged and re-raised;
        there is no useful fallback without a word list.
        """
        try:
            with open(path, encoding="utf-8") as f:
                lines = [line.strip() for line in f]
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not load word list %s: %s", path, e)
            raise
        # Nothing is indexed until the whole file has been read
        before = self.word_count
        self.add_words(lines)
        logger.info("Loaded %d words from %s", self.word_count - before, path)

    def add_words(self, words: Iterable[str]) -> None:
        for word in words:
            self._insert(word)

    def _insert(self, word: str) -> None:
        # The empty key would match every exhausted remainder
        if not word:
            return
        key = word_occurrences(word)
        group = self._by_occurrences.get(key, ())
        if word not in group:
            self._by_occurrences[key] = group + (word,)
            self._words.append(word)

    @property
    def by_occurrences(self) -> Mapping[Occurrences, tuple[str, ...]]:
        return MappingProxyType(self._by_occurrences)

    def has_occurrences(self, occurrences: Occurrences) -> bool:
        return occurrences in self._by_occurrences

    def words_for(self, occurrences: Occurrences) -> list[str]:
        """All words whose letters are exactly *occurrences*."""
        return list(self._by_occurrences.get(occurrences, ()))

    def word_anagrams(self, word: str) -> list[str]:
        """All dictionary words sharing *word*'s letters, itself included."""
        return self.words_for(word_occurrences(word))

    @property
    def words(self) -> list[str]:
        return list(self._words)

    @property
    def word_count(self) -> int:
        return len(self._words)


def load_default_dictionary(path: str | Path | None = None) -> Dictionary:
    """Load the word list from the data/ directory (or *path*)."""
    path = Path(path) if path is not None else DEFAULT_WORDLIST
    if not path.exists():
        logger.error("Word list not found at %s", path)
        raise FileNotFoundError(
            f"Dictionary not found at {path}. "
            f"Place a word list (one word per line) at {DEFAULT_WORDLIST}"
        )
    d = Dictionary()
    d.load(path)
    return d
