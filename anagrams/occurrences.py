"""Letter-occurrence multisets: the canonical key for anagram lookup.

Two representations are used:

* ``Occurrences`` — a sorted tuple of ``(char, count)`` pairs with positive
  counts. Hashable, so it can key dictionaries and sets.
* ``CharOccurrences`` — a ``Counter`` with the same content, used where
  counts are added or removed repeatedly.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

Occurrences = tuple[tuple[str, int], ...]


def word_occurrences(word: str) -> Occurrences:
    """Lower-case *word* and count each character, sorted by character."""
    return to_occurrences(Counter(word.lower()))


def sentence_occurrences(sentence: Iterable[str]) -> Occurrences:
    return word_occurrences("".join(sentence))


def to_char_occurrences(occurrences: Occurrences) -> Counter[str]:
    return Counter(dict(occurrences))


def to_occurrences(char_occurrences: Mapping[str, int]) -> Occurrences:
    return tuple(sorted((ch, n) for ch, n in char_occurrences.items() if n > 0))


def is_sub_occurrences(occurrences: Mapping[str, int],
                       sub_occurrences: Mapping[str, int]) -> bool:
    """True if every character of *sub_occurrences* appears in *occurrences*
    at least as often."""
    return all(occurrences.get(ch, 0) >= n for ch, n in sub_occurrences.items())


def add_char_occurrences(a: Mapping[str, int], b: Mapping[str, int]) -> Counter[str]:
    total = Counter(a)
    total.update(b)
    return +total


def subtract_char_occurrences(a: Mapping[str, int], b: Mapping[str, int]) -> Counter[str]:
    """Remove *b*'s counts from *a*. *b* must be contained in *a*."""
    if not is_sub_occurrences(a, b):
        raise ValueError(f"Cannot subtract {dict(b)} from {dict(a)}: not a sub-multiset")
    rest = Counter(a)
    rest.subtract(b)
    return +rest  # drop characters that reached zero


def subtract(x: Occurrences, y: Occurrences) -> Occurrences:
    """Subtract occurrence list *y* from *x*.

    Raises ValueError if some character of *y* is missing from *x* or
    appears there fewer times. The result is sorted and has no zero entries.
    """
    return to_occurrences(subtract_char_occurrences(dict(x), dict(y)))
