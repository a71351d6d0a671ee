"""Enumeration of every sub-multiset of an occurrence list."""

from __future__ import annotations

from anagrams.occurrences import Occurrences


def combinations(occurrences: Occurrences) -> list[Occurrences]:
    """Return all subsets of *occurrences*, including ``()`` and itself.

    For ``(("a", 2), ("b", 2))`` that is nine entries, from ``()`` through
    ``(("a", 2), ("b", 2))``. Order of the result is not significant.
    """
    partials: list[Occurrences] = [()]
    # Walk backwards so prepending keeps every partial sorted by character
    for ch, max_count in reversed(occurrences):
        partials = [
            ((ch, count),) + partial if count else partial
            for count in range(max_count + 1)
            for partial in partials
        ]
    return partials
