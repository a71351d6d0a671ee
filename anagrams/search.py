"""Sentence anagram search: exhaustive decomposition and a memoized variant.

Both strategies split the sentence's letter multiset into chunks that each
match at least one dictionary word, then expand every chunk list into
concrete sentences. They return the same set of sentences.
"""

from __future__ import annotations

import logging
from collections import Counter
from itertools import product

from anagrams.combinations import combinations
from anagrams.dictionary import Dictionary
from anagrams.occurrences import (
    Occurrences,
    add_char_occurrences,
    is_sub_occurrences,
    sentence_occurrences,
    subtract,
    to_char_occurrences,
    to_occurrences,
)

logger = logging.getLogger(__name__)

ExplorationMap = dict[Occurrences, list[Occurrences]]


def _to_sentences(chunks: list[Occurrences] | tuple[Occurrences, ...],
                  dictionary: Dictionary) -> list[list[str]]:
    """Every choice of one word per chunk, keeping chunk order."""
    choices = [dictionary.words_for(chunk) for chunk in chunks]
    return [list(words) for words in product(*choices)]


def sentence_anagrams(sentence: list[str], dictionary: Dictionary) -> list[list[str]]:
    """Return all anagram sentences of *sentence* built from *dictionary*.

    Two sentences with the same words in a different order are different
    anagrams. The empty sentence has exactly one anagram, itself.
    """
    decompositions = _decompositions(sentence_occurrences(sentence), dictionary)
    logger.debug("Found %d decompositions for %r", len(decompositions), sentence)

    results: list[list[str]] = []
    for chunks in decompositions:
        results.extend(_to_sentences(chunks, dictionary))
    return results


def _decompositions(occurrences: Occurrences,
                    dictionary: Dictionary) -> set[tuple[Occurrences, ...]]:
    """Split *occurrences* into ordered chunks that each key the dictionary."""
    found: set[tuple[Occurrences, ...]] = set()
    stack: list[tuple[Occurrences, tuple[Occurrences, ...]]] = [(occurrences, ())]

    while stack:
        remaining, chosen = stack.pop()
        if not remaining:
            found.add(chosen)
            continue
        # No matching chunk means a dead end: nothing is pushed
        for chunk in combinations(remaining):
            if chunk and dictionary.has_occurrences(chunk):
                stack.append((subtract(remaining, chunk), chosen + (chunk,)))

    return found


# ---------------------------------------------------------------------------
# Memoized search — explores each reachable letter state once
# ---------------------------------------------------------------------------

def find_anagrams(sentence: list[str], dictionary: Dictionary) -> list[list[str]]:
    """Same result as :func:`sentence_anagrams`, without re-solving shared
    sub-problems.

    States are partial letter multisets between the empty set and the
    sentence's multiset. A breadth-first pass records, for every reachable
    state, which states lead to it by adding one dictionary word. Anagrams
    are then read off by walking those links back from the full sentence.
    """
    target = to_char_occurrences(sentence_occurrences(sentence))
    candidates = {
        occurrences: to_char_occurrences(occurrences)
        for occurrences in dictionary.by_occurrences
        if is_sub_occurrences(target, dict(occurrences))
    }
    logger.debug("%d of %d signatures fit in %r",
                 len(candidates), len(dictionary.by_occurrences), sentence)

    explored = _explore(target, candidates)
    paths = _paths_to(to_occurrences(target), explored)

    results: list[list[str]] = []
    for chunks in paths:
        results.extend(_to_sentences(chunks, dictionary))
    return results


def _explore(target: Counter[str],
             candidates: dict[Occurrences, Counter[str]]) -> ExplorationMap:
    """Map every state reachable inside *target* to its predecessor states."""
    explored: ExplorationMap = {(): []}
    frontier: set[Occurrences] = {()}
    words_left = dict(candidates)

    while frontier:
        transitions: list[tuple[Occurrences, Occurrences, Occurrences]] = []
        for state in frontier:
            state_counts = to_char_occurrences(state)
            for word_key, word_counts in words_left.items():
                reached = add_char_occurrences(state_counts, word_counts)
                if is_sub_occurrences(target, reached):
                    transitions.append((to_occurrences(reached), state, word_key))

        newly_found = {reached for reached, _, _ in transitions if reached not in explored}

        # A word that fits on no frontier state fits on none of their supersets
        used = {word_key for _, _, word_key in transitions}
        words_left = {k: v for k, v in words_left.items() if k in used}

        for reached, previous, _ in transitions:
            predecessors = explored.setdefault(reached, [])
            if previous not in predecessors:
                predecessors.append(previous)

        frontier = newly_found

    logger.debug("Explored %d states", len(explored))
    return explored


def _paths_to(target: Occurrences, explored: ExplorationMap) -> list[list[Occurrences]]:
    """All chunk sequences leading from the empty state to *target*.

    Chunks are listed in the order they were consumed. An unreachable
    target has no paths; the empty target has one empty path.
    """
    paths: list[list[Occurrences]] = []
    stack: list[tuple[Occurrences, list[Occurrences]]] = [(target, [])]

    while stack:
        state, chunks = stack.pop()
        if not state:
            paths.append(chunks)
            continue
        for previous in explored.get(state, []):
            stack.append((previous, [subtract(state, previous)] + chunks))

    return paths
