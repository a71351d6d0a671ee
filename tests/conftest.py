"""Shared fixtures for anagram tests."""

from __future__ import annotations

import pytest

from anagrams.dictionary import Dictionary


@pytest.fixture
def small_dictionary() -> Dictionary:
    """Hand-picked words inserted directly via _insert(). No file I/O."""
    d = Dictionary()
    words = [
        # "Yes man"
        "en", "as", "my", "man", "yes", "men", "say", "sane", "Sean",
        # "Linux rulez"
        "Rex", "Lin", "nil", "Zulu", "null", "Uzi", "Linux", "rulez",
        # "I love you"
        "I", "love", "you", "olive",
        # Unrelated anagram groups
        "ate", "eat", "tea", "abba", "team", "mate", "meat",
    ]
    for w in words:
        d._insert(w)
    return d


@pytest.fixture
def yes_man_anagrams() -> list[list[str]]:
    return [
        ["en", "as", "my"], ["en", "my", "as"], ["man", "yes"],
        ["men", "say"], ["as", "en", "my"], ["as", "my", "en"],
        ["sane", "my"], ["Sean", "my"], ["my", "en", "as"],
        ["my", "as", "en"], ["my", "sane"], ["my", "Sean"],
        ["say", "men"], ["yes", "man"],
    ]


@pytest.fixture
def linux_rulez_anagrams() -> list[list[str]]:
    return [
        ["Rex", "Lin", "Zulu"], ["nil", "Zulu", "Rex"], ["Rex", "nil", "Zulu"],
        ["Zulu", "Rex", "Lin"], ["null", "Uzi", "Rex"], ["Rex", "Zulu", "Lin"],
        ["Uzi", "null", "Rex"], ["Rex", "null", "Uzi"], ["null", "Rex", "Uzi"],
        ["Lin", "Rex", "Zulu"], ["nil", "Rex", "Zulu"], ["Rex", "Uzi", "null"],
        ["Rex", "Zulu", "nil"], ["Zulu", "Rex", "nil"], ["Zulu", "Lin", "Rex"],
        ["Lin", "Zulu", "Rex"], ["Uzi", "Rex", "null"], ["Zulu", "nil", "Rex"],
        ["rulez", "Linux"], ["Linux", "rulez"],
    ]
