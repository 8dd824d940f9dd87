"""Tests for Levenshtein distance."""

import itertools

import pytest

from nordum.core.distance import length_gap_exceeds, levenshtein


WORDS = ["", "a", "hus", "huset", "hund", "kitten", "sitting", "går", "gar"]


def test_kitten_sitting():
    assert levenshtein("kitten", "sitting") == 3


@pytest.mark.parametrize("a,b,expected", [
    ("hus", "huset", 2),
    ("hund", "hus", 2),
    ("bok", "bog", 1),
    ("flaw", "lawn", 2),
    ("går", "gar", 1),
    ("abc", "cab", 2),
])
def test_known_distances(a, b, expected):
    assert levenshtein(a, b) == expected


@pytest.mark.parametrize("word", WORDS)
def test_identity(word):
    assert levenshtein(word, word) == 0


@pytest.mark.parametrize("word", WORDS)
def test_empty_string(word):
    assert levenshtein("", word) == len(word)
    assert levenshtein(word, "") == len(word)


def test_symmetric():
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein(a, b) == levenshtein(b, a)


def test_triangle_inequality():
    for a, b, c in itertools.product(WORDS, repeat=3):
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


def test_length_gap():
    assert length_gap_exceeds("en", "snakker", 2)
    assert not length_gap_exceeds("hus", "huset", 2)
    assert not length_gap_exceeds("", "ab", 2)
