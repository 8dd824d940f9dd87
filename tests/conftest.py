"""Shared fixtures."""

from pathlib import Path

import pytest

from nordum.core.index import DictionaryEntry, DictionaryIndex, PartOfSpeech


FIXTURE_DICTIONARY = Path(__file__).parent / "fixtures" / "dictionary.json"


def make_entry(key, english="gloss", frequency=0, nordum=None, sources=None, pos=PartOfSpeech.NOUN):
    return DictionaryEntry(
        key=key,
        nordum=nordum or key,
        english=english,
        part_of_speech=pos,
        frequency=frequency,
        sources=sources or {},
    )


@pytest.fixture
def fixture_path():
    return FIXTURE_DICTIONARY


@pytest.fixture
def small_index():
    return DictionaryIndex.build([
        make_entry("hus", "house", 10),
        make_entry("huset", "the house", 50),
        make_entry("hund", "dog", 35),
        make_entry("bok", "book", 40, sources={"danish": "bog"}),
        make_entry("og", "and", 99, pos=PartOfSpeech.OTHER),
        make_entry("vann", "water", 60, sources={"swedish": "vatten", "danish": "vand"}),
    ])
