# src/nordum/core/lexicon.py
"""
Lexicon: owner of the current dictionary index.

Query components hold the index by reference. Reloading builds a complete
new index and swaps it in with one assignment, so readers never see a
partially built dictionary.
"""

from pathlib import Path

from nordum.core.errors import DictionaryUnavailable, MalformedEntry
from nordum.core.index import DictionaryEntry, DictionaryIndex
from nordum.core.loader import load_dictionary
from nordum.core.search import SearchEngine, SearchFilter
from nordum.core.spellcheck import SpellChecker, SpellCheckResult


class _Engines:
    def __init__(self, index: DictionaryIndex):
        self.index = index
        self.search = SearchEngine(index)
        self.spell = SpellChecker(index)


class Lexicon:
    def __init__(self, index: DictionaryIndex | None = None):
        self._engines = _Engines(index or DictionaryIndex.empty())

    @classmethod
    def from_path(cls, path: Path | str) -> "Lexicon":
        """Load from a file; an unreadable or malformed dictionary gives an empty lexicon."""
        try:
            return cls(load_dictionary(path))
        except (DictionaryUnavailable, MalformedEntry) as e:
            print(f"✗ Dictionary unavailable: {e}")
            return cls()

    @property
    def index(self) -> DictionaryIndex:
        return self._engines.index

    def replace(self, index: DictionaryIndex) -> None:
        self._engines = _Engines(index)

    def reload(self, path: Path | str) -> DictionaryIndex:
        """
        Replace the index from a file.

        MalformedEntry and DictionaryUnavailable propagate and the current
        index stays in place.
        """
        index = load_dictionary(path)
        self.replace(index)
        return index

    # === Query operations ===

    def search(
        self,
        query: str,
        scope: SearchFilter | str = SearchFilter.ALL,
    ) -> list[DictionaryEntry]:
        return self._engines.search.search(query, scope)

    def words_by_letter(self, letter: str) -> list[DictionaryEntry]:
        return self._engines.index.by_starting_letter(letter)

    def spell_check(self, text: str) -> SpellCheckResult:
        return self._engines.spell.check(text)

    def lookup(self, key: str) -> DictionaryEntry | None:
        return self._engines.index.get(key.strip().lower())
