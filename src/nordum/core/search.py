# src/nordum/core/search.py
"""
Ranked substring search over a DictionaryIndex.

Exact matches (headword or gloss equal to the query) come first, then
partial matches. Within each group: frequency descending, ties kept in
dictionary order.
"""

from enum import Enum

from nordum.core.errors import InvalidFilter
from nordum.core.index import DictionaryEntry, DictionaryIndex


SEARCH_LIMIT = 20


class SearchFilter(Enum):
    ALL = "all"
    NORDUM = "nordum"
    ENGLISH = "english"

    @classmethod
    def parse(cls, value: "str | SearchFilter") -> "SearchFilter":
        if isinstance(value, SearchFilter):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidFilter(value, cls.names()) from None

    @classmethod
    def names(cls) -> list[str]:
        return [f.value for f in cls]


def matches(entry: DictionaryEntry, query: str, scope: SearchFilter) -> bool:
    """Case-insensitive containment of an already-lowercased query."""
    match scope:
        case SearchFilter.NORDUM:
            return query in entry.nordum.lower()
        case SearchFilter.ENGLISH:
            return query in entry.english.lower()
        case SearchFilter.ALL:
            if query in entry.nordum.lower() or query in entry.english.lower():
                return True
            return any(query in word.lower() for word in entry.sources.values())


def is_exact(entry: DictionaryEntry, query: str) -> bool:
    return entry.nordum.lower() == query or entry.english.lower() == query


class SearchEngine:
    def __init__(self, index: DictionaryIndex, limit: int = SEARCH_LIMIT):
        self.index = index
        self.limit = limit

    def search(
        self,
        query: str,
        scope: SearchFilter | str = SearchFilter.ALL,
    ) -> list[DictionaryEntry]:
        scope = SearchFilter.parse(scope)
        query = query.strip().lower()
        if not query:
            return []

        results = [e for e in self.index.entries() if matches(e, query, scope)]

        # sorted() is stable: equal keys stay in dictionary order
        results = sorted(results, key=lambda e: (not is_exact(e, query), -e.frequency))

        return results[: self.limit]
