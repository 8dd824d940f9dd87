"""
Immutable dictionary index.

Holds the entries by key, in the order the dictionary supplies them, and a
by-letter view sorted alphabetically by headword. Built once, never mutated;
rebuilding means building a new index.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from nordum.core.errors import MalformedEntry


LETTER_LIMIT = 50


class PartOfSpeech(Enum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "PartOfSpeech":
        """Map a loader pos string onto the enum. Unlisted parts of speech are OTHER."""
        if not value:
            return cls.OTHER
        aliases = {
            "noun": cls.NOUN, "n": cls.NOUN, "substantiv": cls.NOUN,
            "verb": cls.VERB, "v": cls.VERB,
            "adjective": cls.ADJECTIVE, "adj": cls.ADJECTIVE, "adjektiv": cls.ADJECTIVE,
        }
        return aliases.get(str(value).strip().lower(), cls.OTHER)


class Gender(Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"
    COMMON = "common"

    @classmethod
    def parse(cls, value: str) -> "Gender":
        aliases = {
            "masculine": cls.MASCULINE, "m": cls.MASCULINE,
            "feminine": cls.FEMININE, "f": cls.FEMININE,
            "neuter": cls.NEUTER, "n": cls.NEUTER, "et": cls.NEUTER, "ett": cls.NEUTER,
            "common": cls.COMMON, "c": cls.COMMON, "en": cls.COMMON,
        }
        gender = aliases.get(value.strip().lower())
        if gender is None:
            raise ValueError(f"Unknown gender: {value}")
        return gender


@dataclass(frozen=True)
class DictionaryEntry:
    key: str
    nordum: str
    english: str
    part_of_speech: PartOfSpeech = PartOfSpeech.OTHER
    gender: Gender | None = None
    frequency: int = 0
    # language code -> cognate; read-only, and left out of the hash
    sources: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

    @property
    def letter(self) -> str:
        return self.nordum.lower()[:1]

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "nordum": self.nordum,
            "english": self.english,
            "pos": self.part_of_speech.value,
            "gender": self.gender.value if self.gender else None,
            "frequency": self.frequency,
            "sources": dict(self.sources),
        }


@dataclass(frozen=True)
class DictionaryMetadata:
    entry_count: int = 0
    languages: tuple[str, ...] = ()
    generated: str | None = None

    def to_dict(self) -> dict:
        return {
            "entryCount": self.entry_count,
            "languages": list(self.languages),
            "generated": self.generated,
        }


class DictionaryIndex:
    """Read-only lookup structures over one entry set."""

    def __init__(
        self,
        by_key: dict[str, DictionaryEntry],
        by_letter: dict[str, tuple[DictionaryEntry, ...]],
        metadata: DictionaryMetadata,
    ):
        self._by_key = by_key
        self._by_letter = by_letter
        self._keys = frozenset(by_key)
        self.metadata = metadata

    @classmethod
    def build(
        cls,
        entries: Iterable[DictionaryEntry],
        metadata: DictionaryMetadata | None = None,
    ) -> "DictionaryIndex":
        by_key: dict[str, DictionaryEntry] = {}
        for entry in entries:
            if not entry.key:
                raise MalformedEntry(None, "missing key")
            if not entry.nordum:
                raise MalformedEntry(entry.key, "missing nordum")
            if not entry.english:
                raise MalformedEntry(entry.key, "missing english")
            if entry.key in by_key:
                raise MalformedEntry(entry.key, "duplicate key")
            by_key[entry.key] = entry

        buckets: dict[str, list[DictionaryEntry]] = {}
        for entry in by_key.values():
            buckets.setdefault(entry.letter, []).append(entry)

        by_letter = {
            letter: tuple(sorted(bucket, key=lambda e: (e.nordum.lower(), e.nordum)))
            for letter, bucket in buckets.items()
        }

        if metadata is None:
            metadata = DictionaryMetadata(entry_count=len(by_key))

        return cls(by_key, by_letter, metadata)

    @classmethod
    def empty(cls) -> "DictionaryIndex":
        return cls.build([])

    def get(self, key: str) -> DictionaryEntry | None:
        return self._by_key.get(key)

    def all_keys(self) -> frozenset[str]:
        return self._keys

    def keys(self) -> Iterator[str]:
        """Keys in dictionary order."""
        return iter(self._by_key)

    def entries(self) -> Iterator[DictionaryEntry]:
        """Entries in dictionary order."""
        return iter(self._by_key.values())

    def by_starting_letter(self, letter: str) -> list[DictionaryEntry]:
        prefix = letter.lower()
        if not prefix:
            return []
        bucket = self._by_letter.get(prefix[:1], ())
        if len(prefix) > 1:
            bucket = [e for e in bucket if e.nordum.lower().startswith(prefix)]
        return list(bucket[:LETTER_LIMIT])

    def letters(self) -> list[str]:
        return sorted(self._by_letter)

    def counts_by_pos(self) -> dict[str, int]:
        counts = {pos.value: 0 for pos in PartOfSpeech}
        for entry in self._by_key.values():
            counts[entry.part_of_speech.value] += 1
        counts["total"] = len(self._by_key)
        return counts

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key
