# src/nordum/core/loader.py
"""
Dictionary loader.

Reads the dictionary.json produced by the dictionary build:

    {
      "metadata": {"entryCount": 2, "languages": [...], "generated": "..."},
      "entries": {
        "hus": {"nordum": "hus", "english": "house", "pos": "noun",
                "gender": "neuter", "frequency": 10,
                "sources": {"norwegian": {"word": "hus"}, ...}}
      }
    }
"""

import json
import math
from pathlib import Path

from nordum.core.errors import DictionaryUnavailable, MalformedEntry
from nordum.core.index import (
    DictionaryEntry,
    DictionaryIndex,
    DictionaryMetadata,
    Gender,
    PartOfSpeech,
)


def parse_frequency(key: str, value) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise MalformedEntry(key, f"invalid frequency: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise MalformedEntry(key, f"invalid frequency: {value!r}")
    try:
        frequency = int(value) if isinstance(value, (int, float)) else int(str(value).strip())
    except (ValueError, OverflowError):
        raise MalformedEntry(key, f"invalid frequency: {value!r}") from None
    if frequency < 0:
        raise MalformedEntry(key, f"negative frequency: {frequency}")
    return frequency


def parse_sources(key: str, value) -> dict[str, str]:
    if not value:
        return {}
    if not isinstance(value, dict):
        raise MalformedEntry(key, "sources must be a mapping")

    sources = {}
    for lang, source in value.items():
        word = source.get("word") if isinstance(source, dict) else source
        if not word:
            continue
        sources[lang] = str(word)
    return sources


def parse_entry(key: str, data: dict) -> DictionaryEntry:
    if not isinstance(data, dict):
        raise MalformedEntry(key, "entry must be an object")

    gender = None
    if data.get("gender"):
        try:
            gender = Gender.parse(str(data["gender"]))
        except ValueError as e:
            raise MalformedEntry(key, str(e)) from None

    return DictionaryEntry(
        key=key.strip().lower(),
        nordum=str(data.get("nordum") or ""),
        english=str(data.get("english") or ""),
        part_of_speech=PartOfSpeech.parse(data.get("pos")),
        gender=gender,
        frequency=parse_frequency(key, data.get("frequency")),
        sources=parse_sources(key, data.get("sources")),
    )


def parse_metadata(data: dict | None, entry_count: int) -> DictionaryMetadata:
    data = data or {}
    return DictionaryMetadata(
        entry_count=data.get("entryCount", entry_count),
        languages=tuple(data.get("languages", [])),
        generated=data.get("generated"),
    )


def index_from_blob(blob: dict) -> DictionaryIndex:
    """Build an index from an already-parsed dictionary blob."""
    if not isinstance(blob, dict) or not isinstance(blob.get("entries"), dict):
        raise DictionaryUnavailable("dictionary has no entries mapping")

    entries = [parse_entry(key, data) for key, data in blob["entries"].items()]
    metadata = parse_metadata(blob.get("metadata"), len(entries))
    return DictionaryIndex.build(entries, metadata)


def load_dictionary(path: Path | str) -> DictionaryIndex:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            blob = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DictionaryUnavailable(f"cannot read {path}: {e}") from e

    index = index_from_blob(blob)
    print(f"Loaded dictionary with {len(index)} entries")
    return index
