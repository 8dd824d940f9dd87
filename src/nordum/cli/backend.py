"""
Backend selection for CLI commands.

Local mode answers from a dictionary file in-process; remote mode goes
through the HTTP client. Both return the same JSON-shaped dicts.
"""

from pathlib import Path

from nordum import config
from nordum.cli import client
from nordum.core.lexicon import Lexicon


class LocalBackend:
    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def search(self, query: str, filter: str = "all") -> list[dict]:
        return [e.to_dict() for e in self.lexicon.search(query, filter)]

    def words_by_letter(self, letter: str) -> list[dict]:
        return [e.to_dict() for e in self.lexicon.words_by_letter(letter)]

    def get_entry(self, key: str) -> dict:
        entry = self.lexicon.lookup(key)
        if entry is None:
            raise LookupError(f"Entry not found: {key}")
        return entry.to_dict()

    def spell_check(self, text: str) -> dict:
        return self.lexicon.spell_check(text).to_dict()

    def stats(self) -> dict:
        index = self.lexicon.index
        return {
            "metadata": index.metadata.to_dict(),
            "counts": index.counts_by_pos(),
            "letters": index.letters(),
        }


def get_backend(args):
    if getattr(args, "remote", False):
        return client
    path = Path(args.dict) if getattr(args, "dict", None) else config.get_settings().dictionary
    return LocalBackend(Lexicon.from_path(path))
