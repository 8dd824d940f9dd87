# src/nordum/core/spellcheck.py
"""
Dictionary spell checker.

Stage 1: text → lowercase word tokens
Stage 2: distinct tokens not in the key set → unknown words
Stage 3: unknown word → up to 3 keys within edit distance 2
"""

from dataclasses import dataclass, field

from nordum.core.distance import length_gap_exceeds, levenshtein
from nordum.core.index import DictionaryIndex
from nordum.core.tokenize import split_sentences, tokenize_words


MAX_SUGGESTIONS = 3
MAX_DISTANCE = 2


@dataclass
class SpellingError:
    word: str
    suggestions: list[str] = field(default_factory=list)


@dataclass
class TextStats:
    words: int = 0
    characters: int = 0
    sentences: int = 0


@dataclass
class SpellCheckResult:
    errors: list[SpellingError] = field(default_factory=list)
    stats: TextStats = field(default_factory=TextStats)

    def to_dict(self) -> dict:
        return {
            "errors": [
                {"word": e.word, "suggestions": list(e.suggestions)}
                for e in self.errors
            ],
            "stats": {
                "words": self.stats.words,
                "characters": self.stats.characters,
                "sentences": self.stats.sentences,
            },
        }


class SpellChecker:
    def __init__(
        self,
        index: DictionaryIndex,
        max_suggestions: int = MAX_SUGGESTIONS,
        max_distance: int = MAX_DISTANCE,
    ):
        self.index = index
        self.max_suggestions = max_suggestions
        self.max_distance = max_distance

    def check(self, text: str) -> SpellCheckResult:
        if not text.strip():
            return SpellCheckResult()

        words = tokenize_words(text)
        known = self.index.all_keys()

        errors = []
        # dict.fromkeys keeps first-occurrence order
        for word in dict.fromkeys(words):
            if word not in known:
                errors.append(SpellingError(word, self.suggest(word)))

        stats = TextStats(
            words=len(words),
            characters=len(text),
            sentences=len(split_sentences(text)),
        )
        return SpellCheckResult(errors=errors, stats=stats)

    def suggest(self, word: str) -> list[str]:
        """Closest known keys, nearest first, dictionary order within a distance."""
        candidates = []
        for key in self.index.keys():
            if length_gap_exceeds(word, key, self.max_distance):
                continue
            distance = levenshtein(word, key)
            if 0 < distance <= self.max_distance:
                candidates.append((distance, key))

        candidates.sort(key=lambda c: c[0])
        return [key for _, key in candidates[: self.max_suggestions]]
