# src/nordum/core/tokenize.py
"""
Tokenization for spell checking.

A word is a maximal run of Unicode letters or digits. Underscore is not a
word character. Text is NFC-normalised first so a decomposed "å" (a + ring)
stays one letter.
"""

import re
import unicodedata
from dataclasses import dataclass


WORD_PATTERN = re.compile(r"[^\W_]+")
SENTENCE_BREAK = re.compile(r"[.!?]+")


@dataclass
class Token:
    text: str
    position: int  # character offset in the normalised text


def tokenize(text: str) -> list[Token]:
    """Split text into word tokens, tracking positions. Case is preserved."""
    text = unicodedata.normalize("NFC", text)
    tokens = []
    for match in WORD_PATTERN.finditer(text):
        tokens.append(Token(text=match.group(), position=match.start()))
    return tokens


def tokenize_words(text: str) -> list[str]:
    """Lowercase word tokens in order, duplicates kept."""
    return [t.text.lower() for t in tokenize(text)]


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop empty fragments."""
    sentences = []
    for fragment in SENTENCE_BREAK.split(text):
        fragment = fragment.strip()
        if fragment:
            sentences.append(fragment)
    return sentences
