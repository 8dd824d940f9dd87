"""
Shared dependencies for routes.
"""

from nordum import config
from nordum.core.lexicon import Lexicon


_lexicon: Lexicon | None = None


def get_lexicon() -> Lexicon:
    global _lexicon
    if _lexicon is None:
        _lexicon = Lexicon.from_path(config.get_settings().dictionary)
    return _lexicon


def set_lexicon(lexicon: Lexicon | None) -> None:
    """Install the app-wide lexicon (None forces a lazy load on next use)."""
    global _lexicon
    _lexicon = lexicon
