# src/nordum/core/errors.py
"""
Error kinds raised by the dictionary core.
"""


class MalformedEntry(ValueError):
    """An entry set that cannot be built into an index."""

    def __init__(self, key: str | None, reason: str):
        self.key = key
        self.reason = reason
        where = f"entry '{key}'" if key else "entry"
        super().__init__(f"Malformed {where}: {reason}")


class DictionaryUnavailable(RuntimeError):
    """The dictionary data could not be read or has no entries."""


class InvalidFilter(ValueError):
    def __init__(self, value: str, available: list[str]):
        self.value = value
        super().__init__(f"Unknown filter: {value}. Available: {', '.join(available)}")
