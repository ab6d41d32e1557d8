"""Exception types for dictionary analysis and configuration."""
from typing import Iterable, List


class DictionaryError(Exception):
    """Base class for dictionaries that do not yield a single alphabet."""

    def __init__(self, message: str, letters: Iterable[str] = ()):
        super().__init__(message)
        self.letters: List[str] = list(letters)


class UnderspecifiedDictionaryError(DictionaryError):
    """Some letters cannot be ordered relative to each other."""


class MalformedDictionaryError(DictionaryError):
    """The dictionary orders some letters in a circle."""


class ConfigError(ValueError):
    """Invalid configuration value."""
