"""Custom exception hierarchy for word grid generation."""


class WordGridError(Exception):
    """Base exception for generator failures."""


class DictionaryLoadError(WordGridError):
    """Raised when the word list file cannot be read."""


class WordListFetchError(WordGridError):
    """Raised when a remote word list cannot be downloaded."""


class PlacementError(WordGridError):
    """Raised when a path is written onto cells it may not occupy."""


class ValidationError(WordGridError):
    """Raised when the puzzle integrity checks fail."""
