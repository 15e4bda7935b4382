"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(CrosswordError, ValueError):
    """Raised when grid size or word cap cannot produce a puzzle."""


class WordSourceError(CrosswordError):
    """Raised when a word source cannot produce candidate words."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""
