"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError):
    """Raised when the grid size or direction set cannot be used."""


class ValidationError(WordSearchError):
    """Raised when a generated grid fails the integrity checks."""


class StoreError(WordSearchError):
    """Raised when a stored puzzle document cannot be read."""
