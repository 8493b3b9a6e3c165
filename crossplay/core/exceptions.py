"""Custom exception hierarchy for the crossword engine."""


class CrosswordError(Exception):
    """Base exception for engine failures."""


class SchemaError(CrosswordError):
    """Raised when a puzzle document has missing or malformed fields."""


class BoundsError(CrosswordError):
    """Raised when a clue's span does not fit inside the grid."""


class LengthMismatchError(CrosswordError):
    """Raised when word-fill text does not match the word length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} letters, got {actual}")
        self.expected = expected
        self.actual = actual


class NetworkError(CrosswordError):
    """Raised when a puzzle document cannot be fetched."""
