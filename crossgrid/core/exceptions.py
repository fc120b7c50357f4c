"""Custom exception hierarchy for crossword grid generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class EmptySourceError(CrosswordError):
    """Raised when no word survives the length filter."""


class InvalidLetterError(CrosswordError, ValueError):
    """Raised when a character outside A-Z reaches the position index."""


class NotFoundError(CrosswordError, LookupError):
    """Raised when removing a position index entry that does not exist."""


class SeedPlacementError(CrosswordError):
    """Raised when the seed word cannot be written at its anchor."""


class ValidationError(CrosswordError):
    """Raised when the grid integrity checks fail."""


class LetterConflictError(CrosswordError):
    """Raised when a commit would overwrite a cell with a different letter."""
