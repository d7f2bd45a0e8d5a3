"""Domain-layer exceptions."""


class DomainError(Exception):
    """Base exception for progression and scoring rules."""


class InvalidLevelError(DomainError, ValueError):
    """Raised when a level is not an integer of at least 1."""


class InvalidCharacterError(DomainError, ValueError):
    """Raised when character data handed to the engine is malformed."""
