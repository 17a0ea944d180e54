"""Exceptions raised by the mood journal."""


class MoodJournalError(Exception):
    """Base exception for mood journal errors."""
    pass


class ScoringUnavailable(MoodJournalError):
    """Raised by a scorer that cannot produce a score for the given text."""
    pass


class PersistenceError(MoodJournalError):
    """Raised when the journal store cannot read, write or delete records."""
    pass


class NotFoundError(MoodJournalError):
    """Raised when a record to delete does not exist in the store."""
    pass


class InvalidCoordinate(MoodJournalError, ValueError):
    """Raised when latitude/longitude are out of range or not finite."""
    pass


class EmptyDescriptionError(MoodJournalError, ValueError):
    """Raised when a record is submitted without a description."""
    pass


class PermissionDeniedError(MoodJournalError):
    """Raised when location permission has not been granted."""
    pass
