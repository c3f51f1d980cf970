"""Lookup error for empty collections."""


class NotFound(LookupError):
    """Raised when a requested element does not exist."""
