"""
Exception hierarchy for the Happy Thoughts domain.

Use cases and repositories raise these; the API layer maps each kind to an
HTTP status. ``message`` is always safe to show to a client.
"""

# Standard library
from typing import Any, Dict, Optional


class HappyThoughtsError(Exception):
    """Base exception for all Happy Thoughts errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(HappyThoughtsError, ValueError):
    """Malformed, missing or out-of-range input, including bad identifiers."""
    pass


class UnauthenticatedError(HappyThoughtsError):
    """Missing or unknown access token, or bad login credentials."""
    pass


class ForbiddenError(HappyThoughtsError):
    """Authenticated caller is not allowed to touch the resource."""
    pass


class NotFoundError(HappyThoughtsError):
    """Requested record does not exist."""
    pass


class ConflictError(HappyThoughtsError):
    """Unique constraint violated (e.g. username already taken)."""
    pass


class DataAccessError(HappyThoughtsError):
    """Unexpected failure talking to the document store."""
    pass
