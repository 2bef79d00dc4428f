"""Errors raised by the service layer.

They subclass ValueError so callers that only care about "bad input" can
keep catching that. The API layer maps each one to an HTTP status.
"""


class BakeryError(ValueError):
    """Base class for service errors."""


class NotFoundError(BakeryError):
    """A record with the requested key does not exist."""


class ConflictError(BakeryError):
    """A record with the same key already exists."""


class InvalidInputError(BakeryError):
    """The operation was rejected and nothing was changed."""
