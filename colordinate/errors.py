# errors.py

from typing import Optional, Tuple


class ColordinateError(Exception):
    """Base class for every error raised by colordinate."""


class ValidationError(ColordinateError):
    """
    Raised when a highlight document is malformed.

    Attributes:
        key: Path of the offending key, e.g. "Comment.style".
        allowed: The allowed values for that key, when the set is closed.
    """

    def __init__(self, message: str, key: Optional[str] = None,
                 allowed: Optional[Tuple[str, ...]] = None):
        self.key = key
        self.allowed = tuple(allowed) if allowed else None
        if self.allowed:
            message = f"{message} Possible values: [{', '.join(self.allowed)}]."
        super().__init__(message)


class HostQueryFailure(ColordinateError):
    """Raised when the host editor fails to answer a query or apply commands."""

    def __init__(self, message: str, syn_id: Optional[int] = None, key: Optional[str] = None):
        self.syn_id = syn_id
        self.key = key
        super().__init__(message)


class SessionError(ColordinateError):
    """Raised when a session entry point is used out of order."""
