"""Custom exceptions for the badge streak engine.

Missing price data, duplicate claim periods and stale events are normal
outcomes, not errors; nothing here is raised for them.
"""


class BadgerError(Exception):
    """Base exception for all badge engine errors."""


class InvalidBadgeError(BadgerError):
    """Raised when a badge definition or its streak state is out of range."""


class InvalidEventError(BadgerError):
    """Raised when a trigger event cannot be mapped to a day index."""
