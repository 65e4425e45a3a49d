"""Error conditions raised by the navigation engine."""

from __future__ import annotations


class EmptyCollectionError(ValueError):
    """Raised when navigating or rendering a collection that holds no bills."""

    def __init__(self, message: str = "Bill collection is empty; nothing to navigate."):
        super().__init__(message)


class InvalidConfigurationError(ValueError):
    """Raised for session settings outside their documented domain (e.g. quota <= 0)."""
