"""Errors raised by the widget transforms."""

from typing import Optional


class WidgetError(Exception):
    """Base class for transform failures reported back to the host."""


class PayloadDecodeError(WidgetError):
    """Raised when an event payload is not a decodable JSON object."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class FieldAccessError(WidgetError, LookupError):
    """Raised when a decoded record lacks a field or holds the wrong type."""

    def __init__(self, path: str, reason: str = "missing"):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
