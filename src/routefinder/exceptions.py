"""Typed validation failures raised by the route finder."""

from __future__ import annotations


class RouteFinderError(ValueError):
    """Base class for input validation failures."""


class EmptyInputError(RouteFinderError):
    """Raised when no points are supplied."""

    def __init__(self, message: str = "At least one point is required to compute a route.") -> None:
        super().__init__(message)


class LengthMismatchError(RouteFinderError):
    """Raised when a sequence to reorder does not match the number of route points."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Cannot reorder {actual} items by a route of {expected} points.")


class MissingPropertyError(RouteFinderError):
    """Raised when an object does not expose the requested point-valued property."""

    def __init__(self, key: str, index: int, obj: object | None = None) -> None:
        self.key = key
        self.index = index
        self.obj = obj
        super().__init__(f"Object at index {index} has no point-valued property '{key}'.")


class InvalidConfigError(RouteFinderError):
    """Raised for out-of-range or unknown algorithm settings."""


class InvalidPointError(RouteFinderError):
    """Raised when a value cannot be read as a finite 2-D point."""
