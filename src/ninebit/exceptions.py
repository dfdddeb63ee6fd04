"""Exceptions raised by the ninebit codec."""

from __future__ import annotations


class NinebitError(Exception):
    """Base exception for all ninebit errors."""


class InvalidCodeFormatError(NinebitError, ValueError):
    """A code token is not exactly 9 characters from {'0', '1'}."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Invalid 9-bit code: {code!r} (expected 9 characters of 0/1)")


class DimensionMismatchError(NinebitError, ValueError):
    """Number of codes disagrees with the declared grid dimensions."""

    def __init__(self, count: int, width: int, height: int):
        self.count = count
        self.width = width
        self.height = height
        super().__init__(
            f"Dimension mismatch: {count} codes for a {width}x{height} grid "
            f"(expected {max(width, 0) * max(height, 0)})"
        )


class ImageEncodingError(NinebitError):
    """Source image could not be loaded or sampled."""


class EmptyGridError(NinebitError):
    """Rendering requested for a grid with no rows or columns."""
