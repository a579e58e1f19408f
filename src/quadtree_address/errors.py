"""Error types raised by quad tree address operations."""

from __future__ import annotations


class QuadTreeAddressError(ValueError):
    """Base class for all address and coordinate errors."""


class InvalidCoordinateError(QuadTreeAddressError):
    pass


class InvalidDepthError(QuadTreeAddressError):
    pass


class InvalidEncodingError(InvalidDepthError):
    """Packed integer is negative or encodes a depth above the maximum."""


class InvalidAddressError(QuadTreeAddressError):
    pass


class InsufficientDepthError(QuadTreeAddressError):
    """Address is too shallow for the requested neighbor computation."""


class NullInputError(QuadTreeAddressError, TypeError):
    """A required argument was None."""


class InvalidDirectionError(QuadTreeAddressError):
    pass
