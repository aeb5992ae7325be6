"""Structured error types raised by octarray operations."""


class OctArrayError(Exception):
    """Base class for octarray errors."""


class InvalidDimensions(OctArrayError, ValueError):
    """Missing, non-positive or unsupported dimension arguments."""


class ShapeMismatch(OctArrayError, ValueError):
    """Value being written does not match the selected region."""


class IndexOutOfRange(OctArrayError, IndexError):
    """Resolved bounds fall outside the addressed axis."""
