"""Enumerations for array construction and index resolution."""

from enum import IntEnum


class FillKind(IntEnum):
    """How a freshly constructed array is populated."""

    CONSTANT = 0  # Every slot receives the same value
    RANDOM = 1  # Every slot receives an independent draw in [0, 1)


class OutOfRangePolicy(IntEnum):
    """What index resolution does with bounds outside an axis."""

    RAISE = 0  # Report IndexOutOfRange
    CLIP = 1  # Clamp into [0, len] like a native slice

    @classmethod
    def from_config(cls, name: str) -> "OutOfRangePolicy":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(
                f"Invalid out-of-range policy {name!r}, must be 'raise' or 'clip'"
            ) from None
