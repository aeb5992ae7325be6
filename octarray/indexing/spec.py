"""
Per-axis index specifications.

Each axis of an index vector is selected by one of three tagged variants:
``Omitted`` (the whole axis), ``Point(i)`` (the half-open range
``[i, i + 1)``) or ``Range(lower, upper)`` with either endpoint optional.
"""

import numbers
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union


@dataclass(frozen=True)
class Omitted:
    """Select the entire axis."""


@dataclass(frozen=True)
class Point:
    """Select a single position; the axis is kept with length 1."""

    index: int


@dataclass(frozen=True)
class Range:
    """Select ``[lower, upper)``; ``None`` endpoints default to the axis ends."""

    lower: Optional[int] = None
    upper: Optional[int] = None


IndexSpec = Union[Omitted, Point, Range]

OMITTED = Omitted()


def _is_int(obj: Any) -> bool:
    return isinstance(obj, numbers.Integral) and not isinstance(obj, bool)


def _endpoint(obj: Any) -> Optional[int]:
    if obj is None:
        return None
    if not _is_int(obj):
        raise TypeError(f"Range endpoint must be an integer or None, got {obj!r}")
    return int(obj)


def as_index_spec(obj: Any) -> IndexSpec:
    """
    Coerce a caller-friendly value to an index specification.

    ``None`` is omitted, an integer is a point, and a step-less ``slice``
    or a list/tuple of at most two endpoints is a range. Zero is a valid
    point index.

    Examples
    --------
    >>> as_index_spec(0)
    Point(index=0)
    >>> as_index_spec([1, None])
    Range(lower=1, upper=None)
    >>> as_index_spec(slice(None, 2))
    Range(lower=None, upper=2)
    """
    if isinstance(obj, (Omitted, Point, Range)):
        return obj
    if obj is None:
        return OMITTED
    if _is_int(obj):
        return Point(int(obj))
    if isinstance(obj, slice):
        if obj.step is not None:
            raise TypeError(f"Stepped slices are not supported: {obj!r}")
        return Range(_endpoint(obj.start), _endpoint(obj.stop))
    if isinstance(obj, (list, tuple)):
        if len(obj) > 2:
            raise TypeError(
                f"A range holds at most two endpoints, got {len(obj)}: {obj!r}"
            )
        bounds = list(obj) + [None] * (2 - len(obj))
        return Range(_endpoint(bounds[0]), _endpoint(bounds[1]))
    raise TypeError(f"Unsupported index specification: {obj!r}")


def as_index_vector(index_vector: Sequence[Any]) -> List[IndexSpec]:
    """Coerce every entry of an index vector."""
    return [as_index_spec(spec) for spec in index_vector]
