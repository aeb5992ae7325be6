"""
Resolution of index specifications to concrete ``[lower, upper)`` bounds.

Out-of-range requests either raise ``IndexOutOfRange`` or are clamped,
depending on the ``indexing.out_of_range`` configuration value.
"""

from typing import Any, List, Optional, Sequence, Tuple

from octarray.base.enums import OutOfRangePolicy
from octarray.base.shape import shape_of
from octarray.errors import IndexOutOfRange
from octarray.indexing.spec import OMITTED, Point, Range, as_index_spec, as_index_vector
from octarray.utils.config import Config


Bounds = Tuple[int, int]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def resolve_slice(
    length: int,
    spec: Any = None,
    policy: Optional[OutOfRangePolicy] = None,
    axis: int = 0,
) -> Bounds:
    """
    Resolve one axis's index specification against its length.

    Parameters
    ----------
    length : int
        Current length of the axis
    spec : IndexSpec or coercible value
        ``None``/Omitted, a point index, or a range
    policy : OutOfRangePolicy, optional
        Defaults to the configured ``indexing.out_of_range`` policy
    axis : int
        Axis number, used in error messages

    Returns
    -------
    tuple of int
        ``(lower, upper)`` with ``0 <= lower <= upper <= length``

    Raises
    ------
    IndexOutOfRange
        Under the RAISE policy, when the request falls outside the axis

    Examples
    --------
    >>> resolve_slice(5)
    (0, 5)
    >>> resolve_slice(5, 0)
    (0, 1)
    >>> resolve_slice(5, [2, None])
    (2, 5)
    """
    if policy is None:
        policy = OutOfRangePolicy.from_config(Config.get("indexing.out_of_range"))
    spec = as_index_spec(spec)

    if isinstance(spec, Point):
        lower, upper = spec.index, spec.index + 1
        if policy == OutOfRangePolicy.RAISE and not 0 <= spec.index < length:
            raise IndexOutOfRange(
                f"Index {spec.index} out of range for axis {axis} with length {length}"
            )
    elif isinstance(spec, Range):
        lower = 0 if spec.lower is None else spec.lower
        upper = length if spec.upper is None else spec.upper
        if policy == OutOfRangePolicy.RAISE and not 0 <= lower <= upper <= length:
            raise IndexOutOfRange(
                f"Range [{lower}, {upper}) out of range for axis {axis} "
                f"with length {length}"
            )
    else:
        return 0, length

    lower = _clamp(lower, 0, length)
    upper = _clamp(upper, lower, length)
    return lower, upper


def resolve_index_vector(model: Any, index_vector: Sequence[Any]) -> List[Bounds]:
    """
    Resolve every entry of an index vector against the shape of ``model``.

    An empty index vector addresses the whole outermost axis. Entries
    below an empty axis are never visited and resolve to ``(0, 0)``.

    Raises
    ------
    IndexOutOfRange
        If the vector addresses more axes than ``model`` has, or any entry
        is out of range under the RAISE policy
    """
    specs = as_index_vector(index_vector) or [OMITTED]
    dims = shape_of(model)
    empty = bool(dims) and dims[-1] == 0
    if len(specs) > len(dims) and not empty:
        raise IndexOutOfRange(
            f"Index vector addresses {len(specs)} axes but array has rank {len(dims)}"
        )

    policy = OutOfRangePolicy.from_config(Config.get("indexing.out_of_range"))
    bounds = [
        resolve_slice(dims[axis], spec, policy=policy, axis=axis)
        for axis, spec in enumerate(specs[: len(dims)])
    ]
    return bounds + [(0, 0)] * (len(specs) - len(bounds))
