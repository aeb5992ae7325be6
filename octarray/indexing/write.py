"""Write access: in-place assignment into a slice of a nested-list array."""

import logging
from typing import Any, List, Sequence

from octarray.base.shape import is_container
from octarray.errors import ShapeMismatch
from octarray.indexing.resolve import Bounds, resolve_index_vector


logger = logging.getLogger(__name__)


def _check_value(value: Any, bounds: List[Bounds], axis: int) -> None:
    # Scalars broadcast to any region
    if not is_container(value):
        return
    lower, upper = bounds[0]
    if len(value) != upper - lower:
        raise ShapeMismatch(
            f"Value of length {len(value)} cannot fill {upper - lower} "
            f"positions on axis {axis}"
        )
    if len(bounds) > 1:
        for item in value:
            _check_value(item, bounds[1:], axis + 1)


def _assign(node: list, bounds: List[Bounds], value: Any) -> None:
    lower, upper = bounds[0]
    array_valued = is_container(value)
    for i in range(lower, upper):
        item = value[i - lower] if array_valued else value
        if len(bounds) == 1:
            node[i] = item
        else:
            _assign(node[i], bounds[1:], item)


def write_slice(model: list, index_vector: Sequence[Any], value: Any) -> None:
    """
    Assign ``value`` to the region of ``model`` selected by ``index_vector``.

    A scalar value is broadcast to every selected position. A list value
    must match the selected length at each axis it spans; below its depth
    its leaves are broadcast. At the last addressed axis, list elements are
    stored as they are, so a list of rows can replace whole rows.

    The index vector and value shape are fully validated before the first
    write, so a failed call leaves ``model`` untouched. The structure is
    never resized.

    Parameters
    ----------
    model : list
        Array mutated in place
    index_vector : sequence
        One specification per addressed axis, as for ``read_slice``
    value : leaf or list
        Scalar to broadcast or array to distribute

    Raises
    ------
    IndexOutOfRange
        If the index vector does not fit ``model``
    ShapeMismatch
        If an array-shaped value has the wrong length on some axis

    Examples
    --------
    >>> m = [[1, 2], [3, 4]]
    >>> write_slice(m, [None, 1], 0)
    >>> m
    [[1, 0], [3, 0]]
    """
    bounds = resolve_index_vector(model, index_vector)
    _check_value(value, bounds, 0)
    logger.debug("Writing slice %s", bounds)
    _assign(model, bounds, value)
