"""Read access: axis-wise slicing of nested-list arrays."""

import logging
from typing import Any, List, Sequence

from octarray.indexing.resolve import Bounds, resolve_index_vector


logger = logging.getLogger(__name__)


def _slice(node: list, bounds: List[Bounds]) -> list:
    lower, upper = bounds[0]
    selected = node[lower:upper]
    if len(bounds) == 1:
        return selected
    return [_slice(child, bounds[1:]) for child in selected]


def read_slice(model: Any, index_vector: Sequence[Any]) -> Any:
    """
    Select a sub-array, one index specification per axis.

    Axes beyond the end of ``index_vector`` are kept whole. A point index
    keeps its axis with length 1, as Octave does for ``A(2, :)``.

    Parameters
    ----------
    model : list
        Array to slice (not mutated)
    index_vector : sequence
        One specification per addressed axis, outermost first: ``None``
        for the whole axis, an int for a point, ``[lo, hi]`` for a range

    Returns
    -------
    list
        New array; leaves are shared with ``model``, lists are not

    Examples
    --------
    >>> m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    >>> read_slice(m, [None, [1, 2]])
    [[2], [5], [8]]
    >>> read_slice(m, [[1, 2], [1, 2]])
    [[5]]
    """
    bounds = resolve_index_vector(model, index_vector)
    logger.debug("Reading slice %s", bounds)
    return _slice(model, bounds)
