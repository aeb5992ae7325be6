"""
Shape introspection for nested-list arrays.

An array is a recursively nested ``list``: rank 0 is any non-list leaf,
rank k is a list of rank k-1 arrays. Siblings are assumed to share one
shape; nothing here validates that.
"""

from typing import Any, List


def is_container(obj: Any) -> bool:
    """Return True if ``obj`` is an array axis rather than a leaf."""
    return isinstance(obj, list)


def shape_of(model: Any) -> List[int]:
    """
    Return the dimension vector of a nested-list array.

    Only the first element along each axis is inspected, so a ragged array
    reports the shape of its first slice.

    Parameters
    ----------
    model : list or leaf
        Array to inspect

    Returns
    -------
    list of int
        Length of each axis, outermost first. Empty for a leaf.

    Examples
    --------
    >>> shape_of([[1, 2, 3], [4, 5, 6]])
    [2, 3]
    >>> shape_of(7)
    []
    """
    dims = []
    node = model
    while is_container(node):
        dims.append(len(node))
        if not node:
            break
        node = node[0]
    return dims


def ndim(model: Any) -> int:
    """Number of axes of ``model``."""
    return len(shape_of(model))
