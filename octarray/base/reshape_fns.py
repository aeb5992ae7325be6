"""
Reshaping utilities for rank <= 2 nested-list arrays.

A flat list is a row vector (1 x N); a list of singleton lists is a
column vector (N x 1).
"""

import logging
import numbers
from typing import Any, List

from octarray.base.shape import shape_of
from octarray.errors import InvalidDimensions


logger = logging.getLogger(__name__)


def _check_matrix_rank(model: Any, name: str) -> int:
    rank = len(shape_of(model))
    if rank > 2:
        raise InvalidDimensions(f"{name} supports rank <= 2, got rank {rank}")
    return rank


def to_2d(model: Any) -> List[list]:
    """
    View a rank <= 2 array as a matrix.

    A leaf becomes 1 x 1, a flat list a single row. Rows of a matrix input
    are shared, not copied.

    Examples
    --------
    >>> to_2d(5)
    [[5]]
    >>> to_2d([1, 2, 3])
    [[1, 2, 3]]
    """
    rank = _check_matrix_rank(model, "to_2d")
    if rank == 0:
        return [[model]]
    if rank == 1:
        return [model]
    return model


def transpose(model: Any) -> Any:
    """
    Transpose a rank <= 2 array.

    A row vector ``[a, b, c]`` becomes the column ``[[a], [b], [c]]`` and
    an N x 1 column becomes the flat row ``[a, b, c]``. Any other matrix is
    transposed as usual. A leaf is returned unchanged.

    Parameters
    ----------
    model : leaf or list
        Array of rank <= 2

    Returns
    -------
    Any
        New array

    Raises
    ------
    InvalidDimensions
        If ``model`` has rank > 2

    Examples
    --------
    >>> transpose([[1, 2, 3], [4, 5, 6]])
    [[1, 4], [2, 5], [3, 6]]
    >>> transpose([1, 2, 3])
    [[1], [2], [3]]
    >>> transpose([[1], [2], [3]])
    [1, 2, 3]
    """
    dims = shape_of(model)
    rank = _check_matrix_rank(model, "transpose")
    logger.debug("Transposing array of shape %s", dims)

    if rank == 0:
        return model
    if rank == 1:
        return [[x] for x in model]

    n_rows, n_cols = dims
    if n_cols == 1:
        return [row[0] for row in model]
    return [[model[i][j] for i in range(n_rows)] for j in range(n_cols)]


def _check_rep(rep: Any, name: str) -> int:
    if isinstance(rep, bool) or not isinstance(rep, numbers.Integral):
        raise InvalidDimensions(f"{name} must be an integer, got {rep!r}")
    if rep <= 0:
        raise InvalidDimensions(f"{name} must be positive, got {rep}")
    return int(rep)


def tile(model: Any, row_rep: int = 1, col_rep: int = 1) -> Any:
    """
    Replicate a rank <= 2 array in blocks, like Octave's ``repmat``.

    ``result[i][j] == model[i % rows][j % cols]`` with shape
    ``(rows * row_rep, cols * col_rep)`` for matrix inputs. A flat input is
    a single row and stays flat when ``row_rep == 1``, so its result has
    shape ``(cols * col_rep,)`` in that case; a leaf stays a leaf when both
    factors are 1.

    Parameters
    ----------
    model : leaf or list
        Array of rank <= 2
    row_rep : int
        Number of vertical copies
    col_rep : int
        Number of horizontal copies

    Returns
    -------
    Any
        New array

    Raises
    ------
    InvalidDimensions
        If a factor is not a positive integer, the input is an empty row,
        or the input has rank > 2

    Examples
    --------
    >>> tile([[1, 2], [3, 4]], 1, 2)
    [[1, 2, 1, 2], [3, 4, 3, 4]]
    >>> tile([1, 2], 2)
    [[1, 2], [1, 2]]
    """
    row_rep = _check_rep(row_rep, "row_rep")
    col_rep = _check_rep(col_rep, "col_rep")
    rank = _check_matrix_rank(model, "tile")
    if rank == 1 and len(model) == 0:
        raise InvalidDimensions("Cannot tile an empty row")

    matrix = to_2d(model)
    n_rows, n_cols = len(matrix), len(matrix[0])
    logger.debug(
        "Tiling %dx%d array by (%d, %d)", n_rows, n_cols, row_rep, col_rep
    )

    result = [
        [matrix[i % n_rows][j % n_cols] for j in range(n_cols * col_rep)]
        for i in range(n_rows * row_rep)
    ]

    if rank < 2 and row_rep == 1:
        result = result[0]
        if rank == 0 and col_rep == 1:
            result = result[0]
    return result
