"""
Array construction with a fill policy.

Mirrors Octave's ``zeros``, ``ones`` and ``rand``: build an n-dimensional
nested list whose every slot holds a constant or an independent draw.
"""

import copy
import logging
import numbers
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import numpy as np

from octarray.base.enums import FillKind
from octarray.errors import InvalidDimensions
from octarray.utils.config import Config


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FillPolicy:
    """
    How each slot of a new array is populated.

    Use the ``constant`` and ``random`` constructors rather than building
    instances directly.
    """

    kind: FillKind
    value: Any = None
    rng: Optional[np.random.Generator] = None

    @classmethod
    def constant(cls, value: Any) -> "FillPolicy":
        """Every slot receives ``value``."""
        return cls(kind=FillKind.CONSTANT, value=value)

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> "FillPolicy":
        """Every slot receives an independent uniform draw in [0, 1)."""
        return cls(kind=FillKind.RANDOM, rng=rng)

    def generator(self) -> np.random.Generator:
        if self.rng is not None:
            return self.rng
        return np.random.default_rng(Config.get("random.seed"))


def validate_dims(dims: Sequence[int]) -> List[int]:
    """
    Check a dimension sequence and return it as a list of ints.

    Raises
    ------
    InvalidDimensions
        If ``dims`` is empty or holds anything but positive integers
    """
    dims = list(dims)
    if not dims:
        raise InvalidDimensions("At least one dimension is required")
    for axis, d in enumerate(dims):
        if isinstance(d, bool) or not isinstance(d, numbers.Integral):
            raise InvalidDimensions(f"Dimension {axis} must be an integer, got {d!r}")
        if d <= 0:
            raise InvalidDimensions(f"Dimension {axis} must be positive, got {d}")
    return [int(d) for d in dims]


def make_array(fill: FillPolicy, dims: Sequence[int]) -> list:
    """
    Build a nested-list array of shape ``dims``.

    Parameters
    ----------
    fill : FillPolicy
        Constant or random fill
    dims : sequence of int
        Positive length of each axis, outermost first

    Returns
    -------
    list
        New array with ``shape_of(result) == list(dims)``

    Examples
    --------
    >>> make_array(FillPolicy.constant(0), [2, 3])
    [[0, 0, 0], [0, 0, 0]]
    """
    dims = validate_dims(dims)
    logger.debug("Building %s array of shape %s", fill.kind.name.lower(), dims)

    if fill.kind == FillKind.RANDOM:
        rng = fill.generator()

        def leaf():
            return float(rng.random())
    else:
        def leaf():
            return copy.copy(fill.value)

    def build(axis: int) -> list:
        if axis == len(dims) - 1:
            return [leaf() for _ in range(dims[axis])]
        return [build(axis + 1) for _ in range(dims[axis])]

    return build(0)


def zeros(*dims: int) -> list:
    """Array of shape ``dims`` filled with 0."""
    return make_array(FillPolicy.constant(0), dims)


def ones(*dims: int) -> list:
    """Array of shape ``dims`` filled with 1."""
    return make_array(FillPolicy.constant(1), dims)


def rand(*dims: int, rng: Optional[np.random.Generator] = None) -> list:
    """
    Array of shape ``dims`` filled with uniform draws in [0, 1).

    Examples
    --------
    >>> a = rand(2, 3, rng=np.random.default_rng(42))
    >>> len(a), len(a[0])
    (2, 3)
    """
    return make_array(FillPolicy.random(rng), dims)
