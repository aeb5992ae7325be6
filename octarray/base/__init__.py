"""Array model, construction and reshaping."""

from octarray.base.enums import FillKind, OutOfRangePolicy
from octarray.base.shape import is_container, ndim, shape_of
from octarray.base.factory import FillPolicy, make_array, zeros, ones, rand
from octarray.base.reshape_fns import to_2d, transpose, tile

__all__ = [
    "FillKind",
    "OutOfRangePolicy",
    "is_container",
    "ndim",
    "shape_of",
    "FillPolicy",
    "make_array",
    "zeros",
    "ones",
    "rand",
    "to_2d",
    "transpose",
    "tile",
]
