"""
octarray - Octave-style nested-list arrays

Construction, shape introspection, read/write slicing, transposition and
tiling for plain Python nested lists.
"""

__version__ = "0.1.0"

from octarray.errors import (
    OctArrayError,
    InvalidDimensions,
    ShapeMismatch,
    IndexOutOfRange,
)
from octarray.utils.config import Config
from octarray.base import (
    FillKind,
    FillPolicy,
    make_array,
    zeros,
    ones,
    rand,
    shape_of,
    ndim,
    transpose,
    tile,
)
from octarray.indexing import Omitted, Point, Range, resolve_slice, read_slice, write_slice
from octarray.base.array_wrapper import ArrayWrapper
from octarray.logging_config import setup_logging

repmat = tile

__all__ = [
    "OctArrayError",
    "InvalidDimensions",
    "ShapeMismatch",
    "IndexOutOfRange",
    "Config",
    "FillKind",
    "FillPolicy",
    "make_array",
    "zeros",
    "ones",
    "rand",
    "shape_of",
    "ndim",
    "transpose",
    "tile",
    "repmat",
    "Omitted",
    "Point",
    "Range",
    "resolve_slice",
    "read_slice",
    "write_slice",
    "ArrayWrapper",
    "setup_logging",
]
