"""Generalized axis-wise slicing for read and write access."""

from octarray.indexing.spec import (
    OMITTED,
    IndexSpec,
    Omitted,
    Point,
    Range,
    as_index_spec,
    as_index_vector,
)
from octarray.indexing.resolve import resolve_slice, resolve_index_vector
from octarray.indexing.read import read_slice
from octarray.indexing.write import write_slice

__all__ = [
    "OMITTED",
    "IndexSpec",
    "Omitted",
    "Point",
    "Range",
    "as_index_spec",
    "as_index_vector",
    "resolve_slice",
    "resolve_index_vector",
    "read_slice",
    "write_slice",
]
