"""
Array wrapper class that gives nested-list arrays Octave-like ergonomics.

The wrapped data stays a plain nested list; the wrapper only routes
subscripting, transposition and tiling to the functional API, and converts
to numpy/pandas when needed.
"""

from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from octarray.base.factory import FillPolicy, make_array
from octarray.base.reshape_fns import tile, transpose
from octarray.base.shape import is_container, shape_of
from octarray.indexing.read import read_slice
from octarray.indexing.write import write_slice


class ArrayWrapper:
    """
    Wraps a nested-list array.

    Subscripts follow the index specification rules of ``read_slice``:
    ``w[0, :]`` keeps both axes (a 1 x N result), ``w[None, [1, 3]]``
    selects columns 1 and 2 of every row, and ``w[1:, 0] = 5`` broadcasts
    into the wrapped list in place.
    """

    def __init__(self, data: Any):
        """
        Parameters
        ----------
        data : list or leaf
            Nested-list array. It is wrapped, not copied.
        """
        if isinstance(data, ArrayWrapper):
            data = data.data
        self._data = data

    @property
    def data(self) -> Any:
        """Underlying nested list."""
        return self._data

    @property
    def shape(self) -> Tuple[int, ...]:
        """Length of each axis."""
        return tuple(shape_of(self._data))

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        return len(self.shape)

    @property
    def size(self) -> int:
        """Number of leaves, assuming a uniform shape."""
        return int(np.prod(self.shape, dtype=np.int64))

    @property
    def T(self) -> "ArrayWrapper":
        """Transposed copy."""
        return ArrayWrapper(transpose(self._data))

    def repmat(self, row_rep: int = 1, col_rep: int = 1) -> "ArrayWrapper":
        """Tiled copy, see ``tile``."""
        return ArrayWrapper(tile(self._data, row_rep, col_rep))

    @staticmethod
    def _index_vector(key: Any) -> Sequence[Any]:
        if not isinstance(key, tuple):
            key = (key,)
        return list(key)

    def __getitem__(self, key: Any) -> "ArrayWrapper":
        return ArrayWrapper(read_slice(self._data, self._index_vector(key)))

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(value, ArrayWrapper):
            value = value.data
        elif isinstance(value, np.ndarray):
            value = value.tolist()
        write_slice(self._data, self._index_vector(key), value)

    def __len__(self) -> int:
        return len(self._data) if is_container(self._data) else 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayWrapper):
            return self._data == other._data
        return self._data == other

    __hash__ = None

    def to_numpy(self) -> np.ndarray:
        """Convert to a numpy array."""
        return np.asarray(self._data)

    def to_frame(self) -> Union[pd.Series, pd.DataFrame]:
        """
        Convert to pandas.

        Returns
        -------
        pd.Series or pd.DataFrame
            Series for rank 1, DataFrame with one row per outer element
            for rank 2
        """
        if self.ndim == 1:
            return pd.Series(self._data)
        elif self.ndim == 2:
            return pd.DataFrame(self._data)
        else:
            raise ValueError(f"Unsupported ndim: {self.ndim}")

    @classmethod
    def from_shape(
        cls,
        shape: Sequence[int],
        fill: Optional[FillPolicy] = None,
    ) -> "ArrayWrapper":
        """
        Create a new array of ``shape``.

        Parameters
        ----------
        shape : sequence of int
            Positive axis lengths
        fill : FillPolicy, optional
            Defaults to a constant 0

        Returns
        -------
        ArrayWrapper
        """
        if fill is None:
            fill = FillPolicy.constant(0)
        return cls(make_array(fill, shape))

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "ArrayWrapper":
        """Create wrapper from a numpy array, converting to Python leaves."""
        return cls(np.asarray(arr).tolist())

    def __repr__(self) -> str:
        return f"ArrayWrapper(shape={self.shape}, data={self._data!r})"
