"""
Unit tests for index specifications and bound resolution.
"""

import numpy as np
import pytest

from octarray.base.enums import OutOfRangePolicy
from octarray.errors import IndexOutOfRange
from octarray.indexing.resolve import resolve_index_vector, resolve_slice
from octarray.indexing.spec import OMITTED, Omitted, Point, Range, as_index_spec
from octarray.utils.config import Config


class TestAsIndexSpec:
    """Tests for coercion of caller values to index specifications."""

    def test_none_is_omitted(self):
        assert as_index_spec(None) == Omitted()
        assert as_index_spec(None) is OMITTED

    def test_zero_is_a_point(self):
        """Test that 0 is not mistaken for an omitted index."""
        assert as_index_spec(0) == Point(0)

    def test_numpy_int_is_a_point(self):
        assert as_index_spec(np.int32(4)) == Point(4)

    def test_pair_is_range(self):
        assert as_index_spec([1, 3]) == Range(1, 3)
        assert as_index_spec((None, 2)) == Range(None, 2)
        assert as_index_spec([2]) == Range(2, None)
        assert as_index_spec([]) == Range()

    def test_slice_is_range(self):
        assert as_index_spec(slice(1, None)) == Range(1, None)
        assert as_index_spec(slice(None)) == Range()

    def test_specs_pass_through(self):
        spec = Range(0, 1)
        assert as_index_spec(spec) is spec

    @pytest.mark.parametrize(
        "obj", [True, 1.5, "a", [1, 2, 3], slice(0, 4, 2), [0.5, 1]]
    )
    def test_unsupported_values_raise(self, obj):
        with pytest.raises(TypeError):
            as_index_spec(obj)


class TestResolveSlice:
    """Tests for resolve_slice."""

    def test_omitted_selects_whole_axis(self):
        assert resolve_slice(5) == (0, 5)
        assert resolve_slice(5, Omitted()) == (0, 5)

    def test_point(self):
        assert resolve_slice(5, 0) == (0, 1)
        assert resolve_slice(5, 4) == (4, 5)

    def test_range_defaults(self):
        assert resolve_slice(5, [None, None]) == (0, 5)
        assert resolve_slice(5, [2, None]) == (2, 5)
        assert resolve_slice(5, [None, 3]) == (0, 3)
        assert resolve_slice(5, [1, 3]) == (1, 3)

    def test_empty_range_is_allowed(self):
        assert resolve_slice(5, [2, 2]) == (2, 2)
        assert resolve_slice(5, [5, 5]) == (5, 5)

    @pytest.mark.parametrize("spec", [5, -1, [0, 6], [-1, 2], [3, 2]])
    def test_out_of_range_raises_by_default(self, spec):
        with pytest.raises(IndexOutOfRange):
            resolve_slice(5, spec)

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            resolve_slice(2, 2)

    def test_error_names_axis(self):
        with pytest.raises(IndexOutOfRange, match="axis 3"):
            resolve_slice(2, 7, axis=3)

    @pytest.mark.parametrize(
        "spec, expected",
        [
            (5, (5, 5)),
            (9, (5, 5)),
            (-1, (0, 0)),
            ([0, 9], (0, 5)),
            ([-3, 2], (0, 2)),
            ([4, 2], (4, 4)),
        ],
    )
    def test_clip_policy_clamps(self, spec, expected):
        assert resolve_slice(5, spec, policy=OutOfRangePolicy.CLIP) == expected

    def test_clip_policy_from_config(self):
        Config.set("indexing.out_of_range", "clip")
        assert resolve_slice(3, [1, 10]) == (1, 3)

    def test_invalid_policy_name(self):
        Config.set("indexing.out_of_range", "wrap")
        with pytest.raises(ValueError, match="out-of-range policy"):
            resolve_slice(3, 0)


class TestResolveIndexVector:
    """Tests for resolve_index_vector."""

    def test_resolves_each_axis(self, cube_4x3x2):
        bounds = resolve_index_vector(cube_4x3x2, [None, [1, 2], 1])
        assert bounds == [(0, 4), (1, 2), (1, 2)]

    def test_shorter_vector(self, cube_4x3x2):
        assert resolve_index_vector(cube_4x3x2, [2]) == [(2, 3)]

    def test_empty_vector_selects_outer_axis(self, matrix_3x3):
        assert resolve_index_vector(matrix_3x3, []) == [(0, 3)]

    def test_too_many_axes_raise(self, matrix_3x3):
        with pytest.raises(IndexOutOfRange, match="rank 2"):
            resolve_index_vector(matrix_3x3, [0, 0, 0])

    def test_axes_below_empty_axis_resolve_empty(self):
        assert resolve_index_vector([], [None, 3]) == [(0, 0), (0, 0)]
        assert resolve_index_vector([[], []], [0, None, 7]) == [
            (0, 1),
            (0, 0),
            (0, 0),
        ]

    def test_leaf_cannot_be_indexed(self):
        with pytest.raises(IndexOutOfRange):
            resolve_index_vector(5, [0])
