"""
Unit tests for read access.
"""

import logging

import pytest

from octarray.errors import IndexOutOfRange
from octarray.indexing.read import read_slice
from octarray.indexing.spec import Omitted, Point, Range
from octarray.utils.config import Config


class TestReadSlice:
    """Tests for read_slice."""

    def test_column_range(self, matrix_3x3):
        assert read_slice(matrix_3x3, [None, [1, 2]]) == [[2], [5], [8]]

    def test_block(self, matrix_3x3):
        assert read_slice(matrix_3x3, [[1, 2], [1, 2]]) == [[5]]

    def test_everything(self, matrix_3x3):
        assert read_slice(matrix_3x3, [None, None]) == matrix_3x3

    def test_tagged_specs(self, matrix_3x3):
        result = read_slice(matrix_3x3, [Range(None, 2), Omitted()])
        assert result == [[1, 2, 3], [4, 5, 6]]

    def test_point_keeps_axis(self, matrix_3x3):
        """Test that a point index leaves a length-1 axis."""
        assert read_slice(matrix_3x3, [1]) == [[4, 5, 6]]
        assert read_slice(matrix_3x3, [None, 2]) == [[3], [6], [9]]

    def test_zero_point_index(self, matrix_3x3):
        """Test that index 0 selects the first element."""
        assert read_slice(matrix_3x3, [0, 0]) == [[1]]
        assert read_slice(matrix_3x3, [Point(0), None]) == [[1, 2, 3]]

    def test_three_dimensional(self, cube_4x3x2):
        result = read_slice(cube_4x3x2, [[1, 3], 2, [1, None]])
        assert result == [[[11]], [[17]]]

    def test_remaining_axes_untouched(self, cube_4x3x2):
        result = read_slice(cube_4x3x2, [3])
        assert result == [cube_4x3x2[3]]

    def test_empty_range(self, matrix_3x3):
        assert read_slice(matrix_3x3, [[1, 1], None]) == []

    def test_empty_array_with_longer_index_vector(self):
        """Test that axes below an empty axis are not checked."""
        assert read_slice([], [None, None]) == []
        assert read_slice([[], []], [None, None, 0]) == [[], []]

    def test_reslice_empty_result(self, matrix_3x3):
        empty = read_slice(matrix_3x3, [[1, 1], None])
        assert read_slice(empty, [None, None]) == []

    def test_empty_index_vector_copies_outer_axis(self, matrix_3x3):
        result = read_slice(matrix_3x3, [])
        assert result == matrix_3x3
        assert result is not matrix_3x3

    def test_source_not_mutated(self, matrix_3x3):
        result = read_slice(matrix_3x3, [None, None])
        result[0][0] = 100
        result.append([0, 0, 0])
        assert matrix_3x3 == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_fresh_lists_at_each_sliced_axis(self, matrix_3x3):
        result = read_slice(matrix_3x3, [None, None])
        assert all(r is not s for r, s in zip(result, matrix_3x3))

    def test_out_of_range_raises(self, matrix_3x3):
        with pytest.raises(IndexOutOfRange):
            read_slice(matrix_3x3, [None, [2, 4]])

    def test_out_of_range_clips_when_configured(self, matrix_3x3):
        Config.set("indexing.out_of_range", "clip")
        assert read_slice(matrix_3x3, [[2, 10], [1, 10]]) == [[8, 9]]
        assert read_slice(matrix_3x3, [5]) == []

    def test_logs_bounds(self, matrix_3x3, caplog):
        caplog.set_level(logging.DEBUG, logger="octarray")
        read_slice(matrix_3x3, [0])
        assert "Reading slice [(0, 1)]" in caplog.text
