import numpy as np
import pytest

from ndprep import RangeIndex, Index
from .test_base import assert_index_equal


def assert_range_equal(actual, expected):
    assert actual.start == expected.start
    assert actual.stop == expected.stop
    assert actual.step == expected.step

    assert_index_equal(actual, expected)


class TestRangeIndex(object):
    def test_init_single_arg(self, range_index):
        assert_range_equal(RangeIndex(5), range_index)

    def test_init_no_args(self):
        with pytest.raises(TypeError):
            RangeIndex()

    def test_init_negative_step(self):
        with pytest.raises(ValueError):
            RangeIndex(5, 0, -1)

    def test_init_not_int(self):
        with pytest.raises(TypeError):
            RangeIndex(2.5)

    def test_repr(self):
        assert repr(RangeIndex(3)) == 'RangeIndex(start=0, stop=3, step=1)'

    def test_values(self):
        np.testing.assert_array_equal(RangeIndex(1, 7, 2).values, np.array([1, 3, 5]))

    def test_len(self, range_index):
        assert len(range_index) == 5
        assert len(RangeIndex(0)) == 0

    def test_empty(self):
        assert RangeIndex(0).empty
        assert not RangeIndex(1).empty

    def test_comparison(self, range_index):
        actual = range_index < 3
        expected = Index(np.array([True, True, True, False, False]))

        assert_index_equal(actual, expected)

    def test_comparison_not_int(self, range_index):
        with pytest.raises(TypeError):
            range_index < 2.5

    def test_slice_returns_index(self, range_index):
        actual = range_index[1:3]

        assert type(actual) == Index
        assert_index_equal(actual, Index(np.array([1, 2])))
