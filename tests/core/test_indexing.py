import numpy as np
import pytest

from ndprep import Index, NDArray, DataFrame, Series
from .indexes.utils import assert_indexes_equal
from .test_series import assert_series_equal


class TestSeriesILoc(object):
    def test_int(self, series_f32):
        actual = series_f32.iloc[2]

        assert actual == 3.
        assert type(actual) == float

    def test_negative_int(self, series_i64):
        assert series_i64.iloc[-1] == 5

    def test_int_out_of_bounds(self, series_i64):
        with pytest.raises(IndexError):
            series_i64.iloc[5]

    def test_slice(self, series_i64):
        actual = series_i64.iloc[1:3]
        expected = Series(np.array([2, 3]), Index(np.array([1, 2])))

        assert_series_equal(actual, expected)

    def test_list(self, series_i64):
        actual = series_i64.iloc[[0, 2]]
        expected = Series(np.array([1, 3]), Index(np.array([0, 2])))

        assert_series_equal(actual, expected)

    def test_ndarray(self, series_i64):
        actual = series_i64.iloc[NDArray(np.array([4, 0]))]

        np.testing.assert_array_equal(actual.values, np.array([5, 1]))
        np.testing.assert_array_equal(actual.index.values, np.array([4, 0]))

    @pytest.mark.parametrize('item, exception', [
        ([1.5], TypeError),
        ([0, 7], IndexError),
        (np.array([True, False]), TypeError),
        ('a', TypeError)
    ])
    def test_invalid(self, series_i64, item, exception):
        with pytest.raises(exception):
            series_i64.iloc[item]


class TestDataFrameILoc(object):
    def test_row(self, df_small):
        actual = df_small.iloc[1]

        assert list(actual.values) == [2., 2, 'Abc']
        assert actual.dtype == np.dtype(object)
        assert list(actual.index.values) == ['a', 'b', 'c']
        assert actual.name == '1'

    def test_row_numeric(self, df_missing):
        actual = df_missing[['a', 'c']].iloc[0]

        np.testing.assert_array_equal(actual.values, np.array([1., 10.]))
        assert actual.dtype == np.dtype(np.float64)
        assert actual.name == '0'

    def test_rows_slice(self, df_small):
        actual = df_small.iloc[0:2]

        assert isinstance(actual, DataFrame)
        np.testing.assert_array_equal(actual['b'].values, np.array([1, 2]))

    def test_rows_list(self, df_small):
        actual = df_small.iloc[[0, 2]]

        assert_indexes_equal(actual.index, Index(np.array([0, 2])))
        np.testing.assert_array_equal(actual['a'].values, np.array([1., 3.], dtype=np.float32))

    def test_column(self, df_small):
        actual = df_small.iloc[:, 1]

        assert isinstance(actual, Series)
        assert actual.name == 'b'
        np.testing.assert_array_equal(actual.values, np.arange(1, 6))

    def test_cell(self, df_small):
        assert df_small.iloc[1, 0] == 2.
        assert df_small.iloc[-1, 2] == 'secrETariat'

    def test_rows_and_columns(self, df_small):
        actual = df_small.iloc[[0, 2], [0, 1]]

        assert list(actual) == ['a', 'b']
        assert_indexes_equal(actual.index, Index(np.array([0, 2])))

    def test_column_slice(self, df_small):
        assert list(df_small.iloc[:, 1:]) == ['b', 'c']

    @pytest.mark.parametrize('item, exception', [
        (5, IndexError),
        ((0, 3), IndexError),
        ((0, 0, 0), IndexError),
        ([0, 9], IndexError),
        ('a', TypeError)
    ])
    def test_invalid(self, df_small, item, exception):
        with pytest.raises(exception):
            df_small.iloc[item]
