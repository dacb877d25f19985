import numpy as np
import pytest

from ndprep import Series, RangeIndex, Index, NDArray, MissingValueError
from .indexes.utils import assert_indexes_equal


def assert_series_equal(actual, expected, almost=None, sort=False):
    actual_values = actual.values
    expected_values = expected.values
    if sort:
        actual_values = np.sort(actual_values)
        expected_values = np.sort(expected_values)

    # for checking floats
    if almost is not None:
        np.testing.assert_array_almost_equal(actual_values, expected_values, almost)
    else:
        np.testing.assert_array_equal(actual_values, expected_values)
    assert actual.dtype.char == expected.dtype.char
    assert len(actual) == len(expected)
    assert actual.name == expected.name
    assert_indexes_equal(actual.index, expected.index, sort=sort)


class TestSeries(object):
    def test_init_default_index(self, data_i64):
        actual = Series(data_i64)
        expected = Series(data_i64, RangeIndex(5))

        assert_series_equal(actual, expected)

    def test_init_raw_cast_type(self, data_i64, index_i64, data_f32):
        actual = Series(data_i64, index_i64, np.dtype(np.float32))
        expected = Series(data_f32, index_i64, np.dtype(np.float32))

        assert_series_equal(actual, expected)

    def test_init_list(self):
        data = [1, 2, 3]
        sr = Series(data)

        np.testing.assert_array_equal(sr.values, np.array(data))
        assert sr.dtype == np.dtype(np.int64)

    def test_init_list_missing_int(self):
        sr = Series([1, None, 3])

        assert sr.dtype == np.dtype(np.float64)
        np.testing.assert_array_equal(sr.values, np.array([1., np.nan, 3.]))

    def test_init_list_missing_str(self):
        sr = Series(['Pave', None])

        assert sr.dtype == np.dtype(object)
        assert sr.values[1] is None

    def test_init_object_numbers_missing(self):
        sr = Series(np.array([2, None, 4], dtype=object))

        assert sr.dtype == np.dtype(np.float64)

    def test_init_list_wrong_dtype(self):
        with pytest.raises(TypeError):
            Series([1, 2, 'abc'])

    def test_init_2d(self):
        with pytest.raises(ValueError):
            Series(np.zeros((2, 2)))

    def test_init_index_length_mismatch(self, index_i64):
        with pytest.raises(ValueError):
            Series([1, 2], index_i64)

    def test_init_cast_missing_to_int(self, data_f64_missing):
        with pytest.raises(MissingValueError):
            Series(data_f64_missing, dtype=np.int64)

    def test_init_empty(self):
        sr = Series()

        assert sr.empty
        assert sr.dtype == np.dtype(np.float64)
        assert str(sr) == 'Empty Series'

    def test_repr_str(self, series_f32):
        assert repr(series_f32) == 'Series(name=None, dtype=float32)'
        str(series_f32)

    @pytest.mark.parametrize('comparison, expected_data', [
        ('<', np.array([True, False, False, False, False])),
        ('<=', np.array([True, True, False, False, False])),
        ('==', np.array([False, True, False, False, False])),
        ('!=', np.array([True, False, True, True, True])),
        ('>=', np.array([False, True, True, True, True])),
        ('>', np.array([False, False, True, True, True]))
    ])
    def test_comparison(self, comparison, expected_data, series_i64, index_i64):
        actual = eval('series_i64 {} 2'.format(comparison))
        expected = Series(expected_data, index_i64, np.dtype(np.bool_))

        assert_series_equal(actual, expected)

    def test_filter(self, series_f32, index_i64):
        actual = series_f32[series_f32 != 2]
        expected = Series(np.array([1, 3, 4, 5], dtype=np.float32),
                          Index(np.array([0, 2, 3, 4])),
                          np.dtype(np.float32))

        assert_series_equal(actual, expected)

    def test_filter_combined(self, series_i64):
        actual = series_i64[(series_i64 > 1) & ~(series_i64 > 3)]

        np.testing.assert_array_equal(actual.values, np.array([2, 3]))
        np.testing.assert_array_equal(actual.index.values, np.array([1, 2]))

    def test_filter_not_bool(self, series_i64):
        with pytest.raises(TypeError):
            series_i64[series_i64]

    def test_slice(self, series_f32):
        actual = series_f32[1:3]
        expected = Series(np.array([2, 3], dtype=np.float32), Index(np.array([1, 2])), np.dtype(np.float32))

        assert_series_equal(actual, expected)

    def test_head_tail(self, series_f32):
        np.testing.assert_array_equal(series_f32.head(2).values, np.array([1, 2], dtype=np.float32))
        np.testing.assert_array_equal(series_f32.tail(2).values, np.array([4, 5], dtype=np.float32))
        assert len(series_f32.tail(0)) == 0

    @pytest.mark.parametrize('operation, expected_data', [
        ('+', np.array([3, 4, 5, 6, 7], dtype=np.float32)),
        ('-', np.array([-1, 0, 1, 2, 3], dtype=np.float32)),
        ('*', np.array([2, 4, 6, 8, 10], dtype=np.float32)),
        ('/', np.array([0.5, 1, 1.5, 2, 2.5], dtype=np.float32)),
        ('**', np.array([1, 4, 9, 16, 25], dtype=np.float32))
    ])
    def test_op_scalar(self, operation, expected_data, series_f32, index_i64):
        actual = eval('series_f32 {} 2'.format(operation))
        expected = Series(expected_data, index_i64, np.dtype(np.float32))

        assert_series_equal(actual, expected, almost=5)

    def test_op_series(self, series_i64):
        actual = series_i64 + series_i64

        np.testing.assert_array_equal(actual.values, np.arange(2, 11, 2))

    def test_op_reflected(self, series_i64):
        np.testing.assert_array_equal((10 - series_i64).values, np.array([9, 8, 7, 6, 5]))

    def test_op_different_index(self, series_i64):
        with pytest.raises(ValueError):
            series_i64 + Series(np.arange(5), Index(np.arange(1, 6)))

    def test_op_str(self, series_str):
        with pytest.raises(TypeError):
            series_str + 1

    def test_astype(self, series_i64):
        assert series_i64.astype(np.float64).dtype == np.dtype(np.float64)

    @pytest.mark.parametrize('aggregation, expected', [
        ('sum', 9.),
        ('prod', 15.),
        ('count', 3),
        ('mean', 3.),
        ('min', 1.),
        ('max', 5.),
        ('var', 4.),
        ('std', 2.)
    ])
    def test_aggregation_skips_missing(self, series_f64_missing, aggregation, expected):
        actual = getattr(series_f64_missing, aggregation)()

        assert actual == pytest.approx(expected)

    def test_aggregation_str(self, series_str):
        with pytest.raises(TypeError):
            series_str.mean()

        assert series_str.count() == 5

    def test_mean_all_missing(self):
        assert np.isnan(Series([np.nan, np.nan]).mean())

    def test_unique(self):
        actual = Series(['b', 'a', 'b', None]).unique()

        assert list(actual) == ['b', 'a', None]

    def test_isna(self, series_f64_missing, index_i64):
        expected = Series(np.array([False, True, False, True, False]), index_i64, name='a')

        assert_series_equal(series_f64_missing.isna(), expected)
        assert_series_equal(series_f64_missing.notna(), Series(~expected.values, index_i64, name='a'))

    def test_isna_str(self, data_str_missing):
        actual = Series(data_str_missing).isna()

        np.testing.assert_array_equal(actual.values, np.array([False, True, False, True, False]))

    def test_isna_int(self, series_i64):
        assert not series_i64.isna().values.any()

    def test_dropna(self, series_f64_missing):
        actual = series_f64_missing.dropna()
        expected = Series(np.array([1., 3., 5.]), Index(np.array([0, 2, 4])), name='a')

        assert_series_equal(actual, expected)

    def test_fillna(self, series_f64_missing, index_i64):
        actual = series_f64_missing.fillna(series_f64_missing.mean())
        expected = Series(np.array([1., 3., 3., 3., 5.]), index_i64, name='a')

        assert_series_equal(actual, expected)

    def test_fillna_does_not_mutate(self, series_f64_missing):
        series_f64_missing.fillna(0)

        assert np.isnan(series_f64_missing.values[1])

    def test_fillna_str(self, data_str_missing):
        actual = Series(data_str_missing).fillna('None')

        assert list(actual.values) == ['Pave', 'None', 'Grvl', 'None', 'Pave']

    def test_fillna_wrong_type(self, series_f64_missing, data_str_missing):
        with pytest.raises(TypeError):
            series_f64_missing.fillna('a')

        with pytest.raises(TypeError):
            Series(data_str_missing).fillna(1)

        with pytest.raises(TypeError):
            series_f64_missing.fillna([1])

    def test_apply(self, series_f32):
        actual = series_f32.apply(np.sqrt)

        np.testing.assert_array_almost_equal(actual.values, np.sqrt(series_f32.values))

    def test_apply_kwargs(self):
        actual = Series([3, 1, 2]).apply(np.sort, kind='stable')

        np.testing.assert_array_equal(actual.values, np.array([1, 2, 3]))

    def test_apply_wrong_length(self, series_f32):
        with pytest.raises(ValueError):
            series_f32.apply(lambda x: x[:2])

        with pytest.raises(TypeError):
            series_f32.apply('sqrt')

    def test_to_array(self, series_f32):
        actual = series_f32.to_array()

        assert isinstance(actual, NDArray)
        np.testing.assert_array_equal(actual.values, series_f32.values)
        assert actual.dtype == np.dtype(np.float32)
        assert series_f32.to_array(np.float64).dtype == np.dtype(np.float64)

    def test_to_array_missing(self, series_f64_missing):
        with pytest.raises(MissingValueError) as excinfo:
            series_f64_missing.to_array()

        assert excinfo.value.columns == ['a']

    def test_to_array_str(self, series_str):
        with pytest.raises(TypeError):
            series_str.to_array()
