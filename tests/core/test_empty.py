import numpy as np
import pytest

from ndprep import Index, Series, RangeIndex, DataFrame, NDArray, zeros
from .indexes.utils import assert_indexes_equal
from .test_frame import assert_dataframe_equal
from .test_series import assert_series_equal


class TestEmptyDataFrame(object):
    def test_aggregation_empty(self, df_empty):
        assert_series_equal(df_empty.min(), Series(np.empty(0), Index(np.empty(0, dtype=object))))

    @pytest.mark.parametrize('op', [
        'df < 2',
        'df * 2',
        'df.fillna(0)',
        'df.dropna()',
        'df.get_dummies()'
    ])
    def test_empty_ops(self, df_empty, op):
        df = df_empty
        assert_dataframe_equal(eval(op), df)

    @pytest.mark.parametrize('op', [
        'df[2:]',
        'df.head()',
        'df.tail()'
    ])
    def test_empty_selection(self, df_empty, op):
        df = df_empty
        actual = eval(op)

        assert actual.empty
        assert list(actual) == []

    @pytest.mark.parametrize('op,exception', [
        ('df["a"]', KeyError),
        ('df[["a", "b"]]', KeyError),
        ('df.drop("a")', KeyError),
        ('df.drop(["a", "b"])', KeyError),
        ('df.iloc[0]', IndexError)
    ])
    def test_empty_exceptions(self, df_empty, op, exception):
        df = df_empty

        with pytest.raises(exception):
            eval(op)

    def test_keys_empty(self, df_empty):
        assert_indexes_equal(df_empty.keys(), Index(np.empty(0, dtype=object)))

    def test_missing_counts_empty(self, df_empty):
        assert len(df_empty.missing_counts()) == 0
        assert df_empty.drop_most_missing().empty

    def test_to_array_empty(self, df_empty):
        assert df_empty.to_array().shape == (0, 0)


class TestEmptySeries(object):
    def test_aggregations(self):
        sr = Series()

        assert np.isnan(sr.mean())
        assert np.isnan(sr.max())
        assert sr.sum() == 0
        assert sr.count() == 0

    def test_ops(self):
        assert_series_equal(Series() + 1, Series())
        assert_series_equal(Series().fillna(0), Series())
        assert_series_equal(Series().dropna(), Series(np.empty(0), Index(np.empty(0, dtype=np.int64))))


def test_empty_series_init():
    assert_series_equal(Series(), Series(np.empty(0), RangeIndex(0, 0, 1), np.dtype(np.float64)))


def test_empty_dataframe_init():
    assert_dataframe_equal(DataFrame(), DataFrame({}, RangeIndex(0)))


def test_empty_ndarray():
    arr = zeros(0)

    assert arr.empty
    assert arr.shape == (0, )
    assert str(arr) == 'Empty NDArray'
    assert NDArray().empty
