from collections import OrderedDict

import numpy as np
import pytest

from ndprep import NDArray, Series, Index, DataFrame, RangeIndex


@pytest.fixture(scope='module')
def data_f32():
    return np.arange(1, 6, dtype=np.float32)


@pytest.fixture(scope='module')
def data_i64():
    return np.arange(1, 6, dtype=np.int64)


@pytest.fixture(scope='module')
def data_str():
    return np.array(['a', 'Abc', 'goosfraba', '   dC  ', 'secrETariat'], dtype=object)


@pytest.fixture(scope='module')
def data_f64_missing():
    return np.array([1., np.nan, 3., np.nan, 5.])


@pytest.fixture(scope='module')
def data_str_missing():
    return np.array(['Pave', None, 'Grvl', None, 'Pave'], dtype=object)


@pytest.fixture(scope='module')
def index_i64():
    return Index(np.arange(5), np.dtype(np.int64))


@pytest.fixture(scope='module')
def range_index():
    return RangeIndex(0, 5, 1)


@pytest.fixture(scope='module')
def series_f32(data_f32, index_i64):
    return Series(data_f32, index_i64, np.dtype(np.float32))


@pytest.fixture(scope='module')
def series_i64(data_i64, index_i64):
    return Series(data_i64, index_i64, np.dtype(np.int64))


@pytest.fixture(scope='module')
def series_str(data_str, index_i64):
    return Series(data_str, index_i64, data_str.dtype)


@pytest.fixture(scope='module')
def series_f64_missing(data_f64_missing, index_i64):
    return Series(data_f64_missing, index_i64, name='a')


@pytest.fixture(scope='module')
def df_small(data_f32, series_i64, series_str, index_i64):
    return DataFrame(OrderedDict((('a', data_f32), ('b', series_i64), ('c', series_str))), index_i64)


@pytest.fixture(scope='module')
def df_missing(data_f64_missing, data_str_missing):
    return DataFrame(OrderedDict((('a', data_f64_missing),
                                  ('b', data_str_missing),
                                  ('c', np.array([10., 20., np.nan, 40., 50.])))))


@pytest.fixture(scope='module')
def df_empty():
    return DataFrame()


@pytest.fixture(scope='module')
def index_i64_2():
    return Index(np.arange(2, 7), np.dtype(np.int64))


@pytest.fixture(scope='module')
def df1(data_f32, index_i64_2):
    return DataFrame(OrderedDict((('a', Series(np.arange(5), index_i64_2)), ('b', data_f32))), index_i64_2)


@pytest.fixture
def matrix():
    # function scope since tests update it in place
    return NDArray(np.arange(12).reshape(3, 4))


@pytest.fixture(scope='module')
def matrix_f32():
    return NDArray(np.arange(12, dtype=np.float32).reshape(3, 4))


@pytest.fixture(scope='module')
def matrix_other():
    return NDArray(np.array([[2., 1, 4, 3], [1, 2, 3, 4], [4, 3, 2, 1]], dtype=np.float32))


@pytest.fixture
def house_tiny_dir(tmpdir):
    return str(tmpdir.mkdir('data'))
