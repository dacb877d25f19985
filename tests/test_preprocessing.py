from collections import OrderedDict

import numpy as np
import pytest

from ndprep import DataFrame, Series, NDArray, MissingValueError
from ndprep.datasets import load_house_tiny
from ndprep.preprocessing import impute_mean, encode_categorical, to_arrays, prepare


@pytest.fixture
def house_df(house_tiny_dir):
    return load_house_tiny(house_tiny_dir)


class TestPreprocessing(object):
    def test_impute_mean(self, house_df):
        actual = impute_mean(house_df[['NumRooms', 'Alley']])

        np.testing.assert_array_equal(actual['NumRooms'].values, np.array([3., 2., 4., 3.]))
        # categorical columns are left as they are
        assert actual['Alley'].isna().values.tolist() == [False, True, True, True]

    def test_encode_categorical(self, house_df):
        actual = encode_categorical(house_df[['NumRooms', 'Alley']])

        assert list(actual) == ['NumRooms', 'Alley_Pave', 'Alley_nan']
        np.testing.assert_array_equal(actual['Alley_Pave'].values, np.array([1., 0., 0., 0.]))
        np.testing.assert_array_equal(actual['Alley_nan'].values, np.array([0., 1., 1., 1.]))

    def test_encode_categorical_no_na(self, house_df):
        actual = encode_categorical(house_df[['Alley']], dummy_na=False)

        assert list(actual) == ['Alley_Pave']

    def test_to_arrays(self):
        inputs = DataFrame(OrderedDict((('a', [1., 2.]), ('b', [0, 1]))))
        outputs = Series([10, 20])

        X, y = to_arrays(inputs, outputs)

        assert isinstance(X, NDArray)
        assert X.shape == (2, 2)
        assert y.shape == (2, )
        assert y.dtype == np.dtype(np.float64)

    def test_to_arrays_dtype(self):
        X, y = to_arrays(DataFrame(OrderedDict({'a': [1, 2]})), Series([1, 2]), np.float32)

        assert X.dtype == np.dtype(np.float32)
        assert y.dtype == np.dtype(np.float32)

    def test_to_arrays_length_mismatch(self):
        with pytest.raises(ValueError):
            to_arrays(DataFrame(OrderedDict({'a': [1, 2]})), Series([1, 2, 3]))

    def test_to_arrays_missing(self, house_df):
        with pytest.raises(MissingValueError) as excinfo:
            to_arrays(house_df[['NumRooms']], house_df['Price'])

        assert excinfo.value.columns == ['NumRooms']

    def test_prepare(self, house_df):
        X, y = prepare(house_df)

        np.testing.assert_array_equal(X.values, np.array([[3., 1., 0.],
                                                          [2., 0., 1.],
                                                          [4., 0., 1.],
                                                          [3., 0., 1.]]))
        np.testing.assert_array_equal(y.values, np.array([127500., 106000., 178100., 140000.]))
        assert X.dtype == np.dtype(np.float64)
        assert y.dtype == np.dtype(np.float64)

    def test_prepare_does_not_mutate(self, house_df):
        prepare(house_df)

        assert house_df.missing_counts().values.tolist() == [2, 3, 0]

    def test_prepare_then_compute(self, house_df):
        X, y = prepare(house_df, target='Price')

        # arrays support the usual elementwise arithmetic and reductions
        assert (X * 2).sum().item() == 2 * 16.
        assert X.sum(axis=0).tolist() == [12., 1., 3.]
