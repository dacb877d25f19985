from collections import OrderedDict

import numpy as np
from pandas import Series as PandasSeries, unique as pd_unique
from tabulate import tabulate

from .generic import BinaryOps, BitOps, NdCommon
from .indexes import Index, RangeIndex
from .ndarray import NDArray
from .utils import infer_dtype, check_type, is_scalar, check_valid_int_slice, convert_to_numpy, check_dtype, \
    shorten_data, missing_mask, is_numeric_dtype, same_index, get_operation, get_comparison, \
    get_bitwise_operation, MissingValueError


class Series(BinaryOps, BitOps, NdCommon):
    """Named column of data with an Index, possibly containing missing values.

    Missing values are np.nan for float data and None or np.nan for object (string) data.
    Integer data given with missing values is converted to float64.

    Attributes
    ----------
    index
    dtype
    name
    iloc

    See Also
    --------
    pandas.Series : https://pandas.pydata.org/pandas-docs/stable/reference/api/pandas.Series.html

    Examples
    --------
    >>> import ndprep as nd
    >>> import numpy as np
    >>> sr = nd.Series([0, 1, 2])
    >>> sr
    Series(name=None, dtype=int64)
    >>> sr.index
    RangeIndex(start=0, stop=3, step=1)
    >>> print(sr)  # str
    <BLANKLINE>
    ---  --
      0   0
      1   1
      2   2
    >>> len(sr)
    3
    >>> (sr + 2).values
    array([2, 3, 4])
    >>> sr = nd.Series([3, None, 5], name='NumRooms')
    >>> sr.dtype
    dtype('float64')
    >>> sr.mean()
    4.0
    >>> sr.fillna(sr.mean()).values
    array([3., 4., 5.])

    """
    _empty_text = 'Empty Series'

    def __init__(self, data=None, index=None, dtype=None, name=None):
        """Initialize a Series object.

        Parameters
        ----------
        data : numpy.ndarray or NDArray or list, optional
            Raw 1-dimensional data.
        index : Index or RangeIndex, optional
            Index linked to the data; must be of the same length.
            RangeIndex by default.
        dtype : numpy.dtype or type, optional
            Desired Numpy dtype for the elements. If data is np.ndarray with a dtype different to dtype argument,
            it is astype'd to the argument dtype. Inferred from `data` by default.
        name : str, optional
            Name of the Series.

        """
        self._data = _process_input(data, dtype)
        self.index = _process_index(index, self._data)
        self.name = check_type(name, str)

    @property
    def values(self):
        return self._data

    @property
    def dtype(self):
        return self._data.dtype

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = value

    @property
    def empty(self):
        return len(self._data) == 0

    @property
    def is_numeric(self):
        """Whether the data is numeric (bool, int, or float) as opposed to e.g. strings."""
        return is_numeric_dtype(self.dtype)

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    @property
    def iloc(self):
        """Retrieve Indexer by position.

        Supported iloc functionality exemplified below.

        Returns
        -------
        _ILocIndexer

        Examples
        --------
        >>> sr = nd.Series(np.arange(3))
        >>> print(sr.iloc[2])
        2
        >>> print(sr.iloc[0:2])
        <BLANKLINE>
        ---  --
          0   0
          1   1
        >>> print(sr.iloc[[0, 2]])
        <BLANKLINE>
        ---  --
          0   0
          2   2

        """
        from .indexing import _ILocIndexer

        return _ILocIndexer(self)

    def __repr__(self):
        return "{}(name={}, dtype={})".format(self.__class__.__name__,
                                              self.name,
                                              self.dtype)

    def __str__(self):
        if self.empty:
            return self._empty_text

        # index
        str_data = OrderedDict()
        str_data.update((name, shorten_data(data.values)) for name, data in self.index._gather_data(' ').items())

        # self data
        name = '' if self.name is None else self.name
        str_data[name] = shorten_data(self._data)

        return tabulate(str_data, headers='keys')

    def _other_values(self, other):
        if isinstance(other, Series):
            if not same_index(self.index, other.index):
                raise ValueError('Can only operate on Series with the same index')

            return other.values
        elif is_scalar(other):
            return other
        else:
            raise TypeError('Can only apply operation with scalar or Series')

    def _comparison(self, other, comparison):
        other = self._other_values(other)

        return Series(get_comparison(comparison)(self._data, other),
                      self.index,
                      np.dtype(np.bool_),
                      self.name)

    def _bitwise_operation(self, other, operation):
        if self.dtype.kind != 'b':
            raise TypeError('Bitwise operations require a boolean Series')

        if operation == '~':
            data = np.logical_not(self._data)
        else:
            check_type(other, Series)
            if other.dtype.kind != 'b':
                raise TypeError('Bitwise operations require a boolean Series')
            data = get_bitwise_operation(operation)(self._data, self._other_values(other))

        return Series(data,
                      self.index,
                      np.dtype(np.bool_),
                      self.name)

    def _element_wise_operation(self, other, operation, reflected=False):
        if not self.is_numeric:
            raise TypeError('Arithmetic requires numeric data, dtype is {}'.format(self.dtype))

        other = self._other_values(other)
        func = get_operation(operation)
        data = func(other, self._data) if reflected else func(self._data, other)

        return Series(data,
                      self.index,
                      data.dtype,
                      self.name)

    def astype(self, dtype):
        dtype = check_dtype(dtype)

        return Series(self._data.astype(dtype),
                      self.index,
                      dtype,
                      self.name)

    def __getitem__(self, item):
        """Select from the Series.

        Supported selection functionality exemplified below.

        Examples
        --------
        >>> sr = nd.Series(np.arange(5, dtype=np.float32), name='Test')
        >>> sr = sr[sr > 0]
        >>> sr
        Series(name=Test, dtype=float32)
        >>> print(sr)
               Test
        ---  ------
          1       1
          2       2
          3       3
          4       4
        >>> print(sr[:1])
               Test
        ---  ------
          1       1

        """
        if isinstance(item, Series):
            if item.dtype.kind != 'b':
                raise TypeError('Expected a boolean Series')

            mask = self._other_values(item)

            return Series(self._data[mask],
                          self.index[mask],
                          self.dtype,
                          self.name)
        elif isinstance(item, slice):
            check_valid_int_slice(item)

            return Series(self._data[item],
                          self.index[item],
                          self.dtype,
                          self.name)
        else:
            raise TypeError('Expected a boolean Series or a slice')

    def head(self, n=5):
        """Return Series with first n values.

        Parameters
        ----------
        n : int
            Number of values.

        Returns
        -------
        Series
            Series containing the first n values.

        """
        return self[:n]

    def tail(self, n=5):
        """Return Series with the last n values.

        Parameters
        ----------
        n : int
            Number of values.

        Returns
        -------
        Series
            Series containing the last n values.

        """
        if n == 0:
            return self[:0]

        return self[-n:]

    def _numeric_non_missing(self, operation):
        if not self.is_numeric:
            raise TypeError('Cannot compute {} of non-numeric data with dtype {}'.format(operation, self.dtype))

        return self._data[~missing_mask(self._data)]

    def sum(self):
        return self._numeric_non_missing('sum').sum().item()

    def prod(self):
        return self._numeric_non_missing('prod').prod().item()

    def count(self):
        """Number of non-missing values.

        Returns
        -------
        int

        """
        return int((~missing_mask(self._data)).sum())

    def mean(self):
        """Mean of the non-missing values; np.nan if there are none.

        Returns
        -------
        float

        """
        data = self._numeric_non_missing('mean')
        if len(data) == 0:
            return np.nan

        return float(data.mean())

    def var(self):
        # sample variance, as pandas
        data = self._numeric_non_missing('var')
        if len(data) < 2:
            return np.nan

        return float(data.var(ddof=1))

    def std(self):
        return float(np.sqrt(self.var()))

    def min(self):
        data = self._numeric_non_missing('min')
        if len(data) == 0:
            return np.nan

        return data.min().item()

    def max(self):
        data = self._numeric_non_missing('max')
        if len(data) == 0:
            return np.nan

        return data.max().item()

    def unique(self):
        """Return unique values in the Series, in order of appearance.

        Missing values are included once if present.

        Returns
        -------
        numpy.ndarray

        """
        return pd_unique(self._data)

    def isna(self):
        """Boolean Series marking missing values.

        Returns
        -------
        Series

        """
        return Series(missing_mask(self._data),
                      self.index,
                      np.dtype(np.bool_),
                      self.name)

    def notna(self):
        return ~self.isna()

    def dropna(self):
        """Returns Series without missing values.

        Returns
        -------
        Series
            Series with no missing values.

        """
        return self[self.notna()]

    def fillna(self, value):
        """Returns Series with missing values replaced with value.

        Parameters
        ----------
        value : {int, float, str, bool}
            Scalar value to replace missing values with.

        Returns
        -------
        Series
            With missing values replaced.

        """
        if not is_scalar(value):
            raise TypeError('Value to replace with is not a valid scalar')

        mask = missing_mask(self._data)
        if not mask.any():
            return Series(self._data.copy(), self.index, self.dtype, self.name)

        if self.is_numeric and isinstance(value, (str, bytes)):
            raise TypeError('Cannot fill numeric data with a string')
        elif not self.is_numeric and not isinstance(value, (str, bytes)):
            raise TypeError('Cannot fill non-numeric data with a number')

        data = self._data.copy()
        data[mask] = value

        return Series(data,
                      self.index,
                      self.dtype,
                      self.name)

    def apply(self, func, **kwargs):
        """Apply a function to the raw data of the Series.

        The function receives the whole numpy.ndarray (not each element), so NumPy functions
        and the predefined functions in ndprep.functions can be used directly.

        Parameters
        ----------
        func : function
            Receives the raw data and kwargs, returns a numpy.ndarray of the same length.

        Returns
        -------
        Series
            With function result.

        Examples
        --------
        >>> sr = nd.Series([4., 1., 9.])
        >>> sr.apply(nd.sqrt).values
        array([2., 1., 3.])
        >>> sr.apply(nd.raw(np.sort)).values
        array([1., 4., 9.])

        """
        if not callable(func):
            raise TypeError('Expected a function')

        result = np.asarray(func(self._data, **kwargs))
        if result.shape != self._data.shape:
            raise ValueError('Function must return data of the same length as the Series')

        return Series(result,
                      self.index,
                      result.dtype,
                      self.name)

    def to_array(self, dtype=None):
        """Convert to a 1-dimensional NDArray.

        Parameters
        ----------
        dtype : numpy.dtype, optional
            Inferred from the Series by default.

        Returns
        -------
        NDArray

        Raises
        ------
        MissingValueError
            If any value is still missing.

        """
        if not self.is_numeric:
            raise TypeError('Cannot convert non-numeric column {} with dtype {} to an array; encode it first'
                            .format(self.name, self.dtype))

        if missing_mask(self._data).any():
            raise MissingValueError('Column {} has missing values; impute or drop them first'.format(self.name),
                                    [self.name])

        return NDArray(self._data.copy(), check_dtype(dtype))

    @classmethod
    def from_pandas(cls, series):
        """Create ndprep Series from pandas Series.

        Parameters
        ----------
        series : pandas.Series

        Returns
        -------
        Series

        """
        check_type(series, PandasSeries)

        return _series_from_pandas(series, Index.from_pandas(series.index))

    def to_pandas(self):
        """Convert to pandas Series

        Returns
        -------
        pandas.Series

        """
        return PandasSeries(self._data,
                            self.index.to_pandas(),
                            self.dtype,
                            self.name)


def _process_input(data, dtype):
    dtype = check_dtype(dtype)

    if data is None:
        return np.empty(0, dtype=_default_dtype(dtype))

    check_type(data, (np.ndarray, NDArray, list))
    if isinstance(data, NDArray):
        data = data.values
    elif isinstance(data, list):
        data = convert_to_numpy(data)

    if data.ndim != 1:
        raise ValueError('Series data must be 1-dimensional, received shape {}'.format(data.shape))

    if data.dtype == object and dtype is None:
        data = _numeric_object_to_float(data)

    inferred_dtype = infer_dtype(data, dtype)
    if data.dtype != inferred_dtype:
        if data.dtype.kind == 'f' and inferred_dtype.kind in 'iub' and missing_mask(data).any():
            raise MissingValueError('Cannot cast data with missing values to {}'.format(inferred_dtype))
        data = data.astype(inferred_dtype)

    return data


def _default_dtype(dtype):
    return np.dtype(np.float64) if dtype is None else dtype


def _numeric_object_to_float(data):
    # e.g. from pandas: an object column of numbers and None becomes float64 with np.nan
    mask = missing_mask(data)
    present = data[~mask]
    if len(present) > 0 and mask.any() and all(isinstance(value, (int, float, np.number)) and
                                               not isinstance(value, (bool, np.bool_)) for value in present):
        result = np.full(len(data), np.nan, dtype=np.float64)
        result[~mask] = present.astype(np.float64)

        return result

    return data


def _process_index(index, data):
    if index is None:
        return RangeIndex(len(data))
    else:
        check_type(index, Index)
        if len(index) != len(data):
            raise ValueError('Index of length {} does not match data of length {}'.format(len(index), len(data)))

        return index


# the following methods are shortcuts for DataFrame ops
def _series_from_pandas(series, index):
    return Series(series.to_numpy(),
                  index,
                  None,
                  None if series.name is None else str(series.name))
