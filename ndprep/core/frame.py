import logging
from collections import OrderedDict
from functools import reduce

import numpy as np
from tabulate import tabulate

from .generic import BinaryOps, NdCommon
from .indexes import Index, RangeIndex
from .ndarray import NDArray
from .series import Series, _series_from_pandas
from .utils import check_type, is_scalar, check_inner_types, shorten_data, check_valid_int_slice, as_list, \
    same_index, check_str_or_list_str, check_dtype, missing_mask, MissingValueError
from ..config import DEFAULT_FLOAT_DTYPE, DUMMY_NA_SUFFIX

logger = logging.getLogger(__name__)


class DataFrame(BinaryOps, NdCommon):
    """Ordered collection of named columns sharing one Index.

    Each row maps column names to numeric-or-missing values; see `Series` for the missing value convention.

    Attributes
    ----------
    index
    dtypes
    columns
    iloc

    See Also
    --------
    pandas.DataFrame : https://pandas.pydata.org/pandas-docs/stable/reference/api/pandas.DataFrame.html

    Examples
    --------
    >>> import ndprep as nd
    >>> import numpy as np
    >>> from collections import OrderedDict
    >>> df = nd.DataFrame(OrderedDict((('a', np.arange(5, 8)), ('b', [1, 0, 2]))))
    >>> df.index  # repr
    RangeIndex(start=0, stop=3, step=1)
    >>> df  # repr
    DataFrame(index=RangeIndex(start=0, stop=3, step=1), columns=[a: int64, b: int64])
    >>> print(df)
           a    b
    ---  ---  ---
      0    5    1
      1    6    0
      2    7    2
    >>> print(len(df))
    3
    >>> print(df * 2)
           a    b
    ---  ---  ---
      0   10    2
      1   12    0
      2   14    4
    >>> print(df.mean())
    <BLANKLINE>
    ---  --
    a     6
    b     1
    >>> df.rename({'a': 'c'})
    DataFrame(index=RangeIndex(start=0, stop=3, step=1), columns=[c: int64, b: int64])
    >>> df.drop('a')
    DataFrame(index=RangeIndex(start=0, stop=3, step=1), columns=[b: int64])
    >>> df2 = nd.DataFrame(OrderedDict((('NumRooms', [None, 2., 4.]), ('Alley', ['Pave', None, None]))))
    >>> print(df2.fillna(df2.mean()).get_dummies(dummy_na=True))
           NumRooms    Alley_Pave    Alley_nan
    ---  ----------  ------------  -----------
      0           3             1            0
      1           2             0            1
      2           4             0            1

    """
    _empty_text = 'Empty DataFrame'

    def __init__(self, data=None, index=None):
        """Initialize a DataFrame object.

        All data, be it raw or Series, inherits the index of the DataFrame.

        Parameters
        ----------
        data : dict, optional
            Data as a dict of str -> np.ndarray or NDArray or Series or list.
            Use an OrderedDict to control the order of the columns.
        index : Index or RangeIndex, optional
            Index linked to the data; it must be of the same length.
            RangeIndex by default.

        """
        data = _check_input_data(data)
        self._length = _infer_length(index, data)
        self.index = _process_index(index, self._length)
        self._data = _process_data(data, self.index)

    @property
    def values(self):
        """Alias for `data` attribute.

        Returns
        -------
        dict
            The internal dict data representation.

        """
        return self._data

    @property
    def empty(self):
        return self._length == 0 or len(self._data) == 0

    def _gather_dtypes(self):
        return OrderedDict(((k, v.dtype) for k, v in self._data.items()))

    @property
    def dtypes(self):
        """Series of NumPy dtypes present in the DataFrame with index of column names.

        Returns
        -------
        Series

        """
        dtypes = np.empty(len(self._data), dtype=object)
        dtypes[:] = list(self._gather_dtypes().values())

        return Series(dtypes, self.keys())

    def _gather_column_names(self):
        return list(self._data.keys())

    @property
    def columns(self):
        """Index of the column names present in the DataFrame in order.

        Returns
        -------
        Index

        """
        return Index(_names_array(self._gather_column_names()), np.dtype(object))

    @property
    def shape(self):
        return self._length, len(self._data)

    def __len__(self):
        """Get the length, i.e. number of rows, of the DataFrame.

        Returns
        -------
        int
            Length of the DataFrame.

        """
        return self._length

    @property
    def iloc(self):
        """Retrieve Indexer by position.

        Supported iloc functionality exemplified below.

        Examples
        --------
        >>> df = nd.DataFrame(OrderedDict((('a', np.arange(5, 8)), ('b', np.array([1, 0, 2])))))
        >>> print(df.iloc[0:2])
               a    b
        ---  ---  ---
          0    5    1
          1    6    0
        >>> print(df.iloc[[0, 2]])
               a    b
        ---  ---  ---
          0    5    1
          2    7    2
        >>> print(df.iloc[:, 1])
               b
        ---  ---
          0    1
          1    0
          2    2
        >>> df.iloc[1, 0]
        6

        """
        from .indexing import _ILocIndexer

        return _ILocIndexer(self)

    def __repr__(self):
        columns = '[' + ', '.join(['{}: {}'.format(k, v) for k, v in self._gather_dtypes().items()]) + ']'

        return "{}(index={}, columns={})".format(self.__class__.__name__,
                                                 repr(self.index),
                                                 columns)

    def __str__(self):
        if self.empty:
            return self._empty_text

        default_index_name = ' '
        str_data = OrderedDict()
        str_data.update((name, shorten_data(data.values))
                        for name, data in self.index._gather_data(default_index_name).items())
        str_data.update((column.name, shorten_data(column.values)) for column in self._iter())

        return tabulate(str_data, headers='keys')

    def _comparison(self, other, comparison):
        if is_scalar(other):
            df = _drop_str_columns(self)
            new_data = OrderedDict((column.name, column._comparison(other, comparison))
                                   for column in df._iter())

            return DataFrame(new_data, self.index)
        else:
            raise TypeError('Can currently only compare with scalars')

    def _element_wise_operation(self, other, operation, reflected=False):
        if isinstance(other, list):
            check_inner_types(other, (int, float))

            df = _drop_str_columns(self)
            if len(other) != len(df._gather_column_names()):
                raise ValueError('Expected same number of values in other as the number of non-string columns')

            new_data = OrderedDict((column.name, column._element_wise_operation(scalar, operation, reflected))
                                   for column, scalar in zip(df._iter(), other))

            return DataFrame(new_data, self.index)
        elif is_scalar(other):
            df = _drop_str_columns(self)
            new_data = OrderedDict((column.name, column._element_wise_operation(other, operation, reflected))
                                   for column in df._iter())

            return DataFrame(new_data, self.index)
        else:
            raise TypeError('Can only apply operation with scalar or list of scalars')

    def astype(self, dtype):
        """Cast DataFrame columns to given dtype.

        Parameters
        ----------
        dtype : numpy.dtype or dict
            Dtype or column_name -> dtype mapping to cast columns to. Note index is excluded.

        Returns
        -------
        DataFrame
            With casted columns.

        """
        if isinstance(dtype, dict):
            new_data = OrderedDict(self._data)
            for column in self._iter():
                column_name = column.name
                if column_name in dtype:
                    new_data[column_name] = column.astype(dtype[column_name])

            return DataFrame(new_data, self.index)
        else:
            dtype = check_dtype(dtype)
            if dtype is None:
                raise TypeError('Expected numpy.dtype or dict mapping column names to dtypes')

            new_data = OrderedDict((column.name, column.astype(dtype))
                                   for column in self._iter())

            return DataFrame(new_data, self.index)

    def __getitem__(self, item):
        """Select from the DataFrame.

        Supported functionality exemplified below.

        Examples
        --------
        >>> df = nd.DataFrame(OrderedDict({'a': np.arange(5, 8)}))
        >>> print(df['a'])
               a
        ---  ---
          0    5
          1    6
          2    7
        >>> print(df[['a']])
               a
        ---  ---
          0    5
          1    6
          2    7
        >>> print(df[df['a'] < 7])
               a
        ---  ---
          0    5
          1    6

        """
        if isinstance(item, str):
            if item not in self._data:
                raise KeyError('Column name not in DataFrame: {}'.format(str(item)))

            return self._data[item]
        elif isinstance(item, list):
            check_inner_types(item, str)
            new_data = OrderedDict()

            for column_name in item:
                if column_name not in self:
                    raise KeyError('Column name not in DataFrame: {}'.format(str(column_name)))

                new_data[column_name] = self._data[column_name]

            return DataFrame(new_data, self.index)
        elif isinstance(item, Series):
            if item.dtype.kind != 'b':
                raise TypeError('Expected a boolean Series')
            if not same_index(self.index, item.index):
                raise ValueError('Boolean Series must have the same index as the DataFrame')

            mask = item.values
            new_index = self.index[mask]
            new_data = OrderedDict((column.name, Series(column.values[mask], new_index, column.dtype, column.name))
                                   for column in self._iter())

            return DataFrame(new_data, new_index)
        elif isinstance(item, slice):
            check_valid_int_slice(item)

            new_index = self.index[item]
            new_data = OrderedDict((column.name, Series(column.values[item], new_index, column.dtype, column.name))
                                   for column in self._iter())

            return DataFrame(new_data, new_index)
        else:
            raise TypeError('Expected a column name, list of columns, boolean Series, or a slice')

    def __setitem__(self, key, value):
        """Add/update DataFrame column.

        Parameters
        ----------
        key : str
            Column name.
        value : numpy.ndarray or NDArray or list or Series
            Raw data must have the same length as the DataFrame. If a Series with a different index,
            the data will be aligned based on the index of the DataFrame, i.e. df.index left join sr.index,
            with labels not found in sr becoming missing values.

        Examples
        --------
        >>> df = nd.DataFrame(OrderedDict({'a': np.arange(5, 8)}))
        >>> df['b'] = np.arange(3)
        >>> print(df)
               a    b
        ---  ---  ---
          0    5    0
          1    6    1
          2    7    2

        """
        key = check_type(key, str)
        value = check_type(value, (np.ndarray, NDArray, list, Series))

        # the first column of a DataFrame without data decides its length
        if len(self._data) == 0 and self._length == 0 and len(value) > 0:
            if isinstance(value, Series):
                self.index = value.index
            else:
                self.index = RangeIndex(len(value))
            self._length = len(self.index)

        if isinstance(value, Series):
            if not same_index(self.index, value.index):
                aligned = value.to_pandas().reindex(self.index.to_pandas())
                value = Series(aligned.to_numpy(), self.index, name=key)
            else:
                value = Series(value.values, self.index, value.dtype, key)
        else:
            value = Series(value, self.index, name=key)

        self._data[key] = value

    def __delitem__(self, key):
        if key not in self._data:
            raise KeyError('Column name not in DataFrame: {}'.format(str(key)))

        del self._data[key]

    def _iter(self):
        for column in self._data.values():
            yield column

    def __iter__(self):
        for column_name in self._data:
            yield column_name

    def __contains__(self, item):
        return item in self._data

    def head(self, n=5):
        """Return DataFrame with first n values per column.

        Parameters
        ----------
        n : int
            Number of values.

        Returns
        -------
        DataFrame
            DataFrame containing the first n values per column.

        """
        return self[:n]

    def tail(self, n=5):
        """Return DataFrame with last n values per column.

        Parameters
        ----------
        n : int
            Number of values.

        Returns
        -------
        DataFrame
            DataFrame containing the last n values per column.

        """
        if n == 0:
            return self[:0]

        return self[-n:]

    def keys(self):
        """Retrieve column names as Index, i.e. for axis=1.

        Returns
        -------
        Index
             Column names as an Index.

        """
        return self.columns

    def rename(self, columns):
        """Returns a new DataFrame with renamed columns.

        Currently a simplified version of Pandas' rename.

        Parameters
        ----------
        columns : dict
            Old names to new names.

        Returns
        -------
        DataFrame
            With columns renamed, if found.

        """
        check_type(columns, dict)
        check_inner_types(columns.values(), str)

        new_data = OrderedDict()
        for column_name, column in self._data.items():
            new_name = columns.get(column_name, column_name)
            new_data[new_name] = Series(column.values, self.index, column.dtype, new_name)

        return DataFrame(new_data, self.index)

    def drop(self, columns):
        """Drop 1 or more columns.

        Parameters
        ----------
        columns : str or list of str
            Column name or list of column names to drop.

        Returns
        -------
        DataFrame
            A new DataFrame without these columns.

        """
        check_str_or_list_str(columns)
        columns = as_list(columns)

        for column_name in columns:
            if column_name not in self._data:
                raise KeyError('Column name not in DataFrame: {}'.format(str(column_name)))

        new_data = OrderedDict((name, column) for name, column in self._data.items()
                               if name not in columns)

        return DataFrame(new_data, self.index)

    def _aggregate_columns(self, func_name):
        df = _drop_str_columns(self)
        names = df._gather_column_names()
        results = [getattr(column, func_name)() for column in df._iter()]

        return Series(np.array(results, dtype=np.float64),
                      Index(_names_array(names), np.dtype(object)))

    def min(self):
        return self._aggregate_columns('min')

    def max(self):
        return self._aggregate_columns('max')

    def sum(self):
        return self._aggregate_columns('sum')

    def prod(self):
        return self._aggregate_columns('prod')

    def mean(self):
        """Mean of each numeric column, skipping missing values.

        Returns
        -------
        Series
            Indexed by the column names; use with `fillna` to impute missing values.

        """
        return self._aggregate_columns('mean')

    def var(self):
        return self._aggregate_columns('var')

    def std(self):
        return self._aggregate_columns('std')

    def count(self):
        """Number of non-missing values in each column, including non-numeric ones.

        Returns
        -------
        Series

        """
        return Series(np.array([column.count() for column in self._iter()], dtype=np.int64),
                      self.keys())

    def agg(self, aggregations):
        """Multiple aggregations over the numeric columns.

        Parameters
        ----------
        aggregations : list of str
            Which aggregations to perform, e.g. ['mean', 'var'].

        Returns
        -------
        DataFrame
            DataFrame with the aggregations per column, indexed by the aggregation names.

        """
        check_type(aggregations, list)
        check_inner_types(aggregations, str)
        if len(aggregations) == 0:
            raise ValueError('Expected at least one aggregation')

        df = _drop_str_columns(self)
        new_index = Index(_names_array(aggregations), np.dtype(object))
        new_data = OrderedDict()
        for column in df._iter():
            results = []
            for aggregation in aggregations:
                if aggregation not in _aggregations:
                    raise ValueError('Unsupported aggregation: {}'.format(aggregation))
                results.append(getattr(column, aggregation)())
            new_data[column.name] = Series(np.array(results, dtype=np.float64), new_index, name=column.name)

        return DataFrame(new_data, new_index)

    def isna(self):
        """DataFrame of booleans marking missing values.

        Returns
        -------
        DataFrame

        """
        new_data = OrderedDict((column.name, column.isna()) for column in self._iter())

        return DataFrame(new_data, self.index)

    def notna(self):
        new_data = OrderedDict((column.name, column.notna()) for column in self._iter())

        return DataFrame(new_data, self.index)

    def missing_counts(self):
        """Number of missing values per column.

        Returns
        -------
        Series
            Indexed by the column names.

        """
        return Series(np.array([len(column) - column.count() for column in self._iter()], dtype=np.int64),
                      self.keys(),
                      name='missing')

    def dropna(self, axis=0, how='any', subset=None):
        """Remove rows or columns with missing values.

        Parameters
        ----------
        axis : {0, 1}, optional
            0 to drop rows, 1 to drop columns.
        how : {'any', 'all'}, optional
            Drop if any or only if all of the values are missing.
        subset : list of str, optional
            Which columns to check for missing values in; only when dropping rows.

        Returns
        -------
        DataFrame
            DataFrame with no missing values in the checked rows or columns.

        """
        if axis not in (0, 1):
            raise ValueError('axis must be 0 or 1')
        if how not in ('any', 'all'):
            raise ValueError("how must be 'any' or 'all'")

        if axis == 1:
            if subset is not None:
                raise ValueError('subset is only supported when dropping rows')

            check = np.any if how == 'any' else np.all
            to_drop = [column.name for column in self._iter()
                       if len(column) > 0 and check(missing_mask(column.values))]

            return self.drop(to_drop) if len(to_drop) > 0 else DataFrame(OrderedDict(self._data), self.index)

        subset = check_and_obtain_subset_columns(subset, self)
        if len(subset) == 0:
            return DataFrame(OrderedDict(self._data), self.index)

        not_nas = [v.notna() for v in self[subset]._iter()]
        if how == 'any':
            keep = reduce(lambda x, y: x & y, not_nas)
        else:
            keep = reduce(lambda x, y: x | y, not_nas)

        return self[keep]

    def drop_most_missing(self):
        """Drop the column with the most missing values.

        If multiple columns have the same number of missing values, the first of them is dropped.
        Columns without missing values are never dropped.

        Returns
        -------
        DataFrame

        """
        counts = self.missing_counts()
        if len(counts) == 0 or counts.values.max() == 0:
            return DataFrame(OrderedDict(self._data), self.index)

        column_name = counts.index.values[int(np.argmax(counts.values))]
        logger.debug('Dropping column %s with %d missing values', column_name, counts.values.max())

        return self.drop(column_name)

    def fillna(self, value):
        """Returns DataFrame with missing values replaced with value.

        Parameters
        ----------
        value : {int, float, str, bool} or dict or Series
            Scalar value to replace missing values with, in the numeric columns for a number and in the
            other columns for a string. If dict, replaces missing values
            only in the key columns with the value scalar. If Series, its index is
            the column names, e.g. the result of `mean()`.

        Returns
        -------
        DataFrame
            With missing values replaced.

        Examples
        --------
        >>> df = nd.DataFrame(OrderedDict((('a', [1., None, 3.]), ('b', ['x', None, 'y']))))
        >>> print(df.fillna(df.mean()))
               a  b
        ---  ---  ---
          0    1  x
          1    2
          2    3  y

        """
        if is_scalar(value):
            # a number fills the numeric columns, a string the others
            fill_numeric = not isinstance(value, (str, bytes))
            new_data = OrderedDict((column.name, column.fillna(value) if column.is_numeric == fill_numeric else column)
                                   for column in self._iter())

            return DataFrame(new_data, self.index)
        elif isinstance(value, Series):
            mapping = OrderedDict((str(label), fill) for label, fill in zip(value.index.values, value.values))

            return self.fillna(mapping)
        elif isinstance(value, dict):
            new_data = OrderedDict((column.name, column.fillna(_as_python(value[column.name]))
                                    if column.name in value else column)
                                   for column in self._iter())

            return DataFrame(new_data, self.index)
        else:
            raise TypeError('Can only fill na given a scalar, a dict or a Series mapping columns to their scalar')

    def get_dummies(self, columns=None, dummy_na=False, dtype=None):
        """One-hot encode categorical columns.

        Each encoded column is replaced by one indicator column per category, named `<column>_<category>`,
        with categories in sorted order. The indicator columns are placed after the remaining columns.

        Parameters
        ----------
        columns : str or list of str, optional
            Which columns to encode. All non-numeric columns by default.
        dummy_na : bool, optional
            Add a `<column>_nan` indicator column for missing values; otherwise they are all zeros.
        dtype : numpy.dtype, optional
            Of the indicator columns; float64 by default.

        Returns
        -------
        DataFrame

        Examples
        --------
        >>> df = nd.DataFrame(OrderedDict((('Alley', ['Pave', None, 'Grvl']), )))
        >>> print(df.get_dummies(dummy_na=True))
               Alley_Grvl    Alley_Pave    Alley_nan
        ---  ------------  ------------  -----------
          0             0             1            0
          1             0             0            1
          2             1             0            0

        """
        check_str_or_list_str(columns)
        dtype = check_dtype(dtype)
        if dtype is None:
            dtype = DEFAULT_FLOAT_DTYPE

        if columns is None:
            columns = [column.name for column in self._iter() if not column.is_numeric]
        else:
            columns = as_list(columns)
            for column_name in columns:
                if column_name not in self._data:
                    raise KeyError('Column name not in DataFrame: {}'.format(str(column_name)))

        new_data = OrderedDict((name, column) for name, column in self._data.items() if name not in columns)
        for column_name in columns:
            dummies = _encode_column(self._data[column_name], dummy_na, dtype)
            logger.debug('Encoded column %s into %d indicator columns', column_name, len(dummies))
            for name, data in dummies.items():
                if name in new_data:
                    raise ValueError('Indicator column {} clashes with an existing column'.format(name))
                new_data[name] = Series(data, self.index, dtype, name)

        return DataFrame(new_data, self.index)

    def to_array(self, dtype=None):
        """Convert to a 2-dimensional NDArray of shape (rows, columns).

        Every column must be numeric and free of missing values.

        Parameters
        ----------
        dtype : numpy.dtype, optional
            float64 by default.

        Returns
        -------
        NDArray

        Raises
        ------
        MissingValueError
            If there are missing values left; the offending columns are in the `columns` attribute.

        Examples
        --------
        >>> df = nd.DataFrame(OrderedDict((('a', [1, 2]), ('b', [3., 4.]))))
        >>> print(df.to_array())
        [[1. 3.]
         [2. 4.]]

        """
        dtype = check_dtype(dtype)
        if dtype is None:
            dtype = DEFAULT_FLOAT_DTYPE

        non_numeric = [column.name for column in self._iter() if not column.is_numeric]
        if len(non_numeric) > 0:
            raise TypeError('Cannot convert non-numeric columns {} to an array; encode them first'
                            .format(non_numeric))

        missing = [column.name for column in self._iter() if missing_mask(column.values).any()]
        if len(missing) > 0:
            raise MissingValueError('Columns {} have missing values; impute or drop them first'.format(missing),
                                    missing)

        if len(self._data) == 0:
            data = np.empty((self._length, 0), dtype=dtype)
        else:
            data = np.column_stack([column.values.astype(dtype) for column in self._iter()])
        logger.debug('Converted DataFrame to array of shape %s', data.shape)

        return NDArray(data)

    @classmethod
    def from_pandas(cls, df):
        """Create ndprep DataFrame from pandas DataFrame.

        Parameters
        ----------
        df : pandas.DataFrame

        Returns
        -------
        DataFrame

        """
        from pandas import DataFrame as PandasDataFrame

        check_type(df, PandasDataFrame)

        ndprep_index = Index.from_pandas(df.index)
        ndprep_data = OrderedDict((str(column_name), _series_from_pandas(df[column_name], ndprep_index))
                                  for column_name in df)

        return DataFrame(ndprep_data, ndprep_index)

    def to_pandas(self):
        """Convert to pandas DataFrame.

        Returns
        -------
        pandas.DataFrame

        """
        from pandas import DataFrame as PandasDataFrame

        pandas_index = self.index.to_pandas()
        pandas_data = OrderedDict((column.name, column.to_pandas())
                                  for column in self._iter())

        return PandasDataFrame(pandas_data, pandas_index)

    def to_csv(self, filepath, sep=',', header=True, index=True):
        """Save DataFrame as csv.

        Parameters
        ----------
        filepath : str
        sep : str, optional
            Separator used between values.
        header : bool, optional
            Whether to save the header.
        index : bool, optional
            Whether to save the index columns.

        Returns
        -------
        None

        """
        from ..io import to_csv

        to_csv(self, filepath, sep, header, index)


def get_dummies(df, columns=None, dummy_na=False, dtype=None):
    """One-hot encode categorical columns of the DataFrame.

    See `DataFrame.get_dummies`.

    """
    check_type(df, DataFrame)

    return df.get_dummies(columns, dummy_na, dtype)


_aggregations = {'min', 'max', 'sum', 'prod', 'mean', 'var', 'std', 'count'}


def _as_python(value):
    return value.item() if isinstance(value, np.generic) else value


def _names_array(names):
    data = np.empty(len(names), dtype=object)
    data[:] = names

    return data


def _encode_column(column, dummy_na, dtype):
    mask = missing_mask(column.values)
    present = column.values[~mask]
    categories = sorted(set(_as_python(value) for value in present), key=lambda value: (str(type(value)), value))

    dummies = OrderedDict()
    for category in categories:
        name = '{}_{}'.format(column.name, category)
        dummies[name] = np.logical_and(column.values == category, ~mask).astype(dtype)

    if dummy_na:
        dummies['{}_{}'.format(column.name, DUMMY_NA_SUFFIX)] = mask.astype(dtype)

    return dummies


def _check_input_data(data):
    if data is None:
        return OrderedDict()
    else:
        check_type(data, dict)
        check_inner_types(data.keys(), str)

        return data


def _process_index(index, length):
    if index is None:
        return RangeIndex(length)
    else:
        return check_type(index, Index)


def _process_data(data, index):
    new_data = OrderedDict()
    for name, value in data.items():
        if isinstance(value, Series):
            if not same_index(index, value.index):
                raise ValueError('Series {} does not have the same index as the DataFrame'.format(name))
            new_data[name] = Series(value.values, index, value.dtype, name)
        else:
            new_data[name] = Series(value, index, name=name)

    return new_data


def _infer_length(index, data):
    lengths = set(len(value) for value in data.values())
    if len(lengths) > 1:
        raise ValueError('All columns must have the same length, received lengths: {}'.format(sorted(lengths)))

    if index is not None:
        check_type(index, Index)
        if len(lengths) == 1 and len(index) not in lengths:
            raise ValueError('Index of length {} does not match data of length {}'
                             .format(len(index), lengths.pop()))

        return len(index)
    elif len(lengths) == 1:
        return lengths.pop()
    else:
        return 0


def _drop_str_columns(df):
    """Drop the non-numeric columns.

    Returns
    -------
    DataFrame
        With only the numeric columns.

    """
    numeric_columns = [column.name for column in df._iter() if column.is_numeric]

    return df[numeric_columns]


def check_and_obtain_subset_columns(columns, df):
    check_str_or_list_str(columns)

    if columns is None:
        return df._gather_column_names()

    columns = as_list(columns)
    for column in columns:
        if column not in df._data:
            raise KeyError('Column name not in DataFrame: {}'.format(str(column)))

    return columns
