import numpy as np

from ..generic import BinaryOps, IndexCommon, NdCommon
from ..utils import check_type, infer_dtype, is_scalar, check_valid_int_slice, convert_to_numpy, check_dtype, \
    get_comparison, get_operation, missing_mask


class Index(BinaryOps, IndexCommon, NdCommon):
    """Row labels of a Series or DataFrame.

    Attributes
    ----------
    dtype
    name

    See Also
    --------
    pandas.Index : https://pandas.pydata.org/pandas-docs/stable/reference/api/pandas.Index.html

    Examples
    --------
    >>> import ndprep as nd
    >>> import numpy as np
    >>> ind = nd.Index(np.array(['a', 'b', 'c'], dtype=object))
    >>> ind  # repr
    Index(name=None, dtype=object)
    >>> print(ind)  # str
    ['a' 'b' 'c']
    >>> len(ind)
    3

    """
    def __init__(self, data, dtype=None, name=None):
        """Initialize an Index object.

        Parameters
        ----------
        data : np.ndarray or list
            Raw data.
        dtype : np.dtype, optional
            Numpy dtype of the elements. Inferred from `data` by default.
        name : str, optional
            Name of the Index.

        """
        data, dtype = _process_input_data(data, dtype)
        self._data = data
        self.dtype = dtype
        self.name = check_type(name, str)

    @property
    def values(self):
        return self._data

    @property
    def empty(self):
        return len(self._data) == 0

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __repr__(self):
        return "{}(name={}, dtype={})".format(self.__class__.__name__,
                                              self.name,
                                              self.dtype)

    def __str__(self):
        return str(self._data)

    def _comparison(self, other, comparison):
        if is_scalar(other):
            return Index(get_comparison(comparison)(self._data, other),
                         np.dtype(np.bool_),
                         self.name)
        else:
            raise TypeError('Can currently only compare with scalars')

    def _element_wise_operation(self, other, operation, reflected=False):
        if isinstance(other, Index):
            other = other.values
        elif not is_scalar(other):
            raise TypeError('Can only apply operation with scalar or Index')

        func = get_operation(operation)
        data = func(other, self._data) if reflected else func(self._data, other)

        return Index(data, data.dtype, self.name)

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = value

    def _gather_names(self, name='index'):
        return [name if self.name is None else self.name]

    def _gather_data(self, name='index'):
        return {self._gather_names(name)[0]: self}

    def _iloc_indices(self, indices):
        return Index(self._data[indices],
                     self.dtype,
                     self.name)

    def get_loc(self, label):
        """Position of the label in the Index.

        Returns
        -------
        int

        """
        positions = np.flatnonzero(self._data == label)
        if len(positions) == 0:
            raise KeyError('Label not in Index: {}'.format(str(label)))

        return int(positions[0])

    def astype(self, dtype):
        dtype = check_dtype(dtype)

        return Index(self._data.astype(dtype),
                     dtype,
                     self.name)

    def __getitem__(self, item):
        """Select from the Index. Currently used internally through DataFrame and Series.

        Supported selection functionality exemplified below.

        Examples
        --------
        >>> ind = nd.Index(np.arange(3))
        >>> print(ind[ind < 2])
        [0 1]
        >>> print(ind[1:2])
        [1]

        """
        if isinstance(item, Index) or _is_bool_array(item):
            mask = item.values if isinstance(item, Index) else item
            if mask.dtype.kind != 'b':
                raise TypeError('Expected a boolean mask')

            return Index(self._data[mask],
                         self.dtype,
                         self.name)
        elif isinstance(item, slice):
            check_valid_int_slice(item)

            return Index(self._data[item],
                         self.dtype,
                         self.name)
        else:
            raise TypeError('Expected boolean mask or slice')

    def head(self, n=5):
        """Return Index with first n values.

        Parameters
        ----------
        n : int
            Number of values.

        Returns
        -------
        Index
            Index containing the first n values.

        Examples
        --------
        >>> ind = nd.Index(np.arange(3, dtype=np.float64))
        >>> print(ind.head(2))
        [0. 1.]

        """
        return self[:n]

    def tail(self, n=5):
        """Return Index with the last n values.

        Parameters
        ----------
        n : int
            Number of values.

        Returns
        -------
        Index
            Index containing the last n values.

        Examples
        --------
        >>> ind = nd.Index(np.arange(3, dtype=np.float64))
        >>> print(ind.tail(2))
        [1. 2.]

        """
        if n == 0:
            return self[:0]

        return self[-n:]

    def isna(self):
        return Index(missing_mask(self._data), np.dtype(np.bool_), self.name)

    def notna(self):
        return Index(~missing_mask(self._data), np.dtype(np.bool_), self.name)

    @classmethod
    def from_pandas(cls, index):
        """Create ndprep Index from pandas Index.

        Parameters
        ----------
        index : pandas.Index

        Returns
        -------
        Index

        """
        from pandas import Index as PandasIndex, RangeIndex as PandasRangeIndex
        check_type(index, PandasIndex)
        name = None if index.name is None else str(index.name)

        if isinstance(index, PandasRangeIndex):
            from .range import RangeIndex

            return RangeIndex(index.start, index.stop, index.step, name)

        # extension dtypes, e.g. the pandas string dtype, are inferred from the object array instead
        dtype = index.dtype if isinstance(index.dtype, np.dtype) else None

        return Index(index.to_numpy(),
                     dtype,
                     name)

    def to_pandas(self):
        """Convert to pandas Index.

        Returns
        -------
        pandas.Index

        """
        from pandas import Index as PandasIndex

        return PandasIndex(self._data,
                           self.dtype,
                           name=self.name)


def _is_bool_array(item):
    return isinstance(item, np.ndarray) and item.dtype.kind == 'b'


def _process_input_data(data, dtype):
    check_type(data, (np.ndarray, list))
    dtype = check_dtype(dtype)

    if isinstance(data, list):
        data = convert_to_numpy(data)

    if data.ndim != 1:
        raise ValueError('Index data must be 1-dimensional')

    inferred_dtype = infer_dtype(data, dtype)
    if data.dtype != inferred_dtype:
        data = data.astype(inferred_dtype)

    return data, inferred_dtype
