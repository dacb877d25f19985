import numpy as np

from .generic import BinaryOps, InPlaceOps, BitOps, NdCommon
from .utils import check_type, check_dtype, check_axis, process_shape, convert_to_numpy, is_scalar, \
    get_operation, get_comparison, get_bitwise_operation, check_inner_types


class NDArray(BinaryOps, InPlaceOps, BitOps, NdCommon):
    """Dense n-dimensional array backed by a NumPy ndarray.

    The number of elements always equals the product of the shape dimensions.

    Attributes
    ----------
    shape
    dtype
    ndim
    size

    Examples
    --------
    >>> import ndprep as nd
    >>> x = nd.arange(12)
    >>> x
    NDArray(shape=(12,), dtype=int64)
    >>> x.numel()
    12
    >>> X = x.reshape(3, 4)
    >>> X.shape
    (3, 4)
    >>> print(X)
    [[ 0  1  2  3]
     [ 4  5  6  7]
     [ 8  9 10 11]]
    >>> x.reshape(-1, 6).shape
    (2, 6)
    >>> print(nd.array([1., 2, 4, 8]) ** nd.array([2, 2, 2, 2]))
    [ 1.  4. 16. 64.]
    >>> print(nd.arange(3).reshape(3, 1) + nd.arange(2).reshape(1, 2))
    [[0 1]
     [1 2]
     [2 3]]
    >>> nd.concat([X, X], axis=0).shape
    (6, 4)
    >>> nd.concat([X, X], axis=1).shape
    (3, 8)
    >>> print(X.sum())
    66

    """
    _empty_text = 'Empty NDArray'

    def __init__(self, data=None, dtype=None):
        """Initialize an NDArray object.

        Parameters
        ----------
        data : numpy.ndarray or NDArray or list or scalar, optional
            Raw data. Lists may be nested. An ndarray is wrapped without copying.
        dtype : numpy.dtype or type, optional
            Desired NumPy dtype for the elements. Data of a different dtype is astype'd.
            Inferred from `data` by default.

        """
        self._data = _process_input(data, check_dtype(dtype))

    @property
    def values(self):
        """The underlying ndarray, shared with this NDArray."""
        return self._data

    @property
    def shape(self):
        return self._data.shape

    @property
    def ndim(self):
        return self._data.ndim

    @property
    def size(self):
        return self._data.size

    @property
    def dtype(self):
        return self._data.dtype

    @property
    def empty(self):
        return self._data.size == 0

    @property
    def T(self):
        return NDArray(self._data.T)

    def numel(self):
        """Total number of elements, i.e. the product of the shape dimensions.

        Returns
        -------
        int

        """
        return int(self._data.size)

    def __len__(self):
        if self._data.ndim == 0:
            raise TypeError('len() of a 0-d NDArray')

        return self._data.shape[0]

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __repr__(self):
        return "{}(shape={}, dtype={})".format(self.__class__.__name__,
                                               self.shape,
                                               self.dtype)

    def __str__(self):
        if self.empty:
            return self._empty_text

        return str(self._data)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data

        return self._data.astype(dtype)

    def __bool__(self):
        if self._data.size != 1:
            raise ValueError('The truth value of an NDArray with more than one element is ambiguous. '
                             'Use all() or any()')

        return bool(self._data)

    def __float__(self):
        return float(self.item())

    def __int__(self):
        return int(self.item())

    def item(self):
        """Convert a size-1 NDArray to a Python scalar.

        Returns
        -------
        int or float or bool

        """
        if self._data.size != 1:
            raise ValueError('Can only convert an NDArray of size 1 to a scalar, size is {}'.format(self._data.size))

        return self._data.item()

    def numpy(self):
        """Return the underlying ndarray; changes to it are visible in this NDArray.

        Returns
        -------
        numpy.ndarray

        """
        return self._data

    def tolist(self):
        return self._data.tolist()

    def astype(self, dtype):
        dtype = check_dtype(dtype)

        return NDArray(self._data.astype(dtype))

    def copy(self):
        return NDArray(self._data.copy())

    def reshape(self, *shape):
        """Return an NDArray with the same data in a new shape.

        At most one dimension may be -1, in which case it is inferred from the remaining ones.

        Parameters
        ----------
        shape : int or tuple of int
            Either variadic, e.g. reshape(3, 4), or a single tuple, e.g. reshape((3, 4)).

        Returns
        -------
        NDArray
            A view whenever NumPy can provide one.

        Examples
        --------
        >>> x = nd.arange(12)
        >>> x.reshape(3, -1).shape
        (3, 4)
        >>> x.reshape((2, 2, 3)).shape
        (2, 2, 3)

        """
        new_shape = _infer_shape(_process_reshape_args(shape), self.size, self.shape)

        return NDArray(self._data.reshape(new_shape))

    def _comparison(self, other, comparison):
        if other is None:
            # elementwise identity check, as NumPy does for `arr == None`
            if comparison not in ('==', '!='):
                raise TypeError('Can only check equality with None')

            mask = np.asarray(_is_none(self._data), dtype=np.bool_)

            return NDArray(mask if comparison == '==' else ~mask)

        other = _unwrap_operand(other)
        _check_broadcastable(self.shape, np.shape(other))

        return NDArray(get_comparison(comparison)(self._data, other))

    def _element_wise_operation(self, other, operation, reflected=False):
        other = _unwrap_operand(other)
        _check_broadcastable(self.shape, np.shape(other))

        func = get_operation(operation)
        if reflected:
            return NDArray(func(other, self._data))
        else:
            return NDArray(func(self._data, other))

    def _in_place_operation(self, other, operation):
        other = _unwrap_operand(other)
        result_shape = broadcast_shapes(self.shape, np.shape(other))
        if result_shape != self.shape:
            raise ValueError('Cannot update array of shape {} in place with operand of shape {}'
                             .format(self.shape, np.shape(other)))

        get_operation(operation)(self._data, other, out=self._data, casting='same_kind')

        return self

    def _bitwise_operation(self, other, operation):
        if self.dtype.kind != 'b':
            raise TypeError('Bitwise operations require a boolean NDArray')

        if operation == '~':
            return NDArray(np.logical_not(self._data))

        other = _unwrap_operand(other)
        _check_broadcastable(self.shape, np.shape(other))

        return NDArray(get_bitwise_operation(operation)(self._data, other))

    def __neg__(self):
        return NDArray(np.negative(self._data))

    def __getitem__(self, item):
        """Select from the NDArray.

        Supported selection functionality exemplified below. The result is always an NDArray,
        0-d for a single element; use `item()` to obtain the Python scalar.

        Examples
        --------
        >>> X = nd.arange(12).reshape(3, 4)
        >>> print(X[-1])
        [ 8  9 10 11]
        >>> print(X[1:3])
        [[ 4  5  6  7]
         [ 8  9 10 11]]
        >>> X[1, 2].item()
        6
        >>> print(X[X > 9])
        [10 11]

        """
        return NDArray(self._data[_unwrap_item(item)])

    def __setitem__(self, key, value):
        """Write to the NDArray in place.

        Examples
        --------
        >>> X = nd.arange(12).reshape(3, 4)
        >>> X[1, 2] = 17
        >>> X[0:2, :] = 12
        >>> print(X)
        [[12 12 12 12]
         [12 12 12 12]
         [ 8  9 10 11]]

        """
        value = _unwrap_operand(value)

        self._data[_unwrap_item(key)] = value

    def _reduce(self, func, axis, keepdims):
        if axis is not None:
            if isinstance(axis, tuple):
                check_inner_types(axis, (int, np.integer))
                axis = tuple(check_axis(ax, self.ndim) for ax in axis)
            else:
                axis = check_axis(axis, self.ndim)

        return NDArray(np.asarray(func(self._data, axis=axis, keepdims=keepdims)))

    def sum(self, axis=None, keepdims=False):
        """Sum of elements, over all of them or along the axis.

        Parameters
        ----------
        axis : int or tuple of int, optional
        keepdims : bool, optional
            Keep the reduced axes with size 1, useful for broadcasting the result back.

        Returns
        -------
        NDArray

        """
        return self._reduce(np.sum, axis, keepdims)

    def mean(self, axis=None, keepdims=False):
        return self._reduce(np.mean, axis, keepdims)

    def max(self, axis=None, keepdims=False):
        return self._reduce(np.max, axis, keepdims)

    def min(self, axis=None, keepdims=False):
        return self._reduce(np.min, axis, keepdims)

    def all(self):
        return bool(np.all(self._data))

    def any(self):
        return bool(np.any(self._data))

    def isnan(self):
        if self.dtype.kind != 'f':
            return NDArray(np.zeros(self.shape, dtype=np.bool_))

        return NDArray(np.isnan(self._data))

    def equals(self, other):
        """Check whether other has the same shape and elements. Unlike `==`, this returns a bool.

        Returns
        -------
        bool

        """
        if not isinstance(other, (NDArray, np.ndarray)):
            return False

        return np.array_equal(self._data, _unwrap_operand(other))


def concat(arrays, axis=0):
    """Concatenate NDArrays along an existing axis.

    All arrays must have the same number of dimensions and
    the same size along every axis except `axis`.

    Parameters
    ----------
    arrays : list of NDArray
    axis : int, optional
        May be negative.

    Returns
    -------
    NDArray

    Examples
    --------
    >>> X = nd.arange(12, dtype=np.float32).reshape(3, 4)
    >>> Y = nd.array([[2., 1, 4, 3], [1, 2, 3, 4], [4, 3, 2, 1]])
    >>> print(nd.concat([X, Y], axis=0))
    [[ 0.  1.  2.  3.]
     [ 4.  5.  6.  7.]
     [ 8.  9. 10. 11.]
     [ 2.  1.  4.  3.]
     [ 1.  2.  3.  4.]
     [ 4.  3.  2.  1.]]

    """
    raw_arrays = _check_join_input(arrays)

    ndim = raw_arrays[0].ndim
    if ndim == 0:
        raise ValueError('Zero-dimensional arrays cannot be concatenated')
    if any(array.ndim != ndim for array in raw_arrays):
        raise ValueError('Expected arrays with the same number of dimensions, received: {}'
                         .format([array.ndim for array in raw_arrays]))

    axis = check_axis(axis, ndim)
    expected = _shape_without(raw_arrays[0].shape, axis)
    for array in raw_arrays[1:]:
        if _shape_without(array.shape, axis) != expected:
            raise ValueError('Shapes {} and {} do not match outside of axis {}'
                             .format(raw_arrays[0].shape, array.shape, axis))

    return NDArray(np.concatenate(raw_arrays, axis=axis))


def stack(arrays, axis=0):
    """Join equally-shaped NDArrays along a new axis.

    Parameters
    ----------
    arrays : list of NDArray
    axis : int, optional

    Returns
    -------
    NDArray

    """
    raw_arrays = _check_join_input(arrays)

    shape = raw_arrays[0].shape
    if any(array.shape != shape for array in raw_arrays):
        raise ValueError('Expected arrays of the same shape, received: {}'
                         .format([array.shape for array in raw_arrays]))

    axis = check_axis(axis, len(shape) + 1)

    return NDArray(np.stack(raw_arrays, axis=axis))


def broadcast_shapes(*shapes):
    """Shape resulting from broadcasting the given shapes together.

    Shapes are aligned from the trailing dimension; two dimensions are compatible
    if they are equal or one of them is 1.

    Returns
    -------
    tuple of int

    Examples
    --------
    >>> nd.broadcast_shapes((3, 1), (1, 2))
    (3, 2)

    """
    try:
        return tuple(np.broadcast_shapes(*shapes))
    except ValueError:
        raise ValueError('Shapes {} cannot be broadcast together'.format(', '.join(str(s) for s in shapes)))


def _process_input(data, dtype):
    if data is None:
        data = np.empty(0, dtype=np.float64)
    elif isinstance(data, NDArray):
        data = data.values
    elif isinstance(data, (list, tuple)):
        data = convert_to_numpy(list(data))
    elif is_scalar(data):
        if isinstance(data, (str, bytes)):
            raise TypeError('Expected numeric data, received: {}'.format(repr(data)))
        data = np.asarray(data)
    else:
        check_type(data, np.ndarray)

    if dtype is not None and data.dtype != dtype:
        data = data.astype(dtype)

    return data


def _process_reshape_args(shape):
    if len(shape) == 1 and isinstance(shape[0], (tuple, list)):
        shape = tuple(shape[0])

    check_inner_types(shape, (int, np.integer))

    return shape


def _infer_shape(shape, size, old_shape):
    unknown = [i for i, dim in enumerate(shape) if dim == -1]
    if len(unknown) > 1:
        raise ValueError('Can only infer one dimension, received: {}'.format(shape))
    if any(dim < -1 for dim in shape):
        raise ValueError('Invalid dimensions: {}'.format(shape))

    known = int(np.prod([dim for dim in shape if dim != -1]))
    if unknown:
        if known == 0 or size % known != 0:
            raise ValueError('Cannot reshape array of shape {} into {}'.format(old_shape, shape))
        shape = tuple(size // known if dim == -1 else dim for dim in shape)
    elif known != size:
        raise ValueError('Cannot reshape array of size {} into shape {}'.format(size, shape))

    return tuple(int(dim) for dim in shape)


_is_none = np.frompyfunc(lambda value: value is None, 1, 1)


def _unwrap_operand(other):
    if isinstance(other, NDArray):
        return other.values
    elif isinstance(other, np.ndarray):
        return other
    elif is_scalar(other) and not isinstance(other, (str, bytes)):
        return other
    elif isinstance(other, list):
        return convert_to_numpy(other)
    else:
        raise TypeError('Can only apply operation with scalar, list, numpy.ndarray or NDArray')


def _unwrap_item(item):
    if isinstance(item, NDArray):
        return item.values
    elif isinstance(item, tuple):
        return tuple(_unwrap_item(value) for value in item)
    else:
        return item


def _check_broadcastable(shape, other_shape):
    broadcast_shapes(shape, other_shape)


def _check_join_input(arrays):
    check_type(arrays, (list, tuple))
    if len(arrays) == 0:
        raise ValueError('Need at least one array to join')
    check_inner_types(arrays, (NDArray, np.ndarray))

    return [_unwrap_operand(array) for array in arrays]


def _shape_without(shape, axis):
    return shape[:axis] + shape[axis + 1:]
