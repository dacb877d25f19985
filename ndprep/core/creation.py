import numpy as np

from .ndarray import NDArray
from .utils import check_dtype, check_type, process_shape, replace_if_none
from ..config import DEFAULT_FLOAT_DTYPE, DEFAULT_INT_DTYPE


def array(data, dtype=None):
    """Create an NDArray from (nested) lists, an ndarray, or a scalar.

    Parameters
    ----------
    data : list or numpy.ndarray or NDArray or scalar
    dtype : numpy.dtype, optional

    Returns
    -------
    NDArray

    Examples
    --------
    >>> import ndprep as nd
    >>> nd.array([[2, 1, 4, 3], [1, 2, 3, 4], [4, 3, 2, 1]]).shape
    (3, 4)

    """
    return NDArray(data, dtype)


def arange(start, stop=None, step=1, dtype=None):
    """Evenly spaced values within [start, stop).

    If only 1 value is passed, it is considered the `stop` value.

    Parameters
    ----------
    start : int or float
    stop : int or float, optional
    step : int or float, optional
    dtype : numpy.dtype, optional
        int64 for integer arguments and float64 otherwise by default.

    Returns
    -------
    NDArray

    Examples
    --------
    >>> print(nd.arange(12))
    [ 0  1  2  3  4  5  6  7  8  9 10 11]

    """
    if stop is None:
        start, stop = 0, start

    check_type(start, (int, float, np.number))
    check_type(stop, (int, float, np.number))
    check_type(step, (int, float, np.number))
    if step == 0:
        raise ValueError('step must not be zero')

    dtype = check_dtype(dtype)
    if dtype is None:
        if all(isinstance(value, (int, np.integer)) for value in (start, stop, step)):
            dtype = DEFAULT_INT_DTYPE
        else:
            dtype = DEFAULT_FLOAT_DTYPE

    return NDArray(np.arange(start, stop, step, dtype=dtype))


def zeros(*shape, dtype=None):
    """NDArray of the given shape filled with 0.

    Examples
    --------
    >>> nd.zeros(2, 3, 4).shape
    (2, 3, 4)
    >>> nd.zeros((2, 3)).dtype
    dtype('float64')

    """
    return full(process_shape(shape), 0, dtype=replace_if_none(dtype, DEFAULT_FLOAT_DTYPE))


def ones(*shape, dtype=None):
    return full(process_shape(shape), 1, dtype=replace_if_none(dtype, DEFAULT_FLOAT_DTYPE))


def full(shape, fill_value, dtype=None):
    """NDArray of the given shape filled with `fill_value`.

    Parameters
    ----------
    shape : int or tuple of int
    fill_value : int or float or bool
    dtype : numpy.dtype, optional
        Inferred from `fill_value` by default.

    Returns
    -------
    NDArray

    """
    shape = process_shape((shape, ))
    check_type(fill_value, (int, float, bool, np.number, np.bool_))

    return NDArray(np.full(shape, fill_value, dtype=check_dtype(dtype)))


def zeros_like(data, dtype=None):
    check_type(data, (NDArray, np.ndarray))

    return NDArray(np.zeros_like(np.asarray(data), dtype=check_dtype(dtype)))


def ones_like(data, dtype=None):
    check_type(data, (NDArray, np.ndarray))

    return NDArray(np.ones_like(np.asarray(data), dtype=check_dtype(dtype)))


def eye(n, m=None, dtype=None):
    check_type(n, int)
    check_type(m, int)

    return NDArray(np.eye(n, m, dtype=replace_if_none(check_dtype(dtype), DEFAULT_FLOAT_DTYPE)))


def normal(*shape, mean=0.0, std=1.0, seed=None, dtype=None):
    """NDArray with elements drawn from a normal distribution.

    Parameters
    ----------
    shape : int or tuple of int
    mean : float, optional
    std : float, optional
        Must be non-negative.
    seed : int or numpy.random.Generator, optional
        For reproducible draws.
    dtype : numpy.dtype, optional

    Returns
    -------
    NDArray

    Examples
    --------
    >>> nd.normal(3, 4, seed=0).shape
    (3, 4)

    """
    shape = process_shape(shape)
    if std < 0:
        raise ValueError('std must be non-negative')

    rng = np.random.default_rng(seed)
    data = rng.normal(mean, std, size=shape)

    return NDArray(data, replace_if_none(check_dtype(dtype), DEFAULT_FLOAT_DTYPE))


def randn(*shape, seed=None, dtype=None):
    """NDArray with elements drawn from the standard normal distribution."""
    return normal(*shape, seed=seed, dtype=dtype)
