import numpy as np

from ..core import NDArray, Series


def _unary(data, operation):
    """Apply operation on each element of the data.

    The operations follow the behavior of the equivalent NumPy ufuncs.

    Parameters
    ----------
    data : NDArray or Series or numpy.ndarray
        Data
    operation : numpy.ufunc
        Which unary operation to apply.

    Returns
    -------
    NDArray or Series or numpy.ndarray
        Of the same type as the data.

    """
    if isinstance(data, NDArray):
        return NDArray(operation(data.values))
    elif isinstance(data, Series):
        if not data.is_numeric:
            raise TypeError('Unary operation supported only on numeric data')

        result = operation(data.values)

        return Series(result, data.index, result.dtype, data.name)
    elif isinstance(data, np.ndarray):
        return operation(data)
    else:
        raise TypeError('Expected NDArray, Series, or numpy.ndarray')


def exp(data):
    return _unary(data, np.exp)


def log(data):
    return _unary(data, np.log)


def sqrt(data):
    return _unary(data, np.sqrt)


def abs(data):
    return _unary(data, np.abs)


def sin(data):
    return _unary(data, np.sin)


def cos(data):
    return _unary(data, np.cos)


def tanh(data):
    return _unary(data, np.tanh)
