import numpy as np
from pandas import isna

from ..config import DISPLAY_MAX_ROWS, DISPLAY_EDGE_ITEMS


class MissingValueError(ValueError):
    """Raised when missing values reach a numeric conversion.

    Missing values must be imputed (e.g. `fillna`) or dropped (`dropna`) first.

    """
    def __init__(self, message, columns=None):
        super(MissingValueError, self).__init__(message)
        self.columns = columns


def check_type(data, expected_types):
    if data is not None and not isinstance(data, expected_types):
        raise TypeError('Expected: {}'.format(str(expected_types)))

    return data


def check_dtype(data):
    # silently allow and convert python types; strings are always kept as object
    if data is str or (isinstance(data, str) and data in ('str', 'object')):
        return np.dtype(object)
    if isinstance(data, str):
        # NumPy names such as 'float32'; unknown names raise TypeError
        return np.dtype(data)
    if data in (bool, int, float, object):
        return np.dtype(data)

    if data is not None and not (isinstance(data, np.dtype) or getattr(data, '__module__', None) == np.__name__):
        raise TypeError('Expected a valid NumPy dtype, received: {}'.format(str(data)))

    return data


def check_inner_types(data, expected_types):
    if data is not None:
        for value in data:
            check_type(value, expected_types)

    return data


def check_str_or_list_str(data):
    check_type(data, (list, str))
    if data is not None:
        check_inner_types(as_list(data), str)

    return data


def check_axis(axis, ndim):
    check_type(axis, (int, np.integer))
    if not -ndim <= axis < ndim:
        raise ValueError('axis {} is out of bounds for array of dimension {}'.format(axis, ndim))

    # normalize negative axis
    return int(axis % ndim)


def process_shape(shape):
    """Normalize variadic or tuple shape arguments, e.g. (2, 3) or ((2, 3),) -> (2, 3).

    Parameters
    ----------
    shape : tuple
        As received by a `*shape` argument.

    Returns
    -------
    tuple of int

    """
    if len(shape) == 1 and isinstance(shape[0], (tuple, list)):
        shape = shape[0]

    shape = tuple(shape)
    for dim in shape:
        if isinstance(dim, (bool, np.bool_)) or not isinstance(dim, (int, np.integer)):
            raise TypeError('Expected integer dimensions, received: {}'.format(str(shape)))
        if dim < 0:
            raise ValueError('Negative dimensions are not allowed: {}'.format(str(shape)))

    return tuple(int(dim) for dim in shape)


def infer_dtype(data, arg_dtype):
    if arg_dtype is not None:
        if not isinstance(arg_dtype, np.dtype):
            arg_dtype = np.dtype(arg_dtype)

        return arg_dtype
    else:
        if isinstance(data, np.ndarray):
            return data.dtype
        else:
            raise ValueError('Unsupported data type: {}'.format(str(type(data))))


def is_scalar(data):
    return isinstance(data, (int, float, str, bytes, bool, np.generic))


def is_numeric_dtype(dtype):
    return dtype.kind in 'biuf'


def _is_int_or_none(value):
    return value is None or isinstance(value, int)


def _valid_int_slice(slice_):
    return all([_is_int_or_none(v) for v in [slice_.start, slice_.stop, slice_.step]])


def check_valid_int_slice(slice_):
    if not _valid_int_slice(slice_):
        raise ValueError('Can currently only slice with integers')


def shorten_data(data):
    if not isinstance(data, np.ndarray):
        raise TypeError('Expected raw data to shorten')

    if len(data) > DISPLAY_MAX_ROWS:
        return list(data[:DISPLAY_EDGE_ITEMS]) + ['...'] + list(data[-DISPLAY_EDGE_ITEMS:])
    else:
        return data


def as_list(data):
    if isinstance(data, list):
        return data
    else:
        return [data]


def replace_if_none(value, default):
    return default if value is None else value


def missing_mask(data):
    """Boolean mask of missing values; NaN for floats, None or NaN for objects."""
    if data.dtype.kind in 'biu':
        return np.zeros(data.shape, dtype=np.bool_)

    return np.asarray(isna(data), dtype=np.bool_)


def convert_to_numpy(data):
    """Convert a (possibly nested) list to an ndarray.

    Mixing strings with numbers is rejected. Numbers with None become float64 with np.nan.
    Strings with None stay object with None.

    """
    flat = list(_flatten(data))
    has_none = any(value is None for value in flat)
    has_str = any(isinstance(value, (str, bytes)) for value in flat)
    has_number = any(isinstance(value, (int, float, np.number)) and not isinstance(value, (bool, np.bool_))
                     for value in flat)

    if has_str and has_number:
        raise TypeError('Cannot mix strings and numbers in the same data')
    elif has_str:
        return np.array(data, dtype=object)
    elif has_none:
        if not has_number:
            return np.array(data, dtype=object)

        return np.array(_replace_none(data, np.nan), dtype=np.float64)
    else:
        return np.array(data)


def _flatten(data):
    for value in data:
        if isinstance(value, (list, tuple)):
            for inner in _flatten(value):
                yield inner
        else:
            yield value


def _replace_none(data, replacement):
    return [_replace_none(value, replacement) if isinstance(value, (list, tuple))
            else replacement if value is None else value
            for value in data]


def same_index(index1, index2):
    # compares labels only; a RangeIndex and an Index with the same labels are the same
    if len(index1) != len(index2):
        return False
    else:
        return np.array_equal(index1.values, index2.values)


_operations = {
    '+': np.add,
    '-': np.subtract,
    '*': np.multiply,
    '/': np.true_divide,
    'pow': np.power
}

_comparisons = {
    '<': np.less,
    '<=': np.less_equal,
    '==': np.equal,
    '!=': np.not_equal,
    '>=': np.greater_equal,
    '>': np.greater
}

_bitwise_operations = {
    '&': np.logical_and,
    '|': np.logical_or
}


def get_operation(operation):
    try:
        return _operations[operation]
    except KeyError:
        raise ValueError('Unsupported operation: {}'.format(operation))


def get_comparison(comparison):
    try:
        return _comparisons[comparison]
    except KeyError:
        raise ValueError('Unsupported comparison: {}'.format(comparison))


def get_bitwise_operation(operation):
    try:
        return _bitwise_operations[operation]
    except KeyError:
        raise ValueError('Unsupported bitwise operation: {}'.format(operation))
