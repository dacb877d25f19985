from collections import OrderedDict

import numpy as np

from .frame import DataFrame
from .indexes import Index
from .ndarray import NDArray
from .series import Series
from .utils import check_type, check_valid_int_slice, check_inner_types, is_numeric_dtype


class _ILocIndexer(object):
    """Implements iloc indexing.

    Attributes
    ----------
    data : Series or DataFrame
        Which data to select from by int/slice/list of int indexing.

    """
    def __init__(self, data):
        self.data = check_type(data, (Series, DataFrame))

    def __getitem__(self, item):
        if isinstance(self.data, Series):
            return _series_iloc(self.data, item)
        elif isinstance(item, tuple):
            if len(item) != 2:
                raise IndexError('DataFrame iloc expects at most 2 selectors: rows, columns')

            rows, columns = item
            selected = _frame_iloc_columns(self.data, columns)

            if isinstance(selected, Series):
                return _series_iloc(selected, rows)
            else:
                return _frame_iloc_rows(selected, rows)
        else:
            return _frame_iloc_rows(self.data, item)


def _process_positions(item, length):
    if isinstance(item, NDArray):
        item = item.values
    elif isinstance(item, list):
        check_inner_types(item, (int, np.integer))
        item = np.array(item, dtype=np.int64)

    if isinstance(item, np.ndarray):
        if item.dtype.kind not in 'iu':
            raise TypeError('Expected integer positions')
        if len(item) > 0 and (item.max() >= length or item.min() < -length):
            raise IndexError('Positions out of bounds for length {}'.format(length))

        return item

    raise TypeError('Expected an int, slice, or list of positions')


def _check_position(position, length):
    if not -length <= position < length:
        raise IndexError('Position {} out of bounds for length {}'.format(position, length))

    return position


def _as_python(value):
    return value.item() if isinstance(value, np.generic) else value


def _series_iloc(series, item):
    if isinstance(item, (int, np.integer)) and not isinstance(item, bool):
        return _as_python(series.values[_check_position(item, len(series))])
    elif isinstance(item, slice):
        return series[item]
    else:
        positions = _process_positions(item, len(series))

        return Series(series.values[positions],
                      series.index._iloc_indices(positions),
                      series.dtype,
                      series.name)


def _frame_iloc_rows(df, item):
    if isinstance(item, (int, np.integer)) and not isinstance(item, bool):
        position = _check_position(item, len(df))
        values = [_as_python(column.values[position]) for column in df._iter()]
        if all(is_numeric_dtype(column.dtype) for column in df._iter()):
            data = np.array(values)
        else:
            data = np.array(values, dtype=object)

        return Series(data,
                      Index(np.array(df._gather_column_names(), dtype=object)),
                      name=str(_as_python(df.index.values[position])))
    elif isinstance(item, slice):
        check_valid_int_slice(item)

        return df[item]
    else:
        positions = _process_positions(item, len(df))
        new_index = df.index._iloc_indices(positions)
        new_data = OrderedDict((column.name, Series(column.values[positions], new_index, column.dtype, column.name))
                               for column in df._iter())

        return DataFrame(new_data, new_index)


def _frame_iloc_columns(df, item):
    names = df._gather_column_names()

    if isinstance(item, (int, np.integer)) and not isinstance(item, bool):
        return df[names[_check_position(item, len(names))]]
    elif isinstance(item, slice):
        check_valid_int_slice(item)

        return df[names[item]]
    else:
        positions = _process_positions(item, len(names))

        return df[[names[position] for position in positions]]
