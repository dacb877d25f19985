import numpy as np

from .base import Index
from ..utils import check_type, replace_if_none


class RangeIndex(Index):
    """Default Index of consecutive integers.

    Attributes
    ----------
    start
    stop
    step
    dtype

    See Also
    --------
    pandas.RangeIndex : https://pandas.pydata.org/pandas-docs/stable/reference/api/pandas.RangeIndex.html

    Examples
    --------
    >>> import ndprep as nd
    >>> ind = nd.RangeIndex(3)
    >>> ind  # repr
    RangeIndex(start=0, stop=3, step=1)
    >>> print(ind)
    [0 1 2]
    >>> len(ind)
    3
    >>> (ind * 2).values
    array([0, 2, 4])

    """
    def __init__(self, start=None, stop=None, step=None, name=None):
        """Initialize a RangeIndex object.

        If only 1 value (`start`) is passed, it will be considered the `stop` value.

        Parameters
        ----------
        start : int
        stop : int, optional
        step : int, optional
        name : str, optional

        """
        self.start, self.stop, self.step = _check_input(start, stop, step)

        super(RangeIndex, self).__init__(np.arange(self.start, self.stop, self.step, dtype=np.int64),
                                         np.dtype(np.int64),
                                         name)

    def __repr__(self):
        return "{}(start={}, stop={}, step={})".format(self.__class__.__name__,
                                                       self.start,
                                                       self.stop,
                                                       self.step)

    def _comparison(self, other, comparison):
        if isinstance(other, int):
            return super(RangeIndex, self)._comparison(other, comparison)
        else:
            raise TypeError('Can only compare with integers')


def _check_input(start, stop, step):
    if start is None and stop is None and step is None:
        raise TypeError('Must be called with at least one integer')
    elif step is not None and step <= 0:
        raise ValueError('Only positive steps are currently supported')
    elif start is not None and stop is None and step is None:
        stop = start
        start = None

    check_type(start, int)
    check_type(stop, int)
    check_type(step, int)

    start = replace_if_none(start, 0)
    stop = replace_if_none(stop, 0)
    step = replace_if_none(step, 1)

    return start, stop, step
