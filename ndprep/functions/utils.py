from functools import wraps

from ..core import NDArray, Series


def raw(func, **func_args):
    """Decorator for eager NumPy functions checking the input is raw data.

    Allows passing NumPy functions to `Series.apply`, which calls the function with the raw
    numpy.ndarray, optionally fixing some of its arguments.

    Parameters
    ----------
    func : function
        Function to execute eagerly over raw data.
    func_args : kwargs
        Arguments to pass to func, if any.

    Returns
    -------
    function

    """
    if len(func_args) == 0:
        @wraps(func)
        def wrapper(array, **kwargs):
            if isinstance(array, (NDArray, Series)):
                array = array.values
            return func(array, **kwargs)
        return wrapper
    else:
        @wraps(func)
        def wrapper(array, **kwargs):
            if isinstance(array, (NDArray, Series)):
                array = array.values
            return func(array, **func_args)
        return wrapper
