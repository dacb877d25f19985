"""Cleaning tabular data with missing values before converting it into arrays.

The steps are: split the inputs from the target, impute the missing numeric inputs with the column means,
one-hot encode the categorical inputs (missing values becoming their own category), and convert to NDArrays.

"""
import logging

from .core import DataFrame, Series
from .core.utils import check_type
from .datasets import split_features_target

logger = logging.getLogger(__name__)


def impute_mean(df):
    """Replace missing values in the numeric columns with the mean of the column.

    Parameters
    ----------
    df : DataFrame

    Returns
    -------
    DataFrame
        Non-numeric columns are left as they are.

    """
    check_type(df, DataFrame)

    means = df.mean()
    logger.debug('Imputing missing values with means %s', dict(zip(means.index.values, means.values)))

    return df.fillna(means)


def encode_categorical(df, dummy_na=True):
    """One-hot encode the non-numeric columns.

    Parameters
    ----------
    df : DataFrame
    dummy_na : bool, optional
        Treat missing values as a category of their own.

    Returns
    -------
    DataFrame
        Fully numeric.

    """
    check_type(df, DataFrame)

    return df.get_dummies(dummy_na=dummy_na)


def to_arrays(inputs, outputs, dtype=None):
    """Convert inputs and outputs to NDArrays.

    Parameters
    ----------
    inputs : DataFrame
    outputs : Series or DataFrame
    dtype : numpy.dtype, optional
        float64 by default.

    Returns
    -------
    (NDArray, NDArray)
        X of shape (rows, features) and y of shape (rows,), or (rows, targets) for a DataFrame.

    """
    check_type(inputs, DataFrame)
    check_type(outputs, (Series, DataFrame))

    if len(inputs) != len(outputs):
        raise ValueError('Inputs of length {} do not match outputs of length {}'.format(len(inputs), len(outputs)))

    X = inputs.to_array(dtype)
    if isinstance(outputs, Series):
        y = outputs.to_array(X.dtype)
    else:
        y = outputs.to_array(dtype)

    return X, y


def prepare(df, target=-1, dummy_na=True, dtype=None):
    """Turn a raw DataFrame into arrays ready for training.

    Parameters
    ----------
    df : DataFrame
    target : str or int, optional
        Name or position of the target column; the last column by default.
    dummy_na : bool, optional
        Treat missing values in categorical columns as a category of their own.
    dtype : numpy.dtype, optional
        float64 by default.

    Returns
    -------
    (NDArray, NDArray)

    Examples
    --------
    >>> import tempfile
    >>> from ndprep.datasets import load_house_tiny
    >>> X, y = prepare(load_house_tiny(tempfile.mkdtemp()))
    >>> print(X)
    [[3. 1. 0.]
     [2. 0. 1.]
     [4. 0. 1.]
     [3. 0. 1.]]
    >>> print(y)
    [127500. 106000. 178100. 140000.]

    """
    inputs, outputs = split_features_target(df, target)
    inputs = encode_categorical(impute_mean(inputs), dummy_na)
    logger.debug('Prepared inputs with columns %s', inputs.columns.values.tolist())

    return to_arrays(inputs, outputs, dtype)
