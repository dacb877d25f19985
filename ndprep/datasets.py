import logging
import os

from .config import DATA_DIR
from .core import DataFrame, Series
from .core.utils import check_type
from .io import read_csv, write_rows

logger = logging.getLogger(__name__)

HOUSE_TINY_HEADER = 'NumRooms,Alley,Price'
HOUSE_TINY_ROWS = ['NA,Pave,127500',
                   '2,NA,106000',
                   '4,NA,178100',
                   'NA,NA,140000']


def house_tiny(data_dir=None):
    """Write the tiny house prices dataset as csv.

    Each row is a house: its number of rooms, the type of alley access, and its price.
    NA marks missing values.

    Parameters
    ----------
    data_dir : str, optional
        Directory to write house_tiny.csv to. `config.DATA_DIR` by default.

    Returns
    -------
    str
        Path to the csv file.

    """
    if data_dir is None:
        data_dir = DATA_DIR

    filepath = os.path.join(data_dir, 'house_tiny.csv')
    write_rows(filepath, HOUSE_TINY_HEADER, HOUSE_TINY_ROWS)
    logger.info('Created dataset house_tiny at %s', filepath)

    return filepath


def load_house_tiny(data_dir=None):
    """Write the tiny house prices dataset and read it back.

    Returns
    -------
    DataFrame
        With columns NumRooms (float64 with missing values), Alley (strings with missing values), and Price.

    Examples
    --------
    >>> import tempfile
    >>> from ndprep.datasets import load_house_tiny
    >>> df = load_house_tiny(tempfile.mkdtemp())
    >>> df  # repr
    DataFrame(index=RangeIndex(start=0, stop=4, step=1), columns=[NumRooms: float64, Alley: object, Price: int64])
    >>> df.missing_counts().values.tolist()
    [2, 3, 0]

    """
    return read_csv(house_tiny(data_dir))


def split_features_target(df, target=-1):
    """Split into the input features and the target to predict.

    Parameters
    ----------
    df : DataFrame
    target : str or int, optional
        Name or position of the target column; the last column by default.

    Returns
    -------
    (DataFrame, Series)
        Inputs with all the other columns, in order, and outputs.

    """
    check_type(df, DataFrame)
    check_type(target, (str, int))

    names = df.columns.values.tolist()
    if isinstance(target, int):
        if not -len(names) <= target < len(names):
            raise IndexError('Target position {} out of bounds for {} columns'.format(target, len(names)))
        target = names[target]
    elif target not in df:
        raise KeyError('Column name not in DataFrame: {}'.format(target))

    inputs = df[[name for name in names if name != target]]
    outputs = df[target]

    return inputs, check_type(outputs, Series)
