import logging
import os

from pandas import read_csv as pd_read_csv

from ..core import DataFrame
from ..core.utils import check_type, check_inner_types

logger = logging.getLogger(__name__)


def read_csv(filepath, sep=',', header='infer', names=None, usecols=None, dtype=None, na_values=None,
             nrows=None):
    """Read CSV into DataFrame.

    Eager implementation using pandas, i.e. entire file is read at this point. Only common/relevant parameters
    available at the moment; for full list, could use pandas directly and then convert with `DataFrame.from_pandas`.

    Empty fields and pandas' default markers, such as NA, NaN, or null, become missing values.

    Parameters
    ----------
    filepath : str
    sep : str, optional
        Separator used between values.
    header : 'infer' or None, optional
        Whether to infer the column names from the first row or not.
    names : list of str, optional
        List of column names to use. Overrides inferred header.
    usecols : list of (int or str), optional
        Which columns to parse.
    dtype : dict, optional
        Dict of column -> type to parse as.
    na_values : list of str, optional
        Additional strings to recognize as missing values.
    nrows : int, optional
        Number of rows to read.

    Returns
    -------
    DataFrame

    See Also
    --------
    pandas.read_csv : https://pandas.pydata.org/pandas-docs/stable/reference/api/pandas.read_csv.html

    """
    pd_df = pd_read_csv(filepath,
                        sep=sep,
                        header=header,
                        names=names,
                        usecols=usecols,
                        dtype=dtype,
                        na_values=na_values,
                        nrows=nrows)
    logger.debug('Read %d rows with columns %s from %s', len(pd_df), list(pd_df.columns), filepath)

    return DataFrame.from_pandas(pd_df)


def to_csv(df, filepath, sep=',', header=True, index=True):
    """Save DataFrame as csv.

    Missing values are written as NA such that `read_csv` reads them back as missing.

    Currently delegates to pandas.

    Parameters
    ----------
    df : DataFrame
    filepath : str
    sep : str, optional
        Separator used between values.
    header : bool, optional
        Whether to save the header.
    index : bool, optional
        Whether to save the index columns.

    Returns
    -------
    None

    See Also
    --------
    pandas.DataFrame.to_csv : https://pandas.pydata.org/pandas-docs/stable/reference/api/pandas.DataFrame.to_csv.html

    """
    check_type(df, DataFrame)

    df.to_pandas().to_csv(filepath,
                          sep=sep,
                          header=header,
                          index=index,
                          na_rep='NA')
    logger.debug('Wrote %d rows to %s', len(df), filepath)


def write_rows(filepath, header, rows):
    """Write literal lines of text to a file, creating its directory if needed.

    Useful for creating small datasets by hand, e.g. with NA marking missing values.

    Parameters
    ----------
    filepath : str
    header : str
        First line, e.g. 'NumRooms,Alley,Price'.
    rows : list of str
        Following lines, without line endings.

    Returns
    -------
    str
        The filepath.

    """
    check_type(header, str)
    check_type(rows, list)
    check_inner_types(rows, str)

    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w') as f:
        f.write(header + '\n')
        for row in rows:
            f.write(row + '\n')
    logger.debug('Wrote %d rows to %s', len(rows), filepath)

    return filepath
