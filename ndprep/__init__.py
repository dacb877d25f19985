from .core import *
from .functions import *
from .io import read_csv, to_csv, write_rows
from . import datasets, preprocessing

"""
Missing data conventions:
float16, float32, float64: np.nan
int*: not representable; data with missing values is converted to float64 holding np.nan
object (str): None or np.nan, both detected through pandas.isna
bool: not representable; a missing value turns the column into object
"""

""" All ndprep containers shall conform to the following:
- `__repr__` shall show the class info without any data
- `.values` shall contain the underlying data, be it np.ndarray or dict for DataFrame
- `__str__` shall pretty print the data; for `NDArray` it is the NumPy rendering
but for `Series` and `DataFrame` it's a tabulate pretty print
"""
