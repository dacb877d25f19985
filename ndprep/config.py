import os

import numpy as np
import tabulate

# While not explicit, the code here gets executed on ndprep import because core.utils imports from here
tabulate.PRESERVE_WHITESPACE = True

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
# where generated datasets such as house_tiny.csv are written
DATA_DIR = os.environ.get('NDPREP_DATA_DIR', os.path.join(os.getcwd(), 'data'))

DEFAULT_FLOAT_DTYPE = np.dtype(np.float64)
DEFAULT_INT_DTYPE = np.dtype(np.int64)

# str() of Series/DataFrame shows only the edges of longer data
DISPLAY_MAX_ROWS = 50
DISPLAY_EDGE_ITEMS = 20

DUMMY_NA_SUFFIX = 'nan'
