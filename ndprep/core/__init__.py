from .creation import array, arange, zeros, ones, full, zeros_like, ones_like, eye, randn, normal
from .frame import DataFrame, get_dummies
from .indexes import Index, RangeIndex
from .ndarray import NDArray, concat, stack, broadcast_shapes
from .series import Series
from .utils import MissingValueError
