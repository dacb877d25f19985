from .base import Index
from .range import RangeIndex
