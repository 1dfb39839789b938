from .insert import InsertionError, insert_in_order, insert_ascending, insert_descending
from .ordering import Direction, directed, partial_compare
from .ordlist import OrdList
from .search import insertion_index, mid_point

__all__ = [
    "InsertionError",
    "insert_in_order",
    "insert_ascending",
    "insert_descending",
    "Direction",
    "directed",
    "partial_compare",
    "OrdList",
    "insertion_index",
    "mid_point",
]
