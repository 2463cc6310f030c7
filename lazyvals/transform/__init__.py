from .filter import Filter, FilterIs
from .mapping import Indexed, IndexedValue, Map, Mapping
from .trans import Cond, If, IfIs, Trans

__all__ = (
    # Single value
    "Trans",
    "Cond",
    "If",
    "IfIs",
    # Multi-value
    "Map",
    "Mapping",
    "Indexed",
    "IndexedValue",
    "Filter",
    "FilterIs",
)
