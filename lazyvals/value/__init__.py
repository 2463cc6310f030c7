from .core import Delegated, Eager, EagerVal, Memo, Val, Value
from .multi import Empty, MultiVal, Vals

__all__ = (
    "Delegated",
    "Eager",
    "EagerVal",
    "Empty",
    "Memo",
    "MultiVal",
    "Val",
    "Vals",
    "Value",
)
