"""
Lazy, memoized value wrappers and a pure/effect boundary.

Core building blocks: a Value is a deferred computation that runs at most
once; combinators build trees of values; Try turns raised errors into
Result data; IO collaborators perform side effects outside the tree.

Architecture:
- value      - Value, Val, EagerVal, Eager, Empty, Vals, MultiVal
- transform  - Trans/Cond/If/IfIs, Map, Filter, FilterIs, Indexed
- collection - Reduction (the only multi -> single collapse)
- result     - Try, FromResult over kungfu's Result
- io, text   - collaborators consuming the core
"""

import logging

# Core types
from ._types import Check, Maybe, MultiValue, Operation, Predicate, Thunk

# Values
from . import value
from .value import Delegated, Eager, EagerVal, Empty, Memo, MultiVal, Val, Vals, Value

# Combinators
from . import transform
from .transform import Cond, Filter, FilterIs, If, IfIs, Indexed, IndexedValue, Map, Mapping, Trans
from .collection import Reduction

# Error-as-value
from . import result
from .result import Error, FromResult, Ok, Result, Try, capture

# Fluent builder
from .flow import Flow, flow

# Errors
from ._errors import CyclicEvaluationError

# Library logging stays silent unless the host configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Check",
    "Maybe",
    "MultiValue",
    "Operation",
    "Predicate",
    "Thunk",
    # Values
    "value",
    "Delegated",
    "Eager",
    "EagerVal",
    "Empty",
    "Memo",
    "MultiVal",
    "Val",
    "Vals",
    "Value",
    # Combinators
    "transform",
    "Cond",
    "Filter",
    "FilterIs",
    "If",
    "IfIs",
    "Indexed",
    "IndexedValue",
    "Map",
    "Mapping",
    "Trans",
    "Reduction",
    # Error-as-value
    "result",
    "Error",
    "FromResult",
    "Ok",
    "Result",
    "Try",
    "capture",
    # Flow
    "Flow",
    "flow",
    # Errors
    "CyclicEvaluationError",
)
