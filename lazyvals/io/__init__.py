"""
I/O collaborators.

Consumers of the value core: they lift values and perform the effect,
combinator nodes never do.
"""

from .action import IO, IOResult, Print
from .files import BytesFile, TextFile

__all__ = (
    "IO",
    "IOResult",
    "Print",
    "BytesFile",
    "TextFile",
)
