"""
A python library to select ranges of sequences with negative indices.

The rangeview package resolves ranges whose bounds may count from the
end of a sequence, Python style, into absolute bounds, and returns
windows over these ranges that share storage with the sequence
(anything that supports indexing such as lists or arrays).

Out of range bounds are reported with precise errors instead of being
clamped. Read-only windows can coexist but a writable window must be
the only window of its sequence, this is checked at run time.
"""

from .borrow import registry
from .errors import (
    BorrowError,
    IndexOutOfBounds,
    IndexUnderflow,
    InvertedRange,
    RangeError,
    seterr,
)
from .ranges import R, RangeSpec, ResolvedRange, as_rangespec, resolve
from .views import (
    MutableView,
    View,
    at,
    put,
    view,
    view_buffer,
    view_buffer_mut,
    view_mut,
)

__all__ = [
    "RangeError",
    "IndexUnderflow",
    "IndexOutOfBounds",
    "InvertedRange",
    "BorrowError",
    "seterr",
    "registry",
    "R",
    "RangeSpec",
    "ResolvedRange",
    "as_rangespec",
    "resolve",
    "View",
    "MutableView",
    "view",
    "view_mut",
    "view_buffer",
    "view_buffer_mut",
    "at",
    "put",
]
