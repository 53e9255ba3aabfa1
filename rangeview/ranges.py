"""Range descriptions with negative bounds and their resolution."""

from collections import namedtuple

from .errors import IndexOutOfBounds, IndexUnderflow, InvertedRange
from .utils import isint


class RangeSpec(namedtuple('RangeSpec', ['start', 'end'])):
    """Half-open range `[start, end)` with optional, possibly negative bounds.

    A missing bound leaves the range open on that side, a negative bound
    counts from the end of the sequence. Nothing is checked here, the
    bounds are validated by :func:`resolve` against an actual length.
    """

    __slots__ = ()

    @classmethod
    def full(cls):
        """The whole sequence, like `[:]`."""
        return cls(None, None)

    @classmethod
    def from_start(cls, start):
        """From `start` to the end, like `[start:]`."""
        return cls(start, None)

    @classmethod
    def to(cls, end):
        """From the beginning up to `end` excluded, like `[:end]`."""
        return cls(None, end)

    @classmethod
    def between(cls, start, end):
        """From `start` up to `end` excluded, like `[start:end]`."""
        return cls(start, end)

    @classmethod
    def from_slice(cls, key):
        """Build a range from a :class:`python:slice` without step."""
        if key.step is not None:
            raise ValueError(
                "ranges do not support a step, apply it on the view instead")
        return cls(key.start, key.stop)

    def __repr__(self):
        return "R[{}:{}]".format(
            "" if self.start is None else self.start,
            "" if self.end is None else self.end)


class RangeNotation(object):
    """Build :class:`RangeSpec` objects with the slice syntax.

    Example:

        >>> R[-4:-1]
        R[-4:-1]
        >>> R[:-2] == RangeSpec.to(-2)
        True
    """

    def __getitem__(self, key):
        if not isinstance(key, slice):
            raise TypeError(
                "ranges are written with slices, as in R[1:-1], not "
                + key.__class__.__name__)
        return RangeSpec.from_slice(key)


R = RangeNotation()


def as_rangespec(obj):
    """Coerce `obj` into a :class:`RangeSpec`.

    Accepted values are a :class:`RangeSpec`, a slice without step, a
    `(start, end)` pair or `None` for the full range.
    """
    if isinstance(obj, RangeSpec):
        return obj
    elif obj is None:
        return RangeSpec.full()
    elif isinstance(obj, slice):
        return RangeSpec.from_slice(obj)
    elif isinstance(obj, tuple) and len(obj) == 2:
        return RangeSpec(*obj)
    else:
        raise TypeError(
            "cannot interpret {} as a range".format(obj.__class__.__name__))


class ResolvedRange(namedtuple('ResolvedRange', ['lo', 'hi'])):
    """Non-negative half-open bounds with `0 <= lo <= hi <= length`."""

    __slots__ = ()

    @property
    def size(self):
        return self.hi - self.lo

    def to_slice(self):
        return slice(self.lo, self.hi)

    def indices(self):
        return range(self.lo, self.hi)


def _position(endpoint, value, default, length):
    if value is None:
        return default
    if not isint(value):
        raise TypeError(
            "{} index must be an integer or None, not {}".format(
                endpoint, value.__class__.__name__))

    value = int(value)
    return value if value >= 0 else length + value


def resolve(spec, length):
    """Convert a range with possibly negative bounds into absolute bounds.

    Args:
        spec (RangeSpec):
            The range to resolve, or anything accepted by
            :func:`as_rangespec`.
        length (int):
            Length of the sequence the range applies to.

    Returns:
        ResolvedRange: the equivalent bounds `(lo, hi)` with
        `0 <= lo <= hi <= length`.

    Raises:
        IndexUnderflow: a negative bound reaches before the start of the
            sequence.
        IndexOutOfBounds: a bound lies past the end of the sequence.
        InvertedRange: the resolved start comes after the resolved end.

    Bounds are never clamped, an empty range is valid:

        >>> resolve(R[-4:-1], 6)
        ResolvedRange(lo=2, hi=5)
        >>> resolve(R[6:], 6)
        ResolvedRange(lo=6, hi=6)
    """
    spec = as_rangespec(spec)
    if not isint(length) or length < 0:
        raise ValueError(
            "length must be a non-negative integer, not {!r}".format(length))
    length = int(length)

    endpoints = (
        ("start", spec.start, _position("start", spec.start, 0, length)),
        ("end", spec.end, _position("end", spec.end, length, length)))

    for endpoint, value, position in endpoints:
        if position < 0:
            raise IndexUnderflow(endpoint, value, length)

    for endpoint, value, position in endpoints:
        if position > length:
            raise IndexOutOfBounds(endpoint, value, length)

    start, end = endpoints[0][2], endpoints[1][2]
    if start > end:
        raise InvertedRange(start, end, length)

    return ResolvedRange(start, end)
