"""Windows over ranges of sequences."""

import weakref
from collections.abc import Sequence

from .borrow import registry
from .errors import BorrowError, IndexOutOfBounds
from .ranges import RangeSpec, resolve
from .utils import basic_getitem, basic_setitem, isint


class View(Sequence):
    """Read-only window over the items of `sequence` at `indices`.

    `indices` is a :class:`python:range`, contiguous for views made by
    :func:`view`, stepped once a view is sliced with a step. Items are
    read from the underlying sequence on access, nothing is copied.

    A view derived from another one (by slicing it or passing it to
    :func:`view`) borrows from its parent until it is released or
    collected: meanwhile the parent cannot be written to, and cannot be
    used at all if the derived view is mutable.
    """

    writable = False

    def __init__(self, sequence, indices, borrow, parent=None):
        if parent is not None:
            parent._lend(self.writable)

        self.sequence = sequence
        self.indices = indices
        self.borrow = borrow
        self.parent = parent
        self.released = False
        self.n_readers = 0
        self.n_writers = 0
        self.extent = max(indices[0], indices[-1]) + 1 if indices else 0

        if parent is not None:
            self._finalizer = weakref.finalize(
                self, parent._giveback, self.writable)

    @property
    def start(self):
        return self.indices.start

    @property
    def stop(self):
        return self.indices.stop

    def __len__(self):
        return len(self.indices)

    def check(self, write=False):
        """Raise if the view cannot be read, or written if `write`."""
        if self.released:
            raise BorrowError(
                self.__class__.__name__ + " used after being released")
        self.borrow.check()

        if self.n_writers > 0 or (write and self.n_readers > 0):
            raise BorrowError(
                "{} is lent to a derived {}view".format(
                    self.__class__.__name__,
                    "mutable " if self.n_writers > 0 else ""))

        size = len(self.sequence)
        if size < self.extent:  # sequence shrank behind our back
            raise IndexOutOfBounds("end", self.extent, size)

    def _lend(self, writable):
        if writable and not self.writable:
            raise BorrowError("cannot borrow a read-only view as mutable")
        self.check(write=writable)

        if writable:
            self.n_writers += 1
        else:
            self.n_readers += 1

    def _giveback(self, writable):
        if writable:
            self.n_writers -= 1
        else:
            self.n_readers -= 1

    def __iter__(self):
        for i in self.indices:
            self.check()
            yield self.sequence[i]

    def __reversed__(self):
        for i in reversed(self.indices):
            self.check()
            yield self.sequence[i]

    @basic_getitem
    def __getitem__(self, key):
        self.check()
        return self.sequence[self.indices[key]]

    def subview(self, key):
        """Return the view selected by a slice of this view.

        The slice bounds are resolved like :func:`view` does, a step
        is then applied over the resolved window.
        """
        lo, hi = resolve((key.start, key.stop), len(self))
        indices = self.indices[lo:hi][::key.step]
        return self.__class__(self.sequence, indices, self.borrow, self)

    def release(self):
        """End the borrow held by this view.

        A view made directly from a sequence returns its borrow of the
        sequence, which also disables the views derived from it. A
        derived view gives the access back to its parent.
        """
        if self.parent is None:
            self.borrow.release()
        else:
            self._finalizer()
        self.released = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.release()

    def __repr__(self):
        return "<{} [{}:{}:{}] of {}>".format(
            self.__class__.__name__, self.indices.start, self.indices.stop,
            self.indices.step, self.sequence.__class__.__name__)


class MutableView(View):
    """Writable window over the items of `sequence` at `indices`.

    Assignments are forwarded to the underlying sequence, the length of
    the window cannot change.
    """

    writable = True

    @basic_setitem
    def __setitem__(self, key, value):
        self.check(write=True)
        self.sequence[self.indices[key]] = value


def _window(sequence, spec, mutable):
    lo, hi = resolve(spec, len(sequence))

    if isinstance(sequence, View):  # re-borrow
        return (sequence.sequence, sequence.indices[lo:hi],
                sequence.borrow, sequence)

    borrow = registry.acquire(sequence, exclusive=mutable)
    return sequence, range(lo, hi), borrow, None


def view(sequence, spec):
    """Return a read-only window over a range of `sequence`.

    Args:
        sequence (Sequence):
            Any sized and indexable container (list, tuple, array,
            another view...).
        spec (RangeSpec):
            The range to select, bounds may be negative to count from
            the end (see :func:`resolve`).

    Returns:
        View: a view on `sequence[lo:hi]` with the resolved bounds.

    Raises:
        RangeError: if the range does not fit in `sequence`, which is
            left untouched.
        BorrowError: if a mutable view of `sequence` is alive.

    Example:

        >>> a = [0, 1, 2, 3, 4, 5]
        >>> list(view(a, R[-4:-1]))
        [2, 3, 4]
        >>> list(reversed(view(a, R[:-2])))[::2]
        [3, 1]
    """
    return View(*_window(sequence, spec, mutable=False))


def view_mut(sequence, spec):
    """Return a writable window over a range of `sequence`.

    Same as :func:`view` but the returned view supports item and
    one-to-one slice assignment, which modify `sequence`. No other view
    of `sequence` may be alive meanwhile.

    Example:

        >>> a = [0, 1, 2, 3, 4, 5]
        >>> with view_mut(a, R[1:-2]) as w:
        ...     w[0] = 10
        >>> a
        [0, 10, 2, 3, 4, 5]
    """
    return MutableView(*_window(sequence, spec, mutable=True))


def view_buffer(obj, spec):
    """Return a read-only :class:`python:memoryview` over a range of `obj`.

    `obj` must support the buffer protocol (:class:`python:bytearray`,
    :class:`python:array.array`, :class:`numpy:numpy.ndarray`...); the
    owner cannot be resized while the returned memoryview is alive.
    """
    with memoryview(obj) as span:
        lo, hi = resolve(spec, len(span))
        return span[lo:hi].toreadonly()


def view_buffer_mut(obj, spec):
    """Return a writable :class:`python:memoryview` over a range of `obj`.

    Raises:
        BorrowError: if `obj` exposes a read-only buffer.
    """
    with memoryview(obj) as span:
        if span.readonly:
            raise BorrowError(
                "cannot borrow a read-only {} as mutable".format(
                    obj.__class__.__name__))
        lo, hi = resolve(spec, len(span))
        return span[lo:hi]


def at(sequence, index):
    """Return the item at `index`, which may count from the end.

    Example:

        >>> at([0, 1, 2, 3, 4, 5], -2)
        4
    """
    if not isint(index):
        raise TypeError(
            "index must be an integer, not " + index.__class__.__name__)

    with view(sequence, RangeSpec.from_start(index)) as window:
        if len(window) == 0:
            raise IndexOutOfBounds("start", index, len(sequence))
        return window[0]


def put(sequence, index, value):
    """Set the item at `index`, which may count from the end."""
    if not isint(index):
        raise TypeError(
            "index must be an integer, not " + index.__class__.__name__)

    with view_mut(sequence, RangeSpec.from_start(index)) as window:
        if len(window) == 0:
            raise IndexOutOfBounds("start", index, len(sequence))
        window[0] = value
