"""Run-time guard for the shared/exclusive access discipline of views.

Any number of read-only views of a sequence may be alive at the same time,
but a mutable view must be the only view of its sequence for as long as it
lives. Views hold a :class:`Borrow` token obtained from the module level
:data:`registry`, tokens are returned either explicitly with
:meth:`Borrow.release` or when they are garbage collected.
"""

import collections
import threading
import weakref

from .errors import BorrowError, seterr
from .utils import get_logger


logger = get_logger(__name__)


class Borrow(object):
    """Claim on a sequence, shared or exclusive."""

    def __init__(self, registry, sequence, exclusive):
        self.exclusive = exclusive
        self.target = sequence.__class__.__name__
        self._finalizer = weakref.finalize(
            self, registry._release, id(sequence), exclusive)

    @property
    def active(self):
        return self._finalizer.alive

    def release(self):
        """Return the claim, calling this more than once has no effect."""
        self._finalizer()

    def check(self):
        if not self.active:
            raise BorrowError(
                "view of {} used after its borrow was released".format(
                    self.target))

    def __repr__(self):
        return "<{} borrow of {}{}>".format(
            "exclusive" if self.exclusive else "shared", self.target,
            "" if self.active else " (released)")


class BorrowRegistry(object):
    """Book-keeping of the live borrows, by sequence identity.

    Borrowed sequences are referenced by the registry until their last
    borrow is returned so that their identity cannot be reused meanwhile.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.entries = {}  # id -> [sequence, n_shared, n_exclusive]
        # releases from finalizers which may run while the lock is held
        self.pending = collections.deque()

    def acquire(self, sequence, exclusive=False):
        """Claim `sequence` and return the corresponding :class:`Borrow`.

        Raises:
            BorrowError: if the claim conflicts with live borrows and
                :func:`seterr` is set to `'raise'`.
        """
        key = id(sequence)

        with self.lock:
            self._drain()
            try:
                entry = self.entries.get(key)
                if entry is None:
                    entry = [sequence, 0, 0]

                _, n_shared, n_exclusive = entry
                if n_exclusive > 0 or (exclusive and n_shared > 0):
                    self._conflict(
                        sequence, exclusive, n_shared, n_exclusive)

                entry[2 if exclusive else 1] += 1
                self.entries[key] = entry
            finally:  # releases that came in while we held the lock
                self._drain()

        logger.debug("%s borrow of %s at 0x%x",
                     "exclusive" if exclusive else "shared",
                     sequence.__class__.__name__, key)

        return Borrow(self, sequence, exclusive)

    def state(self, sequence):
        """Return the numbers of shared and exclusive borrows of `sequence`."""
        with self.lock:
            self._drain()
            entry = self.entries.get(id(sequence))
            if entry is None or entry[0] is not sequence:
                return 0, 0
            return entry[1], entry[2]

    def _conflict(self, sequence, exclusive, n_shared, n_exclusive):
        msg = "cannot borrow {} as {}, it is already borrowed {}".format(
            sequence.__class__.__name__,
            "mutable" if exclusive else "shared",
            "as mutable" if n_exclusive > 0
            else "by {} view(s)".format(n_shared))

        policy = seterr()
        if policy == 'raise':
            raise BorrowError(msg)
        elif policy == 'warn':
            logger.warning(msg)

    def _release(self, key, exclusive):
        self.pending.append((key, exclusive))
        if self.lock.acquire(blocking=False):
            try:
                self._drain()
            finally:
                self.lock.release()

    def _drain(self):
        while self.pending:
            key, exclusive = self.pending.popleft()
            entry = self.entries.get(key)
            if entry is None:
                continue

            entry[2 if exclusive else 1] -= 1
            if entry[1] == 0 and entry[2] == 0:
                del self.entries[key]

            logger.debug("released %s borrow at 0x%x",
                         "exclusive" if exclusive else "shared", key)


registry = BorrowRegistry()
