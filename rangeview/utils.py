"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler

from .errors import IndexOutOfBounds, IndexUnderflow


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def normalize_index(key, size):
    """Convert a possibly negative element index into a position.

    Args:
        key (int): element index, negative values count from the end.
        size (int): size of the indexed sequence.

    Return:
        int: the position of the element, in `[0, size)`.

    Raises:
        IndexUnderflow: when a negative `key` reaches before the first
            element.
        IndexOutOfBounds: when `key` is past the last element.
    """
    if key < 0:
        if key < -size:
            raise IndexUnderflow("element", key, size)
        key = size + key

    if key >= size:
        raise IndexOutOfBounds("element", key, size)

    return int(key)


def basic_getitem(func):
    """Decorate a `__getitem__` method to add slicing support.

    Args:
        func (Callable[[Sequence, int], Any]):
            A `__getitem__` method that only accepts positive integer
            indices.

    Return:
        A `__getitem__` method that accepts negative indexing and
        slicing, slices are delegated to the `subview` method.
    """
    def getitem(self, key):
        if isinstance(key, slice):
            return self.subview(key)

        elif isint(key):
            return func(self, normalize_index(key, len(self)))

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    return getitem


def basic_setitem(func):
    """Decorate a `__setitem__` method to add slicing support.

    Args:
        func (Callable[[MutableSequence, int, Any]]):
            A `__setitem__` method that only accepts positive integer
            indices.

    Return:
        A `__setitem__` method that accepts negative indexing and
        one-to-one slice assignment.
    """
    def setitem(self, key, value):
        if isinstance(key, slice):
            with self.subview(key) as window:
                if len(window) != len(value):
                    raise ValueError(
                        self.__class__.__name__ +
                        " only supports one-to-one assignment")

                for i, val in enumerate(value):
                    window[i] = val

        elif isint(key):
            func(self, normalize_index(key, len(self)), value)

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    return setitem
