import threading


class RangeError(IndexError):
    """Raised when a range cannot be resolved against a sequence length."""


class IndexUnderflow(RangeError):
    """A negative index reaches before the start of the sequence."""

    def __init__(self, endpoint, index, length):
        super().__init__(
            "{} index {} reaches before the start of a sequence of "
            "length {}".format(endpoint, index, length))
        self.endpoint = endpoint
        self.index = index
        self.length = length


class IndexOutOfBounds(RangeError):
    """A resolved index lies past the end of the sequence."""

    def __init__(self, endpoint, index, length):
        super().__init__(
            "{} index {} is out of bounds for a sequence of length {}".format(
                endpoint, index, length))
        self.endpoint = endpoint
        self.index = index
        self.length = length


class InvertedRange(RangeError):
    """The resolved start lies after the resolved end."""

    def __init__(self, start, end, length):
        super().__init__(
            "range starts at {} but ends at {} (sequence length {})".format(
                start, end, length))
        self.start = start
        self.end = end
        self.length = length


class BorrowError(RuntimeError):
    """Raised when a view violates the shared/exclusive access discipline."""


# Settings --------------------------------------------------------------------

def seterr(borrow=None):
    """Set how borrow conflicts are handled.

    Args:
        borrow (str): what happens when a mutable view is requested while
            other views of the same sequence are alive, or any view is
            requested while a mutable one is alive:

            - `'raise'`: raise :class:`BorrowError` (default).
            - `'warn'`: log a warning and hand out the view anyway.
            - `'ignore'`: hand out the view silently.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if borrow in ('raise', 'warn', 'ignore'):
        error_config.borrow = borrow
    elif borrow is not None:
        raise ValueError("borrow must be 'raise', 'warn' or 'ignore'")

    return error_config.borrow


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.borrow = 'raise'


error_config = ErrorConfig()
