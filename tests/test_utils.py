import pytest

from rangeview.errors import IndexOutOfBounds, IndexUnderflow
from rangeview.utils import basic_getitem, basic_setitem, isint, normalize_index


class Window:
    def __init__(self, sequence):
        self.sequence = sequence

    def __len__(self):
        return len(self.sequence)

    @basic_getitem
    def __getitem__(self, key):
        return self.sequence[key]

    @basic_setitem
    def __setitem__(self, key, value):
        self.sequence[key] = value

    def subview(self, key):
        return Window(self.sequence[key])

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.released = True


def test_isint():
    assert isint(3)
    assert isint(-3)
    assert not isint(3.0)
    assert not isint("3")


def test_normalize_index():
    for size in range(1, 20):
        for i in range(-size, size):
            assert normalize_index(i, size) == i % size

        with pytest.raises(IndexUnderflow):
            normalize_index(-size - 1, size)
        with pytest.raises(IndexOutOfBounds):
            normalize_index(size, size)

    with pytest.raises(IndexOutOfBounds):
        normalize_index(0, 0)


def test_basic_getitem():
    arr = list(range(10))
    w = Window(arr)

    assert [w[i] for i in range(10)] == arr
    assert [w[i] for i in range(-10, 0)] == arr
    assert w[2:5].sequence == [2, 3, 4]

    with pytest.raises(IndexError):
        w[10]
    with pytest.raises(TypeError):
        w[1.0]


def test_basic_setitem():
    arr = list(range(10))
    w = Window(arr)

    w[-1] = -1
    w[0] = -2
    assert arr == [-2] + list(range(1, 9)) + [-1]

    with pytest.raises(IndexError):
        w[-11] = 0
    with pytest.raises(TypeError):
        w["a"] = 0

    # slices are assigned item by item through the subview
    w = Window(list(range(10)))
    with pytest.raises(ValueError):
        w[2:5] = [1, 2]
