import pytest
from lazyviews.utils import basic_getitem, isint


class Sized:
    def __init__(self, data):
        self.data = data

    def __len__(self):
        return len(self.data)

    @basic_getitem
    def __getitem__(self, key):
        assert key >= 0
        return self.data[key]

    def subview(self, start, stop):
        return self.data[start:stop]


class Unsized:
    @basic_getitem
    def __getitem__(self, key):
        return key * 2

    def __len__(self):
        raise TypeError("no len")


def test_basic_getitem():
    arr = Sized(list(range(10)))

    assert [arr[i] for i in range(10)] == list(range(10))
    assert [arr[i - 10] for i in range(10)] == list(range(10))
    assert arr[2:5] == [2, 3, 4]
    assert arr[-3:] == [7, 8, 9]
    assert arr[8:2] == []

    with pytest.raises(IndexError):
        arr[10]
    with pytest.raises(IndexError):
        arr[-11]
    with pytest.raises(TypeError):
        arr["a"]
    with pytest.raises(ValueError):
        arr[::3]


def test_basic_getitem_unsized():
    arr = Unsized()
    assert arr[1000] == 2000
    with pytest.raises(TypeError):
        arr[-1]


def test_isint():
    assert isint(3)
    assert isint(True)
    assert not isint(3.)
