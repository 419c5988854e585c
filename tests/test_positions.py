import array
import copy

import pytest
from lazyviews import Category, ProxyPointer, advance, begin, distance, end, \
    next_position, prev_position
from lazyviews.positions import IterablePosition, SequencePosition, \
    return_type, value_type


def test_sequence_position():
    arr = list(range(10))
    first, last = begin(arr), end(arr)

    assert isinstance(first, SequencePosition)
    assert first.category == Category.RANDOM_ACCESS
    assert first.reference
    assert last - first == 10
    assert distance(first, last) == 10

    it = first.copy()
    it.increment()
    assert it.get() == 1
    assert first.get() == 0  # copies are independent
    it.decrement()
    assert it == first

    it += 4
    assert it.get() == 4
    it -= 2
    assert it.get() == 2
    assert (it + 3).get() == 5
    assert (3 + it).get() == 5
    assert (it - 1).get() == 1
    assert it[5] == 7
    assert it.get() == 2

    assert first < it <= last
    assert last > it >= first
    assert not it < first

    it.set(-1)
    assert arr[2] == -1

    with pytest.raises(TypeError):
        hash(it)


def test_read_only_sequence():
    data = (1, 2, 3)
    first = begin(data)
    assert not first.reference
    with pytest.raises(TypeError):
        first.set(0)

    assert value_type(begin("abc")) is str
    assert value_type(begin(range(3))) == int
    assert value_type(begin(array.array('d', [1.]))) == 'd'
    assert value_type(begin([1, 2])) is None


def test_iterable_position():
    def gen():
        gen.n_calls += 1
        yield from [1, 2, 3]

    gen.n_calls = 0

    source = gen()
    first, last = begin(source), end(source)
    assert isinstance(first, IterablePosition)
    assert first.category == Category.FORWARD

    it = first.copy()
    values = []
    while it != last:
        values.append(it.get())
        it.increment()
    assert values == [1, 2, 3]

    # the buffer is shared, other copies can still be traversed
    assert first.get() == 1
    assert next_position(first, 2).get() == 3
    assert distance(first, last) == 3
    assert next_position(first, 3) == next_position(first, 5)
    assert gen.n_calls == 1

    with pytest.raises(IndexError):
        it.get()

    with pytest.raises(TypeError):
        first.decrement()
    with pytest.raises(TypeError):
        first + 1
    with pytest.raises(TypeError):
        first < last
    with pytest.raises(TypeError):
        first.set(0)


def test_advance():
    arr = list(range(10))

    it = begin(arr)
    assert advance(it, 3) is it
    assert it.get() == 3
    assert prev_position(it, 2).get() == 1
    assert it.get() == 3

    source = iter(arr)
    it = advance(begin(source), 4)
    assert it.get() == 4
    with pytest.raises(TypeError):
        advance(it, -1)


def test_proxy_pointer():
    p = ProxyPointer(3 + 4j)
    assert p.real == 3
    assert p.conjugate() == 3 - 4j
    assert p.value == 3 + 4j

    q = copy.copy(p)
    assert q.imag == 4

    with pytest.raises(AttributeError):
        p.missing


def test_return_type():
    def f(x) -> float:
        return x / 2

    assert return_type(f) is float
    assert return_type(lambda x: x) is None
    assert return_type(str.upper) is None
