import random
from collections import namedtuple

import pytest
import lazyviews
from lazyviews import Category, EvaluationError, ProxyPointer, map_range, \
    seterr, take


def test_map_basics():
    n = 100
    data = [random.random() for _ in range(n)]

    def do(x):
        do.call_cnt += 1
        return x + 1

    do.call_cnt = 0

    result = lazyviews.map(data, do)
    assert len(result) == len(data)
    assert do.call_cnt == 0
    assert list(result) == [x + 1 for x in data]
    assert do.call_cnt == n
    assert [result[i] for i in range(len(result))] == [x + 1 for x in data]
    assert list(result[:]) == [x + 1 for x in data]
    assert list(reversed(result)) == [x + 1 for x in reversed(data)]
    assert result[-1] == data[-1] + 1


def test_map_no_caching():
    def do(x):
        do.call_cnt += 1
        return x * 2

    do.call_cnt = 0

    result = lazyviews.map([1, 2, 3], do)
    it = result.begin()
    assert it.get() == 2
    assert it.get() == 2
    assert do.call_cnt == 2


def test_map_binary_operations():
    data = [1, 2, 3, 4]
    result = lazyviews.map(data, lambda x: x * 10)
    it = result.begin()

    assert it.category == Category.RANDOM_ACCESS
    it.increment()
    assert it.get() == 20
    it.decrement()
    assert it.get() == 10
    assert (it + 3).get() == 40
    it += 2
    assert (it - 1).get() == 20
    it -= 2
    assert it[1] == 20
    assert result.end() - result.begin() == 4
    assert result.begin() < result.end()
    assert result.end() >= result.begin()

    # equality only depends on the wrapped position
    other = lazyviews.map(data, lambda x: -x)
    assert other.begin() == result.begin()
    assert other.begin() + 1 != result.begin()


def test_map_pointer():
    Point = namedtuple('Point', ['x', 'y'])
    result = lazyviews.map([1, 2, 3], lambda v: Point(v, -v))
    pointer = result.begin().pointer()

    assert isinstance(pointer, ProxyPointer)
    assert pointer.x == 1
    assert pointer.y == -1


def test_map_read_only():
    result = lazyviews.map([1, 2, 3], lambda x: x)
    assert not result.begin().reference
    with pytest.raises(TypeError):
        result.begin().set(0)


def test_map_iterable():
    result = lazyviews.map((x for x in range(5)), lambda x: x * x)
    assert result.category == Category.FORWARD
    assert list(result) == [0, 1, 4, 9, 16]
    with pytest.raises(TypeError):
        len(result)
    assert result[2] == 4


def test_map_range():
    data = list(range(10))
    first = lazyviews.begin(data)
    result = map_range(first + 2, first + 5, str)
    assert result.join(",") == "2,3,4"


def test_map_value_type():
    def half(x) -> float:
        return x / 2

    assert lazyviews.map([1, 2], half).value_type is float
    assert lazyviews.map([1, 2], lambda x: x).value_type is None


def test_compose():
    data = list(range(20))
    view = lazyviews.map(take(data, 5), lambda x: x + 1)
    assert list(view) == [1, 2, 3, 4, 5]
    assert len(view) == 5

    view = take(lazyviews.map(data, lambda x: x * 2), 3)
    assert list(view) == [0, 2, 4]
    assert view.begin().category == Category.RANDOM_ACCESS


class CustomException(Exception):
    pass


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_map_exceptions(evaluation):
    def do(x):
        del x
        raise CustomException

    data = [random.random() for _ in range(100)]
    m = lazyviews.map(data, do)

    seterr(evaluation)
    error_t = EvaluationError if evaluation == "wrap" else CustomException

    with pytest.raises(error_t):
        print(m[0])

    with pytest.raises(error_t):
        next(iter(m))

    with pytest.raises(TypeError):
        lazyviews.map(data, None)

    seterr('wrap')


def test_map_error_message():
    m = lazyviews.map([1, 2, 0], lambda x: 1 / x)
    with pytest.raises(EvaluationError) as excinfo:
        list(m)

    assert "Map created at" in str(excinfo.value)
    assert "test_map_error_message" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
