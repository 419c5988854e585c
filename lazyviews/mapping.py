"""Views computing their elements with a transform on each read."""

from .errors import UserFunction, format_stack
from .positions import Position, ProxyPointer, begin, end, return_type
from .view import View


class MapIterator(Position):
    reference = False

    def __init__(self, position, function):
        self.position = position
        self.function = function  # shared with the view and its other positions
        self.category = position.category
        self.lazy_end = position.lazy_end

    @property
    def value_type(self):
        return return_type(self.function.func)

    def copy(self):
        return MapIterator(self.position.copy(), self.function)

    def get(self):
        return self.function(self.position.get())

    def pointer(self):
        return ProxyPointer(self.get())

    def increment(self):
        self.position.increment()
        return self

    def decrement(self):
        self.position.decrement()
        return self

    def advance(self, n):
        self.position += n

    def distance(self, other):
        return self.position - other.position

    def __eq__(self, other):
        if not isinstance(other, MapIterator):
            return NotImplemented
        return self.position == other.position

    def __repr__(self):
        return "MapIterator({!r})".format(self.position)


class Map(View):
    def __init__(self, first, last, function):
        self.function = UserFunction(function, self.__class__.__name__,
                                     format_stack(2))
        super().__init__(MapIterator(first.copy(), self.function),
                         MapIterator(last.copy(), self.function))


def map_range(first, last, function):
    """Return a mapping of `function` over the elements from position
    `first` to `last`."""
    return Map(first, last, function)


def map(sequence, function):  # pylint: disable=redefined-builtin
    """Return a mapping of `function` over the sequence.

    Equivalent to :code:`[function(x) for x in sequence]` with on-demand
    evaluation: `function` is called each time an element is read, results
    are not cached. The view keeps the traversal capabilities of
    `sequence` (a mapping over a list supports :func:`len`, indexing and
    :func:`reversed`).

    Items pulled from a `sequence` that is only iterable are buffered for
    as long as the view lives.

    Example:

        >>> a = [1, 2, 3, 4]
        >>> m = lazyviews.map(a, lambda x: x + 2)
        >>> list(m)
        [3, 4, 5, 6]
        >>> def do(x):
        ...     print("computing now")
        ...     return x * 2
        ...
        >>> m = lazyviews.map(a, do)
        >>> m[2]
        computing now
        6
    """
    return Map(begin(sequence), end(sequence), function)
