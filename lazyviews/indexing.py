"""Views bounding a sequence to a prefix or a sub-range."""

from .errors import UserFunction, format_stack
from .positions import Position, begin, end, next_position
from .utils import get_logger
from .view import View

logger = get_logger(__name__)


class TakeIterator(Position):
    """Position that stops at a captured end or when a predicate fails.

    Offsets, distance and ordering are forwarded to the wrapped position
    without bound checks.
    """
    def __init__(self, position, last, predicate=None):
        self.position = position
        self.last = last
        self.predicate = predicate
        self.category = position.category
        self.reference = position.reference
        self.value_type = position.value_type
        self.lazy_end = predicate is not None or position.lazy_end

    def copy(self):
        result = super().copy()
        result.position = self.position.copy()
        return result

    def get(self):
        return self.position.get()

    def set(self, value):
        self.position.set(value)

    def pointer(self):
        return self.position.pointer()

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

    def exhausted(self):
        """Return wether the position has reached the end of the view."""
        if self.position == self.last:
            return True
        if self.predicate is None:
            return False
        return not self.predicate(self.position.get())

    def __eq__(self, other):
        if not isinstance(other, TakeIterator):
            return NotImplemented
        if self.position == other.position:
            return True
        if other.position == other.last:
            return self.exhausted()
        if self.position == self.last:
            return other.exhausted()
        return False

    def __repr__(self):
        return "TakeIterator({!r})".format(self.position)


class Take(View):
    def __init__(self, first, last, predicate=None):
        if predicate is not None:
            predicate = UserFunction(predicate, self.__class__.__name__,
                                     format_stack(2))

        self.predicate = predicate
        last = last.copy()
        super().__init__(TakeIterator(first.copy(), last, predicate),
                         TakeIterator(last.copy(), last, predicate))


def take_while_range(first, last, predicate):
    """Return a view of the elements from position `first` to `last`
    while `predicate` holds.

    Args:
        first (Position): Position of the first element.
        last (Position): Position past the last element.
        predicate (Callable[[Any], bool]): Traversal stops before the first
            element for which `predicate` returns false.
    """
    return Take(first, last, predicate)


def take_while(sequence, predicate):
    """Return a view on the longest prefix of `sequence` whose elements
    satisfy `predicate`.

    The predicate is evaluated lazily, when a traversal reaches an element.

    Example:

        >>> data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        >>> list(lazyviews.take_while(data, lambda x: x != 5))
        [1, 2, 3, 4]
    """
    return Take(begin(sequence), end(sequence), predicate)


def take_range(first, last):
    """Return a view of the elements from position `first` to `last`."""
    return Take(first, last)


def take(sequence, n):
    """Return a view on the first `n` elements of `sequence`.

    `n` must not exceed the size of the sequence. Elements are returned
    by reference so item assignments through the view are written to
    `sequence`.

    When `sequence` is only iterable (a generator for instance), the items
    pulled from it are buffered for as long as the view lives.

    Example:

        >>> data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        >>> list(lazyviews.take(data, 3))
        [1, 2, 3]
    """
    first = begin(sequence)
    return Take(first, next_position(first, n))


def slice(sequence, start, stop):  # pylint: disable=redefined-builtin
    """Return a view on the elements of `sequence` from index `start`
    (included) to `stop` (excluded).

    Requires `0 <= start <= stop <= len(sequence)`.

    Example:

        >>> data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        >>> list(lazyviews.slice(data, 2, 4))
        [3, 4]
    """
    if start > stop:
        logger.warning("slice start %d is greater than stop %d", start, stop)

    first = begin(sequence)
    return Take(next_position(first, start), next_position(first, stop))
