"""Base view class: a pair of positions with the Python sequence protocol."""

from .positions import Category, distance, next_position, value_type
from .utils import basic_getitem, get_logger

logger = get_logger(__name__)


class View:
    """A re-iterable pair of positions.

    A view never owns the data it adapts, only a begin and an end
    position into it. :meth:`begin` and :meth:`end` return fresh copies so
    that independent traversals never interfere.

    Views support the Python iteration protocol and expose the traversal
    capabilities of their positions: :func:`reversed` for bidirectional
    views, :func:`len`, indexing and slicing for random access views.
    """
    def __init__(self, first, last):
        self._begin = first
        self._end = last

    def begin(self):
        """Return the position of the first element."""
        return self._begin.copy()

    def end(self):
        """Return the position past the last element."""
        return self._end.copy()

    @property
    def category(self):
        """The :class:`~lazyviews.positions.Category` of the positions."""
        return self._begin.category

    @property
    def value_type(self):
        """The declared element type, None if unknown."""
        return value_type(self._begin)

    def size_hint(self):
        """Return the number of elements if known without a traversal."""
        if self.category >= Category.RANDOM_ACCESS and not self._begin.lazy_end:
            return distance(self._begin, self._end)
        return None

    def __len__(self):
        size = self.size_hint()
        if size is None:
            raise TypeError(
                self.__class__.__name__ + " size is only known after a "
                "traversal, it has no len()")
        return size

    def __bool__(self):
        return self._begin != self._end

    def __iter__(self):
        position, last = self.begin(), self.end()
        while position != last:
            yield position.get()
            position.increment()

    def __reversed__(self):
        if self.category < Category.BIDIRECTIONAL:
            raise TypeError(self.__class__.__name__
                            + " over forward positions cannot be reversed")

        position = self.end()
        if self._begin.lazy_end:  # locate where a forward traversal stops
            position, last = self.begin(), position
            while position != last:
                position.increment()

        return backward(self.begin(), position)

    @basic_getitem
    def __getitem__(self, key):
        if self.category >= Category.RANDOM_ACCESS and not self._begin.lazy_end:
            return next_position(self._begin, key).get()

        # bounds are unknown, walk up to the element
        for i, value in enumerate(self):
            if i == key:
                return value

        raise IndexError(self.__class__.__name__ + " index out of range")

    def subview(self, start, stop):
        """Return a view of the elements from offset `start` to `stop`."""
        return View(next_position(self._begin, start),
                    next_position(self._begin, stop))

    # Conversions -------------------------------------------------------------

    def to_array(self, size):
        """Return the `size` elements of the view in a tuple.

        The view must produce exactly `size` elements, a mismatch is only
        reported as a warning.
        """
        position, last = self.begin(), self.end()
        result = []
        while len(result) < size and position != last:
            result.append(position.get())
            position.increment()

        if len(result) < size or position != last:
            logger.warning("%s does not produce exactly %d elements",
                           self.__class__.__name__, size)

        return tuple(result)

    def to_list(self):
        """Return the elements of the view in a list.

        The list is allocated upfront when the size is known.
        """
        size = self.size_hint()
        if size is None:
            return list(iter(self))

        result = [None] * size
        position = self.begin()
        for i in range(size):
            result[i] = position.get()
            position.increment()

        return result

    def to(self, kind, **kwargs):
        """Return the elements of the view in a container of type `kind`.

        Args:
            kind (Callable[[Iterable], Any]):
                Container type, must accept an iterable of the elements as
                first argument (ex: :class:`set`,
                :class:`collections.deque`).
            **kwargs:
                Extra keyword arguments for `kind`.

        Example:

            >>> from collections import deque
            >>> lazyviews.take([1, 2, 3, 4], 3).to(deque, maxlen=2)
            deque([2, 3], maxlen=2)
        """
        return kind(iter(self), **kwargs)

    def to_dict(self, key):
        """Return a dict mapping `key(element)` to each element."""
        return {key(value): value for value in self}

    def join(self, delimiter=""):
        """Return the string representations of the elements joined by `delimiter`."""
        return delimiter.join(str(value) for value in self)


def backward(first, position):
    while position != first:
        position.decrement()
        yield position.get()
