"""Positions: the traversal state shared by all views.

A position designates one element of a sequence, or the place right after
its last element. Every adaptor in lazyviews consumes and produces
positions, which is what lets them compose while keeping the traversal
capabilities of the underlying data.

Positions come in three capability classes (:class:`Category`):

- forward positions support :meth:`~Position.increment`, :meth:`~Position.get`
  and equality,
- bidirectional positions also support :meth:`~Position.decrement`,
- random access positions also support offsets (``p + n``, ``p -= n``...),
  distance (``q - p``), subscripting (``p[n]``) and ordering.
"""

import copy
import enum
import inspect
from collections.abc import Mapping


class Category(enum.IntEnum):
    """Traversal capability of a position, stronger values support more."""
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3


class ProxyPointer:
    """Hold a value so that member access works on a by-value result.

    Attribute lookups are forwarded to the held value.

    Example:

        >>> p = ProxyPointer(3 + 4j)
        >>> p.imag
        4.0
    """
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __getattr__(self, name):
        if name == 'value':  # not yet initialized, eg. during copy
            raise AttributeError(name)
        return getattr(self.value, name)

    def __repr__(self):
        return "ProxyPointer({!r})".format(self.value)


class Position:
    """Base class for positions.

    Subclasses must provide :meth:`get`, :meth:`increment` and
    :meth:`__eq__`. Bidirectional subclasses add :meth:`decrement`,
    random access subclasses add :meth:`advance` and :meth:`distance`
    which back the arithmetic and ordering operators.

    `lazy_end` is set when the end of a traversal is only known by testing
    the elements (predicate bounds), distances to the end position then
    overestimate the number of elements.
    """
    category = Category.FORWARD
    reference = False
    value_type = None
    lazy_end = False

    __hash__ = None

    def get(self):
        """Return the designated element."""
        raise NotImplementedError

    def set(self, value):
        """Write `value` at the designated place of the source."""
        raise TypeError(self.__class__.__name__ + " is read-only")

    def pointer(self):
        """Return an object on which to perform member access."""
        return self.get()

    def increment(self):
        raise NotImplementedError

    def decrement(self):
        raise TypeError(self.__class__.__name__ + " is not bidirectional")

    def advance(self, n):
        """Move by `n` places in place (random access positions)."""
        raise TypeError(self.__class__.__name__ + " is not random access")

    def distance(self, other):
        """Return the number of increments from `other` to `self`."""
        raise TypeError(self.__class__.__name__ + " is not random access")

    def copy(self):
        return copy.copy(self)

    def _check_random_access(self, op):
        if self.category < Category.RANDOM_ACCESS:
            raise TypeError(
                "unsupported operand for " + op + ": "
                + self.__class__.__name__ + " is not random access")

    # Arithmetic --------------------------------------------------------------

    def __iadd__(self, n):
        self._check_random_access("+=")
        self.advance(n)
        return self

    def __isub__(self, n):
        self._check_random_access("-=")
        self.advance(-n)
        return self

    def __add__(self, n):
        self._check_random_access("+")
        result = self.copy()
        result.advance(n)
        return result

    __radd__ = __add__

    def __sub__(self, other):
        self._check_random_access("-")
        if isinstance(other, Position):
            return self.distance(other)

        result = self.copy()
        result.advance(-other)
        return result

    def __getitem__(self, n):
        return (self + n).get()

    # Comparisons -------------------------------------------------------------

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        self._check_random_access("<")
        return self.distance(other) < 0

    def __le__(self, other):
        self._check_random_access("<=")
        return self.distance(other) <= 0

    def __gt__(self, other):
        self._check_random_access(">")
        return self.distance(other) > 0

    def __ge__(self, other):
        self._check_random_access(">=")
        return self.distance(other) >= 0


# Positions over Python containers --------------------------------------------

def element_type(sequence):
    """Return the element type declared by a sequence, or None."""
    dtype = getattr(sequence, 'dtype', None)  # numpy arrays
    if dtype is not None:
        return dtype

    typecode = getattr(sequence, 'typecode', None)  # array.array
    if isinstance(typecode, str):
        return typecode

    if isinstance(sequence, str):
        return str
    if isinstance(sequence, (bytes, bytearray, range)):
        return int

    return None


class SequencePosition(Position):
    """Random access position into an indexable sequence."""
    category = Category.RANDOM_ACCESS

    def __init__(self, sequence, index):
        self.sequence = sequence
        self.index = index
        self.reference = hasattr(type(sequence), '__setitem__')
        self.value_type = element_type(sequence)

    def get(self):
        return self.sequence[self.index]

    def set(self, value):
        if not self.reference:
            raise TypeError(type(self.sequence).__name__
                            + " does not support item assignment")
        self.sequence[self.index] = value

    def increment(self):
        self.index += 1
        return self

    def decrement(self):
        self.index -= 1
        return self

    def advance(self, n):
        self.index += n

    def distance(self, other):
        return self.index - other.index

    def __eq__(self, other):
        if not isinstance(other, SequencePosition):
            return NotImplemented
        return self.index == other.index

    def __repr__(self):
        return "SequencePosition({}, {})".format(
            type(self.sequence).__name__, self.index)


class Stream:
    """Buffer items pulled on-demand from an iterator.

    All positions over the same iterable share one stream so that copies
    can be advanced independently although the iterator itself can only be
    consumed once. Pulled items stay buffered as long as a position over
    the stream is alive, views over a generator therefore hold every item
    traversed so far.
    """
    def __init__(self, iterable):
        self.iterator = iter(iterable)
        self.items = []
        self.exhausted = False

    def fetch(self, index):
        """Make sure item `index` is buffered, return False if it does not exist."""
        while not self.exhausted and index >= len(self.items):
            try:
                self.items.append(next(self.iterator))
            except StopIteration:
                self.exhausted = True

        return index < len(self.items)


class IterablePosition(Position):
    """Forward-only position over an arbitrary iterable.

    The end position is the one with no stream, any exhausted position
    compares equal to it.
    """
    category = Category.FORWARD

    def __init__(self, stream, index=0):
        self.stream = stream
        self.index = index

    def get(self):
        if not self.stream.fetch(self.index):
            raise IndexError("dereferencing an exhausted position")
        return self.stream.items[self.index]

    def increment(self):
        self.index += 1
        return self

    def exhausted(self):
        return self.stream is None or not self.stream.fetch(self.index)

    def __eq__(self, other):
        if not isinstance(other, IterablePosition):
            return NotImplemented
        if self.stream is other.stream and self.index == other.index:
            return True
        return self.exhausted() and other.exhausted()

    def __repr__(self):
        if self.stream is None:
            return "IterablePosition(end)"
        return "IterablePosition({})".format(self.index)


def is_indexable(iterable):
    return hasattr(iterable, '__len__') \
        and hasattr(iterable, '__getitem__') \
        and not isinstance(iterable, Mapping)


def begin(iterable):
    """Return the position of the first element of `iterable`.

    Views return their own begin position, indexable sequences a random
    access position and other iterables a forward-only one.
    """
    if hasattr(iterable, 'begin') and hasattr(iterable, 'end'):
        return iterable.begin()
    if is_indexable(iterable):
        return SequencePosition(iterable, 0)
    return IterablePosition(Stream(iterable), 0)


def end(iterable):
    """Return the position past the last element of `iterable`."""
    if hasattr(iterable, 'begin') and hasattr(iterable, 'end'):
        return iterable.end()
    if is_indexable(iterable):
        return SequencePosition(iterable, len(iterable))
    return IterablePosition(None, None)


# Free functions --------------------------------------------------------------

def category(position):
    """Return the :class:`Category` of a position."""
    return position.category


def value_type(position):
    """Return the declared element type of a position, or None if unknown."""
    return position.value_type


def return_type(function):
    """Return the return annotation of a function, or None if unknown."""
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):  # builtins without signature
        return None

    if signature.return_annotation is inspect.Signature.empty:
        return None
    return signature.return_annotation


def distance(first, last):
    """Return the number of increments needed to go from `first` to `last`.

    Constant time for random access positions, linear otherwise.
    """
    if first.category >= Category.RANDOM_ACCESS:
        return last - first

    position = first.copy()
    n = 0
    while position != last:
        position.increment()
        n += 1
    return n


def advance(position, n):
    """Move `position` by `n` places in place and return it.

    Negative offsets require a bidirectional position.
    """
    if position.category >= Category.RANDOM_ACCESS:
        position.advance(n)
    elif n >= 0:
        for _ in range(n):
            position.increment()
    else:
        for _ in range(-n):
            position.decrement()

    return position


def next_position(position, n=1):
    """Return a copy of `position` moved forward by `n` places."""
    return advance(position.copy(), n)


def prev_position(position, n=1):
    """Return a copy of `position` moved backward by `n` places."""
    return advance(position.copy(), -n)
