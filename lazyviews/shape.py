"""Operations that assemble sequences."""

from .positions import Category, Position, begin, end, value_type
from .utils import get_logger
from .view import View

logger = get_logger(__name__)


class ConcatIterator(Position):
    """Position over a group of concatenated sequences.

    Holds one position per sequence. The active sequence is the first one
    whose position has not reached its end: sequences before it are at
    their end, sequences after it at their beginning. At the end of the
    concatenation, every position is at its end.

    The index of the active sequence is looked up on first use and then
    maintained by each move, so end tests on predicate-bounded sequences
    run once per element reached.

    Jumping by an offset walks through the sequences, so its cost grows
    with the number of sequence boundaries crossed. Predicate-bounded
    sequences are crossed one element at a time.
    """
    def __init__(self, positions, begins, ends):
        self.positions = positions
        self.begins = begins
        self.ends = ends
        self.index = None
        self.category = min(p.category for p in begins)
        self.reference = begins[0].reference
        self.lazy_end = any(p.lazy_end for p in begins)
        self.value_type = next(
            (t for t in map(value_type, begins) if t is not None), None)

    def copy(self):
        result = super().copy()
        result.positions = [p.copy() for p in self.positions]
        return result

    def active(self):
        """Return the index of the sequence being traversed."""
        if self.index is None:
            self.skip_finished(0)
        return self.index

    def skip_finished(self, i):
        """Make the first sequence from `i` not at its end the active one."""
        while i < len(self.positions) and self.positions[i] == self.ends[i]:
            i += 1
        self.index = i

    def settled(self, i):
        """Return the position of sequence `i`.

        A position left on the end of a predicate-bounded sequence is
        replaced by the one where the predicate fails, which is where
        offsets must be counted from.
        """
        position = self.positions[i]
        if not position.lazy_end:
            return position
        if position.category == Category.RANDOM_ACCESS \
                and self.ends[i] - position != 0:
            return position

        walker = self.begins[i].copy()
        while walker != position:
            walker.increment()
        return walker

    def get(self):
        return self.positions[self.active()].get()

    def set(self, value):
        self.positions[self.active()].set(value)

    def pointer(self):
        return self.positions[self.active()].pointer()

    def increment(self):
        i = self.active()
        self.positions[i].increment()
        self.skip_finished(i)
        return self

    def decrement(self):
        i = self.active()
        if i == len(self.positions) or self.positions[i] == self.begins[i]:
            i -= 1
            while self.positions[i] == self.begins[i]:  # skip empty sequences
                i -= 1
            self.positions[i] = self.settled(i)

        self.positions[i].decrement()
        self.index = i
        return self

    def advance(self, n):
        i = self.active()

        if n > 0:
            while n > 0:
                position = self.positions[i]
                if position.lazy_end:
                    while n > 0 and position != self.ends[i]:
                        position.increment()
                        n -= 1
                else:
                    step = min(self.ends[i] - position, n)
                    self.positions[i] += step
                    n -= step
                i += 1
            self.skip_finished(i - 1)

        elif n < 0:
            n = -n
            if i < len(self.positions):
                step = min(self.positions[i] - self.begins[i], n)
                self.positions[i] -= step
                n -= step

            while n > 0:
                i -= 1
                self.positions[i] = self.settled(i)
                step = min(self.positions[i] - self.begins[i], n)
                self.positions[i] -= step
                n -= step
            self.index = i

    def offset(self):
        """Return the index of the designated element in the concatenation."""
        return sum(self.settled(i) - b for i, b in enumerate(self.begins))

    def distance(self, other):
        return self.offset() - other.offset()

    def __eq__(self, other):
        if not isinstance(other, ConcatIterator):
            return NotImplemented
        i = self.active()
        if i != other.active():
            return False
        return i == len(self.positions) or self.positions[i] == other.positions[i]

    def __repr__(self):
        return "ConcatIterator({!r})".format(self.positions)


class Concatenation(View):
    def __init__(self, begins, ends):
        begins = tuple(p.copy() for p in begins)
        ends = tuple(p.copy() for p in ends)

        if len(begins) < 2:
            raise ValueError("at least two sequences must be concatenated")
        if len(begins) != len(ends):
            raise ValueError("begins and ends must have the same length")
        if len({p.reference for p in begins}) > 1:
            raise TypeError("reference and pointer types of sequences do not match")
        declared = [t for t in map(value_type, begins) if t is not None]
        if any(t != declared[0] for t in declared[1:]):
            raise TypeError("value types of sequences do not match")

        self.begins = begins
        self.ends = ends
        super().__init__(
            ConcatIterator([p.copy() for p in begins], begins, ends),
            ConcatIterator([p.copy() for p in ends], begins, ends))


def concat_range(begins, ends):
    """Return a view on concatenated ranges given by their positions.

    Args:
        begins (Sequence[Position]): Positions of the first element of each
            range.
        ends (Sequence[Position]): Positions past the last element of each
            range.
    """
    return Concatenation(begins, ends)


def concat(*sequences):
    """Return a view on the concatenated sequences.

    At least two sequences are required, they must agree on wether their
    elements can be assigned and on their declared element types (numpy
    dtype, array typecode, transform return annotation...), otherwise a
    :class:`TypeError` is raised.

    The view has the weakest traversal capability of the sequences, jumping
    by an offset costs one step per sequence boundary crossed.

    Sequences that are only iterable (generators) are buffered as they are
    traversed, the buffer lives as long as the view.

    Example:

        >>> data1 = [0, 1, 2, 3]
        >>> data2 = [4, 5]
        >>> data3 = [6, 7, 8, 9, 10, 11]
        >>> cat = lazyviews.concat(data1, data2, data3)
        >>> [cat[i] for i in range(12)]
        [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
    """
    if len(sequences) < 2:
        raise ValueError("at least two sequences must be concatenated")

    begins = []
    ends = []
    for seq in sequences:
        if isinstance(seq, Concatenation):  # optimize nested concatenations
            logger.debug("flattening %d nested sequences", len(seq.begins))
            begins.extend(seq.begins)
            ends.extend(seq.ends)
        else:
            begins.append(begin(seq))
            ends.append(end(seq))

    return Concatenation(begins, ends)
