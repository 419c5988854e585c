"""
A python library of composable lazy views over sequences.

The lazyviews package contains functions that bound, transform or
concatenate sequences (lists, arrays, strings, any iterable...) without
copying nor computing their elements upfront. Elements are read or
computed on-demand, when a traversal reaches them.

Every view exposes a pair of positions, :meth:`View.begin` and
:meth:`View.end`, and views compose by wrapping the positions of their
source. The traversal capabilities of the source are preserved through
composition: a view over a list supports :func:`len`, indexing, slicing
and :func:`reversed`, a view over a generator supports forward iteration.

Views also support the usual python iteration protocol and can be
converted to containers with :meth:`View.to_list`, :meth:`View.to_array`
or :meth:`View.to`.

The :func:`map` and :func:`slice` views are not exported by star imports
because they share their names with python builtins, use
:code:`lazyviews.map` and :code:`lazyviews.slice`.
"""

from .errors import EvaluationError, seterr
from .indexing import slice, take, take_range, take_while, take_while_range
from .mapping import map, map_range
from .positions import (
    Category,
    ProxyPointer,
    advance,
    begin,
    distance,
    end,
    next_position,
    prev_position,
)
from .shape import concat, concat_range
from .view import View

__all__ = [
    "EvaluationError",
    "seterr",
    "take",
    "take_range",
    "take_while",
    "take_while_range",
    "map_range",
    "concat",
    "concat_range",
    "View",
    "Category",
    "ProxyPointer",
    "advance",
    "begin",
    "distance",
    "end",
    "next_position",
    "prev_position",
]
