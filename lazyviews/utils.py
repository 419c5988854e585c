"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def basic_getitem(func):
    """Decorate a `__getitem__` method to add slicing support.

    Args:
        func (Callable[[View, int], Any]):
            A `__getitem__` method that only accepts positive integer
            indices.

    Return:
        A `__getitem__` method that accepts negative indexing and
        contiguous slicing, slices are delegated to the `subview`
        method of the object.
    """
    def getitem(self, key):
        if isinstance(key, slice):
            start, stop, step = key.indices(len(self))
            if step != 1:
                raise ValueError(
                    self.__class__.__name__ + " only supports contiguous "
                    "slices")

            return self.subview(start, max(start, stop))

        elif isint(key):
            if key < 0:
                if key < -len(self):
                    raise IndexError(self.__class__.__name__ + " index out of range")
                key = len(self) + key

            try:
                size = len(self)
            except TypeError:  # forward-only views have no len
                pass
            else:
                if key >= size:
                    raise IndexError(self.__class__.__name__ + " index out of range")

            return func(self, key)

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    getitem.__doc__ = func.__doc__
    return getitem
