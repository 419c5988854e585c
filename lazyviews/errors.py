"""Error reporting for user functions evaluated during traversals."""

import inspect
import threading


class EvaluationError(Exception):
    """Raised when evaluating a user function over an element fails."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how lazyviews reports failures of user functions.

    Args:
        evaluation (str): how errors from user code (transforms,
            predicates) triggered during a traversal are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through lazyviews
              code, might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    """Per-thread error settings of lazyviews, changed with :func:`seterr`."""
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    """Strip the indentation common to the source `lines` of a frame."""
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    """Render the calling frames, outermost first, for error messages.

    View factories call this at construction so that a failing transform
    or predicate can be traced back to where its view was created. The
    innermost `skip` frames (lazyviews internals) are left out.
    """
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out


class UserFunction:
    """Holder for a function supplied by the caller of a view factory.

    The holder is owned by the view and shared by every position derived
    from it. Calling it evaluates the function and, unless errors are set
    to passthrough, wraps failures into an :class:`EvaluationError` that
    points to where the view was created.
    """
    __slots__ = ('func', 'owner', 'stack')

    def __init__(self, func, owner, stack):
        if not callable(func):
            raise TypeError(owner + " function must be callable")

        self.func = func
        self.owner = owner
        self.stack = stack

    def __call__(self, value):
        try:
            return self.func(value)

        except Exception as cause:
            if seterr() == 'passthrough' or isinstance(cause, EvaluationError):
                raise
            else:
                msg = "Failed to evaluate {!r} in {} created at:\n{}".format(
                    value, self.owner, self.stack)
                raise EvaluationError(msg) from cause
