"""Errors raised by frames and by the algorithms working on them.

Every error derives from :class:`FrameError`, so that callers
can catch any failure coming from blockframe in one place,
and also from the builtin exception that better describes it,
so that idiomatic code like ``except KeyError`` keeps working:

>>> from blockframe import Frame
>>> frame = Frame("a", "b")
>>> try:
...     frame.get(0, "c")
... except KeyError as err:
...     print(type(err).__name__)
UnknownColumnError

Errors are always raised synchronously to the caller, a failed
mutation leaves the frame as it was before the call.
"""


class FrameError(Exception):
    """Base class for all the errors raised by blockframe."""

    pass


class UnknownColumnError(FrameError, KeyError):
    """A column name lookup failed."""

    def __str__(self) -> str:
        # KeyError would repr() the message, keep it readable.
        return str(self.args[0]) if self.args else ""


class DuplicateColumnError(FrameError, ValueError):
    """A column name that is already in use was introduced."""

    pass


class IndexOutOfRangeError(FrameError, IndexError):
    """A row or column index is outside of the current bounds."""

    pass


class ShapeMismatchError(FrameError, ValueError):
    """A row does not have the same number of cells as the frame columns."""

    pass


class DuplicateJoinKeyError(FrameError, ValueError):
    """One of the sides of a join contains the same key more than once."""

    pass


class IncomparableError(FrameError, TypeError):
    """Two cells have no natural order and can't be sorted."""

    pass
