"""The blockframe compute functions.

The functions in this package implement the algorithms
that go beyond reading and writing cells: sorting,
joining and deduplicating rows.

They never modify the frames they receive, a new frame
is always built and returned. This makes them safe to
use on the same input from multiple threads,
as far as nobody is modifying the input in the meantime.

The new frame is built by appending rows one by one,
and is of the same class of the input frame:

>>> from blockframe import Frame
>>> from blockframe.compute import sort, SortDirection
>>> frame = Frame.from_columns({"n_legs": [4, 2, 100, 5]})
>>> sort(frame, {0: SortDirection.DESCENDING}).column(0)
[100, 5, 4, 2]

Usually these functions are not invoked directly,
but through the corresponding methods of :class:`blockframe.Frame`
like :meth:`blockframe.Frame.sort_by`.
"""

from .base import JoinType, SortDirection, compare_values
from .join import join
from .selection import unique
from .sorting import parse_sort_columns, sort, sort_with

__all__ = (
    "JoinType",
    "SortDirection",
    "compare_values",
    "join",
    "unique",
    "sort",
    "sort_with",
    "parse_sort_columns",
)
