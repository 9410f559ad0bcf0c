"""Sorting of the rows of a frame.

When computing ranks or looking for most significant
values, it's often necessary to sort the data based
on one or more columns.

Sorting never changes the frame that is sorted,
it always builds a new frame with the same columns
and the rows in the requested order.

The sort is performed indirectly: instead of moving around
the rows themselves, the list of the row indices
``[0, 1, ..., n-1]`` is sorted comparing the cells that
the indices point to. Then the rows are appended to
the new frame in the order of the sorted indices.

The sort is stable, rows that compare equal keep the
order they had in the original frame. This means that
sorting by ``A`` a frame that was already sorted by ``B``
is the same as sorting by ``A, B`` at once.

>>> from blockframe import Frame
>>> frame = Frame("k", "t")
>>> for row in ([1, "x"], [2, "y"], [1, "z"], [2, "w"]):
...     _ = frame.append(row)
>>> sort(frame, parse_sort_columns(frame, "-k", "t")).rows()
[[2, 'w'], [2, 'y'], [1, 'x'], [1, 'z']]
"""

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping, Self

from ..errors import IndexOutOfRangeError, UnknownColumnError
from .base import SortDirection, compare_values

if TYPE_CHECKING:
    from ..dataframe import Frame

logger = logging.getLogger(__name__)

RowComparator = Callable[[list[Any], list[Any]], int]


def sort(frame: "Frame", priorities: Mapping[int, SortDirection]) -> "Frame":
    """Sort the rows of a frame based on one or more columns.

    :param frame: The frame to sort.
    :param priorities: The indices of the columns to sort by, each one
                       mapped to its :class:`SortDirection`.
                       The first column is the one that matters most,
                       the next ones only break ties.
    """
    size = frame.size()
    for col in priorities:
        if not 0 <= col < size:
            raise IndexOutOfRangeError(
                f"Column index {col} out of range for {size} columns"
            )

    keys = list(priorities)
    descending = [
        SortDirection(priorities[col]) is SortDirection.DESCENDING for col in keys
    ]
    # Only the cells of the sorting columns are needed to compare rows,
    # there is no need to materialize the whole rows.
    columns = [frame.column(col) for col in keys]
    order = sorted(
        range(frame.length()),
        key=lambda r: SortKey([column[r] for column in columns], descending),
    )
    logger.debug("Sorting %d rows by columns %s", len(order), keys)
    return _take(frame, order)


def sort_with(frame: "Frame", comparator: RowComparator) -> "Frame":
    """Sort the rows of a frame using a custom comparison function.

    The comparator receives two rows and returns a negative number,
    zero or a positive number if the first row should come before,
    is equal to, or should come after the second one.

    >>> from blockframe import Frame
    >>> frame = Frame.from_columns({"word": ["ccc", "a", "bb"]})
    >>> sort_with(frame, lambda r1, r2: len(r1[0]) - len(r2[0])).column(0)
    ['a', 'bb', 'ccc']
    """
    rows = frame.rows()
    order = sorted(
        range(len(rows)),
        key=functools.cmp_to_key(lambda r1, r2: comparator(rows[r1], rows[r2])),
    )
    logger.debug("Sorting %d rows with %r", len(order), comparator)
    return _take(frame, order)


def parse_sort_columns(
    frame: "Frame", *cols: str | int
) -> dict[int, SortDirection]:
    """Convert a list of column references in sorting priorities.

    Columns can be provided by name or by index. A name
    starting with ``-`` means that the column must be sorted
    in descending order, otherwise it's sorted ascending.

    >>> from blockframe import Frame
    >>> parse_sort_columns(Frame("a", "b", "c"), "-c", 0)
    {2: <SortDirection.DESCENDING: 'descending'>, 0: <SortDirection.ASCENDING: 'ascending'>}
    """
    priorities = {}
    for col in cols:
        direction = SortDirection.ASCENDING
        if isinstance(col, str) and col.startswith("-") and frame.col_index(col) is None:
            direction = SortDirection.DESCENDING
            col = col[1:]

        if isinstance(col, int):
            colidx = col
        else:
            colidx = frame.col_index(col)
            if colidx is None:
                raise UnknownColumnError(f"Unknown column: {col}")
        priorities[colidx] = direction
    return priorities


def _take(frame: "Frame", order: list[int]) -> "Frame":
    """Build a new frame with the rows of ``frame`` in the given order."""
    result = frame.__class__(frame.columns())
    for r in order:
        result.append(frame.row(r))
    return result


class SortKey:
    """Makes rows sortable by Python functions.

    This implements the rich comparison methods to allow
    sorting of rows based on the values of the
    columns in the order they are provided.
    """

    __slots__ = ("values", "descending")

    def __init__(self, values: list[Any], descending: list[bool]) -> None:
        """
        :param values: The cells of the row in the columns to compare.
        :param descending: Which of the values are compared for descending order.
        """
        self.values = values
        self.descending = descending

    def __lt__(self, other: Self) -> bool:
        for v1, v2, desc in zip(self.values, other.values, self.descending):
            result = compare_values(v1, v2)
            if result == 0:
                continue
            return result > 0 if desc else result < 0
        return False  # All keys are equal
