"""Base definitions shared by the compute functions.

This module defines the options accepted by
the sorting and joining functions and how
two cells are compared with each other.
"""

import enum
from typing import Any

from ..errors import IncomparableError


class SortDirection(enum.Enum):
    """The direction in which a column should be sorted."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class JoinType(enum.Enum):
    """How rows without a matching key are handled by a join.

    * ``INNER`` only keeps keys that are found on both sides.
    * ``LEFT`` keeps all keys of the left side.
    * ``RIGHT`` keeps all keys of the right side.
    * ``OUTER`` keeps all keys of both sides.

    The values are the lowercase names, so that ``JoinType("left")``
    can be used to parse the join type from a string.
    """

    INNER = "inner"
    OUTER = "outer"
    LEFT = "left"
    RIGHT = "right"


def compare_values(v1: Any, v2: Any) -> int:
    """Compare two cells according to their natural order.

    Returns a negative number when ``v1`` comes first, a positive
    one when ``v2`` comes first and ``0`` when they are equal.

    ``None`` is considered greater than any other value, so that
    missing values end up at the bottom of an ascending sort:

    >>> compare_values(1, 2), compare_values("b", "a"), compare_values(3, 3)
    (-1, 1, 0)
    >>> compare_values(None, 1), compare_values(1, None), compare_values(None, None)
    (1, -1, 0)

    Values that can't be ordered raise :class:`IncomparableError`:

    >>> compare_values(1, "a")
    Traceback (most recent call last):
      ...
    blockframe.errors.IncomparableError: Can't compare 1 (int) with 'a' (str)
    """
    if v1 is None:
        return 0 if v2 is None else 1
    elif v2 is None:
        return -1

    try:
        if v1 < v2:
            return -1
        elif v2 < v1:
            return 1
    except TypeError as err:
        raise IncomparableError(
            f"Can't compare {v1!r} ({type(v1).__name__}) with {v2!r} ({type(v2).__name__})"
        ) from err
    return 0
