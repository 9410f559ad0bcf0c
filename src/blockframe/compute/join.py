"""Combine two frames by joining them on a key column.

The join implemented here is an hash join: for each side
a dictionary mapping the key of a row to the row itself
is built, then the keys of one side (the *driving* side)
are looked up in the dictionary of the other side
(the *following* side).

Keys must be unique on each side, a join only ever
matches one row with one other row. Frames with
duplicated keys are rejected with :class:`DuplicateJoinKeyError`.

Inner Join
==========

Given the two frames::

    left:                      right:
    +----+--------+            +----+-----+
    | id | name   |            | id | age |
    +----+--------+            +----+-----+
    | 1  | Alice  |            | 3  | 25  |
    | 2  | Bob    |            | 2  | 30  |
    | 3  | Charlie|            | 4  | 40  |
    +----+--------+            +----+-----+

The join would perform the following steps:

1. Index the rows of each side by their key::

    left_rows = {1: [1, "Alice"], 2: [2, "Bob"], 3: [3, "Charlie"]}
    right_rows = {3: [3, 25], 2: [2, 30], 4: [4, 40]}

2. Compute the columns of the result, columns that exist on both
   sides are disambiguated with a ``_left`` and ``_right`` suffix.
   As the key column is always on both sides, it gets renamed too::

    id_left, name, id_right, age

3. For each key of the driving side, in the order the rows
   had in the driving frame, look up the row of the other side
   and concatenate the two rows::

    [2, "Bob", 2, 30]
    [3, "Charlie", 3, 25]

   The key ``1`` has no match in the right side, so it's skipped.
   Other join types would instead emit it with the missing cells
   set to ``None``.

4. Remove the duplicated key column and restore its name::

    +----+--------+-----+
    | id | name   | age |
    +----+--------+-----+
    | 2  | Bob    | 30  |
    | 3  | Charlie| 25  |
    +----+--------+-----+

>>> from blockframe import Frame
>>> left = Frame.from_columns({"id": [1, 2, 3], "name": ["Alice", "Bob", "Charlie"]})
>>> right = Frame.from_columns({"id": [3, 2, 4], "age": [25, 30, 40]})
>>> result = join(left, right, JoinType.INNER, "id")
>>> result.columns()
['id', 'name', 'age']
>>> result.rows()
[[2, 'Bob', 30], [3, 'Charlie', 25]]

Left, Right and Outer Joins
===========================

For ``LEFT`` and ``OUTER`` joins the left frame is the driving side,
for ``RIGHT`` joins it's the right frame. So the columns of the
driving side always come first in the result.

Keys of the driving side that have no match are emitted anyway,
with ``None`` in place of the cells of the following side.
``OUTER`` joins, after all the driving keys, also emit the keys of the
following side that had no match, with ``None`` in place of the
driving cells, apart from the key itself.

>>> join(left, right, JoinType.OUTER, "id").rows()
[[1, 'Alice', None], [2, 'Bob', 30], [3, 'Charlie', 25], [4, None, 40]]

The key column that is kept is always the one of the driving side,
at the position it had in the driving frame. For ``RIGHT`` joins
this means the key of the right frame is kept, not the one of the left
frame, so the key is populated for every row, also for the rows
of the right frame that had no match:

>>> join(left, right, JoinType.RIGHT, "id").rows()
[[3, 25, 'Charlie'], [2, 30, 'Bob'], [4, 40, None]]

Key cells don't need to be hashable, keys like lists are compared
one by one, which is slower than looking them up in a dictionary.
"""

import logging
from typing import TYPE_CHECKING, Any, Hashable

from ..errors import DuplicateJoinKeyError, IndexOutOfRangeError, UnknownColumnError
from .base import JoinType

if TYPE_CHECKING:
    from ..dataframe import Frame

logger = logging.getLogger(__name__)


def join(
    left: "Frame", right: "Frame", how: JoinType | str, key: Hashable
) -> "Frame":
    """Join two frames on a column both of them have.

    :param left: The left side of the join.
    :param right: The right side of the join.
    :param how: The :class:`JoinType`, or its name like ``"inner"``.
    :param key: The name of the column to join on. It can also
                be a column index, in which case it refers to the
                column of the left frame and the right frame
                must have a column with the same name.
    """
    how = JoinType(how)
    key = _key_name(left, key)
    left_key = _key_index(left, key)
    right_key = _key_index(right, key)

    left_rows = KeyedRows.from_frame(left, left_key)
    right_rows = KeyedRows.from_frame(right, right_key)

    if how is JoinType.RIGHT:
        driving, following = right, left
        driving_rows, following_rows = right_rows, left_rows
        driving_key, following_key = right_key, left_key
        driving_suffix, following_suffix = "right", "left"
    else:
        driving, following = left, right
        driving_rows, following_rows = left_rows, right_rows
        driving_key, following_key = left_key, right_key
        driving_suffix, following_suffix = "left", "right"

    columns = driving.columns()
    for column in following.columns():
        if column in columns:
            # Column exists on both sides, disambiguate both of them.
            colidx = columns.index(column)
            columns[colidx] = f"{columns[colidx]}_{driving_suffix}"
            column = f"{column}_{following_suffix}"
        columns.append(column)

    result = left.__class__(columns)
    missing_following = [None] * following.size()
    for rowkey, driving_row in driving_rows.items():
        following_row = following_rows.get(rowkey)
        if following_row is None:
            if how is JoinType.INNER:
                continue
            following_row = missing_following
        result.append(driving_row + following_row)

    if how is JoinType.OUTER:
        for rowkey, following_row in following_rows.items():
            if rowkey in driving_rows:
                continue
            driving_row = [None] * driving.size()
            # Will be the only key column left after the collapse.
            driving_row[driving_key] = rowkey
            result.append(driving_row + following_row)

    # Only keep the key column of the driving side, with its original name.
    # Disambiguation can rename a column more than once, so the key
    # columns are tracked by position rather than by name.
    result.drop(driving.size() + following_key)
    result.rename(result.columns()[driving_key], key)

    logger.debug(
        "%s join on %r of %d and %d rows produced %d rows",
        how.name,
        key,
        left.length(),
        right.length(),
        result.length(),
    )
    return result


def _key_name(frame: "Frame", key: Hashable) -> Hashable:
    """Resolve a column index to the name of the column."""
    if isinstance(key, int):
        columns = frame.columns()
        if not 0 <= key < len(columns):
            raise IndexOutOfRangeError(
                f"Column index {key} out of range for {len(columns)} columns"
            )
        return columns[key]
    return key


def _key_index(frame: "Frame", key: Hashable) -> int:
    colidx = frame.col_index(key)
    if colidx is None:
        raise UnknownColumnError(f"Join key does not exist: {key}")
    return colidx


class KeyedRows:
    """Index the rows of a frame by the value of their key column.

    Rows are kept in the order they had in the frame.
    Keys are compared by equality, keys that can't be hashed,
    like lists, are looked up one by one, which is slower
    but still correct.

    >>> keyed = KeyedRows()
    >>> keyed.add(1, [1, "a"])
    >>> keyed.add([2], [[2], "b"])
    >>> keyed.get([2]), keyed.get(3)
    ([[2], 'b'], None)
    >>> [2] in keyed, [3] in keyed
    (True, False)
    """

    def __init__(self) -> None:
        self.hashable: dict[Any, list[Any]] = {}
        self.unhashable: list[tuple[Any, list[Any]]] = []
        self.order: list[tuple[Any, list[Any]]] = []

    @classmethod
    def from_frame(cls, frame: "Frame", colidx: int) -> "KeyedRows":
        """Index all the rows of ``frame`` by the cell at ``colidx``."""
        keyed = cls()
        for row in frame:
            keyed.add(row[colidx], row)
        return keyed

    def add(self, key: Any, row: list[Any]) -> None:
        """Record the row of a key, keys must be unique."""
        if key in self:
            raise DuplicateJoinKeyError(f"Join key is not unique: {key!r}")
        try:
            self.hashable[key] = row
        except TypeError:
            self.unhashable.append((key, row))
        self.order.append((key, row))

    def get(self, key: Any) -> list[Any] | None:
        """The row of a key, ``None`` if the key was never added."""
        try:
            return self.hashable.get(key)
        except TypeError:
            for candidate, row in self.unhashable:
                if candidate == key:
                    return row
            return None

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None

    def items(self) -> list[tuple[Any, list[Any]]]:
        """The keys and their rows, in insertion order."""
        return self.order
