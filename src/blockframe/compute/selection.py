"""Selection of the distinct rows of a frame.

Removing duplicated rows is a common step when preparing data,
an example is the ``SELECT DISTINCT`` statement in SQL.

Rows are considered duplicated when the combination
of their cells in the selected columns was already seen
in a previous row. Only the first occurrence is kept
and the rows keep the order they had in the original frame.
"""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..dataframe import Frame

logger = logging.getLogger(__name__)


def unique(frame: "Frame", columns: list[int]) -> "Frame":
    """Build a new frame with only the first row of each distinct key.

    >>> from blockframe import Frame
    >>> frame = Frame.from_columns({"a": [1, 1, 1], "b": [1, 2, 1]})
    >>> unique(frame, [0, 1]).rows()
    [[1, 1], [1, 2]]
    >>> unique(frame, [0]).rows()
    [[1, 1]]

    :param frame: The frame to deduplicate.
    :param columns: The indices of the columns that form the key of
                    a row. If empty, all the columns are used.
    """
    if not columns:
        columns = list(range(frame.size()))

    seen = SeenKeys()
    result = frame.__class__(frame.columns())
    for row in frame:
        if seen.add(tuple(row[colidx] for colidx in columns)):
            result.append(row)

    logger.debug(
        "Unique on columns %s kept %d of %d rows",
        columns,
        result.length(),
        frame.length(),
    )
    return result


class SeenKeys:
    """Keep track of the keys that were already encountered.

    Keys are compared by equality of their cells.
    Cells like lists or dictionaries can't be hashed,
    keys containing them are stored in a list and
    looked up one by one, which is slower but still correct.
    """

    def __init__(self) -> None:
        self.hashable: set[tuple[Any, ...]] = set()
        self.unhashable: list[tuple[Any, ...]] = []

    def add(self, key: tuple[Any, ...]) -> bool:
        """Record a key, returns ``True`` if it was never seen before."""
        try:
            if key in self.hashable:
                return False
            self.hashable.add(key)
        except TypeError:
            if key in self.unhashable:
                return False
            self.unhashable.append(key)
        return True
