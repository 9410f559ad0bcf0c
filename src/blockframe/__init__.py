"""BlockFrame

An in-memory tabular data container with a small algebra
of transformations: adding, dropping and renaming columns,
appending and deleting rows, reading and writing cells,
filling missing values, removing duplicated rows,
sorting and joining.

BlockFrame is meant for applications that need a lightweight
table in process memory, not a database or a numeric engine.
Cells are plain Python objects and ``None`` is the missing value.

The package is constituted by multiple components, each isolated
within its own module:

* The Storage, which keeps the cells in column major order.
* The Frame, the table object users interact with.
* The Compute functions, which sort, join and deduplicate frames.

>>> from blockframe import Frame, JoinType
>>> left = Frame("id", "a")
>>> for row in ([1, "A"], [2, "B"], [3, "C"]):
...     _ = left.append(row)
>>> right = Frame.from_columns({"id": [2, 3, 4], "b": ["X", "Y", "Z"]})
>>> print(left.join_on(right, JoinType.OUTER, "id"))
id | a    | b
-- | ---- | ----
1  | A    | null
2  | B    | X
3  | C    | Y
4  | null | Z
"""

import logging

from . import config
from .compute import JoinType, SortDirection
from .dataframe import Frame
from .errors import (
    DuplicateColumnError,
    DuplicateJoinKeyError,
    FrameError,
    IncomparableError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    UnknownColumnError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "Frame",
    "JoinType",
    "SortDirection",
    "config",
    "FrameError",
    "UnknownColumnError",
    "DuplicateColumnError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
    "DuplicateJoinKeyError",
    "IncomparableError",
)
