"""Exchange data with Apache Arrow.

Frames store plain Python objects, while most of the
Python data ecosystem speaks Arrow. This module converts
frames from and to :class:`pyarrow.Table`, so that data can
be loaded from any source pyarrow supports and results
can be handed over to other libraries.

>>> import pyarrow as pa
>>> from blockframe import Frame
>>> data = pa.table({
...    "animals": pa.array(["Flamingo", "Horse", None]),
...    "n_legs": pa.array([2, 4, 100])
... })
>>> frame = Frame.from_arrow(data)
>>> frame.rows()
[['Flamingo', 2], ['Horse', 4], [None, 100]]
>>> frame.sort_by("-n_legs").to_arrow()
pyarrow.Table
animals: string
n_legs: int64
----
animals: [[null,"Horse","Flamingo"]]
n_legs: [[100,4,2]]

Arrow columns must hold values of a single type,
converting a frame whose columns mix different types
fails with the error reported by pyarrow.
"""

from typing import TYPE_CHECKING

import pyarrow as pa

if TYPE_CHECKING:
    from .dataframe import Frame


def from_arrow(frame_class: type["Frame"], table: pa.Table | pa.RecordBatch) -> "Frame":
    """Create a frame of class ``frame_class`` with the data of ``table``.

    Values are converted to their Python equivalent,
    nulls become ``None``.
    """
    # Arrow allows duplicated column names, pairs are used
    # instead of a dict so that they are detected and rejected.
    return frame_class.from_columns(
        [
            (name, table.column(colidx).to_pylist())
            for colidx, name in enumerate(table.column_names)
        ]
    )


def to_arrow(frame: "Frame") -> pa.Table:
    """Convert a frame to a :class:`pyarrow.Table`.

    The type of each column is inferred by pyarrow from its cells,
    column names are converted to strings.
    """
    arrays = [pa.array(frame.column(colidx)) for colidx in range(frame.size())]
    names = [str(name) for name in frame.columns()]
    return pa.Table.from_arrays(arrays, names=names)
