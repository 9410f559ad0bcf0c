"""The Frame object itself."""

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Self

import pyarrow as pa

from .. import arrow
from ..compute import JoinType, join, parse_sort_columns, sort, sort_with, unique
from ..compute.sorting import RowComparator
from ..errors import (
    DuplicateColumnError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    UnknownColumnError,
)
from ..storage import BlockStore
from ..utils.tabulate import tabulate

ColumnRef = int | Hashable
"""A column can be referenced by its index or by its name."""

_MISSING = object()


class Frame:
    """Data structure that handles data in rows and columns.

    The Frame object allows to represent in-memory data
    and perform transformations over it.

    Cells can be any Python object and ``None`` represents
    a missing value. The cells are stored column by column
    in a :class:`blockframe.storage.BlockStore`.

    >>> frame = Frame("a", "b")
    >>> frame.append([1, 2]).append([3, 4])
    Frame(columns=['a', 'b'], rows=2)
    >>> frame.get(1, "a")
    3
    >>> frame.row(0)
    [1, 2]
    >>> print(frame)
    a | b
    - | -
    1 | 2
    3 | 4

    Columns are referenced either by their position or by
    their name. As integers are always treated as positions,
    columns should not be named with integers.
    """

    def __init__(self, *columns: Hashable) -> None:
        """
        :param columns: The names of the columns, a single list
                        of names is accepted too.
        """
        if len(columns) == 1 and isinstance(columns[0], (list, tuple)):
            columns = tuple(columns[0])

        self._columns: list[Hashable] = list(columns)
        self._index: dict[Hashable, int] = {}
        self._reindex()
        self._store = BlockStore()
        self._store.reshape(len(self._columns), 0)

    @classmethod
    def from_columns(
        cls,
        data: Mapping[Hashable, Iterable[Any]]
        | Iterable[tuple[Hashable, Iterable[Any]]],
    ) -> Self:
        """Create a Frame out of the data of its columns.

        >>> Frame.from_columns({"a": [1, 2], "b": ["x"]}).rows()
        [[1, 'x'], [2, None]]

        :param data: Maps each column name to its cells, can also
                     be a list of ``(name, cells)`` pairs.
                     Shorter columns are padded with ``None``.
        """
        if isinstance(data, Mapping):
            data = data.items()
        data = list(data)

        frame = cls([name for name, _ in data])
        frame._store = BlockStore(cells for _, cells in data)
        return frame

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a Frame with the data of a :class:`pyarrow.Table`.

        :param table: The table or record batch to load.
        """
        return arrow.from_arrow(cls, table)

    def to_arrow(self) -> pa.Table:
        """Convert the frame to a :class:`pyarrow.Table`."""
        return arrow.to_arrow(self)

    def __repr__(self) -> str:
        return f"Frame(columns={self._columns}, rows={self.length()})"

    def __str__(self) -> str:
        return tabulate(self)

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[list[Any]]:
        """Iterate over the rows of the frame.

        The number of rows is captured when the iteration starts,
        adding or removing rows while iterating is not supported.
        """
        store = self._store
        for r in range(store.length()):
            yield store.row(r)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return (
            self._columns == other._columns
            and self._store.blocks == other._store.blocks
        )

    __hash__ = None

    def columns(self) -> list[Hashable]:
        """The names of the columns, in order."""
        return list(self._columns)

    def col_index(self, name: Hashable) -> int | None:
        """The position of a column, ``None`` if there is no such column."""
        return self._index.get(name)

    def size(self) -> int:
        """The number of columns."""
        return len(self._columns)

    def length(self) -> int:
        """The number of rows."""
        return self._store.length()

    def get(self, row: int, col: ColumnRef) -> Any:
        """Get the value of a cell.

        :param row: The index of the row, starting from 0.
        :param col: The index or the name of the column.
        """
        return self._store.get(self._resolve(col), row)

    def set(self, row: int, col: ColumnRef, value: Any) -> None:
        """Replace the value of a cell.

        :param row: The index of the row, starting from 0.
        :param col: The index or the name of the column.
        :param value: The new value of the cell.
        """
        self._store.set(self._resolve(col), row, value)

    def row(self, row: int) -> list[Any]:
        """A new list with the cells of a row.

        Modifying the list does not modify the frame.
        """
        return self._store.row(row)

    def rows(self) -> list[list[Any]]:
        """All the rows of the frame, see :meth:`row`."""
        return list(self)

    def column(self, col: int) -> list[Any] | None:
        """A new list with the cells of a column.

        Returns ``None`` if the column doesn't exist.
        """
        block = self._store.column(col)
        if block is None:
            return None
        return list(block)

    def append(self, row: Iterable[Any]) -> Self:
        """Add a row at the end of the frame.

        :param row: The cells of the row, one for each column.
        """
        row = list(row)
        if len(row) != len(self._columns):
            raise ShapeMismatchError(
                f"Row has {len(row)} cells, but the frame has {len(self._columns)} columns"
            )

        length = self._store.length()
        self._store.reshape(len(self._columns), length + 1)
        for colidx, value in enumerate(row):
            self._store.set(colidx, length, value)
        return self

    def drop_row(self, *rows: int) -> Self:
        """Remove one or more rows.

        Rows are removed starting from the last one,
        so the indices always refer to the positions the rows
        had before the call.
        """
        length = self._store.length()
        for r in rows:
            if not 0 <= r < length:
                raise IndexOutOfRangeError(
                    f"Row index {r} out of range for {length} rows"
                )

        for r in sorted(set(rows), reverse=True):
            self._store.delete_row(r)
        return self

    def add(self, name: Hashable) -> Self:
        """Add a new column, filled with ``None``, after the existing ones."""
        if name in self._index:
            raise DuplicateColumnError(f"Column already exists: {name}")

        self._columns.append(name)
        self._index[name] = len(self._columns) - 1
        self._store.add([])
        return self

    def drop(self, *cols: ColumnRef) -> Self:
        """Remove one or more columns.

        Columns can be referenced by name or index, all the
        references are resolved before any column is removed,
        so indices always refer to the positions the columns
        had before the call.
        """
        indices = {self._resolve(col) for col in cols}
        for colidx in sorted(indices, reverse=True):
            del self._columns[colidx]
            self._store.drop(colidx)
        self._reindex()
        return self

    def rename(
        self, old: Hashable | Mapping[Hashable, Hashable], new: Hashable = _MISSING
    ) -> Self:
        """Change the name of one or more columns.

        Can be called as ``rename("old", "new")`` or
        with a dictionary of renames, ``rename({"old": "new"})``,
        which are applied in order. If any of them fails
        none is applied.

        Renaming a column to its own name does nothing.
        """
        if isinstance(old, Mapping):
            if new is not _MISSING:
                raise TypeError("rename() takes no new name when given a mapping")
            renames = list(old.items())
        elif new is _MISSING:
            raise TypeError(f"rename() missing the new name for column {old!r}")
        else:
            renames = [(old, new)]

        columns = list(self._columns)
        for oldname, newname in renames:
            if oldname not in columns:
                raise UnknownColumnError(f"Unknown column: {oldname}")
            if oldname == newname:
                continue
            if newname in columns:
                raise DuplicateColumnError(f"Column already exists: {newname}")
            columns[columns.index(oldname)] = newname

        self._columns = columns
        self._reindex()
        return self

    def fill_na(self, col: ColumnRef, value: Any) -> Self:
        """Replace the ``None`` cells of a column with a value."""
        return self.fill_na_map({col: value})

    def fill_na_map(self, values: Mapping[ColumnRef, Any]) -> Self:
        """Replace the ``None`` cells of multiple columns.

        :param values: Maps the columns to the values that should
                       replace their missing cells.
        """
        fills = [(self._resolve(col), value) for col, value in values.items()]
        for colidx, value in fills:
            block = self._store.column(colidx)
            for r, cell in enumerate(block):
                if cell is None:
                    block[r] = value
        return self

    def clone(self) -> Self:
        """A copy of the frame that can be modified independently."""
        cloned = self.__class__(self._columns)
        cloned._store = self._store.copy()
        return cloned

    def unique(self, *cols: ColumnRef) -> Self:
        """A new frame without the rows that repeat the same cells.

        Only the values in ``cols`` are considered when deciding if
        two rows are the same, when no column is provided
        all the columns are considered.
        The first of the duplicated rows is kept.
        """
        return unique(self, [self._resolve(col) for col in cols])

    def sort_by(self, *cols: ColumnRef) -> Self:
        """A new frame with the rows sorted by one or more columns.

        Names prefixed with ``-`` are sorted in descending order.
        Missing values are placed last for ascending columns and
        first for descending ones.

        >>> frame = Frame.from_columns({"k": [1, 2, 1, 2], "t": ["x", "y", "z", "w"]})
        >>> frame.sort_by("k").rows()
        [[1, 'x'], [1, 'z'], [2, 'y'], [2, 'w']]
        >>> frame.sort_by("-k", "t").rows()
        [[2, 'w'], [2, 'y'], [1, 'x'], [1, 'z']]
        """
        return sort(self, parse_sort_columns(self, *cols))

    def sort_with(self, comparator: RowComparator) -> Self:
        """A new frame with the rows sorted by a comparison function.

        See :func:`blockframe.compute.sort_with`.
        """
        return sort_with(self, comparator)

    def join_on(
        self, other: "Frame", how: JoinType | str, key: ColumnRef
    ) -> Self:
        """A new frame combining the rows of two frames with the same key.

        See :mod:`blockframe.compute.join` for a description
        of how the rows are combined.

        :param other: The frame to join with, on the right side.
        :param how: The :class:`JoinType`.
        :param key: The column both frames must have.
        """
        return join(self, other, how, key)

    def _resolve(self, col: ColumnRef) -> int:
        """Get the index of a column referenced by name or by index."""
        if isinstance(col, int):
            if not 0 <= col < len(self._columns):
                raise IndexOutOfRangeError(
                    f"Column index {col} out of range for {len(self._columns)} columns"
                )
            return col

        colidx = self._index.get(col)
        if colidx is None:
            raise UnknownColumnError(f"Unknown column: {col}")
        return colidx

    def _reindex(self) -> None:
        """Rebuild the map from column names to their position."""
        index = {}
        for colidx, name in enumerate(self._columns):
            if name in index:
                raise DuplicateColumnError(f"Column already exists: {name}")
            index[name] = colidx
        self._index = index
