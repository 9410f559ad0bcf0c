"""Column major storage of the cells of a frame.

The storage is made of blocks, each block holds all
the cells of a column, one after the other::

    block 0     block 1     block 2
    +-------+   +-------+   +-------+
    | 1     |   | "a"   |   | None  |   <- row 0
    | 2     |   | "b"   |   | 3.5   |   <- row 1
    +-------+   +-------+   +-------+

Keeping the cells of a column together means that
operations working on a whole column (adding it, dropping it,
scanning it) don't have to touch the other columns.
The price is paid when a row is requested, as its cells
have to be picked one from each block and a new list built.

All the blocks always have the same length, which is
the number of rows of the storage.
"""

from typing import Any, Iterable

from ..errors import IndexOutOfRangeError


class BlockStore:
    """Cells of a table stored one block per column.

    >>> store = BlockStore([[1, 2], ["a", "b"]])
    >>> store.size(), store.length()
    (2, 2)
    >>> store.row(1)
    [2, 'b']
    >>> store.reshape(3, 3)
    >>> store.row(2)
    [None, None, None]
    """

    def __init__(self, data: Iterable[Iterable[Any]] = ()) -> None:
        """
        :param data: The initial columns, each one an iterable of cells.
                     Shorter columns are padded with ``None``.
        """
        self.blocks: list[list[Any]] = []
        for column in data:
            self.add(column)

    def __repr__(self) -> str:
        return f"BlockStore(cols={self.size()}, rows={self.length()})"

    def size(self) -> int:
        """The number of columns."""
        return len(self.blocks)

    def length(self) -> int:
        """The number of rows."""
        return len(self.blocks[0]) if self.blocks else 0

    def reshape(self, cols: int, rows: int) -> None:
        """Grow the storage to at least ``cols`` columns and ``rows`` rows.

        New cells are ``None``. The storage never shrinks,
        requesting a smaller shape than the current one does nothing.
        """
        for _ in range(self.size(), cols):
            self.blocks.append([])

        for block in self.blocks:
            missing = rows - len(block)
            if missing > 0:
                block.extend([None] * missing)

    def get(self, col: int, row: int) -> Any:
        """Value of the cell at the given column and row."""
        self._check_col(col)
        self._check_row(row)
        return self.blocks[col][row]

    def set(self, col: int, row: int, value: Any) -> None:
        """Replace the value of a cell."""
        self._check_col(col)
        self._check_row(row)
        self.blocks[col][row] = value

    def row(self, row: int) -> list[Any]:
        """Build a new list with the cells of a row.

        The list is not bound to the storage in any way,
        changing it won't change the stored cells.
        """
        self._check_row(row)
        return [block[row] for block in self.blocks]

    def column(self, col: int) -> list[Any] | None:
        """The block of a column, or ``None`` if there is no such column.

        The block is returned as is, changing it
        changes the storage.
        """
        if col < 0 or col >= len(self.blocks):
            return None
        return self.blocks[col]

    def add(self, column: Iterable[Any]) -> None:
        """Append a new column after the existing ones.

        If the column is shorter than the current rows
        it gets padded with ``None``, if it is longer
        all the other columns are padded to its length.
        """
        block = list(column)
        length = self.length()
        if len(block) < length:
            block.extend([None] * (length - len(block)))
        elif len(block) > length:
            self.reshape(self.size(), len(block))
        self.blocks.append(block)

    def drop(self, col: int) -> None:
        """Remove a column, the following ones are shifted left.

        Dropping a column that doesn't exist does nothing.
        """
        if 0 <= col < len(self.blocks):
            del self.blocks[col]

    def delete_row(self, row: int) -> None:
        """Remove the cells of a row from every column."""
        self._check_row(row)
        for block in self.blocks:
            del block[row]

    def copy(self) -> "BlockStore":
        """A new storage with its own blocks and the same cells."""
        return self.__class__(self.blocks)

    def _check_col(self, col: int) -> None:
        if not 0 <= col < len(self.blocks):
            raise IndexOutOfRangeError(
                f"Column index {col} out of range for {len(self.blocks)} columns"
            )

    def _check_row(self, row: int) -> None:
        length = self.length()
        if not 0 <= row < length:
            raise IndexOutOfRangeError(
                f"Row index {row} out of range for {length} rows"
            )
