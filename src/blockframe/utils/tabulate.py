"""Format a frame into a text table for print.

the `tabulate` function takes a :class:`blockframe.Frame` and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display frames when they are printed.

Example:

    >>> from blockframe import Frame
    >>> frame = Frame.from_columns({
    ...     "Product": ["Videogame", "Laptop", "Laptop"],
    ...     "Quantity": [8, 8, None],
    ...     "Price": [66.5, 38.72, 77.46],
    ... })
    >>> print(tabulate(frame))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | null     | 77.46
"""

from typing import TYPE_CHECKING, Any

from .. import config

if TYPE_CHECKING:
    from ..dataframe import Frame


def tabulate(
    frame: "Frame", max_rows: int | None = None, max_width: int | None = None
) -> str:
    """Format a Frame into a text table.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22

    :param frame: The frame to format.
    :param max_rows: How many rows to show, defaults to
                     :data:`blockframe.config.display_max_rows`.
    :param max_width: How long a cell can be, defaults to
                      :data:`blockframe.config.display_max_width`.
    """
    if max_rows is None:
        max_rows = config.display_max_rows
    if max_width is None:
        max_width = config.display_max_width

    cols = [format_value(c, max_width) for c in frame.columns()]
    rows = [
        [format_value(v, max_width) for v in frame.row(r)]
        for r in range(min(max_rows, frame.length()))
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if frame.length() > max_rows:
        table += f"\n... and {frame.length() - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    ).rstrip()


def format_value(v: Any, max_width: int = 30) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings.

    >>> format_value(None), format_value(True), format_value(1 / 3)
    ('null', 'true', '0.33')
    >>> format_value("a long sentence that does not fit", max_width=10)
    'a long ...'
    """
    if v is None:
        return "null"
    elif isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, float):
        return f"{v:.2f}"

    v = str(v)
    if len(v) > max_width:
        v = v[: max_width - 3] + "..."
    return v
