"""Format frames and vectors into text tables for print.

The `tabulate` function takes a :class:`numframe.dataframe.DataFrame`
and formats it into a text table, one line per row preceded by the
row name. Values are printed with a fixed number of decimal places
and only the first rows are shown for long frames.

Example:

    >>> from numframe.dataframe import DataFrame
    >>> df = DataFrame(["Quantity", "Price"], [[8, 66.5], [8, 38.72], [7, 77.46]])
    >>> print(tabulate(df))
          | Quantity | Price
    ----- | -------- | -----
    row_0 | 8.00     | 66.50
    row_1 | 8.00     | 38.72
    row_2 | 7.00     | 77.46
"""

from typing import Iterable

from ..dataframe.vector import DataVector, row_name


def tabulate(frame, max_rows: int = 20, decimals: int = 2) -> str:
    """Format a DataFrame into a text table.

    Will produce a string like::

              | Quantity | Price
        ----- | -------- | -----
        row_0 | 8.00     | 66.50
        row_1 | 8.00     | 38.72
        ... and 1 more rows

    :param frame: The :class:`numframe.dataframe.DataFrame` to format.
    :param max_rows: How many rows to show at most.
    :param decimals: How many decimal places to show for each value.
    :raises ValueError: when ``max_rows`` is negative.
    """
    if max_rows < 0:
        raise ValueError(f"max_rows can't be negative: {max_rows}")
    header = [""] + list(frame.column_names)
    rows = [
        [row_name(row.index)] + [format_value(v, decimals) for v in row.values]
        for row in frame.get_rows()[:max_rows]
    ]

    table = render(header, rows)
    if frame.row_count > max_rows:
        table += f"\n... and {frame.row_count - max_rows} more rows"
    return table


def tabulate_vector(vector: DataVector, decimals: int = 2) -> str:
    """Format a DataVector into a two columns text table of entries and values.

    >>> from numframe.dataframe import DataVector
    >>> print(tabulate_vector(DataVector("total", ["a", "bb"], [1.5, 20])))
    entry | total
    ----- | -----
    a     | 1.50
    bb    | 20.00
    """
    rows = [
        [entry, format_value(value, decimals)]
        for entry, value in zip(vector.entry_names, vector.values)
    ]
    return render(["entry", vector.name], rows)


def render(header: list[str], rows: list[list[str]]) -> str:
    """Render the header and rows as aligned text lines."""
    colsizes = compute_max_colsize(header, rows)
    lines = [maketablerow(header, colsizes)]
    lines.append(maketablerow(["-"] * len(header), colsizes, fillvalue="-"))
    lines.extend(maketablerow(row, colsizes) for row in rows)
    return "\n".join(line.rstrip() for line in lines)


def compute_max_colsize(header: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table.

    Columns are never narrower than the ``---`` separator.
    """
    return [
        max([len(row[colidx]) for row in rows] + [len(header[colidx]), 3])
        for colidx, _ in enumerate(header)
    ]


def maketablerow(cells: Iterable[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        cell.ljust(colsizes[idx], fillvalue) for idx, cell in enumerate(cells)
    )


def format_value(v: float, decimals: int = 2) -> str:
    """Format a value with a fixed number of decimal places."""
    return f"{v:.{decimals}f}"
