"""The DataFrame object itself."""

import functools
import logging
from typing import Callable, Iterable, Mapping, Sequence, Self

import pyarrow as pa

from ..stats import FrameStatistics
from ..utils import inspect, tabulate
from .vector import ColumnVector, DataVector, RowVector, UnknownColumnError

logger = logging.getLogger(__name__)


class DataFrame(FrameStatistics):
    """Data structure that handles float values in rows and columns.

    Values are addressed by row index and column name.
    The data is stored by column, each column being a list
    of values with one entry per row, rows are gathered
    from the columns when they are requested.

    The frame is eager, every transformation immediately
    builds a new DataFrame and leaves the original one untouched.
    The only way to change a frame in place is :meth:`set_value`.

    >>> df = DataFrame(["A", "B"], [[1, 2], [3, 4], [5, 6]])
    >>> df.get_value(1, "B")
    4.0
    >>> df.select(lambda row: row.get_value("A") > 2).get_column("A").values
    (3.0, 5.0)
    """

    def __init__(self, column_names: Iterable[str], rows: Iterable[Sequence[float]]) -> None:
        """
        :param column_names: The names of the columns, they must be unique.
        :param rows: The data, one sequence of values per row,
                     each with one value for every column.
        """
        column_names = tuple(column_names)
        columns: dict[str, list[float]] = {name: [] for name in column_names}
        if len(columns) != len(column_names):
            raise ValueError(f"Duplicate column names in {list(column_names)}")

        row_count = 0
        for row in rows:
            if len(row) != len(column_names):
                raise ValueError(
                    f"Row {row_count} has {len(row)} values, expected {len(column_names)}"
                )
            for name, value in zip(column_names, row):
                columns[name].append(float(value))
            row_count += 1

        self._column_names = column_names
        self._columns = columns
        self._row_count = row_count

    @classmethod
    def from_columns(
        cls, columns: Mapping[str, Sequence[float]], row_count: int | None = None
    ) -> Self:
        """Create a DataFrame from a ``{column_name: values}`` mapping.

        :param columns: The values of each column, all of the same length.
        :param row_count: The number of rows, only needed
                          when there are no columns at all.

        >>> DataFrame.from_columns({"a": [1, 2], "b": [3, 4]}).get_row(1).as_map()
        {'a': 2.0, 'b': 4.0}
        """
        lengths = {len(values) for values in columns.values()}
        if len(lengths) > 1:
            raise ValueError("All columns must have the same length")
        if row_count is None:
            row_count = lengths.pop() if lengths else 0
        elif lengths and lengths != {row_count}:
            raise ValueError(f"Columns must have {row_count} values")

        values = list(columns.values())
        return cls(columns.keys(), ([v[i] for v in values] for i in range(row_count)))

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a DataFrame from a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`.

        All columns are cast to ``float64``.
        """
        columns = {
            name: table.column(name).cast(pa.float64()).to_pylist()
            for name in table.column_names
        }
        return cls.from_columns(columns, row_count=table.num_rows)

    def to_arrow(self) -> pa.Table:
        """Export the data as a :class:`pyarrow.Table` of ``float64`` columns.

        >>> DataFrame(["a"], [[1], [2]]).to_arrow()
        pyarrow.Table
        a: double
        ----
        a: [[1,2]]
        """
        return pa.table(
            {name: pa.array(self._columns[name], type=pa.float64()) for name in self._column_names}
        )

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return len(self._column_names)

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._column_names

    def get_row_count(self) -> int:
        return self._row_count

    def get_column_count(self) -> int:
        return len(self._column_names)

    def get_column_names(self) -> tuple[str, ...]:
        """The names of the columns, in order. The tuple can't be modified."""
        return self._column_names

    def get_value(self, row_index: int, column_name: str) -> float:
        """Get the value stored at a given row and column.

        :raises IndexError: when the row index does not match any existing row.
        :raises UnknownColumnError: when no column has the given name.
        """
        self._check_row_index(row_index)
        return self._column(column_name)[row_index]

    def set_value(self, row_index: int, column_name: str, value: float) -> None:
        """Replace the value stored at a given row and column.

        :raises IndexError: when the row index does not match any existing row.
        :raises UnknownColumnError: when no column has the given name.
        """
        self._check_row_index(row_index)
        self._column(column_name)[row_index] = float(value)

    def get_row(self, row_index: int) -> RowVector:
        """Get a copy of the row at the given index.

        The entries of the returned vector are named
        after the columns of the frame.

        :raises IndexError: when the row index does not match any existing row.
        """
        self._check_row_index(row_index)
        return RowVector(
            row_index,
            self._column_names,
            [self._columns[name][row_index] for name in self._column_names],
        )

    def get_column(self, column_name: str) -> ColumnVector:
        """Get a copy of the column with the given name.

        The entries of the returned vector are named
        ``row_0``, ``row_1``, ... after the rows of the frame.

        :raises UnknownColumnError: when no column has the given name.
        """
        return ColumnVector(column_name, self._column(column_name))

    def get_rows(self) -> list[RowVector]:
        """All the rows of the frame, in order."""
        return [self.get_row(i) for i in range(self._row_count)]

    def get_columns(self) -> list[ColumnVector]:
        """All the columns of the frame, in order."""
        return [self.get_column(name) for name in self._column_names]

    def expand(self, additional_rows: int, new_columns: str | Iterable[str]) -> Self:
        """Create a new DataFrame with more rows and columns.

        The data of this frame is copied in the top left
        corner of the new one, all other values are ``0.0``.
        The new columns come after the existing ones.

        >>> df = DataFrame(["A", "B"], [[1, 2], [3, 4]]).expand(1, ["E"])
        >>> df.column_names
        ('A', 'B', 'E')
        >>> [row.values for row in df.get_rows()]
        [(1.0, 2.0, 0.0), (3.0, 4.0, 0.0), (0.0, 0.0, 0.0)]

        :param additional_rows: How many rows to add at the end.
        :param new_columns: The name of the columns to add, or a single name.
        :raises ValueError: when ``additional_rows`` is negative or
                            a new column name already exists.
        """
        if additional_rows < 0:
            raise ValueError(f"Cannot expand by a negative number of rows: {additional_rows}")
        if isinstance(new_columns, str):
            new_columns = [new_columns]
        new_columns = list(new_columns)

        row_count = self._row_count + additional_rows
        columns = {
            name: self._columns[name] + [0.0] * additional_rows
            for name in self._column_names
        }
        for name in new_columns:
            if name in columns:
                raise ValueError(f"Column {name} already exists")
            columns[name] = [0.0] * row_count

        logger.debug(
            "expanding %r by %d rows and columns %s", self, additional_rows, new_columns
        )
        return self.from_columns(columns, row_count=row_count)

    def project(self, retain_columns: Iterable[str]) -> Self:
        """Create a new DataFrame with only some of the columns.

        The columns keep the order they have in this frame,
        the order of ``retain_columns`` does not matter.

        >>> DataFrame(["A", "B", "C"], [[1, 2, 3]]).project(["C", "A"]).column_names
        ('A', 'C')

        :param retain_columns: The names of the columns to keep.
        :raises UnknownColumnError: when one of the names is not a column.
        """
        retain_columns = set(retain_columns)
        for name in retain_columns:
            self._column(name)

        columns = {
            name: self._columns[name]
            for name in self._column_names
            if name in retain_columns
        }
        logger.debug("projecting %r to columns %s", self, list(columns))
        return self.from_columns(columns, row_count=self._row_count)

    def select(self, row_predicate: Callable[[RowVector], bool]) -> Self:
        """Create a new DataFrame with only the rows matching a predicate.

        The predicate is invoked with each row, in order,
        the rows for which it returns a true value are kept.
        Rows are numbered again starting from 0 in the new frame.

        :param row_predicate: The function deciding which rows to keep.
        """
        selected = [row.values for row in self.get_rows() if row_predicate(row)]
        logger.debug(
            "selected %d of %d rows with %s",
            len(selected),
            self._row_count,
            inspect.get_qualname(row_predicate),
        )
        return self.__class__(self._column_names, selected)

    def compute_column(
        self, column_name: str, row_function: Callable[[RowVector], float]
    ) -> Self:
        """Create a new DataFrame with an additional computed column.

        The value of the new column for each row is the result
        of ``row_function`` invoked with that row of this frame,
        so the function never sees the new column.

        >>> df = DataFrame(["A", "B"], [[1, 2], [3, 4]])
        >>> df.compute_column("sum", lambda row: sum(row.values)).get_column("sum").values
        (3.0, 7.0)

        :param column_name: The name of the new column.
        :param row_function: Computes the value of the new column from a row.
        """
        new_frame = self.expand(0, column_name)
        for row in self.get_rows():
            new_frame.set_value(row.index, column_name, row_function(row))
        return new_frame

    def summarize(
        self, name: str, summary_function: Callable[[float, float], float]
    ) -> DataVector:
        """Reduce each column to a single value.

        ``summary_function`` is applied cumulatively to the values
        of each column, in row order, starting from ``0.0``.
        The result has one entry for each column, named after it.

        >>> df = DataFrame(["A", "B"], [[1, 2], [2, 4], [3, 6]])
        >>> df.summarize("total", lambda a, b: a + b).as_map()
        {'A': 6.0, 'B': 12.0}

        :param name: The name of the returned vector.
        :param summary_function: Combines the result so far with the next value.
        """
        logger.debug(
            "summarizing %r with %s", self, inspect.get_qualname(summary_function)
        )
        return DataVector(
            name,
            self._column_names,
            [
                functools.reduce(summary_function, self._columns[column], 0.0)
                for column in self._column_names
            ],
        )

    def statistics(self) -> FrameStatistics:
        """Statistical analysis of the columns of this frame."""
        return self

    def column_values(self, name: str) -> list[float]:
        """A copy of the values of a column, in row order."""
        return list(self._column(name))

    def _column(self, column_name: str) -> list[float]:
        try:
            return self._columns[column_name]
        except (KeyError, TypeError):
            raise UnknownColumnError(column_name) from None

    def _check_row_index(self, row_index: int) -> None:
        if isinstance(row_index, bool) or not isinstance(row_index, int):
            raise IndexError(f"Invalid row index: {row_index!r}")
        if not 0 <= row_index < self._row_count:
            raise IndexError(f"Invalid row index: {row_index}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataFrame):
            return NotImplemented
        return (
            self._column_names == other._column_names
            and self._row_count == other._row_count
            and self._columns == other._columns
        )

    __hash__ = None

    def __str__(self) -> str:
        return tabulate.tabulate(self)

    def __repr__(self) -> str:
        return f"DataFrame(columns={list(self._column_names)}, rows={self._row_count})"
