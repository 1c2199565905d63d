"""Named one dimensional views of a DataFrame.

A :class:`DataVector` is what the dataframe hands out when
you ask it for a row, a column, or a summary of its columns.
It's a snapshot: the values are copied out of the frame when the
vector is built, so changing the frame later won't change
the vector and the other way around.

Each vector has a ``name``, a list of ``entry_names``
and a parallel list of ``values``. How an entry is looked up
depends on what the vector represents:

* A :class:`RowVector` is named ``row_<index>`` and its entries
  are named after the columns of the frame, so they are looked
  up by column name.
* A :class:`ColumnVector` is named after the column and its entries
  are the rows ``row_0``, ``row_1``, ... so they are looked up by
  row position, either as an integer or as the ``row_<n>`` entry name.
* A plain :class:`DataVector` (like the one returned by
  :meth:`numframe.dataframe.DataFrame.summarize`) looks up its
  entries by name.

>>> row = RowVector(1, ["a", "b"], [3.0, 4.0])
>>> row
RowVector(name='row_1', entries={'a': 3.0, 'b': 4.0})
>>> row.get_value("b")
4.0
>>> column = ColumnVector("a", [1.0, 3.0])
>>> column.get_value("row_1")
3.0
>>> column.get_value(0)
1.0
"""

import re
from typing import Any, Iterable, Iterator

ROW_PREFIX = "row_"
"""Prefix of the names used for rows."""

_ROW_KEY_RE = re.compile(rf"^{ROW_PREFIX}(\d+)$")


def row_name(index: int) -> str:
    """The name of the row at the given position, like ``row_3``."""
    return f"{ROW_PREFIX}{index}"


class DataVector:
    """A named sequence of float values with a name for each entry.

    Entries are looked up by their name, when the same name
    appears more than once the first one is returned.

    >>> totals = DataVector("totals", ["a", "b"], [4.0, 6.0])
    >>> totals.get_value("a")
    4.0
    >>> totals.as_map()
    {'a': 4.0, 'b': 6.0}
    """

    def __init__(
        self, name: str, entry_names: Iterable[str], values: Iterable[float]
    ) -> None:
        """
        :param name: The name of the vector.
        :param entry_names: The name of each entry, in order.
        :param values: The value of each entry, parallel to ``entry_names``.
        """
        self._name = name
        self._entry_names = tuple(entry_names)
        self._values = tuple(float(v) for v in values)
        if len(self._entry_names) != len(self._values):
            raise ValueError(
                f"Got {len(self._entry_names)} entry names for {len(self._values)} values"
            )

    @property
    def name(self) -> str:
        return self._name

    @property
    def entry_names(self) -> tuple[str, ...]:
        return self._entry_names

    @property
    def values(self) -> tuple[float, ...]:
        return self._values

    def get_name(self) -> str:
        return self._name

    def get_entry_names(self) -> tuple[str, ...]:
        return self._entry_names

    def get_values(self) -> tuple[float, ...]:
        return self._values

    def get_value(self, entry_name: Any) -> float:
        """Get the value of the entry with the given name.

        :raises KeyError: when no entry has that name.
        """
        try:
            position = self._entry_names.index(entry_name)
        except ValueError:
            raise KeyError(entry_name) from None
        return self._values[position]

    def as_map(self) -> dict[str, float]:
        """Map each entry name to its value.

        If an entry name is repeated, the last entry wins.
        """
        return dict(zip(self._entry_names, self._values))

    def __getitem__(self, entry_name: Any) -> float:
        return self.get_value(entry_name)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._name == other._name
            and self._entry_names == other._entry_names
            and self._values == other._values
        )

    def __hash__(self) -> int:
        return hash((type(self), self._name, self._entry_names, self._values))

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{k!r}: {v!r}" for k, v in zip(self._entry_names, self._values)
        )
        return f"{self.__class__.__name__}(name={self._name!r}, entries={{{entries}}})"


class RowVector(DataVector):
    """A row of a DataFrame.

    The entries are named after the columns of the frame,
    in the order the frame has them.
    """

    def __init__(
        self, index: int, column_names: Iterable[str], values: Iterable[float]
    ) -> None:
        """
        :param index: The position of the row in the frame.
        :param column_names: The columns of the frame.
        :param values: The value of the row for each column.
        """
        super().__init__(row_name(index), column_names, values)
        self.index = index

    def get_value(self, column_name: str) -> float:
        """Get the value of the row for the given column.

        :raises UnknownColumnError: when the row has no such column.
        """
        try:
            return super().get_value(column_name)
        except KeyError:
            raise UnknownColumnError(column_name) from None


class ColumnVector(DataVector):
    """A column of a DataFrame.

    Entries are named ``row_0`` to ``row_<n-1>``
    and can be looked up either by that name or by
    the row index itself.

    >>> column = ColumnVector("price", [10.0, 20.0, 30.0])
    >>> column.entry_names
    ('row_0', 'row_1', 'row_2')
    >>> column["row_2"]
    30.0
    >>> column.get_value("price_2")
    Traceback (most recent call last):
      ...
    ValueError: Invalid row key: 'price_2'
    """

    def __init__(self, column_name: str, values: Iterable[float]) -> None:
        """
        :param column_name: The name of the column.
        :param values: The value of the column for each row.
        """
        values = tuple(values)
        super().__init__(
            column_name, (row_name(i) for i in range(len(values))), values
        )

    def get_value(self, row_key: int | str) -> float:
        """Get the value of the column at the given row.

        The row can be given as an ``int`` index or as
        a ``row_<index>`` entry name, the index is parsed
        out of the name without searching the entry names.

        :raises ValueError: when the key isn't a valid row key.
        :raises IndexError: when the row doesn't exist.
        """
        index = self.parse_row_key(row_key)
        if index < 0 or index >= len(self._values):
            raise IndexError(f"Invalid row index: {index}")
        return self._values[index]

    @staticmethod
    def parse_row_key(row_key: int | str) -> int:
        """Convert a row key to the row index it refers to."""
        if isinstance(row_key, bool):
            raise ValueError(f"Invalid row key: {row_key!r}")
        if isinstance(row_key, int):
            return row_key
        match = _ROW_KEY_RE.match(row_key) if isinstance(row_key, str) else None
        if match is None:
            raise ValueError(f"Invalid row key: {row_key!r}")
        return int(match.group(1))


class UnknownColumnError(ValueError):
    """An exception raised when a column name doesn't exist."""

    def __init__(self, column: str) -> None:
        super().__init__(f"Column name not found: {column}")
        self.column = column
