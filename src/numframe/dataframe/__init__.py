"""Dataframe of float values.

A dataframe is a table of data, where each column has a name
and each row is identified by its position, starting from 0.

The numframe dataframe only holds floats and keeps
all of its data in memory. It's built from the names of its
columns and the data of its rows:

>>> from numframe.dataframe import DataFrame
>>> df = DataFrame(["A", "B"], [[1, 2], [3, 4], [5, 6]])
>>> print(df)
      | A    | B
----- | ---- | ----
row_0 | 1.00 | 2.00
row_1 | 3.00 | 4.00
row_2 | 5.00 | 6.00

Rows and columns can be read as :class:`DataVector` objects,
which are detached copies of the data:

>>> df.get_row(0)
RowVector(name='row_0', entries={'A': 1.0, 'B': 2.0})
>>> df.get_column("B")
ColumnVector(name='B', entries={'row_0': 2.0, 'row_1': 4.0, 'row_2': 6.0})

The transformations never modify the frame they are invoked on,
they always return a new frame. That allows to chain them:

>>> summary = (
...     df.select(lambda row: row["A"] > 1)
...     .compute_column("AB", lambda row: row["A"] * row["B"])
...     .project(["A", "AB"])
...     .summarize("total", lambda total, value: total + value)
... )
>>> summary.as_map()
{'A': 8.0, 'AB': 42.0}
"""

from .dataframe import DataFrame
from .vector import ColumnVector, DataVector, RowVector, UnknownColumnError

__all__ = ("DataFrame", "DataVector", "RowVector", "ColumnVector", "UnknownColumnError")
