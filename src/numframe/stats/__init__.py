"""Statistical analysis of numframe frames.

Frames expose their statistics through
:meth:`numframe.dataframe.DataFrame.statistics`,
which returns a :class:`FrameStatistics` implementation
that refers to the data by column name:

>>> from numframe.dataframe import DataFrame
>>> df = DataFrame(["x", "y"], [[1, 2], [2, 4], [3, 6], [4, 8]])
>>> round(df.statistics().pearsons_correlation("x", "y"), 6)
1.0
>>> df.statistics().describe("y").mean
5.0

The actual computation is delegated to :mod:`scipy.stats`,
the functions wrapping it are available in
:mod:`numframe.stats.statistics` for use on plain lists of values.
"""

from .description import Description
from .statistics import (
    FrameStatistics,
    describe,
    one_sample_t_test,
    pearsons_correlation,
    two_sample_t_test,
)

__all__ = (
    "Description",
    "FrameStatistics",
    "describe",
    "one_sample_t_test",
    "two_sample_t_test",
    "pearsons_correlation",
)
