"""Random data generation.

When testing an analysis it's often convenient to have
data of a known distribution at hand. The
:class:`RandomFrameGenerator` fills a
:class:`numframe.dataframe.DataFrame` with values drawn
from a :class:`Distribution`, seeded so that the same data
can be generated again:

>>> from numframe.sampling import RandomFrameGenerator
>>> df = RandomFrameGenerator.uniform(0.0, 1.0).generate(42, 100, ["a", "b"])
>>> df.row_count, df.column_count
(100, 2)
>>> all(0.0 <= v < 1.0 for v in df.get_column("a"))
True

Sampling itself is performed by :mod:`scipy.stats`
using a :class:`numpy.random.Generator` as the source of randomness.
"""

from .distributions import Distribution, exponential, gaussian, uniform
from .generator import RandomFrameGenerator

__all__ = (
    "Distribution",
    "RandomFrameGenerator",
    "uniform",
    "gaussian",
    "exponential",
)
