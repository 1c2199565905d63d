"""numframe

An in-memory dataframe of float values, with the statistics
and random data generation needed to play with it.

The library is constituted by multiple components, each isolated within its own
package and each documented in the package itself.

The primary components are:

* The Dataframe, a table of values with named columns
  and the transformations that can be applied to it.
* The Statistics, which run statistical tests and
  descriptions of the dataframe columns.
* The Sampling, which fills dataframes with random values
  drawn from a probability distribution.

For the user guide and code documentation of each component, refer to the
component itself.
"""

from .dataframe import ColumnVector, DataFrame, DataVector, RowVector, UnknownColumnError
from .sampling import RandomFrameGenerator

__all__ = (
    "DataFrame",
    "DataVector",
    "RowVector",
    "ColumnVector",
    "UnknownColumnError",
    "RandomFrameGenerator",
)
