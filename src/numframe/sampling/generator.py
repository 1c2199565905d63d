"""Fill dataframes with random data."""

import logging
from typing import Iterable, Self

from ..dataframe import DataFrame
from . import distributions
from .distributions import Distribution

logger = logging.getLogger(__name__)


class RandomFrameGenerator:
    """Generate DataFrames of values drawn from a distribution.

    The generator is reseeded at every :meth:`generate` call,
    so the same seed and shape always produce the same frame:

    >>> generator = RandomFrameGenerator.gaussian(0.0, 1.0)
    >>> df = generator.generate(7, 3, ["x", "y"])
    >>> df
    DataFrame(columns=['x', 'y'], rows=3)
    >>> df == generator.generate(7, 3, ["x", "y"])
    True
    """

    def __init__(self, distribution: Distribution) -> None:
        """
        :param distribution: The distribution the values are drawn from.
        """
        self.distribution = distribution

    def generate(self, seed: int, rows: int, column_names: Iterable[str]) -> DataFrame:
        """Create a DataFrame of random values.

        The values are drawn one row at a time,
        filling the columns of each row in order.

        :param seed: The seed the distribution is reseeded with.
        :param rows: The number of rows of the frame.
        :param column_names: The names of the columns of the frame.
        """
        if rows < 0:
            raise ValueError(f"Number of rows can't be negative: {rows}")
        column_names = list(column_names)

        self.distribution.reseed(seed)
        data = [
            [self.distribution.sample() for _ in column_names] for _ in range(rows)
        ]
        logger.debug(
            "generated %d rows of %s from %s", rows, column_names, self.distribution
        )
        return DataFrame(column_names, data)

    @classmethod
    def uniform(cls, lower: float, upper: float) -> Self:
        """A generator of values uniformly distributed in ``[lower, upper)``."""
        return cls(distributions.uniform(lower, upper))

    @classmethod
    def gaussian(cls, mean: float, std: float) -> Self:
        """A generator of normally distributed values."""
        return cls(distributions.gaussian(mean, std))

    @classmethod
    def exponential(cls, mean: float) -> Self:
        """A generator of exponentially distributed values."""
        return cls(distributions.exponential(mean))
