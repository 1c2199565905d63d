"""Statistics over the columns of a frame.

The statistics themselves are not implemented by numframe,
they are delegated to :mod:`scipy.stats`. The functions in this
module take plain sequences of floats, convert them to
:class:`numpy.ndarray` and return plain Python values,
so that the rest of numframe never has to deal with numpy types.

:class:`FrameStatistics` is the interface that frames expose
through their ``statistics()`` method, it refers to the data
by column name and is in charge of extracting the columns
before calling the functions of this module.
"""

import abc
import logging
from typing import Sequence

import numpy as np
from scipy import stats

from .description import Description

logger = logging.getLogger(__name__)


def one_sample_t_test(values: Sequence[float], mu: float) -> float:
    """Two-sided p-value of a t-test of the values against a mean.

    >>> round(one_sample_t_test([1.0, 2.0, 3.0, 4.0, 5.0], 3.0), 6)
    1.0
    """
    result = stats.ttest_1samp(np.asarray(values, dtype=float), popmean=mu)
    return float(result.pvalue)


def two_sample_t_test(values1: Sequence[float], values2: Sequence[float]) -> float:
    """Two-sided p-value of a t-test comparing the means of two samples.

    The samples are not assumed to have the same variance (Welch's t-test).
    """
    result = stats.ttest_ind(
        np.asarray(values1, dtype=float),
        np.asarray(values2, dtype=float),
        equal_var=False,
    )
    return float(result.pvalue)


def pearsons_correlation(values1: Sequence[float], values2: Sequence[float]) -> float:
    """Pearson's correlation coefficient of two samples of the same length.

    >>> round(pearsons_correlation([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]), 6)
    1.0
    """
    result = stats.pearsonr(
        np.asarray(values1, dtype=float), np.asarray(values2, dtype=float)
    )
    return float(result.statistic)


def describe(values: Sequence[float]) -> Description:
    """Compute the descriptive statistics of a sample."""
    return Description(values)


class FrameStatistics(abc.ABC):
    """Statistical analysis of the columns of a frame.

    Frames implement this interface and return themselves
    from their ``statistics()`` method, all methods refer
    to the columns by their name.

    A minimal implementation only has to know how to
    get the values of a column::

        class ListsStatistics(FrameStatistics):
            def __init__(self, columns):
                self.columns = columns

            def column_values(self, name):
                return self.columns[name]
    """

    @abc.abstractmethod
    def column_values(self, name: str) -> list[float]:
        """The values of a column, in row order."""
        ...

    def t_test(self, var: str, other: float | str) -> float:
        """Run a t-test and return its two-sided p-value.

        When ``other`` is the name of a column, the two columns
        are compared with a two sample t-test. Otherwise ``other`` is
        the mean the ``var`` column is tested against.

        :param var: The name of the column to test.
        :param other: The expected mean or the column to compare with.
        """
        if isinstance(other, str):
            logger.debug("two sample t-test of %s against %s", var, other)
            return two_sample_t_test(self.column_values(var), self.column_values(other))
        logger.debug("one sample t-test of %s against mean %s", var, other)
        return one_sample_t_test(self.column_values(var), other)

    def pearsons_correlation(self, var1: str, var2: str) -> float:
        """Pearson's correlation coefficient between two columns."""
        logger.debug("pearson correlation of %s and %s", var1, var2)
        return pearsons_correlation(self.column_values(var1), self.column_values(var2))

    def describe(self, var: str) -> Description:
        """Descriptive statistics of a column."""
        return describe(self.column_values(var))

    def estimate_linear_model(
        self, dependent: str, independent: list[str]
    ) -> dict[str, float] | None:
        """Estimate a linear model of ``dependent`` over ``independent``.

        Linear models are not supported yet, this always
        returns ``None`` to signal that no model was estimated.
        """
        return None
