"""Descriptive statistics of a sample."""

from typing import Sequence

import numpy as np
from scipy import stats


class Description:
    """Summary of a sample of values.

    The moments are computed by :func:`scipy.stats.describe`,
    variance and standard deviation are the sample (``n - 1``) ones
    and kurtosis is the excess kurtosis.

    >>> d = Description([1.0, 2.0, 3.0, 4.0])
    >>> d.n, d.min, d.max, d.mean, d.sum
    (4, 1.0, 4.0, 2.5, 10.0)
    >>> d.percentile(50)
    2.5
    """

    def __init__(self, values: Sequence[float]) -> None:
        """
        :param values: The sample, it must contain at least one value.
        """
        self._values = np.asarray(values, dtype=float)
        if self._values.size == 0:
            raise ValueError("Cannot describe an empty sample")

        result = stats.describe(self._values)
        self.n = int(result.nobs)
        self.min = float(result.minmax[0])
        self.max = float(result.minmax[1])
        self.mean = float(result.mean)
        self.variance = float(result.variance)
        self.std = float(np.sqrt(result.variance))
        self.skewness = float(result.skewness)
        self.kurtosis = float(result.kurtosis)
        self.sum = float(self._values.sum())

    def percentile(self, p: float) -> float:
        """The ``p``-th percentile of the sample, ``0 < p <= 100``."""
        if not 0 < p <= 100:
            raise ValueError(f"Percentile must be in (0, 100], got {p}")
        return float(np.percentile(self._values, p))

    def as_dict(self) -> dict[str, float]:
        """The statistics as a ``{name: value}`` dictionary."""
        return {
            "n": self.n,
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "variance": self.variance,
            "std": self.std,
            "skewness": self.skewness,
            "kurtosis": self.kurtosis,
            "sum": self.sum,
        }

    def __str__(self) -> str:
        return "\n".join(f"{name}: {value}" for name, value in self.as_dict().items())

    def __repr__(self) -> str:
        return f"Description(n={self.n}, mean={self.mean}, std={self.std})"
