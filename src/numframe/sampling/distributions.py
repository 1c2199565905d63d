"""Seedable sources of random values.

A :class:`Distribution` couples a frozen :mod:`scipy.stats`
distribution with the :class:`numpy.random.Generator`
that drives its sampling. Reseeding replaces the generator,
so that the values drawn after reseeding with the same seed
are always the same:

>>> from scipy import stats
>>> d = Distribution(stats.uniform(loc=0, scale=10))
>>> d.reseed(42)
>>> first = d.sample(3)
>>> d.reseed(42)
>>> d.sample(3) == first
True
"""

import logging

import numpy as np
from scipy import stats

logger = logging.getLogger(__name__)


class Distribution:
    """A probability distribution that can be sampled.

    Any continuous distribution of :mod:`scipy.stats` can be used,
    as far as it was frozen with its parameters. The helpers
    :func:`uniform`, :func:`gaussian` and :func:`exponential` build
    the most common ones.
    """

    def __init__(self, frozen, seed: int | None = None) -> None:
        """
        :param frozen: A frozen scipy distribution, like ``scipy.stats.norm(0, 1)``.
        :param seed: The initial seed, ``None`` to seed from the operating system.
        """
        self.frozen = frozen
        self.reseed(seed)

    def reseed(self, seed: int | None) -> None:
        """Restart the sampling from the given seed."""
        logger.debug("reseeding %s with %s", self, seed)
        self.rng = np.random.default_rng(seed)

    def sample(self, size: int | None = None) -> float | list[float]:
        """Draw values from the distribution.

        :param size: How many values to draw. When ``None``,
                     a single float is returned instead of a list.
        """
        if size is None:
            return float(self.frozen.rvs(random_state=self.rng))
        return [float(v) for v in self.frozen.rvs(size=size, random_state=self.rng)]

    def __str__(self) -> str:
        args = ", ".join(
            [str(a) for a in self.frozen.args]
            + [f"{k}={v}" for k, v in self.frozen.kwds.items()]
        )
        return f"Distribution({self.frozen.dist.name}, {args})"


def uniform(lower: float, upper: float) -> Distribution:
    """Uniform distribution of values in ``[lower, upper)``."""
    if lower >= upper:
        raise ValueError(f"Lower bound {lower} must be smaller than upper bound {upper}")
    return Distribution(stats.uniform(loc=lower, scale=upper - lower))


def gaussian(mean: float, std: float) -> Distribution:
    """Normal distribution with the given mean and standard deviation."""
    if std <= 0:
        raise ValueError(f"Standard deviation must be positive, got {std}")
    return Distribution(stats.norm(loc=mean, scale=std))


def exponential(mean: float) -> Distribution:
    """Exponential distribution with the given mean."""
    if mean <= 0:
        raise ValueError(f"Mean must be positive, got {mean}")
    return Distribution(stats.expon(scale=mean))
