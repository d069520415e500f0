"""
Empirical Distributions
=======================

Distributions built directly from an observed sample:

- :class:`RankedContinuousDistribution`: continuous distribution on a closed
  range whose cumulative table places the ``i``-th order statistic at the
  plotting position ``(i - 0.3) / (N + 0.4)``;
- :class:`EmpiricalDiscreteDistribution`: discrete distribution over the
  sorted elements of a sample of comparable, hashable values.

Both keep a private sorted copy of the sample and a nondecreasing
cumulative table ending at exactly 1. ``quantile(p)`` returns the value at the index equal to
the number of table entries strictly below ``p`` (binary search).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from collections import Counter
from typing import TYPE_CHECKING, Any

import numpy as np

from statdist.distributions.computation import AnalyticalComputation
from statdist.distributions.distribution import Distribution
from statdist.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from statdist.distributions.support import ContinuousSupport, ExplicitTableDiscreteSupport
from statdist.errors import InvalidArgumentError
from statdist.types import CharacteristicName, UnivariateContinuous, UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    import numpy.typing as npt

    from statdist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from statdist.distributions.support import Support
    from statdist.types import DistributionType, GenericCharacteristicName, NumericArray

log = logging.getLogger(__name__)

_COMPUTATION_STRATEGY: DefaultComputationStrategy[Any, Any] = DefaultComputationStrategy()
_SAMPLING_STRATEGY = DefaultSamplingUnivariateStrategy()


def _table_index(cumulative: NumericArray, p: Any) -> npt.NDArray[np.intp]:
    """Number of cumulative entries strictly below ``p``."""
    p = np.asarray(p, dtype=np.float64)
    if np.any(~((p >= 0.0) & (p <= 1.0))):
        raise InvalidArgumentError("Probability must be in [0, 1]")
    return np.searchsorted(cumulative, p, side="left")


def _readonly(arr: npt.NDArray[Any]) -> npt.NDArray[Any]:
    arr.setflags(write=False)
    return arr


class _EmpiricalBase(Distribution):
    _support: Support
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return _SAMPLING_STRATEGY

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return _COMPUTATION_STRATEGY

    @property
    def support(self) -> Support:
        return self._support


class RankedContinuousDistribution(_EmpiricalBase):
    """
    Continuous distribution interpolated from ranked sample values.

    The sample is restricted to ``[lower, upper]`` and sorted. With ``N``
    retained values ``x_(1) <= ... <= x_(N)`` the cumulative table is

    ====================  ===========================
    value                 cumulative probability
    ====================  ===========================
    ``lower``             ``0``
    ``x_(i)``             ``(i - 0.3) / (N + 0.4)``
    ``upper``             ``1``
    ====================  ===========================

    ``cdf`` interpolates the table linearly; ``quantile`` is the step inverse
    that returns table values only, so every draw lies in ``[lower, upper]``.

    Parameters
    ----------
    sample : Iterable[float]
        Observed values; values outside the range are ignored.
    lower, upper : float
        Closed value range of the distribution.

    Raises
    ------
    InvalidArgumentError
        If ``lower > upper`` or no sample value lies in the range.
    """

    def __init__(self, sample: Iterable[float], lower: float, upper: float) -> None:
        lower, upper = float(lower), float(upper)
        support = ContinuousSupport(lower, upper)
        if support.is_empty:
            raise InvalidArgumentError(f"Empty range [{lower}, {upper}]")

        arr = np.asarray(list(sample), dtype=np.float64)
        kept = np.sort(arr[(arr >= lower) & (arr <= upper)])
        if kept.size == 0:
            raise InvalidArgumentError(f"No sample values lie in [{lower}, {upper}]")
        if kept.size < arr.size:
            log.debug(
                "Dropped %d sample values outside [%s, %s]", arr.size - kept.size, lower, upper
            )

        n = kept.size
        positions = (np.arange(1, n + 1) - 0.3) / (n + 0.4)

        self._values = _readonly(np.concatenate(([lower], kept, [upper])))
        self._cumulative = _readonly(np.concatenate(([0.0], positions, [1.0])))
        self._support = support
        self._analytical = {
            CharacteristicName.CDF: AnalyticalComputation(
                target=CharacteristicName.CDF, func=self._cdf
            ),
            CharacteristicName.PPF: AnalyticalComputation(
                target=CharacteristicName.PPF, func=self._ppf
            ),
        }

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateContinuous

    @property
    def values(self) -> NumericArray:
        """Table values: ``lower``, the sorted retained sample, ``upper``."""
        return self._values

    @property
    def cumulative(self) -> NumericArray:
        """Cumulative probabilities aligned with :attr:`values`."""
        return self._cumulative

    def _cdf(self, x: Any, **_: Any) -> Any:
        return np.interp(x, self._values, self._cumulative, left=0.0, right=1.0)

    def _ppf(self, p: Any, **_: Any) -> Any:
        return self._values[_table_index(self._cumulative, p)]


class EmpiricalDiscreteDistribution[T](_EmpiricalBase):
    """
    Discrete distribution over the positions of a sorted sample.

    The sample is sorted once at construction. Position ``i`` carries the
    relative frequency of ``values[i]`` in the whole sample (:attr:`masses`).
    The running sum of these masses, normalized so that its last entry is
    exactly 1, is the cumulative table (:attr:`cumulative`) that ``quantile``
    inverts. ``pmf(v)`` is the resulting probability of drawing ``v``; it
    equals the relative frequency when all sample values are distinct. Equal
    values are adjacent in the table, so ``quantile(p)`` is the smallest value
    whose ``cdf`` reaches ``p``.

    Parameters
    ----------
    sample : Sequence[T]
        Sample of comparable, hashable values.

    Raises
    ------
    InvalidArgumentError
        If ``sample`` is empty.
    """

    def __init__(self, sample: Sequence[T]) -> None:
        values = sorted(sample)
        if not values:
            raise InvalidArgumentError("EmpiricalDiscreteDistribution requires a non-empty sample")

        n = len(values)
        frequencies = Counter(values)
        masses = np.array([frequencies[v] / n for v in values], dtype=np.float64)
        running = np.cumsum(masses)

        self._values: list[T] = values
        self._masses = _readonly(masses)
        self._cumulative = _readonly(running / running[-1])

        weights: Counter[T] = Counter()
        for v, m in zip(values, masses / running[-1], strict=True):
            weights[v] += float(m)
        self._weights = dict(weights)

        self._support = ExplicitTableDiscreteSupport(frequencies)
        self._analytical = {
            CharacteristicName.PMF: AnalyticalComputation(
                target=CharacteristicName.PMF, func=self._pmf
            ),
            CharacteristicName.PPF: AnalyticalComputation(
                target=CharacteristicName.PPF, func=self._ppf
            ),
        }

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateDiscrete

    @property
    def values(self) -> tuple[T, ...]:
        """The sample in ascending order."""
        return tuple(self._values)

    @property
    def masses(self) -> NumericArray:
        """Relative frequency of each position's value in the sample."""
        return self._masses

    @property
    def cumulative(self) -> NumericArray:
        """Normalized running sum of :attr:`masses`; ends at exactly 1."""
        return self._cumulative

    def _pmf(self, x: Any, **_: Any) -> Any:
        if np.ndim(x) == 0:
            return self._weights.get(np.asarray(x).item(), 0.0)
        arr = np.asarray(x)
        return np.array([self._weights.get(v, 0.0) for v in arr.ravel().tolist()]).reshape(
            arr.shape
        )

    def _ppf(self, p: Any, **_: Any) -> Any:
        idx = _table_index(self._cumulative, p)
        if np.ndim(idx) == 0:
            return self._values[int(idx)]
        return np.asarray([self._values[i] for i in idx.ravel().tolist()]).reshape(idx.shape)


__all__ = [
    "RankedContinuousDistribution",
    "EmpiricalDiscreteDistribution",
]
