"""
Distribution Interfaces
=======================

- :class:`QuantileDistribution`: the one capability inverse-transform
  sampling needs: ``quantile(p)``.
- :class:`Distribution`: the full interface implemented by parametric
  family members and empirical distributions: type, support, analytical
  characteristics, strategies, plus convenience evaluators.

Notes
-----
- Characteristic evaluators (``pdf``, ``pmf``, ``cdf``, ``quantile``) return a
  Python scalar for a scalar argument and an array for an array argument.
- ``sample`` goes through the distribution's sampling strategy; the default
  strategy uses :func:`~statdist.distributions.sampling.random_variates`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from statdist.distributions.computation import FittedComputationMethod
from statdist.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping

    from statdist.distributions.computation import AnalyticalComputation
    from statdist.distributions.sampling import Sample
    from statdist.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from statdist.distributions.support import Support
    from statdist.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class QuantileDistribution[T](Protocol):
    """Anything that maps a probability in ``[0, 1]`` to a value."""

    def quantile(self, p: float) -> T: ...


def _evaluate(method: Method[Any, Any], value: Any) -> Any:
    if np.ndim(value) == 0:
        return np.asarray(method(value)).item()
    if isinstance(method, FittedComputationMethod):
        arr = np.asarray(value)
        flat = [method(v) for v in arr.ravel().tolist()]
        return np.asarray(flat).reshape(arr.shape)
    return method(np.asarray(value))


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and fitters."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return _evaluate(self.query_method(characteristic_name, **options), value)

    def pdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def pmf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.PMF, x)

    def cdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.CDF, x)

    def quantile(self, p: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.PPF, p)

    def sample(self, n: int, rng: np.random.Generator | None = None, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)


__all__ = [
    "QuantileDistribution",
    "Distribution",
]
