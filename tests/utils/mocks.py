from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from statdist.distributions import (
    AnalyticalComputation,
    ArraySample,
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    Distribution,
    Sample,
    SamplingStrategy,
    Support,
)
from statdist.types import EuclideanDistributionType, GenericCharacteristicName, Kind


class MockSamplingStrategy(SamplingStrategy):
    def sample(
        self,
        n: int,
        distr: Distribution,
        rng: np.random.Generator | None = None,
        **options: Any,
    ) -> Sample:
        return ArraySample(np.zeros((n, 1)))


@dataclass
class RecordingQuantile:
    """Quantile-only distribution that records every probability it receives."""

    seen: list[float] = field(default_factory=list)

    def quantile(self, p: float) -> float:
        self.seen.append(p)
        return 10.0 * p


class StandaloneEuclideanUnivariateDistribution(Distribution):
    """
    Minimal standalone univariate Euclidean distribution.

    Notes
    -----
    - Dimension is fixed to 1.
    - Default strategies are attached: computation and univariate sampling.
    """

    def __init__(
        self,
        kind: Kind,
        analytical_computations: (
            Iterable[AnalyticalComputation[Any, Any]]
            | Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
        ) = (),
        support: Support | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
    ) -> None:
        self._distribution_type = EuclideanDistributionType(kind, 1)
        if isinstance(analytical_computations, Mapping):
            self._analytical = dict(analytical_computations)
        else:
            self._analytical = {ac.target: ac for ac in analytical_computations}
        self._support = support
        self._computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return DefaultSamplingUnivariateStrategy()

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self._computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support
