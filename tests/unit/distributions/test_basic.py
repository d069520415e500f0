from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from typing import Any, cast

from mypy_extensions import KwArg

from statdist.distributions.computation import AnalyticalComputation
from statdist.distributions.strategies import DefaultComputationStrategy
from statdist.distributions.support import (
    ContinuousSupport,
    ExplicitTableDiscreteSupport,
    IntegerDiscreteSupport,
)
from statdist.types import Kind
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


class DistributionTestBase:
    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    PMF = "pmf"

    def make_uniform_ppf_distribution(self) -> StandaloneEuclideanUnivariateDistribution:
        ppf_func = cast(Callable[[float, KwArg(Any)], float], lambda q, **kwargs: q)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation(target=self.PPF, func=ppf_func),
            ],
            support=ContinuousSupport(0, 1),
        )

    def make_logistic_cdf_distribution(
        self, computation_strategy: DefaultComputationStrategy[Any, Any] | None = None
    ) -> StandaloneEuclideanUnivariateDistribution:
        def logistic_cdf(x: float, **_: Any) -> float:
            return 1.0 / (1.0 + math.exp(-x))

        logistic_cdf_func = cast(Callable[[float, KwArg(Any)], float], logistic_cdf)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation(target=self.CDF, func=logistic_cdf_func),
            ],
            support=ContinuousSupport(),
            computation_strategy=computation_strategy,
        )

    def make_discrete_point_pmf_distribution(
        self, is_with_support: bool = True
    ) -> StandaloneEuclideanUnivariateDistribution:
        masses = {0.0: 0.2, 1.0: 0.5, 2.0: 0.3}

        def pmf(x: float, **_: Any) -> float:
            return masses.get(float(x), 0.0)

        pmf_func = cast(Callable[[float, KwArg(Any)], float], pmf)

        support = ExplicitTableDiscreteSupport([0, 1, 2]) if is_with_support else None

        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.DISCRETE,
            analytical_computations=[
                AnalyticalComputation(target=self.PMF, func=pmf_func),
            ],
            support=support,
        )

    def make_unbounded_zero_pmf_distribution(self) -> StandaloneEuclideanUnivariateDistribution:
        pmf_func = cast(Callable[[float, KwArg(Any)], float], lambda k, **kwargs: 0.0)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.DISCRETE,
            analytical_computations=[
                AnalyticalComputation(target=self.PMF, func=pmf_func),
            ],
            support=IntegerDiscreteSupport(min_k=0),
        )
