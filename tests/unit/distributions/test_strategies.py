from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np
import pytest

from statdist.distributions import (
    AnalyticalComputation,
    DefaultComputationStrategy,
    FittedComputationMethod,
)
from statdist.distributions.fitters import default_conversions
from statdist.distributions.support import ContinuousSupport
from statdist.errors import InvalidArgumentError, NumericalFailureError
from statdist.types import CharacteristicName, Kind, UnivariateContinuous, UnivariateDiscrete
from tests.unit.distributions.test_basic import DistributionTestBase
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


class TestDefaultComputationStrategy(DistributionTestBase):
    def test_analytical_method_returned_as_is(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        method = distr.query_method(self.PPF)
        assert isinstance(method, AnalyticalComputation)
        assert distr.quantile(0.3) == pytest.approx(0.3)

    def test_without_caching_refits_every_time(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        first = distr.query_method(self.PPF)
        second = distr.query_method(self.PPF)
        assert isinstance(first, FittedComputationMethod)
        assert first is not second

    def test_caching_reuses_fitted_method(self) -> None:
        distr = self.make_logistic_cdf_distribution(DefaultComputationStrategy(enable_caching=True))
        first = distr.query_method(self.PPF)
        assert distr.query_method(self.PPF) is first

    def test_cache_is_per_distribution(self) -> None:
        strategy: DefaultComputationStrategy[Any, Any] = DefaultComputationStrategy(
            enable_caching=True
        )
        a = self.make_logistic_cdf_distribution(strategy)
        b = self.make_logistic_cdf_distribution(strategy)
        assert a.query_method(self.PPF) is not b.query_method(self.PPF)

    def test_no_analytical_base_raises(self) -> None:
        distr = StandaloneEuclideanUnivariateDistribution(kind=Kind.CONTINUOUS)
        with pytest.raises(RuntimeError, match="no analytical"):
            distr.cdf(0.0)

    def test_no_conversion_path_raises(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        with pytest.raises(RuntimeError, match="No conversion path"):
            distr.pdf(0.5)


class TestCdfToPpf(DistributionTestBase):
    @pytest.mark.parametrize("q", [0.01, 0.25, 0.5, 0.9, 0.999])
    def test_inverts_logistic_cdf(self, q: float) -> None:
        distr = self.make_logistic_cdf_distribution()
        x = distr.quantile(q)
        assert x == pytest.approx(math.log(q / (1.0 - q)), abs=1e-9)
        assert distr.cdf(x) == pytest.approx(q, abs=1e-10)

    def test_endpoints_map_to_infinities(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        assert distr.quantile(0.0) == -math.inf
        assert distr.quantile(1.0) == math.inf

    @pytest.mark.parametrize("q", [-0.1, 1.5, math.nan])
    def test_probability_outside_unit_interval_raises(self, q: float) -> None:
        distr = self.make_logistic_cdf_distribution()
        with pytest.raises(InvalidArgumentError):
            distr.quantile(q)

    def test_array_argument_evaluated_elementwise(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        qs = np.array([0.25, 0.5, 0.75])
        result = distr.quantile(qs)
        assert result.shape == (3,)
        np.testing.assert_allclose(result, np.log(qs / (1.0 - qs)), atol=1e-9)

    def test_unreachable_level_raises_numerical_failure(self) -> None:
        distr = StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation(target=self.CDF, func=lambda x, **_: 0.0)
            ],
        )
        with pytest.raises(NumericalFailureError):
            distr.quantile(0.5)


    def make_shifted_uniform_cdf_distribution(
        self, support: ContinuousSupport
    ) -> StandaloneEuclideanUnivariateDistribution:
        def cdf(x: float, **_: Any) -> float:
            return min(max(x - 100.0, 0.0), 1.0)

        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[AnalyticalComputation(target=self.CDF, func=cdf)],
            support=support,
        )

    @pytest.mark.parametrize(
        "support",
        [
            ContinuousSupport(100.0, 101.0),
            ContinuousSupport(left=100.0),
            ContinuousSupport(right=101.0),
        ],
    )
    def test_bracket_starts_from_support(self, support: ContinuousSupport) -> None:
        distr = self.make_shifted_uniform_cdf_distribution(support)
        method = distr.computation_strategy.query_method(self.PPF, distr, max_expand=1)
        assert method(0.25) == pytest.approx(100.25, abs=1e-9)

    def test_bracket_from_origin_on_real_line(self) -> None:
        distr = self.make_shifted_uniform_cdf_distribution(ContinuousSupport())
        method = distr.computation_strategy.query_method(self.PPF, distr, max_expand=1)
        with pytest.raises(NumericalFailureError, match="Could not bracket"):
            method(0.25)


class TestPmfConversions(DistributionTestBase):
    @pytest.mark.parametrize(
        "x, expected",
        [(-1.0, 0.0), (0.0, 0.2), (0.5, 0.2), (1.0, 0.7), (2.0, 1.0), (5.0, 1.0)],
    )
    def test_cdf_is_prefix_sum(self, x: float, expected: float) -> None:
        distr = self.make_discrete_point_pmf_distribution()
        assert distr.cdf(x) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "q, expected",
        [(0.0, 0), (0.1, 0), (0.2, 0), (0.21, 1), (0.65, 1), (0.75, 2), (1.0, 2)],
    )
    def test_ppf_is_first_point_reaching_level(self, q: float, expected: int) -> None:
        distr = self.make_discrete_point_pmf_distribution()
        assert distr.quantile(q) == expected

    def test_sampling_yields_support_points(self, rng) -> None:
        distr = self.make_discrete_point_pmf_distribution()
        values = set(distr.sample(200, rng=rng).array[:, 0].tolist())
        assert values <= {0, 1, 2}

    def test_missing_support_raises(self) -> None:
        distr = self.make_discrete_point_pmf_distribution(is_with_support=False)
        with pytest.raises(RuntimeError, match="Discrete support is required"):
            distr.cdf(1.0)

    def test_search_cap_on_infinite_support(self) -> None:
        distr = self.make_unbounded_zero_pmf_distribution()
        method = distr.computation_strategy.query_method(self.PPF, distr, max_iterations=50)
        with pytest.raises(NumericalFailureError):
            method(0.5)


class TestDefaultConversions:
    def test_continuous_conversions(self) -> None:
        targets = [(m.target, tuple(m.sources)) for m in default_conversions(UnivariateContinuous)]
        assert targets == [(CharacteristicName.PPF, (CharacteristicName.CDF,))]

    def test_discrete_conversions(self) -> None:
        targets = {m.target for m in default_conversions(UnivariateDiscrete)}
        assert targets == {CharacteristicName.CDF, CharacteristicName.PPF}

    def test_conversions_fit_into_plain_fitted_methods(self) -> None:
        base = DistributionTestBase()
        continuous = base.make_logistic_cdf_distribution()
        discrete = base.make_discrete_point_pmf_distribution()

        fitted = [m.fit(continuous) for m in default_conversions(UnivariateContinuous)]
        fitted += [m.fit(discrete) for m in default_conversions(UnivariateDiscrete)]

        assert all(isinstance(f, FittedComputationMethod) for f in fitted)
        assert not any(hasattr(f, "__orig_class__") for f in fitted)
