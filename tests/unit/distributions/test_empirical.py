from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from statdist.distributions import (
    EmpiricalDiscreteDistribution,
    RankedContinuousDistribution,
    random_variates,
)
from statdist.errors import InvalidArgumentError
from statdist.types import ContinuousSupportShape1D, UnivariateContinuous, UnivariateDiscrete


class TestRankedContinuousDistribution:
    @pytest.fixture
    def distr(self) -> RankedContinuousDistribution:
        return RankedContinuousDistribution([5.0, 1.0, 3.0, 10.0, -2.0], 0.0, 6.0)

    def test_table_values(self, distr: RankedContinuousDistribution) -> None:
        np.testing.assert_array_equal(distr.values, np.array([0.0, 1.0, 3.0, 5.0, 6.0]))

    def test_plotting_positions(self, distr: RankedContinuousDistribution) -> None:
        expected = np.array([0.0, 0.7 / 3.4, 1.7 / 3.4, 2.7 / 3.4, 1.0])
        np.testing.assert_allclose(distr.cumulative, expected)
        assert distr.cumulative[-1] == 1.0
        assert np.all(np.diff(distr.cumulative) >= 0)

    def test_tables_are_read_only(self, distr: RankedContinuousDistribution) -> None:
        with pytest.raises(ValueError):
            distr.values[0] = 100.0

    @pytest.mark.parametrize(
        "p, expected",
        [(0.0, 0.0), (0.1, 1.0), (0.3, 3.0), (0.6, 5.0), (0.9, 6.0), (1.0, 6.0)],
    )
    def test_quantile_returns_table_values(
        self, distr: RankedContinuousDistribution, p: float, expected: float
    ) -> None:
        assert distr.quantile(p) == expected

    def test_quantile_array(self, distr: RankedContinuousDistribution) -> None:
        result = distr.quantile(np.array([0.1, 0.6]))
        np.testing.assert_array_equal(result, np.array([1.0, 5.0]))

    @pytest.mark.parametrize("p", [-0.01, 1.2])
    def test_quantile_outside_unit_interval_raises(
        self, distr: RankedContinuousDistribution, p: float
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            distr.quantile(p)

    def test_cdf_interpolates_table(self, distr: RankedContinuousDistribution) -> None:
        assert distr.cdf(-1.0) == 0.0
        assert distr.cdf(7.0) == 1.0
        assert distr.cdf(3.0) == pytest.approx(0.5)
        assert distr.cdf(2.0) == pytest.approx(0.5 * (0.7 / 3.4 + 0.5))

    def test_type_and_support(self, distr: RankedContinuousDistribution) -> None:
        assert distr.distribution_type == UnivariateContinuous
        assert 0.0 in distr.support
        assert 6.0 in distr.support
        assert 6.5 not in distr.support

    def test_draws_stay_in_range(self, distr: RankedContinuousDistribution, rng) -> None:
        values = random_variates(distr, 300, rng)
        assert set(values) <= {0.0, 1.0, 3.0, 5.0, 6.0}

    def test_sample_shape(self, distr: RankedContinuousDistribution, rng) -> None:
        assert distr.sample(25, rng=rng).shape == (25, 1)

    def test_inverted_range_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            RankedContinuousDistribution([1.0, 2.0], 3.0, 0.0)

    def test_single_point_range(self) -> None:
        distr = RankedContinuousDistribution([2.0, 2.0, 5.0], 2.0, 2.0)
        assert distr.support.shape == ContinuousSupportShape1D.SINGLE_POINT
        assert distr.quantile(0.5) == 2.0
        assert distr.values.tolist() == [2.0, 2.0, 2.0, 2.0]

    def test_no_values_in_range_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            RankedContinuousDistribution([10.0, 20.0], 0.0, 1.0)

    def test_source_sample_is_copied(self) -> None:
        sample = [2.0, 1.0]
        distr = RankedContinuousDistribution(sample, 0.0, 3.0)
        sample.append(2.5)
        assert distr.values.tolist() == [0.0, 1.0, 2.0, 3.0]


class TestEmpiricalDiscreteDistribution:
    def test_distinct_values_have_equal_mass(self) -> None:
        distr = EmpiricalDiscreteDistribution([1, 2, 3, 4])
        np.testing.assert_allclose(distr.cumulative, [0.25, 0.5, 0.75, 1.0])
        assert distr.pmf(2) == pytest.approx(0.25)
        assert distr.quantile(0.25) == 1
        assert distr.quantile(0.26) == 2
        assert distr.quantile(1.0) == 4

    def test_masses_are_relative_frequencies(self) -> None:
        distr = EmpiricalDiscreteDistribution(list("abacab"))
        np.testing.assert_allclose(distr.masses, [0.5, 0.5, 0.5, 1 / 3, 1 / 3, 1 / 6])
        assert distr.cumulative[-1] == 1.0

    @pytest.mark.parametrize(
        "p, expected",
        [(0.0, "a"), (0.1, "a"), (0.3, "a"), (0.6, "a"), (0.7, "b"), (0.8, "b"), (0.95, "c")],
    )
    def test_quantile_over_characters(self, p: float, expected: str) -> None:
        distr = EmpiricalDiscreteDistribution(list("abacab"))
        assert distr.quantile(p) == expected

    def test_pmf_is_draw_probability(self) -> None:
        distr = EmpiricalDiscreteDistribution(list("abacab"))
        assert distr.pmf("a") == pytest.approx(1.5 / (7 / 3))
        assert distr.pmf("b") == pytest.approx((2 / 3) / (7 / 3))
        assert distr.pmf("c") == pytest.approx((1 / 6) / (7 / 3))
        assert distr.pmf("z") == 0.0
        assert sum(distr.pmf(v) for v in "abc") == pytest.approx(1.0)

    def test_pmf_array(self) -> None:
        distr = EmpiricalDiscreteDistribution([1, 2, 2, 3])
        np.testing.assert_allclose(distr.pmf(np.array([1, 2, 3, 4])), [1 / 6, 2 / 3, 1 / 6, 0.0])

    def test_cdf_from_pmf(self) -> None:
        distr = EmpiricalDiscreteDistribution([1, 2, 2, 3])
        assert distr.cdf(0) == 0.0
        assert distr.cdf(2) == pytest.approx(5 / 6)
        assert distr.cdf(3) == pytest.approx(1.0)

    def test_draws_come_from_sample(self, rng) -> None:
        distr = EmpiricalDiscreteDistribution(list("xyz"))
        assert set(random_variates(distr, 100, rng)) <= {"x", "y", "z"}

    def test_sample_of_characters(self, rng) -> None:
        sample = EmpiricalDiscreteDistribution(list("xyz")).sample(10, rng=rng)
        assert sample.shape == (10, 1)
        assert set(sample.array[:, 0].tolist()) <= {"x", "y", "z"}

    def test_values_are_sorted(self) -> None:
        assert EmpiricalDiscreteDistribution([3, 1, 2]).values == (1, 2, 3)

    def test_source_sample_is_copied(self) -> None:
        sample = [2, 1]
        distr = EmpiricalDiscreteDistribution(sample)
        sample.append(0)
        assert distr.values == (1, 2)

    def test_unsorted_sample_quantile_is_smallest_value_reaching_p(self) -> None:
        distr = EmpiricalDiscreteDistribution(["b", "a"])
        assert distr.quantile(0.3) == "a"
        assert distr.quantile(0.5) == "a"
        assert distr.quantile(0.51) == "b"

    @pytest.mark.parametrize("sample", [[3, 1, 2, 1, 5, 3, 3], list("zebra"), [7, 7, 2]])
    def test_quantile_agrees_with_cdf(self, sample: list) -> None:
        distr = EmpiricalDiscreteDistribution(sample)
        support = sorted(set(sample))
        for p in np.linspace(0.0, 1.0, 41):
            expected = next(v for v in support if distr.cdf(v) >= p - 1e-12)
            assert distr.quantile(p) == expected

    def test_type(self) -> None:
        assert EmpiricalDiscreteDistribution([0]).distribution_type == UnivariateDiscrete

    def test_empty_sample_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            EmpiricalDiscreteDistribution([])

    def test_quantile_outside_unit_interval_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            EmpiricalDiscreteDistribution([1, 2]).quantile(1.5)
