from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from statdist.distributions import (
    ArraySample,
    QuantileDistribution,
    random_variate,
    random_variates,
)
from statdist.errors import InvalidArgumentError
from tests.unit.distributions.test_basic import DistributionTestBase
from tests.utils.mocks import RecordingQuantile


class TestInverseTransformSampling:
    def test_quantile_only_object_satisfies_protocol(self) -> None:
        assert isinstance(RecordingQuantile(), QuantileDistribution)

    def test_single_draw_consumes_one_uniform(self) -> None:
        distr = RecordingQuantile()
        rng = np.random.default_rng(7)
        reference = np.random.default_rng(7)

        value = random_variate(distr, rng)

        u = reference.random()
        assert distr.seen == [u]
        assert value == 10.0 * u
        # generator advanced by exactly one draw
        assert rng.random() == reference.random()

    def test_same_seed_same_variates(self) -> None:
        first = random_variates(RecordingQuantile(), 20, np.random.default_rng(123))
        second = random_variates(RecordingQuantile(), 20, np.random.default_rng(123))
        assert first == second

    def test_draws_are_in_order(self) -> None:
        distr = RecordingQuantile()
        reference = np.random.default_rng(99)

        values = random_variates(distr, 5, np.random.default_rng(99))

        expected = [reference.random() for _ in range(5)]
        assert distr.seen == expected
        assert values == [10.0 * u for u in expected]

    def test_uniforms_lie_in_half_open_unit_interval(self) -> None:
        distr = RecordingQuantile()
        random_variates(distr, 500)
        seen = np.array(distr.seen)
        assert ((seen >= 0.0) & (seen < 1.0)).all()

    def test_zero_draws(self) -> None:
        distr = RecordingQuantile()
        assert random_variates(distr, 0) == []
        assert distr.seen == []

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            random_variates(RecordingQuantile(), -1)

    def test_default_generator(self) -> None:
        value = random_variate(RecordingQuantile())
        assert 0.0 <= value < 10.0


class TestSamplingStrategy(DistributionTestBase):
    def test_sample_uniform_ppf_only_shape_bounds_and_mean(self, rng) -> None:
        distr = self.make_uniform_ppf_distribution()

        n = 1000
        sample = distr.sample(n, rng=rng)

        assert sample.shape == (n, 1)
        assert len(sample) == n
        arr = sample.array
        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr < 1.0)).all()
        assert float(arr.mean()) == pytest.approx(0.5, abs=0.1)

    def test_sample_matches_free_routine(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        sample = distr.sample(10, rng=np.random.default_rng(5))
        expected = random_variates(distr, 10, np.random.default_rng(5))

        np.testing.assert_array_equal(sample.array[:, 0], np.array(expected))


class TestArraySample:
    def test_requires_two_dimensional_data(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))

    def test_iteration_yields_rows(self) -> None:
        sample = ArraySample(np.arange(6.0).reshape(3, 2))
        rows = list(sample)
        assert len(rows) == 3
        np.testing.assert_array_equal(rows[1], np.array([2.0, 3.0]))
        assert sample.dimension == 2
