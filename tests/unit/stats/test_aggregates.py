from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from statdist.errors import InvalidArgumentError
from statdist.stats import lsr, mean, median, pvariance, standard_deviation, variance

SAMPLE = [3, 3, 5, 9, 11]


class TestAggregates:
    def test_mean(self):
        assert mean(SAMPLE) == pytest.approx(6.2)

    def test_variance(self):
        assert variance(SAMPLE) == pytest.approx(13.2)

    def test_standard_deviation(self):
        assert standard_deviation(SAMPLE) == pytest.approx(3.63318, abs=1e-5)

    def test_pvariance(self):
        assert pvariance(SAMPLE) == pytest.approx(10.56)

    @pytest.mark.parametrize(
        "data, expected",
        [(SAMPLE, 5.0), ([3, 3, 5, 9], 4.0), ([7], 7.0), ([2.5, 1.5], 2.0)],
    )
    def test_median(self, data, expected):
        assert median(data) == expected

    def test_accepts_arrays_and_generators(self):
        assert mean(np.array(SAMPLE)) == pytest.approx(6.2)
        assert mean(x for x in SAMPLE) == pytest.approx(6.2)

    @pytest.mark.parametrize("func", [mean, median, pvariance])
    def test_empty_sample_rejected(self, func):
        with pytest.raises(InvalidArgumentError, match="non-empty"):
            func([])

    @pytest.mark.parametrize("func", [variance, standard_deviation])
    def test_single_value_rejected(self, func):
        with pytest.raises(InvalidArgumentError, match="at least 2"):
            func([1.0])

    def test_two_dimensional_sample_rejected(self):
        with pytest.raises(InvalidArgumentError, match="one-dimensional"):
            mean([[1.0, 2.0], [3.0, 4.0]])


class TestLeastSquares:
    def test_regression_line(self):
        slope, intercept = lsr(
            [0.2, 0.3, 0.5, 0.7, 0.8, 0.9],
            [0.3, 0.4, 0.5, 0.6, 0.7, 0.8],
        )
        assert slope == pytest.approx(0.661017, abs=1e-6)
        assert intercept == pytest.approx(0.175424, abs=1e-6)

    def test_exact_line(self):
        slope, intercept = lsr([0, 1, 2, 3], [1, 3, 5, 7])
        assert slope == pytest.approx(2.0)
        assert intercept == pytest.approx(1.0)

    def test_unequal_lengths_rejected(self):
        with pytest.raises(InvalidArgumentError, match="equal size"):
            lsr([1, 2, 3], [1, 2])

    def test_too_few_points_rejected(self):
        with pytest.raises(InvalidArgumentError):
            lsr([1], [1])

    def test_constant_x_rejected(self):
        with pytest.raises(InvalidArgumentError, match="distinct"):
            lsr([2, 2, 2], [1, 2, 3])
