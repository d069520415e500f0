"""
Tests for Laplace Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import laplace

from statdist.errors import InvalidArgumentError
from statdist.families.configuration import configure_families_register
from statdist.types import CharacteristicName, ContinuousSupportShape1D, FamilyName

from .base import BaseDistributionTest


class TestLaplaceFamily(BaseDistributionTest):
    """Test suite for Laplace distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.laplace_family = registry.get(FamilyName.LAPLACE)
        self.laplace_dist_example = self.laplace_family(mu=1.0, b=2.0)

    def test_family_properties(self):
        assert self.laplace_family.parametrization_names == ["locScale"]
        assert self.laplace_dist_example.parameters == {"mu": 1.0, "b": 2.0}

    def test_scale_must_be_positive(self):
        with pytest.raises(InvalidArgumentError, match="b > 0"):
            self.laplace_family(mu=0.0, b=0.0)

    def test_moments(self):
        assert self.laplace_dist_example.mean() == pytest.approx(1.0)
        assert self.laplace_dist_example.var() == pytest.approx(8.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-10.0, -1.0, 0.0, 1.0, 2.5, 30.0], laplace.pdf),
            (CharacteristicName.CDF, [-10.0, -1.0, 0.0, 1.0, 2.5, 30.0], laplace.cdf),
            (CharacteristicName.PPF, [0.001, 0.1, 0.5, 0.75, 0.999], laplace.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        x = np.array(test_data)
        result = self.laplace_dist_example.query_method(char_name)(x)
        self.assert_arrays_almost_equal(result, scipy_func(x, loc=1.0, scale=2.0))

    def test_ppf_endpoints(self):
        assert self.laplace_dist_example.quantile(0.0) == float("-inf")
        assert self.laplace_dist_example.quantile(1.0) == float("inf")

    def test_invalid_probability(self):
        with pytest.raises(InvalidArgumentError):
            self.laplace_dist_example.quantile(-0.5)

    def test_support(self):
        assert self.laplace_dist_example.support.shape == ContinuousSupportShape1D.REAL_LINE

    def test_fit_uses_median_and_mean_absolute_deviation(self):
        dist = self.laplace_family.fit([1.0, 2.0, 3.0, 4.0, 10.0])
        assert dist.parameters["mu"] == pytest.approx(3.0)
        assert dist.parameters["b"] == pytest.approx(2.2)

    def test_fit_constant_sample_rejected(self):
        with pytest.raises(InvalidArgumentError, match="b > 0"):
            self.laplace_family.fit([4.0, 4.0])
