"""
Tests for Weibull Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import weibull_min

from statdist.errors import InvalidArgumentError
from statdist.families.configuration import configure_families_register
from statdist.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestWeibullFamily(BaseDistributionTest):
    """Test suite for Weibull distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.weibull_family = registry.get(FamilyName.WEIBULL)
        self.weibull_dist_example = self.weibull_family(scale=2.0, shape=1.5)

    def test_family_properties(self):
        assert self.weibull_family.parametrization_names == ["scaleShape"]
        assert not self.weibull_family.can_fit

    @pytest.mark.parametrize(
        "params, message",
        [({"scale": 0.0, "shape": 1.0}, "scale > 0"), ({"scale": 1.0, "shape": -1.0}, "shape > 0")],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(InvalidArgumentError, match=message):
            self.weibull_family(**params)

    def test_moments(self):
        expected_mean, expected_var = weibull_min.stats(1.5, scale=2.0, moments="mv")
        assert self.weibull_dist_example.mean() == pytest.approx(float(expected_mean))
        assert self.weibull_dist_example.var() == pytest.approx(float(expected_var))

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 0.5, 1.0, 2.0, 6.0], weibull_min.pdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 0.5, 1.0, 2.0, 6.0], weibull_min.cdf),
            (CharacteristicName.PPF, [0.0, 0.01, 0.3, 0.5, 0.9, 0.999], weibull_min.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        x = np.array(test_data)
        result = self.weibull_dist_example.query_method(char_name)(x)
        self.assert_arrays_almost_equal(result, scipy_func(x, 1.5, scale=2.0))

    def test_ppf_at_one_is_infinite(self):
        assert self.weibull_dist_example.quantile(1.0) == float("inf")

    def test_fit_not_available(self):
        with pytest.raises(NotImplementedError):
            self.weibull_family.fit([1.0, 2.0])
