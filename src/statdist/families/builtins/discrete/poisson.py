"""
Poisson distribution family implementation.

Contains the Poisson family parametrized by its mean.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaincc, gammaln

from statdist.distributions.support import IntegerDiscreteSupport
from statdist.errors import InvalidArgumentError
from statdist.families.builtins.discrete._lattice import integer_mask, lattice_values
from statdist.families.parametric_family import ParametricFamily
from statdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statdist.families.registry import ParametricFamilyRegister
from statdist.stats import accumulate_until, mean
from statdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at
    a constant mean rate μ.

    Probability mass function:
        P(X = k) = exp(k ln μ - μ - ln Γ(k + 1)) for k = 0, 1, 2, ...

    The quantile is found by accumulating the mass function from 0 until the
    running total reaches q; q = 1 maps to inf. The data-driven constructor
    takes μ as the sample mean.
    """

    def _pmf_at(mu: float, k: int) -> float:
        return math.exp(k * math.log(mu) - mu - math.lgamma(k + 1))

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
        k : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at k, 0 for negative or non-integer k
        """
        parameters = cast(_Mean, parameters)

        mu = parameters.mu
        arr, mask = integer_mask(k)
        valid = mask & (arr >= 0)
        safe_k = np.where(valid, arr, 0.0)
        mass = np.exp(safe_k * np.log(mu) - mu - gammaln(safe_k + 1))
        return cast(NumericArray, np.where(valid, mass, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Poisson distribution.

        ``P(X <= x)`` is the regularized upper incomplete gamma function
        ``Q(floor(x) + 1, μ)``.
        """
        parameters = cast(_Mean, parameters)

        x = np.asarray(x, dtype=np.float64)
        finite = np.isfinite(x) & (x >= 0)
        safe_x = np.where(finite, x, 0.0)
        total = gammaincc(np.floor(safe_x) + 1, parameters.mu)
        return cast(NumericArray, np.where(finite, total, np.where(x > 0, 1.0, 0.0)))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Poisson distribution.

        Returns
        -------
        NumericArray
            Smallest k with ``P(X <= k) >= q``; inf for q = 1

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        NumericalFailureError
            If the running total does not reach q within the search cap
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any(~((q >= 0) & (q <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_Mean, parameters)
        mu = parameters.mu

        def _quantile(level: float) -> float:
            if level == 1.0:
                return math.inf
            return float(accumulate_until(lambda k: _pmf_at(mu, k), level))

        return lattice_values(np.vectorize(_quantile, otypes=[np.float64])(q))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution."""
        parameters = cast(_Mean, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution."""
        parameters = cast(_Mean, parameters)
        return parameters.mu

    def _support(_: Parametrization) -> IntegerDiscreteSupport:
        return IntegerDiscreteSupport(min_k=0)

    def _estimate(data: NumericArray) -> Parametrization:
        return _Mean(mu=mean(data))

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["mean"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        estimator=_estimate,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="mean")
    class _Mean(Parametrization):
        """
        Mean parametrization of Poisson distribution.

        Parameters
        ----------
        mu : float
            Mean (and variance) of the distribution
        """

        mu: float

        @constraint(description="mu > 0")
        def check_mu_positive(self) -> bool:
            return self.mu > 0

    ParametricFamilyRegister.register(Poisson)
