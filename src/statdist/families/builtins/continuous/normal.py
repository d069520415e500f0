"""
Normal distribution family implementation.

Contains the Normal family with mean/standard deviation, mean/variance and
mean/precision parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf

from statdist.distributions.support import ContinuousSupport
from statdist.errors import InvalidArgumentError
from statdist.families.parametric_family import ParametricFamily
from statdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statdist.families.registry import ParametricFamilyRegister
from statdist.stats import erfinv_extended, mean, variance
from statdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

_erfinv = np.vectorize(erfinv_extended, otypes=[np.float64])


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Symmetric bell-shaped distribution defined by its mean (μ) and standard
    deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Quantile function:
        Q(p) = μ + σ√2 * erfinv(2p - 1)

    The data-driven constructor uses the sample mean and the unbiased sample
    variance.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_MeanStd, parameters)

        sigma = parameters.sigma
        mu = parameters.mu

        coefficient = 1.0 / (sigma * np.sqrt(2 * np.pi))
        exponent = -((x - mu) ** 2) / (2 * sigma**2)

        return cast(NumericArray, coefficient * np.exp(exponent))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for normal distribution.

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mu) / (parameters.sigma * np.sqrt(2))
        return cast(NumericArray, 0.5 * (1 + erf(z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for normal distribution.

        The inverse error function is evaluated by Newton iteration
        (:func:`statdist.stats.erfinv`), so the result satisfies
        ``|cdf(ppf(p)) - p| <= 5e-8``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any(~((p >= 0) & (p <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_MeanStd, parameters)

        return cast(
            NumericArray,
            parameters.mu + parameters.sigma * np.sqrt(2) * _erfinv(2 * p - 1),
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.sigma**2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _estimate(data: NumericArray) -> Parametrization:
        return _MeanStd(mu=mean(data), sigma=math.sqrt(variance(data)))

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanVar", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        estimator=_estimate,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Normal, name="meanVar")
    class _MeanVar(Parametrization):
        """
        Mean-variance parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        var : float
            Variance of the distribution
        """

        mu: float
        var: float

        @constraint(description="var > 0")
        def check_var_positive(self) -> bool:
            return self.var > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=math.sqrt(self.var))

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            sigma = math.sqrt(1 / self.tau)
            return _MeanStd(mu=self.mu, sigma=sigma)

    ParametricFamilyRegister.register(Normal)
