"""
Log-normal distribution family implementation.

Contains the LogNormal family parametrized on the log scale by mean and
standard deviation or by mean and variance.
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


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    Log-normal distribution.

    Distribution of exp(Y) for Y ~ Normal(μ, σ). Both parameters are given on
    the log scale.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0

    Quantile function:
        Q(p) = exp(μ + σ√2 * erfinv(2p - 1))

    The data-driven constructor takes the mean and unbiased variance of the
    logarithms of a positive sample.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of log)
            - sigma: float (standard deviation of log)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, 0 for x <= 0
        """
        parameters = cast(_LogMeanStd, parameters)

        x = np.asarray(x, dtype=np.float64)
        positive = x > 0
        safe_x = np.where(positive, x, 1.0)

        sigma = parameters.sigma
        coefficient = 1.0 / (safe_x * sigma * np.sqrt(2 * np.pi))
        exponent = -((np.log(safe_x) - parameters.mu) ** 2) / (2 * sigma**2)
        return cast(NumericArray, np.where(positive, coefficient * np.exp(exponent), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for log-normal distribution.

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x, 0 for x <= 0
        """
        parameters = cast(_LogMeanStd, parameters)

        x = np.asarray(x, dtype=np.float64)
        positive = x > 0
        safe_x = np.where(positive, x, 1.0)

        z = (np.log(safe_x) - parameters.mu) / (parameters.sigma * np.sqrt(2))
        return cast(NumericArray, np.where(positive, 0.5 * (1 + erf(z)), 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of log)
            - sigma: float (standard deviation of log)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p:
            - For p = 0: returns 0.0
            - For p = 1: returns np.inf

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any(~((p >= 0) & (p <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_LogMeanStd, parameters)

        return cast(
            NumericArray,
            np.exp(parameters.mu + parameters.sigma * np.sqrt(2) * _erfinv(2 * p - 1)),
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of log-normal distribution."""
        parameters = cast(_LogMeanStd, parameters)
        return math.exp(parameters.mu + parameters.sigma**2 / 2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of log-normal distribution."""
        parameters = cast(_LogMeanStd, parameters)
        s2 = parameters.sigma**2
        return math.expm1(s2) * math.exp(2 * parameters.mu + s2)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    def _estimate(data: NumericArray) -> Parametrization:
        if np.any(data <= 0):
            raise InvalidArgumentError("LogNormal fit requires strictly positive data")
        log_data = np.log(data)
        return _LogMeanStd(mu=mean(log_data), sigma=math.sqrt(variance(log_data)))

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["logMeanStd", "logMeanVar"],
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
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="logMeanStd")
    class _LogMeanStd(Parametrization):
        """
        Log-scale mean and standard deviation.

        Parameters
        ----------
        mu : float
            Mean of ln(X)
        sigma : float
            Standard deviation of ln(X)
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=LogNormal, name="logMeanVar")
    class _LogMeanVar(Parametrization):
        """
        Log-scale mean and variance.

        Parameters
        ----------
        mu : float
            Mean of ln(X)
        var : float
            Variance of ln(X)
        """

        mu: float
        var: float

        @constraint(description="var > 0")
        def check_var_positive(self) -> bool:
            return self.var > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _LogMeanStd(mu=self.mu, sigma=math.sqrt(self.var))

    ParametricFamilyRegister.register(LogNormal)
