"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from statdist.distributions.support import ContinuousSupport
from statdist.errors import InvalidArgumentError
from statdist.families.parametric_family import ParametricFamily
from statdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statdist.families.registry import ParametricFamilyRegister
from statdist.stats import mean
from statdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Time between events of a Poisson process, with rate λ or scale β = 1/λ.

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0

    Quantile function:
        Q(p) = -ln(1 - p) / λ

    The data-driven constructor sets λ to the reciprocal of the sample mean.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, 0 for x < 0
        """
        parameters = cast(_Rate, parameters)

        lambda_ = parameters.lambda_
        x = np.asarray(x, dtype=np.float64)
        return np.where(x >= 0, lambda_ * np.exp(-lambda_ * np.maximum(x, 0.0)), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for exponential distribution."""
        parameters = cast(_Rate, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, -np.expm1(-parameters.lambda_ * np.maximum(x, 0.0)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for exponential distribution.

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

        parameters = cast(_Rate, parameters)

        with np.errstate(divide="ignore"):
            return cast(NumericArray, -np.log1p(-p) / parameters.lambda_)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / (parameters.lambda_**2)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _estimate(data: NumericArray) -> Parametrization:
        m = mean(data)
        if m <= 0:
            raise InvalidArgumentError("Exponential fit requires a positive sample mean")
        return _Rate(lambda_=1.0 / m)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
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
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ) of the distribution
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(Exponential)
