"""
Laplace distribution family implementation.

Contains the Laplace family with location/scale parametrization.
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
from statdist.stats import mean, median
from statdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = 1/(2b) * exp(-|x - μ|/b)

    Quantile function:
        Q(p) = μ + b ln(2p)          for p < 1/2
        Q(p) = μ - b ln(2(1 - p))    otherwise

    The data-driven constructor takes μ as the sample median and b as the
    mean absolute deviation from it.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - b: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function
        """
        parameters = cast(_LocScale, parameters)

        b = parameters.b
        return cast(NumericArray, np.exp(-np.abs(x - parameters.mu) / b) / (2 * b))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Laplace distribution."""
        parameters = cast(_LocScale, parameters)

        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.b
        # exp(-|z|) keeps both branches finite
        tail = 0.5 * np.exp(-np.abs(z))
        return cast(NumericArray, np.where(z < 0, tail, 1.0 - tail))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Laplace distribution.

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p; -inf at 0 and inf at 1

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any(~((p >= 0) & (p <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_LocScale, parameters)

        mu, b = parameters.mu, parameters.b
        with np.errstate(divide="ignore"):
            lower = mu + b * np.log(2 * p)
            upper = mu - b * np.log(2 * (1 - p))
        return cast(NumericArray, np.where(p < 0.5, lower, upper))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Laplace distribution."""
        parameters = cast(_LocScale, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Laplace distribution."""
        parameters = cast(_LocScale, parameters)
        return 2 * parameters.b**2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _estimate(data: NumericArray) -> Parametrization:
        m = median(data)
        return _LocScale(mu=m, b=mean(np.abs(data - m)))

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale"],
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
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Laplace distribution.

        Parameters
        ----------
        mu : float
            Location (mean and median)
        b : float
            Scale (diversity)
        """

        mu: float
        b: float

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            return self.b > 0

    ParametricFamilyRegister.register(Laplace)
