"""
Weibull distribution family implementation.

Contains the Weibull family with scale/shape parametrization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gamma

from statdist.distributions.support import ContinuousSupport
from statdist.errors import InvalidArgumentError
from statdist.families.parametric_family import ParametricFamily
from statdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statdist.families.registry import ParametricFamilyRegister
from statdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution.

    Probability density function (scale λ, shape k):
        f(x) = k/λ * (x/λ)^(k-1) * exp(-(x/λ)^k) for x ≥ 0

    Quantile function:
        Q(p) = λ * (-ln(1 - p))^(1/k)
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Weibull distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - scale: float (λ)
            - shape: float (k)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, 0 for x < 0
        """
        parameters = cast(_ScaleShape, parameters)

        x = np.asarray(x, dtype=np.float64)
        scale, shape = parameters.scale, parameters.shape
        z = np.maximum(x, 0.0) / scale
        with np.errstate(divide="ignore"):
            density = shape / scale * z ** (shape - 1) * np.exp(-(z**shape))
        return cast(NumericArray, np.where(x >= 0, density, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Weibull distribution."""
        parameters = cast(_ScaleShape, parameters)

        x = np.asarray(x, dtype=np.float64)
        z = np.maximum(x, 0.0) / parameters.scale
        return cast(NumericArray, -np.expm1(-(z**parameters.shape)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Weibull distribution.

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p; 0 at 0 and inf at 1

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any(~((p >= 0) & (p <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_ScaleShape, parameters)

        with np.errstate(divide="ignore"):
            return cast(
                NumericArray,
                parameters.scale * (-np.log1p(-p)) ** (1.0 / parameters.shape),
            )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Weibull distribution."""
        parameters = cast(_ScaleShape, parameters)
        return parameters.scale * float(gamma(1 + 1 / parameters.shape))

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Weibull distribution."""
        parameters = cast(_ScaleShape, parameters)
        g1 = float(gamma(1 + 1 / parameters.shape))
        g2 = float(gamma(1 + 2 / parameters.shape))
        return parameters.scale**2 * (g2 - g1 * g1)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scaleShape"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Scale-shape parametrization of Weibull distribution.

        Parameters
        ----------
        scale : float
            Scale parameter λ
        shape : float
            Shape parameter k
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0 and math.isfinite(self.shape)

    ParametricFamilyRegister.register(Weibull)
