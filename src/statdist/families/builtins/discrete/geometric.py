"""
Geometric distribution family implementation.

Contains the Geometric family (number of trials up to and including the
first success) parametrized by the success probability.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

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
from statdist.stats import mean
from statdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution.

    Number of independent trials up to and including the first success,
    each succeeding with probability p. Support is k = 1, 2, 3, ...

    Probability mass function:
        P(X = k) = (1 - p)^(k-1) * p

    Quantile function:
        Q(q) = ceil(ln(1 - q) / ln(1 - p)), at least 1

    The data-driven constructor sets p to the reciprocal of the sample mean.
    """

    def _cdf_at(p: float, k: NumericArray) -> NumericArray:
        with np.errstate(divide="ignore", invalid="ignore"):
            return cast(NumericArray, -np.expm1(k * np.log1p(-p)))

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for geometric distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - p: float (success probability)
        k : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at k, 0 outside k = 1, 2, 3, ...
        """
        parameters = cast(_Success, parameters)

        p = parameters.p
        arr, mask = integer_mask(k)
        valid = mask & (arr >= 1)
        safe_k = np.where(valid, arr, 1.0)
        return cast(NumericArray, np.where(valid, (1.0 - p) ** (safe_k - 1) * p, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``1 - (1 - p)^floor(x)`` for x >= 1."""
        parameters = cast(_Success, parameters)

        x = np.asarray(x, dtype=np.float64)
        above = x >= 1
        safe_x = np.where(above & np.isfinite(x), np.floor(x), 1.0)
        total = np.where(np.isposinf(x), 1.0, _cdf_at(parameters.p, safe_x))
        return cast(NumericArray, np.where(above, total, 0.0))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for geometric distribution.

        The closed form is corrected by one step in either direction so that
        the result is the smallest k with ``cdf(k) >= q`` despite rounding.

        Returns
        -------
        NumericArray
            Quantiles, at least 1; inf for q = 1 when p < 1

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any(~((q >= 0) & (q <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_Success, parameters)
        p = parameters.p

        with np.errstate(divide="ignore", invalid="ignore"):
            k = np.ceil(np.log1p(-q) / np.log1p(-p))
        # nan only for q = 1 with p = 1, where every draw is 1
        k = np.maximum(np.nan_to_num(k, nan=1.0, posinf=np.inf), 1.0)

        finite = np.isfinite(k)
        safe_k = np.where(finite, k, 1.0)
        step_down = finite & (safe_k > 1) & (_cdf_at(p, safe_k - 1) >= q)
        k = np.where(step_down, k - 1, k)
        step_up = finite & (_cdf_at(p, np.where(finite, k, 1.0)) < q)
        k = np.where(step_up, k + 1, k)

        return lattice_values(k)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of geometric distribution."""
        parameters = cast(_Success, parameters)
        return 1.0 / parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of geometric distribution."""
        parameters = cast(_Success, parameters)
        return (1.0 - parameters.p) / parameters.p**2

    def _support(_: Parametrization) -> IntegerDiscreteSupport:
        return IntegerDiscreteSupport(min_k=1)

    def _estimate(data: NumericArray) -> Parametrization:
        m = mean(data)
        if m <= 0:
            raise InvalidArgumentError("Geometric fit requires a positive sample mean")
        return _Success(p=1.0 / m)

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["success"],
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
    Geometric.__doc__ = GEOMETRIC_DOC

    @parametrization(family=Geometric, name="success")
    class _Success(Parametrization):
        """
        Success-probability parametrization of geometric distribution.

        Parameters
        ----------
        p : float
            Probability of success on each trial
        """

        p: float

        @constraint(description="0 < p <= 1")
        def check_p_is_probability(self) -> bool:
            return 0 < self.p <= 1

    ParametricFamilyRegister.register(Geometric)
