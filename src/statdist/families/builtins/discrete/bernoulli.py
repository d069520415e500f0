"""
Bernoulli distribution family implementation.

Contains the Bernoulli family parametrized by the success probability.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from statdist.distributions.support import IntegerDiscreteSupport
from statdist.errors import InvalidArgumentError
from statdist.families.builtins.discrete._lattice import lattice_values
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


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    A single trial that succeeds (1) with probability p and fails (0)
    otherwise.

    Probability mass function:
        P(X = 1) = p, P(X = 0) = 1 - p, 0 elsewhere

    Quantile function:
        Q(q) = 0 if q < 1 - p, else 1

    The data-driven constructor takes p as the mean of a 0/1 sample.
    """

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for Bernoulli distribution.

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
            ``p`` at 1, ``1 - p`` at 0 and 0 at every other point
        """
        parameters = cast(_Success, parameters)

        p = parameters.p
        return cast(NumericArray, np.where(k == 1, p, np.where(k == 0, 1.0 - p, 0.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Bernoulli distribution."""
        parameters = cast(_Success, parameters)

        return cast(NumericArray, np.where(x < 0, 0.0, np.where(x < 1, 1.0 - parameters.p, 1.0)))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Bernoulli distribution.

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any(~((q >= 0) & (q <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_Success, parameters)

        return lattice_values(np.where(q < 1.0 - parameters.p, 0, 1))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Bernoulli distribution."""
        parameters = cast(_Success, parameters)
        return parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Bernoulli distribution."""
        parameters = cast(_Success, parameters)
        return parameters.p * (1.0 - parameters.p)

    def _support(_: Parametrization) -> IntegerDiscreteSupport:
        return IntegerDiscreteSupport(min_k=0, max_k=1)

    def _estimate(data: NumericArray) -> Parametrization:
        if not np.all((data == 0) | (data == 1)):
            raise InvalidArgumentError("Bernoulli fit requires a sample of 0/1 outcomes")
        return _Success(p=mean(data))

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
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
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="success")
    class _Success(Parametrization):
        """
        Success-probability parametrization of Bernoulli distribution.

        Parameters
        ----------
        p : float
            Probability of the outcome 1
        """

        p: float

        @constraint(description="0 <= p <= 1")
        def check_p_is_probability(self) -> bool:
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Bernoulli)
