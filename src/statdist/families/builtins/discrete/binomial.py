"""
Binomial distribution family implementation.

Contains the Binomial family parametrized by the number of trials and the
success probability.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, xlog1py, xlogy

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
from statdist.stats import accumulate_until
from statdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in n independent trials, each succeeding with
    probability p. Support is k = 0, 1, ..., n.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1 - p)^(n-k)

    The cumulative distribution sums the mass function from 0; the quantile
    accumulates it from 0 and stops at n.
    """

    def _masses(n: int, p: float, k: NumericArray) -> NumericArray:
        # log space: C(n, k) alone overflows a float once n exceeds about 1030
        k = np.asarray(k, dtype=np.float64)
        log_mass = (
            gammaln(n + 1)
            - gammaln(k + 1)
            - gammaln(n - k + 1)
            + xlogy(k, p)
            + xlog1py(n - k, -p)
        )
        return cast(NumericArray, np.exp(log_mass))

    def pmf(parameters: Parametrization, k: NumericArray) -> NumericArray:
        """
        Probability mass function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        k : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at k, 0 outside 0..n
        """
        parameters = cast(_Trials, parameters)

        n = int(parameters.n)
        arr, mask = integer_mask(k)
        valid = mask & (arr >= 0) & (arr <= n)
        safe_k = np.where(valid, arr, 0.0)
        return cast(NumericArray, np.where(valid, _masses(n, parameters.p, safe_k), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: sum of the mass over 0..floor(x)."""
        parameters = cast(_Trials, parameters)

        n = int(parameters.n)
        running = np.minimum(np.cumsum(_masses(n, parameters.p, np.arange(n + 1))), 1.0)

        x = np.asarray(x, dtype=np.float64)
        index = np.clip(np.floor(np.nan_to_num(x, nan=-1.0, posinf=n, neginf=-1.0)), -1, n)
        total = running[np.maximum(index, 0).astype(np.intp)]
        return cast(NumericArray, np.where(index < 0, 0.0, total))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for binomial distribution.

        Returns
        -------
        NumericArray
            Smallest k with ``P(X <= k) >= q``, never above n

        Raises
        ------
        InvalidArgumentError
            If probability is outside [0, 1]
        """
        q = np.asarray(q, dtype=np.float64)
        if np.any(~((q >= 0) & (q <= 1))):
            raise InvalidArgumentError("Probability must be in [0, 1]")

        parameters = cast(_Trials, parameters)
        n, p = int(parameters.n), parameters.p

        def _mass(k: int) -> float:
            return float(_masses(n, p, k))

        def _quantile(level: float) -> int:
            return accumulate_until(_mass, level, stop=n)

        return lattice_values(np.vectorize(_quantile, otypes=[np.int64])(q))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of binomial distribution."""
        parameters = cast(_Trials, parameters)
        return parameters.n * parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of binomial distribution."""
        parameters = cast(_Trials, parameters)
        return parameters.n * parameters.p * (1.0 - parameters.p)

    def _support(parameters: Parametrization) -> IntegerDiscreteSupport:
        parameters = cast(_Trials, parameters)
        return IntegerDiscreteSupport(min_k=0, max_k=int(parameters.n))

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["trials"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="trials")
    class _Trials(Parametrization):
        """
        Trials-probability parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Probability of success on each trial
        """

        n: int
        p: float

        @constraint(description="n is a nonnegative integer")
        def check_n_nonnegative_integer(self) -> bool:
            return self.n >= 0 and float(self.n).is_integer()

        @constraint(description="0 <= p <= 1")
        def check_p_is_probability(self) -> bool:
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Binomial)
