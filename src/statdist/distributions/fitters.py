"""
Characteristic Conversions
==========================

Fitters that build a missing characteristic from an analytical one:

- ``cdf -> ppf`` for univariate continuous distributions (bracket expansion
  followed by bisection);
- ``pmf -> cdf`` for univariate discrete distributions (prefix sum over the
  discrete support);
- ``pmf -> ppf`` for univariate discrete distributions (incremental search
  over the discrete support).

All fitted callables are scalar (``float -> value``). The distribution
evaluators vectorize them element-wise when given arrays.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from mypy_extensions import KwArg

from statdist.distributions.computation import ComputationMethod, FittedComputationMethod
from statdist.distributions.support import ContinuousSupport, DiscreteSupport
from statdist.errors import InvalidArgumentError, NumericalFailureError
from statdist.stats.numeric import SEARCH_MAX_ITERATIONS
from statdist.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    UnivariateContinuous,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from statdist.distributions.distribution import Distribution
    from statdist.types import DistributionType, GenericCharacteristicName, ScalarFunc


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> ScalarFunc:
    """Scalar view of an analytical characteristic of ``distribution``."""
    fn = distribution.analytical_computations[name]

    def _wrap(x: float) -> float:
        return float(fn(x))

    return _wrap


def _check_probability(q: float) -> None:
    if not 0.0 <= q <= 1.0:
        raise InvalidArgumentError(f"Probability must be in [0, 1], got {q!r}")


def _ppf_bisect_from_cdf(
    cdf: ScalarFunc,
    *,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
    max_iter: int = 200,
) -> ScalarFunc:
    """
    Build a scalar ``ppf`` from a scalar ``cdf``.

    The bracket ``[L, R]`` around ``x0`` grows geometrically until
    ``cdf(L) < q <= cdf(R)``; bisection then shrinks it to ``x_tol``
    (relative to the bracket magnitude), returning the left-continuous
    inverse ``inf {x : cdf(x) >= q}``.

    Notes
    -----
    ``q = 0`` maps to ``-inf`` and ``q = 1`` maps to ``+inf``.
    """

    def _ppf(q: float) -> float:
        _check_probability(q)
        if q == 0.0:
            return -math.inf
        if q == 1.0:
            return math.inf

        step = init_step
        L, R = x0 - step, x0 + step
        for _ in range(max_expand):
            left_ok = cdf(L) < q
            right_ok = cdf(R) >= q
            if left_ok and right_ok:
                break
            step *= expand_factor
            if not left_ok:
                L -= step
            if not right_ok:
                R += step
        else:
            raise NumericalFailureError(
                f"Could not bracket q={q!r} within {max_expand} expansions"
            )

        for _ in range(max_iter):
            if R - L <= x_tol * (1.0 + max(abs(L), abs(R))):
                break
            M = 0.5 * (L + R)
            if cdf(M) >= q:
                R = M
            else:
                L = M
        return R

    return _ppf


def _initial_point(distribution: Distribution) -> float:
    """Start of the bracket search; inside the support when it has a finite end."""
    support = distribution.support
    if not isinstance(support, ContinuousSupport):
        return 0.0

    shape = support.shape
    if shape is ContinuousSupportShape1D.BOUNDED_INTERVAL:
        return 0.5 * (support.left + support.right)
    if shape in (ContinuousSupportShape1D.SINGLE_POINT, ContinuousSupportShape1D.RAY_RIGHT):
        return support.left
    if shape is ContinuousSupportShape1D.RAY_LEFT:
        return support.right
    return 0.0


def fit_cdf_to_ppf_1C(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[float, float]:
    """
    Fit ``ppf`` by numerically inverting an analytical ``cdf``.

    Parameters
    ----------
    distribution : Distribution
    **options
        Forwarded to the bracketing search (``x0``, ``init_step``,
        ``expand_factor``, ``max_expand``, ``x_tol``, ``max_iter``). Without
        ``x0`` the search starts from the support: the midpoint of a bounded
        interval, or the finite end of a ray.
    """
    options.setdefault("x0", _initial_point(distribution))
    ppf_func = _ppf_bisect_from_cdf(_resolve(distribution, CharacteristicName.CDF), **options)

    def _ppf(q: float, **kwargs: Any) -> float:
        return ppf_func(float(q))

    return FittedComputationMethod(
        target=CharacteristicName.PPF,
        sources=[CharacteristicName.CDF],
        func=cast(Callable[[float, KwArg(Any)], float], _ppf),
    )


def _discrete_support(distribution: Distribution, target: str) -> DiscreteSupport:
    support = distribution.support
    if support is None or not isinstance(support, DiscreteSupport):
        raise RuntimeError(f"Discrete support is required for pmf->{target}.")
    return support


def fit_pmf_to_cdf_1D(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[float, float]:
    """
    Fit ``cdf`` as the prefix sum of ``pmf`` over support points ``k <= x``.

    Requires a left-bounded discrete support.
    """
    support = _discrete_support(distribution, "cdf")
    pmf_func = _resolve(distribution, CharacteristicName.PMF)

    def _cdf(x: float, **kwargs: Any) -> float:
        s = 0.0
        for k in support.iter_leq(x):
            s += pmf_func(k)
        return float(np.clip(s, 0.0, 1.0))

    return FittedComputationMethod(
        target=CharacteristicName.CDF,
        sources=[CharacteristicName.PMF],
        func=cast(Callable[[float, KwArg(Any)], float], _cdf),
    )


def fit_pmf_to_ppf_1D(
    distribution: Distribution, /, max_iterations: int = SEARCH_MAX_ITERATIONS, **_: Any
) -> FittedComputationMethod[float, Any]:
    """
    Fit ``ppf`` as the first support point whose cumulative mass reaches ``q``.

    On a finite support the last point is returned when rounding keeps the
    total mass below ``q``; on an infinite support the search stops with
    :class:`~statdist.errors.NumericalFailureError` after ``max_iterations``
    points.
    """
    support = _discrete_support(distribution, "ppf")
    pmf_func = _resolve(distribution, CharacteristicName.PMF)

    def _ppf(q: float, **kwargs: Any) -> Any:
        q = float(q)
        _check_probability(q)
        total = 0.0
        last = None
        for i, k in enumerate(support.iter_points()):
            if i >= max_iterations:
                raise NumericalFailureError(
                    f"Cumulative mass {total!r} did not reach {q!r} within "
                    f"{max_iterations} support points"
                )
            total += pmf_func(k)
            last = k
            if total >= q:
                return k
        if last is None:
            raise RuntimeError("Discrete support is empty.")
        return last

    return FittedComputationMethod(
        target=CharacteristicName.PPF,
        sources=[CharacteristicName.PMF],
        func=cast(Callable[[float, KwArg(Any)], Any], _ppf),
    )


_DEFAULT_CONVERSIONS: dict[DistributionType, tuple[ComputationMethod[Any, Any], ...]] = {
    UnivariateContinuous: (
        ComputationMethod(
            target=CharacteristicName.PPF,
            sources=[CharacteristicName.CDF],
            fitter=fit_cdf_to_ppf_1C,
        ),
    ),
    UnivariateDiscrete: (
        ComputationMethod(
            target=CharacteristicName.CDF,
            sources=[CharacteristicName.PMF],
            fitter=fit_pmf_to_cdf_1D,
        ),
        ComputationMethod(
            target=CharacteristicName.PPF,
            sources=[CharacteristicName.PMF],
            fitter=fit_pmf_to_ppf_1D,
        ),
    ),
}


def default_conversions(
    distribution_type: DistributionType,
) -> tuple[ComputationMethod[Any, Any], ...]:
    """Conversions available for ``distribution_type`` (empty if none)."""
    return _DEFAULT_CONVERSIONS.get(distribution_type, ())


__all__ = [
    "fit_cdf_to_ppf_1C",
    "fit_pmf_to_cdf_1D",
    "fit_pmf_to_ppf_1D",
    "default_conversions",
]
