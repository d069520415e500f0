"""
Numeric Kernel
==============

Scalar special-function helpers used by the closed-form distribution
characteristics:

- :func:`factorial`, :func:`choose`: gamma-function based combinatorics;
- :func:`erfinv`: inverse error function on ``(0, 1)`` refined by Newton
  iterations from a Winitzki initial estimate;
- :func:`erfinv_extended`: the same on ``[-1, 1]`` by odd symmetry;
- :func:`accumulate_until`: incremental inversion of a probability mass
  function over the nonnegative integers.

Notes
-----
Every loop in this module is bounded. Running out of iterations raises
:class:`~statdist.errors.NumericalFailureError` instead of returning a
truncated result.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from scipy.special import erf, gamma

from statdist.errors import InvalidArgumentError, NumericalFailureError

if TYPE_CHECKING:
    from collections.abc import Callable

    from statdist.types import Number

log = logging.getLogger(__name__)

ERFINV_EPSILON = 1e-7
"""Default tolerance on ``|erf(x) - y|`` for :func:`erfinv`."""

ERFINV_MAX_ITERATIONS = 100
"""Default Newton iteration cap for :func:`erfinv`."""

SEARCH_MAX_ITERATIONS = 1_000_000
"""Default number of mass terms :func:`accumulate_until` may add."""

_WINITZKI_A = 8.0 * (math.pi - 3.0) / (3.0 * math.pi * (4.0 - math.pi))


def _as_positive_integer(n: Number, name: str) -> int:
    value = float(n)
    if not math.isfinite(value) or not value.is_integer() or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {n!r}")
    return int(value)


def factorial(n: Number) -> float:
    """
    Compute ``n!`` as ``Γ(n + 1)``.

    Parameters
    ----------
    n : int
        Positive integer-like value.

    Returns
    -------
    float
        ``n!``; overflows to ``inf`` for large ``n``.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is not a positive integer (this includes ``n = 0``).
    """
    k = _as_positive_integer(n, "n")
    return float(gamma(k + 1))


def choose(n: Number, k: Number) -> float:
    """
    Binomial coefficient ``C(n, k)`` via :func:`factorial`.

    Every factorial involved must have a positive argument, so ``0 < k < n``.

    Raises
    ------
    InvalidArgumentError
        If ``k >= n`` or either argument is not a positive integer.
    """
    n_int = _as_positive_integer(n, "n")
    k_int = _as_positive_integer(k, "k")
    if k_int >= n_int:
        raise InvalidArgumentError(f"choose(n, k) requires k < n, got n={n_int}, k={k_int}")
    return factorial(n_int) / (factorial(k_int) * factorial(n_int - k_int))


def erfinv(
    y: float,
    epsilon: float = ERFINV_EPSILON,
    max_iterations: int = ERFINV_MAX_ITERATIONS,
) -> float:
    """
    Inverse error function for ``y`` strictly inside ``(0, 1)``.

    Starts from Winitzki's elementary approximation

    .. math::

        x_0 = \\sqrt{\\sqrt{c^2 - 2b/a} - c}, \\quad
        b = \\tfrac{1}{2}\\ln(1 - y^2), \\quad c = \\tfrac{2}{\\pi a} + b

    and refines it with Newton–Raphson steps
    ``x <- x - (erf(x) - y) / ((2 / sqrt(pi)) * exp(-x**2))`` until
    ``|erf(x) - y| <= epsilon``.

    Parameters
    ----------
    y : float
        Value of ``erf(x)``, ``0 < y < 1``.
    epsilon : float, default 1e-7
        Convergence tolerance on the residual ``|erf(x) - y|``.
    max_iterations : int, default 100
        Maximum number of Newton steps.

    Returns
    -------
    float
        ``x`` such that ``erf(x) ≈ y``.

    Raises
    ------
    InvalidArgumentError
        If ``y`` is outside ``(0, 1)``.
    NumericalFailureError
        If the residual does not drop below ``epsilon`` within
        ``max_iterations`` steps or an iterate becomes non-finite.
    """
    y = float(y)
    if not 0.0 < y < 1.0:
        raise InvalidArgumentError(f"erfinv argument must be in (0, 1) exclusive, got {y!r}")

    a = _WINITZKI_A
    b = 0.5 * math.log1p(-y * y)
    c = 2.0 / (math.pi * a) + b
    x = math.sqrt(math.sqrt(c * c - 2.0 * b / a) - c)

    delta = float(erf(x)) - y
    iterations = 0
    while abs(delta) > epsilon:
        if iterations >= max_iterations:
            raise NumericalFailureError(
                f"erfinv did not converge in {max_iterations} iterations "
                f"(y={y!r}, residual={delta:.3e})"
            )
        x -= delta / (2.0 / math.sqrt(math.pi) * math.exp(-x * x))
        if not math.isfinite(x):
            raise NumericalFailureError(f"erfinv iterate left the finite range (y={y!r})")
        delta = float(erf(x)) - y
        iterations += 1

    log.debug("erfinv(%r) converged after %d Newton steps", y, iterations)
    return x


def erfinv_extended(
    y: float,
    epsilon: float = ERFINV_EPSILON,
    max_iterations: int = ERFINV_MAX_ITERATIONS,
) -> float:
    """
    Inverse error function on the closed interval ``[-1, 1]``.

    ``erfinv(0) = 0``, ``erfinv(±1) = ±inf`` and ``erfinv(-y) = -erfinv(y)``;
    interior values delegate to :func:`erfinv`.

    Raises
    ------
    InvalidArgumentError
        If ``y`` is outside ``[-1, 1]``.
    """
    y = float(y)
    if not -1.0 <= y <= 1.0:
        raise InvalidArgumentError(f"erfinv argument must be in [-1, 1], got {y!r}")
    if y == 0.0:
        return 0.0
    if abs(y) == 1.0:
        return math.copysign(math.inf, y)
    if y < 0.0:
        return -erfinv(-y, epsilon, max_iterations)
    return erfinv(y, epsilon, max_iterations)


def accumulate_until(
    pmf: Callable[[int], float],
    p: float,
    *,
    start: int = 0,
    stop: int | None = None,
    max_iterations: int = SEARCH_MAX_ITERATIONS,
) -> int:
    """
    Smallest ``k >= start`` with ``pmf(start) + ... + pmf(k) >= p``.

    Parameters
    ----------
    pmf : Callable[[int], float]
        Probability mass function on consecutive integers.
    p : float
        Target cumulative probability.
    start : int, default 0
        First support point.
    stop : int or None, default None
        Last support point of a bounded support. Reaching it ends the search
        and returns ``stop`` (absorbs rounding of the total mass below 1).
    max_iterations : int
        Maximum number of mass terms added on an unbounded support.

    Returns
    -------
    int
        The stopping index.

    Raises
    ------
    NumericalFailureError
        If ``max_iterations`` terms were added without reaching ``p``.
    """
    total = 0.0
    k = start
    for _ in range(max_iterations):
        total += float(pmf(k))
        if total >= p:
            log.debug("Cumulative mass reached %r at k=%d", p, k)
            return k
        if stop is not None and k >= stop:
            return stop
        k += 1

    raise NumericalFailureError(
        f"Cumulative mass {total!r} did not reach {p!r} within {max_iterations} terms"
    )


__all__ = [
    "ERFINV_EPSILON",
    "ERFINV_MAX_ITERATIONS",
    "SEARCH_MAX_ITERATIONS",
    "factorial",
    "choose",
    "erfinv",
    "erfinv_extended",
    "accumulate_until",
]
