"""
Sample Aggregates
=================

Elementary statistics over one-dimensional numeric samples, used by the
data-driven family estimators.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any

import numpy as np

from statdist.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy.typing as npt


def _as_sample(data: Iterable[float], name: str, min_size: int) -> npt.NDArray[np.floating[Any]]:
    if not isinstance(data, np.ndarray):
        data = list(data)
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name}() expects a one-dimensional sample")
    if arr.size < min_size:
        if min_size == 1:
            raise InvalidArgumentError(f"{name}() requires a non-empty sample")
        raise InvalidArgumentError(
            f"{name}() requires at least {min_size} values, got {arr.size}"
        )
    return arr


def mean(data: Iterable[float]) -> float:
    """Arithmetic mean of a non-empty sample."""
    return float(_as_sample(data, "mean", 1).mean())


def variance(data: Iterable[float]) -> float:
    """Unbiased sample variance (``n - 1`` denominator); needs two values."""
    return float(_as_sample(data, "variance", 2).var(ddof=1))


def standard_deviation(data: Iterable[float]) -> float:
    """Square root of :func:`variance`."""
    return math.sqrt(variance(data))


def pvariance(data: Iterable[float]) -> float:
    """Population variance (``n`` denominator) of a non-empty sample."""
    return float(_as_sample(data, "pvariance", 1).var(ddof=0))


def median(data: Iterable[float]) -> float:
    """Median; the mean of the two middle order statistics for even sizes."""
    return float(np.median(_as_sample(data, "median", 1)))


def lsr(x: Iterable[float], y: Iterable[float]) -> tuple[float, float]:
    """
    Ordinary least-squares regression line of ``y`` on ``x``.

    Parameters
    ----------
    x : Iterable[float]
        Independent observations.
    y : Iterable[float]
        Dependent observations, same length as ``x``.

    Returns
    -------
    tuple[float, float]
        ``(slope, intercept)`` of the best-fit line.

    Raises
    ------
    InvalidArgumentError
        If the samples differ in length, hold fewer than two points, or all
        ``x`` values coincide.
    """
    xs = _as_sample(x, "lsr", 2)
    ys = _as_sample(y, "lsr", 2)
    if xs.size != ys.size:
        raise InvalidArgumentError(
            f"lsr() requires samples of equal size, got {xs.size} and {ys.size}"
        )

    n = float(xs.size)
    sx, sy = float(xs.sum()), float(ys.sum())
    sxy, sxx = float(xs @ ys), float(xs @ xs)

    denominator = n * sxx - sx * sx
    if denominator == 0.0:
        raise InvalidArgumentError("lsr() requires at least two distinct x values")

    slope = (n * sxy - sx * sy) / denominator
    intercept = (sy - slope * sx) / n
    return slope, intercept


__all__ = [
    "mean",
    "variance",
    "standard_deviation",
    "pvariance",
    "median",
    "lsr",
]
