"""
Sampling
========

Inverse-transform sampling over the quantile capability, and sample
containers.

- :func:`random_variate`: one draw: ``quantile(U)`` with ``U ~ U[0, 1)``;
- :func:`random_variates`: ``n`` independent draws, in order;
- :class:`Sample` / :class:`ArraySample`: array-backed sample containers
  returned by sampling strategies.

Notes
-----
Every draw consumes exactly one ``generator.random()`` call, so a seeded
:class:`numpy.random.Generator` reproduces the same variates. Without a
generator a fresh ``numpy.random.default_rng()`` is created per draw. A
generator shared between threads must be serialized by the caller.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from statdist.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from statdist.distributions.distribution import QuantileDistribution


def random_variate[T](
    distr: QuantileDistribution[T], rng: np.random.Generator | None = None
) -> T:
    """
    Draw one value from ``distr`` by inverse-transform sampling.

    Parameters
    ----------
    distr : QuantileDistribution
        Anything exposing ``quantile(p)``.
    rng : numpy.random.Generator, optional
        Caller-owned generator; a non-deterministic one is used if omitted.

    Returns
    -------
    T
        ``distr.quantile(u)`` for a single uniform ``u`` in ``[0, 1)``.
    """
    generator = np.random.default_rng() if rng is None else rng
    u = float(generator.random())
    return distr.quantile(u)


def random_variates[T](
    distr: QuantileDistribution[T], n: int, rng: np.random.Generator | None = None
) -> list[T]:
    """
    Draw ``n`` independent values from ``distr``, each via :func:`random_variate`.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is negative.
    """
    if n < 0:
        raise InvalidArgumentError(f"Number of draws must be nonnegative, got {n}")
    return [random_variate(distr, rng) for _ in range(n)]


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[Any]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container of shape ``(n_samples, n_dimensions)``.

    The dtype follows the sampled values: floating for parametric families,
    the element dtype for empirical tables (e.g. strings).

    Parameters
    ----------
    data : numpy.ndarray
        2D array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[Any]

    def __init__(self, data: npt.NDArray[Any]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[Any]]:
        yield from self.data

    @property
    def array(self) -> npt.NDArray[Any]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


__all__ = [
    "random_variate",
    "random_variates",
    "Sample",
    "ArraySample",
]
