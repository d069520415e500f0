"""
Supports
========

Sets of values a distribution assigns positive probability to.

- :class:`ContinuousSupport`: an interval of the real line;
- :class:`ExplicitTableDiscreteSupport`: a finite ordered table of points
  (any mutually comparable values, e.g. numbers or characters);
- :class:`IntegerDiscreteSupport`: consecutive integers, optionally bounded
  on either side.

Discrete supports expose ordered traversal (:meth:`DiscreteSupport.iter_points`,
:meth:`DiscreteSupport.iter_leq`) used by the ``pmf``-based conversions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from itertools import count
from math import floor, inf
from typing import TYPE_CHECKING, Any, Protocol, cast, overload, runtime_checkable

import numpy as np

from statdist.errors import InvalidArgumentError
from statdist.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Any]: ...

    def iter_leq(self, x: Any) -> Iterator[Any]: ...

    def first(self) -> Any | None: ...


class ExplicitTableDiscreteSupport(DiscreteSupport):
    """
    Finite support given by an explicit collection of points.

    Parameters
    ----------
    points : Iterable
        Support points; sorted and deduplicated on construction.

    Raises
    ------
    InvalidArgumentError
        If ``points`` is empty.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Any]) -> None:
        arr = np.unique(np.asarray(list(points)))
        if arr.size == 0:
            raise InvalidArgumentError("Points must be non-empty")
        self._points = arr

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Any) -> bool | BoolArray:
        arr = np.asarray(x)
        idx = np.minimum(np.searchsorted(self._points, arr, side="left"), self._points.size - 1)
        result = self._points[idx] == arr

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def iter_points(self) -> Iterator[Any]:
        return (p.item() for p in self._points)

    def iter_leq(self, x: Any) -> Iterator[Any]:
        stop = int(np.searchsorted(self._points, x, side="right"))
        return (p.item() for p in self._points[:stop])

    def first(self) -> Any:
        return self._points[0].item()

    def last(self) -> Any:
        return self._points[-1].item()

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())

    __iter__ = iter_points


@dataclass(frozen=True, slots=True)
class IntegerDiscreteSupport(DiscreteSupport):
    """
    Consecutive integers ``min_k, min_k + 1, ..., max_k``.

    Parameters
    ----------
    min_k : int or None
        Smallest support point, ``None`` for no lower bound.
    max_k : int or None
        Largest support point, ``None`` for no upper bound.
    """

    min_k: int | None = 0
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.min_k is not None and self.max_k is not None and self.min_k > self.max_k:
            raise InvalidArgumentError("min_k must not exceed max_k")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        mask = np.isfinite(xf) & (xf == np.floor(xf))
        if self.min_k is not None:
            mask &= xf >= self.min_k
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    def first(self) -> int | None:
        return self.min_k

    def last(self) -> int | None:
        return self.max_k

    def iter_points(self) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "Cannot enumerate an IntegerDiscreteSupport without a lower bound. "
                "Provide min_k to enable enumeration."
            )
        if self.max_k is None:
            return count(self.min_k)
        return iter(range(self.min_k, self.max_k + 1))

    def iter_leq(self, x: Number) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "iter_leq is not supported for a left-unbounded IntegerDiscreteSupport."
            )
        xf = float(x)
        if xf == -inf:
            return iter(())
        if xf == inf:
            if self.max_k is None:
                raise RuntimeError("iter_leq(inf) would not terminate on an unbounded support.")
            last = self.max_k
        else:
            last = floor(xf)
            if self.max_k is not None:
                last = min(last, self.max_k)
        return iter(range(self.min_k, last + 1))

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerDiscreteSupport",
]
