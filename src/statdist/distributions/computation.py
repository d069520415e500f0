"""
Computation Primitives
======================

Building blocks the computation strategy hands out for a characteristic:

- :class:`AnalyticalComputation`: closed-form callable supplied by the
  distribution itself;
- :class:`FittedComputationMethod`: a conversion (e.g. ``cdf -> ppf``)
  already bound to one distribution;
- :class:`ComputationMethod`: a conversion factory that binds itself to a
  distribution on :meth:`ComputationMethod.fit`.

Notes
-----
``**options`` passed at call time are forwarded to the underlying callable
(e.g. ``epsilon`` for quantiles built on :func:`~statdist.stats.erfinv`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mypy_extensions import KwArg

from statdist.types import GenericCharacteristicName

if TYPE_CHECKING:
    from statdist.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable, vectorized over numpy arrays where the
        distribution's values are numeric.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """Conversion bound to a distribution and ready to call.

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Characteristics the conversion was built from.
    func : Callable[[In, KwArg(Any)], Out]
        Scalar callable implementing the conversion.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """Conversion factory.

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names; every one must be analytical on the
        distribution for the conversion to apply.
    fitter : Callable[[Distribution, KwArg(Any)], FittedComputationMethod]
        Builds the bound conversion for a distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[["Distribution", KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: "Distribution", **options: Any) -> FittedComputationMethod[In, Out]:
        """Fit and return a :class:`FittedComputationMethod`."""
        return self.fitter(distribution, **options)


__all__ = [
    "AnalyticalComputation",
    "FittedComputationMethod",
    "ComputationMethod",
]
