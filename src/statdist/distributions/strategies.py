"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: returns analytical characteristics
  and otherwise fits a conversion from an analytical source
  (see :mod:`statdist.distributions.fitters`), optionally caching it.
- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy`: draws ``(n, 1)`` samples by
  inverse transform through the distribution's ``quantile``.

Notes
-----
- Strategies are stateless unless caching is enabled.
- A family shares one strategy instance among all of its distributions.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from statdist.distributions.computation import (
    AnalyticalComputation,
    FittedComputationMethod,
)
from statdist.distributions.fitters import default_conversions
from statdist.types import GenericCharacteristicName

from .sampling import ArraySample, Sample, random_variates

if TYPE_CHECKING:
    from .distribution import Distribution

log = logging.getLogger(__name__)

type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    enable_caching: bool

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, if caching is enabled and a conversion was already fitted for
       this distribution, return it.
    3. Else, fit the first default conversion for the distribution type whose
       target is the requested characteristic and whose sources are all
       analytical.

    Parameters
    ----------
    enable_caching : bool, default False
        If ``True``, keep fitted conversions per distribution instance. The
        cache holds a reference to every distribution it served.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical base or no conversion applies.
    """

    def __init__(self, enable_caching: bool = False) -> None:
        self.enable_caching = enable_caching
        self._cache: dict[
            tuple[int, GenericCharacteristicName],
            tuple["Distribution", FittedComputationMethod[In, Out]],
        ] = {}

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical base and type.
        **options
            Passed to the fitter when a conversion is required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        analytical = distr.analytical_computations
        if state in analytical:
            return analytical[state]

        key = (id(distr), state)
        if self.enable_caching and key in self._cache:
            return self._cache[key][1]

        if not analytical:
            raise RuntimeError(
                "Distribution provides no analytical computations to ground conversions."
            )

        for method in default_conversions(distr.distribution_type):
            if method.target != state or not all(src in analytical for src in method.sources):
                continue

            log.debug("Fitting '%s' from %s", state, list(method.sources))
            fitted = method.fit(distr, **options)
            if self.enable_caching:
                self._cache[key] = (distr, fitted)
            return fitted

        raise RuntimeError(
            f"No conversion path from any analytical characteristic to '{state}'."
        )


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(
        self,
        n: int,
        distr: "Distribution",
        rng: np.random.Generator | None = None,
        **options: Any,
    ) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    Each of the ``n`` values is ``distr.quantile(U)`` for an independent
    ``U ~ U[0, 1)`` drawn from ``rng``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self,
        n: int,
        distr: "Distribution",
        rng: np.random.Generator | None = None,
        **options: Any,
    ) -> ArraySample:
        values = random_variates(distr, n, rng)
        return ArraySample(np.asarray(values).reshape(n, 1))
