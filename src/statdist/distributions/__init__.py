"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocols (:mod:`.distribution`);
- characteristic conversions (:mod:`.fitters`);
- inverse-transform sampling and sample containers (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- supports (:mod:`.support`);
- empirical distributions (:mod:`.empirical`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution, QuantileDistribution
from .empirical import EmpiricalDiscreteDistribution, RankedContinuousDistribution
from .sampling import ArraySample, Sample, random_variate, random_variates
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    ExplicitTableDiscreteSupport,
    IntegerDiscreteSupport,
    Support,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    "QuantileDistribution",
    # empirical
    "RankedContinuousDistribution",
    "EmpiricalDiscreteDistribution",
    # sampling
    "random_variate",
    "random_variates",
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "IntegerDiscreteSupport",
]
