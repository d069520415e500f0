"""
Numeric helpers: special functions, discrete inversion and sample aggregates.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .aggregates import lsr, mean, median, pvariance, standard_deviation, variance
from .numeric import accumulate_until, choose, erfinv, erfinv_extended, factorial

__all__ = [
    # numeric kernel
    "factorial",
    "choose",
    "erfinv",
    "erfinv_extended",
    "accumulate_until",
    # aggregates
    "mean",
    "variance",
    "standard_deviation",
    "pvariance",
    "median",
    "lsr",
]
