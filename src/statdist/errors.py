"""
Error Taxonomy
==============

Exceptions raised by statdist.

- :class:`InvalidArgumentError`: a caller violated an argument contract
  (probability outside ``[0, 1]``, empty sample, failed parameter constraint).
- :class:`NumericalFailureError`: an iterative numerical routine exhausted
  its iteration budget or left the finite range.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidArgumentError(ValueError):
    """Argument outside the domain accepted by the called operation."""


class NumericalFailureError(ArithmeticError):
    """Iterative computation did not converge within its iteration cap."""


__all__ = [
    "InvalidArgumentError",
    "NumericalFailureError",
]
