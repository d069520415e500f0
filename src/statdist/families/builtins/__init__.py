"""
Built-in distribution families.

Each ``configure_*_family`` function defines one family and registers it in
:class:`~statdist.families.registry.ParametricFamilyRegister`; calling it again
is a no-op.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statdist.families.builtins.continuous import (
    configure_exponential_family,
    configure_laplace_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_uniform_family,
    configure_weibull_family,
)
from statdist.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_geometric_family,
    configure_poisson_family,
)

__all__ = [
    "configure_bernoulli_family",
    "configure_poisson_family",
    "configure_geometric_family",
    "configure_binomial_family",
    "configure_normal_family",
    "configure_lognormal_family",
    "configure_laplace_family",
    "configure_weibull_family",
    "configure_exponential_family",
    "configure_uniform_family",
]
