"""
Built-in continuous distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statdist.families.builtins.continuous.exponential import configure_exponential_family
from statdist.families.builtins.continuous.laplace import configure_laplace_family
from statdist.families.builtins.continuous.lognormal import configure_lognormal_family
from statdist.families.builtins.continuous.normal import configure_normal_family
from statdist.families.builtins.continuous.uniform import configure_uniform_family
from statdist.families.builtins.continuous.weibull import configure_weibull_family

__all__ = [
    "configure_normal_family",
    "configure_lognormal_family",
    "configure_laplace_family",
    "configure_weibull_family",
    "configure_exponential_family",
    "configure_uniform_family",
]
