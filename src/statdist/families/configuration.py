"""
Distribution Families Configuration
====================================

Builds the global register of built-in families:

- discrete: Bernoulli, Poisson, Geometric, Binomial;
- continuous: Normal, LogNormal, Laplace, Weibull, Exponential,
  ContinuousUniform.

Notes
-----
- Configuration happens once per process; repeated calls return the cached
  register.
- :func:`reset_families_register` drops the register so the next call
  rebuilds it.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from statdist.families.builtins import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_exponential_family,
    configure_geometric_family,
    configure_laplace_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_family,
    configure_weibull_family,
)
from statdist.families.registry import ParametricFamilyRegister

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register every built-in family in the global register.

    Returns
    -------
    ParametricFamilyRegister
        The global register of parametric families.
    """
    configure_bernoulli_family()
    configure_poisson_family()
    configure_geometric_family()
    configure_binomial_family()
    configure_normal_family()
    configure_lognormal_family()
    configure_laplace_family()
    configure_weibull_family()
    configure_exponential_family()
    configure_uniform_family()

    register = ParametricFamilyRegister()
    log.debug("Configured %d families", len(register.names()))
    return register


def reset_families_register() -> None:
    """
    Reset the cached families register.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
