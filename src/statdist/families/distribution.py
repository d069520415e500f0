"""
Members of parametric families.

A :class:`ParametricFamilyDistribution` binds a family name to one validated
parametrization. Its analytical characteristics are built lazily by the
family and cached on the instance.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from statdist.distributions.distribution import Distribution
from statdist.families.registry import ParametricFamilyRegister
from statdist.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from statdist.distributions.computation import AnalyticalComputation
    from statdist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from statdist.distributions.support import Support
    from statdist.families.parametric_family import ParametricFamily
    from statdist.families.parametrizations import Parametrization
    from statdist.types import DistributionType, GenericCharacteristicName


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A distribution with concrete parameter values from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the family in :class:`ParametricFamilyRegister`.
    _distribution_type : DistributionType
        Type inferred from the base parametrization.
    parametrization : Parametrization
        Validated parameters, in the parametrization they were given in.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parametrization: Parametrization
    _support: Support | None
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by name, e.g. ``{"mu": 0.0, "sigma": 1.0}``."""
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        return self.parametrization.name

    @property
    def family(self) -> ParametricFamily:
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Closed-form characteristics, built on first access."""
        if self._analytical is None:
            self._analytical = self.family._build_analytical_computations(self.parametrization)
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    def mean(self) -> Any:
        """Expected value, from the family's ``mean`` characteristic."""
        return self.analytical_computations[CharacteristicName.MEAN](None)

    def var(self) -> Any:
        """Variance, from the family's ``var`` characteristic."""
        return self.analytical_computations[CharacteristicName.VAR](None)
