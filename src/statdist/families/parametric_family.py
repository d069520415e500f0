"""
Parametric family definitions.

A :class:`ParametricFamily` collects the parametrizations of one family of
distributions, its closed-form characteristics, its support and an optional
estimator that computes parameters from observed data. Calling the family
builds a :class:`~statdist.families.distribution.ParametricFamilyDistribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

import numpy as np

from statdist.distributions.computation import AnalyticalComputation
from statdist.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from statdist.errors import InvalidArgumentError
from statdist.families.distribution import ParametricFamilyDistribution
from statdist.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Any

    import numpy.typing as npt

    from statdist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from statdist.distributions.support import Support
    from statdist.families.parametrizations import Parametrization
    from statdist.types import GenericCharacteristicName, ParametrizationName

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]
    type SupportArg = Callable[[Parametrization], Support | None] | None
    type SupportResolver = Callable[[Parametrization], Support | None]
    type Estimator = Callable[[npt.NDArray[np.float64]], Parametrization]

log = logging.getLogger(__name__)


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Name of the family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type, or a function inferring it from base parameters.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict
        Characteristic name to a function ``(parameters, x) -> value``, or to
        a mapping from parametrization name to such a function. A bare
        function is defined for the base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Defaults to :class:`DefaultSamplingUnivariateStrategy`.
    computation_strategy : ComputationStrategy, optional
        Defaults to :class:`DefaultComputationStrategy`.
    support_by_parametrization : Callable or None, optional
        Function returning the support for given parameters.
    estimator : Callable or None, optional
        Function computing parameters from a one-dimensional float sample;
        enables :meth:`fit`.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportArg = None,
        estimator: Estimator | None = None,
    ):
        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )

        self.computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self.sampling_strategy = (
            DefaultSamplingUnivariateStrategy() if sampling_strategy is None else sampling_strategy
        )

        self._support_resolver: SupportResolver = (
            (lambda _params: None)
            if support_by_parametrization is None
            else support_by_parametrization
        )
        self._estimator = estimator

        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.base_parametrization_name: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # Per parametrization: characteristic -> parametrization that provides it
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        return self._support_resolver

    @property
    def can_fit(self) -> bool:
        """Whether the family has a data-driven constructor."""
        return self._estimator is not None

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class under ``name``.

        Raises
        ------
        ValueError
            If ``name`` is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert ``parameters`` to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        plan = self._analytical_plan.get(parameters.name, {})
        result: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func_factory = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = AnalyticalComputation(
                target=characteristic,
                func=partial(func_factory, params_obj),
            )

        return result

    def _make_distribution(self, parameters: Parametrization) -> ParametricFamilyDistribution:
        parameters.validate()
        base_parameters = self.to_base(parameters)
        distribution_type = self._distr_type(base_parameters)
        return ParametricFamilyDistribution(
            self.name, distribution_type, parameters, self.support_resolver(base_parameters)
        )

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution with the given parameter values.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in (defaults to base).
        **parameters_values
            Parameter values.

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        InvalidArgumentError
            If the values violate a parametrization constraint.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        return self._make_distribution(parametrization_class(**parameters_values))

    def fit(self, data: Iterable[float]) -> ParametricFamilyDistribution:
        """
        Create a distribution whose parameters are estimated from ``data``.

        Parameters
        ----------
        data : Iterable[float]
            One-dimensional sample of observations.

        Raises
        ------
        NotImplementedError
            If the family has no estimator.
        InvalidArgumentError
            If the sample is not usable by the estimator or the estimated
            parameters violate a constraint.
        """
        if self._estimator is None:
            raise NotImplementedError(f"Family {self.name} has no data-driven constructor")

        if not isinstance(data, np.ndarray):
            data = list(data)
        sample = np.asarray(data, dtype=np.float64)
        if sample.ndim != 1:
            raise InvalidArgumentError("fit() expects a one-dimensional sample")

        parameters = self._estimator(sample)
        log.debug("Fitted %s to %d observations: %s", self.name, sample.size, parameters)
        return self._make_distribution(parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Class decorator registering a parametrization of this family.

        Mypy does not apply ``dataclass_transform`` to methods, so mark the
        decorated class as a dataclass for type checking.
        """
        from statdist.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
