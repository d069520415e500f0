"""
Parametrizations
================

A parametrization is a frozen dataclass holding one named set of parameter
values for a family (e.g. Normal ``mu``/``sigma``), together with declarative
constraints checked when a distribution is built and a conversion to the
family's base parametrization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from statdist.errors import InvalidArgumentError
from statdist.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from statdist.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable statement of the constraint, e.g. ``"sigma > 0"``.
    check : Callable[[Any], bool]
        Predicate returning True if the constraint holds.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class for distribution parametrizations.

    Concrete parametrizations are declared inside a family's configuration
    function and registered with :func:`parametrization`, which turns them
    into frozen dataclasses.
    """

    # Set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name of this parametrization within its family."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every constraint of this parametrization.

        Raises
        ------
        InvalidArgumentError
            Naming the first constraint that does not hold.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise InvalidArgumentError(f'Constraint "{constraint.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert to the family's base parametrization.

        The base parametrization itself returns ``self``; every other
        parametrization overrides this.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable statement of the constraint; reported when it fails.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    constraints: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and getattr(attr, "__is_constraint", False):
            desc = getattr(attr, "__constraint_description", attr.__name__)
            constraints.append(ParametrizationConstraint(description=desc, check=attr))
    return constraints


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Register a class as a parametrization of ``family``.

    The class is converted to a frozen, slotted dataclass if it is not a
    dataclass already; its ``@constraint`` methods are collected.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
