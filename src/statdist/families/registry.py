"""
Global register of parametric families.

A single process-wide :class:`ParametricFamilyRegister` maps family names to
:class:`~statdist.families.parametric_family.ParametricFamily` objects.
Built-in families are added by
:func:`~statdist.families.configuration.configure_families_register`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from statdist.families.parametric_family import ParametricFamily

log = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton register of parametric families, keyed by family name.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Retrieve a family by name.

        Raises
        ------
        ValueError
            If no family with the given name is registered.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_families

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered families, in registration order."""
        return list(cls()._registered_families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Register a new family.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        if family.name in self._registered_families:
            raise ValueError(f"Family {family.name} already found in register")
        self._registered_families[family.name] = family
        log.debug("Registered family %s", family.name)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
