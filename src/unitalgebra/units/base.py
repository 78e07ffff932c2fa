"""Atomic named units.

A :class:`BaseUnit` is either a standard unit (the canonical representative of
its dimension, such as the second) or a non-standard unit defined as a fixed
multiple of a standard :class:`~unitalgebra.units.derived.DerivedUnit`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from unitalgebra.config import load_settings
from unitalgebra.errors import UnitDefinitionError

if TYPE_CHECKING:
    from unitalgebra.units.derived import DerivedUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Standard:
    """Marks a base unit that is itself a standard unit."""


@dataclass(frozen=True)
class NonStandard:
    """Marks a base unit equal to ``factor`` times ``standard_unit``."""

    standard_unit: "DerivedUnit"
    factor: float


UnitKind = Union[Standard, NonStandard]


@dataclass(frozen=True)
class BaseUnit:
    long: str
    short: str
    kind: UnitKind = Standard()

    @property
    def is_standard(self) -> bool:
        return isinstance(self.kind, Standard)

    @property
    def factor(self) -> float:
        """Conversion factor to the standard unit (1 for standard units)."""
        if isinstance(self.kind, NonStandard):
            return self.kind.factor
        return 1.0

    # -- Algebra ----------------------------------------------------------
    def __mul__(self, other: object) -> "DerivedUnit":
        from .derived import DerivedUnit, multiply

        if not isinstance(other, (BaseUnit, DerivedUnit)):
            return NotImplemented
        return multiply(self, other)

    def __truediv__(self, other: object) -> "DerivedUnit":
        from .derived import DerivedUnit, divide

        if not isinstance(other, (BaseUnit, DerivedUnit)):
            return NotImplemented
        return divide(self, other)

    def __pow__(self, exponent: float) -> "DerivedUnit":
        from .derived import power

        if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return power(self, exponent)


def make_standard(long: str, short: str) -> BaseUnit:
    return BaseUnit(long, short, Standard())


def make_non_standard(
    long: str,
    short: str,
    factor: float,
    standard_unit: "DerivedUnit",
) -> BaseUnit:
    """Define ``long`` as ``factor`` times ``standard_unit``.

    ``standard_unit`` is expected to contain only standard base units. The
    check is enforced when ``UNITALGEBRA_STRICT_DEFINITIONS`` is enabled.
    """

    if load_settings().strict_definitions:
        offending = [
            component.base_unit.short
            for component in standard_unit.components
            if not component.base_unit.is_standard
        ]
        if offending:
            raise UnitDefinitionError(
                f"Standard unit of '{long}' refers to non-standard units: "
                + ", ".join(offending),
                symbol=short,
            )
    unit = BaseUnit(long, short, NonStandard(standard_unit, float(factor)))
    logger.debug("Defined %s (%s) as %r x %s", long, short, factor, standard_unit)
    return unit


# Placeholder carried by ``with_prefix`` when no component can take the prefix.
UNITY_BASE = make_standard("unity", "")


__all__ = [
    "BaseUnit",
    "NonStandard",
    "Standard",
    "UNITY_BASE",
    "UnitKind",
    "make_non_standard",
    "make_standard",
]
