"""Conversion of derived units to standard units."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Tuple

from .base import UNITY_BASE, BaseUnit, NonStandard
from .derived import (
    DerivedUnit,
    UnitLike,
    as_derived,
    from_base_unit,
    power,
    product,
    simplify,
)

logger = logging.getLogger(__name__)


def _standard_of(base_unit: BaseUnit) -> DerivedUnit:
    if isinstance(base_unit.kind, NonStandard):
        return base_unit.kind.standard_unit
    return from_base_unit(base_unit)


def to_standard_unit(unit: UnitLike) -> Tuple[DerivedUnit, float]:
    """Rewrite ``unit`` in standard units.

    Returns ``(standard, factor)`` such that one ``unit`` equals ``factor``
    ``standard``. Prefixes are folded into the factor. Non-standard base units
    are replaced by their declared standard unit; that unit is taken as is
    and not standardized again.
    """

    parts: List[DerivedUnit] = []
    factor = 1.0
    for component in as_derived(unit).components:
        parts.append(power(_standard_of(component.base_unit), component.exponent))
        factor *= (10.0 ** component.prefix * component.base_unit.factor) ** component.exponent
    standard = product(parts)
    logger.debug("Standardized %r to %s with factor %r", unit, standard, factor)
    return standard, factor


def conversion_factor(source: UnitLike, target: UnitLike) -> float | None:
    """Return how many ``target`` make one ``source``.

    ``None`` when the two units do not standardize to the same unit.
    """

    source_standard, source_factor = _unprefixed(*to_standard_unit(source))
    target_standard, target_factor = _unprefixed(*to_standard_unit(target))
    if source_standard != target_standard:
        return None
    return source_factor / target_factor


def _unprefixed(unit: DerivedUnit, factor: float) -> Tuple[DerivedUnit, float]:
    # A declared standard unit may itself carry prefixes (litre = dm³).
    stripped = DerivedUnit(
        tuple(replace(c, prefix=0.0) for c in unit.components if c.base_unit != UNITY_BASE)
    )
    return simplify(stripped), factor * 10.0 ** unit.global_prefix


__all__ = ["conversion_factor", "to_standard_unit"]
