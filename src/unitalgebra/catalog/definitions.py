"""Declarative unit definitions validated with pydantic.

A payload is a sequence of mappings such as::

    [
        {"long": "hectare", "short": "ha", "factor": 10000, "standard": {"m": 2}},
        {"long": "byte", "short": "B"},
    ]

Entries without ``factor`` define standard units. ``standard`` maps symbols
already known to the catalog (including entries earlier in the payload) to
exponents.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from unitalgebra.errors import UnitDefinitionError, UnknownUnitError
from unitalgebra.observability import log_event
from unitalgebra.units import BaseUnit, DerivedUnit, make_non_standard, make_standard, power, product

from .registry import DEFAULT_CATALOG, UnitCatalog


class UnitDefinitionModel(BaseModel):
    """One catalog entry."""

    long: str = Field(min_length=1)
    short: str = Field(min_length=1)
    factor: Optional[float] = Field(default=None, gt=0)
    standard: Dict[str, float] = Field(default_factory=dict)
    aliases: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _factor_and_standard_together(self) -> "UnitDefinitionModel":
        if self.factor is None and self.standard:
            raise ValueError("'standard' requires 'factor'")
        if self.factor is not None and not self.standard:
            raise ValueError("'factor' requires 'standard'")
        return self


def _resolve_standard(definition: UnitDefinitionModel, catalog: UnitCatalog) -> DerivedUnit:
    try:
        return product(
            power(catalog.get(symbol), exponent) for symbol, exponent in definition.standard.items()
        )
    except UnknownUnitError as exc:
        raise UnitDefinitionError(
            f"Unknown symbol '{exc.symbol}' in standard unit of '{definition.long}'",
            symbol=definition.short,
        ) from exc


def build_unit(definition: UnitDefinitionModel, catalog: UnitCatalog) -> BaseUnit:
    if definition.factor is None:
        return make_standard(definition.long, definition.short)
    return make_non_standard(
        definition.long,
        definition.short,
        definition.factor,
        _resolve_standard(definition, catalog),
    )


def load_definitions(
    payload: Iterable[Mapping[str, Any]],
    catalog: UnitCatalog | None = None,
) -> UnitCatalog:
    """Validate ``payload`` and register every unit it defines.

    When ``catalog`` is omitted the units are added to a copy of
    :data:`DEFAULT_CATALOG`. The catalog that received the units is returned.
    Entries are built against a staging copy first, so a failing entry leaves
    ``catalog`` untouched.
    """

    target = catalog if catalog is not None else DEFAULT_CATALOG.copy()
    staging = target.copy()
    built: List[Tuple[BaseUnit, List[str]]] = []
    for index, entry in enumerate(payload):
        try:
            definition = UnitDefinitionModel.model_validate(entry)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            detail = f"{location}: {first['msg']}" if location else first["msg"]
            symbol = entry.get("short") if isinstance(entry, Mapping) else None
            raise UnitDefinitionError(
                f"Invalid unit definition at index {index}: {detail}",
                symbol=symbol if isinstance(symbol, str) else None,
            ) from exc
        unit = build_unit(definition, staging)
        staging.register(unit, aliases=definition.aliases)
        built.append((unit, definition.aliases))

    for unit, aliases in built:
        target.register(unit, aliases=aliases)
    loaded = [unit.short for unit, _ in built]
    log_event("Loaded unit definitions", count=len(loaded), symbols=loaded)
    return target


__all__ = ["UnitDefinitionModel", "build_unit", "load_definitions"]
