"""Symbol lookup over catalogs of base units."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence

from unitalgebra.errors import UnitDefinitionError, UnknownUnitError
from unitalgebra.units import BaseUnit, DerivedUnit, from_base_unit

from . import si, time


class UnitCatalog:
    """Registry of base units addressable by short name, long name or alias."""

    def __init__(self, units: Iterable[BaseUnit] = ()) -> None:
        self._symbols: Dict[str, BaseUnit] = {}
        self._units: List[BaseUnit] = []
        for unit in units:
            self.register(unit)

    # ------------------------------------------------------------------
    def register(self, base_unit: BaseUnit, *, aliases: Sequence[str] | None = None) -> None:
        keys = [key for key in (base_unit.short, base_unit.long, *(aliases or [])) if key]
        for key in keys:
            existing = self._symbols.get(key)
            if existing is not None and existing != base_unit:
                raise UnitDefinitionError(
                    f"Symbol is already bound to '{existing.long}'", symbol=key
                )
        for key in keys:
            self._symbols[key] = base_unit
        if base_unit not in self._units:
            self._units.append(base_unit)

    def get_base(self, symbol: str) -> BaseUnit:
        try:
            return self._symbols[symbol]
        except KeyError as exc:
            raise UnknownUnitError(symbol) from exc

    def get(self, symbol: str) -> DerivedUnit:
        return from_base_unit(self.get_base(symbol))

    def symbols(self) -> List[str]:
        return sorted(self._symbols)

    def copy(self) -> UnitCatalog:
        clone = UnitCatalog()
        clone._symbols = dict(self._symbols)
        clone._units = list(self._units)
        return clone

    # ------------------------------------------------------------------
    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __iter__(self) -> Iterator[BaseUnit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)


def _build_default() -> UnitCatalog:
    catalog = UnitCatalog(si.BASE_UNITS)
    catalog.register(si.METER, aliases=["metre"])
    catalog.register(si.SECOND, aliases=["sec"])
    for unit in time.BASE_UNITS:
        catalog.register(unit)
    catalog.register(time.HOUR, aliases=["hr"])
    return catalog


DEFAULT_CATALOG = _build_default()


__all__ = ["DEFAULT_CATALOG", "UnitCatalog"]
