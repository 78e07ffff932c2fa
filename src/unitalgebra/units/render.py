"""Human readable rendering of derived units (``km/h``, ``m²``, ``s⁻¹``)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List

from .derived import Component, UnitLike, simplify

PREFIXES: Dict[float, str] = {
    -18: "a",
    -15: "f",
    -12: "p",
    -9: "n",
    -6: "µ",
    -3: "m",
    -2: "c",
    -1: "d",
    0: "",
    1: "da",
    2: "h",
    3: "k",
    6: "M",
    9: "G",
    12: "T",
    15: "P",
    18: "E",
}

_SUPERSCRIPTS: Dict[float, str] = {1: "¹", 2: "²", 3: "³", 4: "⁴", 5: "⁵"}


@dataclass(frozen=True)
class RenderedUnit:
    """Display form of a unit; ``prefix`` is reserved and currently empty."""

    value: str
    prefix: str = ""


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def prefix_name(prefix: float) -> str | None:
    """Return the SI symbol for the power-of-ten ``prefix``, if there is one."""

    return PREFIXES.get(prefix)


def prefix_symbol(prefix: float) -> str:
    name = prefix_name(prefix)
    if name is None:
        return f"10^{_format_number(prefix)}·"
    return name


def exponent_symbol(exponent: float) -> str:
    if exponent == 1:
        return ""
    if exponent in _SUPERSCRIPTS:
        return _SUPERSCRIPTS[exponent]
    if -exponent in _SUPERSCRIPTS:
        return "⁻" + _SUPERSCRIPTS[-exponent]
    return f"^({_format_number(exponent)})"


def _render_component(component: Component) -> str:
    return (
        prefix_symbol(component.prefix)
        + component.base_unit.short
        + exponent_symbol(component.exponent)
    )


def _join(components: List[Component]) -> str:
    return "·".join(_render_component(c) for c in components)


def to_string_with_prefix(unit: UnitLike) -> RenderedUnit:
    ordered = sorted(simplify(unit).components, key=lambda c: -c.exponent)
    positive = [c for c in ordered if c.exponent > 0]
    negative = [c for c in ordered if c.exponent < 0]

    if not negative:
        return RenderedUnit(_join(positive))
    if not positive:
        return RenderedUnit(_join(negative))

    flipped = [replace(c, exponent=-c.exponent) for c in negative]
    if len(flipped) == 1:
        return RenderedUnit(f"{_join(positive)}/{_join(flipped)}")
    return RenderedUnit(f"{_join(positive)}/({_join(flipped)})")


def to_string(unit: UnitLike) -> str:
    return to_string_with_prefix(unit).value


__all__ = [
    "PREFIXES",
    "RenderedUnit",
    "exponent_symbol",
    "prefix_name",
    "prefix_symbol",
    "to_string",
    "to_string_with_prefix",
]
