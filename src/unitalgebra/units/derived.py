"""Products of prefixed base units raised to exponents.

A :class:`DerivedUnit` is a sequence of :class:`Component` values, each one
denoting ``(10**prefix * base_unit) ** exponent``. The sequence order carries
no meaning: :func:`simplify` imposes a canonical order, merges like
components and drops zero exponents, and equality is defined on that
canonical form with all prefixes folded into a single power of ten.

Units form a commutative monoid under :func:`multiply` with :data:`unity` as
the identity.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import groupby
from typing import Any, Callable, Iterable, Tuple, Union

from .base import UNITY_BASE, BaseUnit, NonStandard


@dataclass(frozen=True)
class Component:
    prefix: float
    base_unit: BaseUnit
    exponent: float


@dataclass(frozen=True, eq=False)
class DerivedUnit:
    components: Tuple[Component, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.components, tuple):
            object.__setattr__(self, "components", tuple(self.components))

    # -- Algebra ----------------------------------------------------------
    def __mul__(self, other: object) -> DerivedUnit:
        if not isinstance(other, (DerivedUnit, BaseUnit)):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: object) -> DerivedUnit:
        if not isinstance(other, BaseUnit):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other: object) -> DerivedUnit:
        if not isinstance(other, (DerivedUnit, BaseUnit)):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other: object) -> DerivedUnit:
        if not isinstance(other, BaseUnit):
            return NotImplemented
        return divide(other, self)

    def __pow__(self, exponent: float) -> DerivedUnit:
        if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return power(self, exponent)

    # -- Comparison -------------------------------------------------------
    def _canonical_key(self) -> Tuple[Tuple[BaseUnit, ...], Tuple[float, ...], float]:
        simplified = simplify(self).components
        kept = [c for c in simplified if c.base_unit != UNITY_BASE]
        global_prefix = sum(c.prefix * c.exponent for c in simplified)
        return (
            tuple(c.base_unit for c in kept),
            tuple(c.exponent for c in kept),
            global_prefix,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DerivedUnit):
            return NotImplemented
        return self._canonical_key() == other._canonical_key()

    def __hash__(self) -> int:
        return hash(self._canonical_key())

    # -- Helpers ----------------------------------------------------------
    @property
    def global_prefix(self) -> float:
        """Exponent-weighted sum of all component prefixes."""
        return sum(c.prefix * c.exponent for c in simplify(self).components)

    def is_unity(self) -> bool:
        return self == unity

    def __str__(self) -> str:
        from .render import to_string

        return to_string(self)


UnitLike = Union[DerivedUnit, BaseUnit]

unity = DerivedUnit()


def as_derived(unit: UnitLike) -> DerivedUnit:
    """Return ``unit`` as a :class:`DerivedUnit`, lifting base units."""

    if isinstance(unit, DerivedUnit):
        return unit
    if isinstance(unit, BaseUnit):
        return from_base_unit(unit)
    raise TypeError(f"Expected DerivedUnit or BaseUnit, got {type(unit)}")


def from_base_unit(base_unit: BaseUnit) -> DerivedUnit:
    return DerivedUnit((Component(0.0, base_unit, 1.0),))


def _unit_key(base_unit: BaseUnit) -> Tuple[Any, ...]:
    # Equal base units get equal keys, so like components sort adjacent.
    kind = base_unit.kind
    if isinstance(kind, NonStandard):
        bases, exponents, global_prefix = kind.standard_unit._canonical_key()
        kind_key: Tuple[Any, ...] = (
            1,
            kind.factor,
            tuple(_unit_key(b) for b in bases),
            exponents,
            global_prefix,
        )
    else:
        kind_key = (0,)
    return (base_unit.short, base_unit.long, kind_key)


def _sort_key(component: Component) -> Tuple[Any, ...]:
    return (_unit_key(component.base_unit), component.prefix)


def simplify(unit: UnitLike) -> DerivedUnit:
    """Return the canonical form of ``unit``.

    Components are sorted by base unit short name (then long name and
    definition), components sharing both base unit and prefix are merged by
    summing exponents, and components whose exponent sums to exactly zero
    are dropped.
    """

    ordered = sorted(as_derived(unit).components, key=_sort_key)
    merged = []
    for (base_unit, prefix), group in groupby(ordered, key=lambda c: (c.base_unit, c.prefix)):
        exponent = sum(c.exponent for c in group)
        if exponent != 0:
            merged.append(Component(prefix, base_unit, exponent))
    return DerivedUnit(tuple(merged))


def multiply(left: UnitLike, right: UnitLike) -> DerivedUnit:
    return simplify(DerivedUnit(as_derived(left).components + as_derived(right).components))


def product(units: Iterable[UnitLike]) -> DerivedUnit:
    """Multiply all ``units`` together; the empty product is :data:`unity`."""

    components: Tuple[Component, ...] = ()
    for unit in units:
        components += as_derived(unit).components
    return simplify(DerivedUnit(components))


def power(unit: UnitLike, exponent: float) -> DerivedUnit:
    # Zero exponents survive until the next simplify.
    return DerivedUnit(
        tuple(replace(c, exponent=c.exponent * exponent) for c in as_derived(unit).components)
    )


def divide(left: UnitLike, right: UnitLike) -> DerivedUnit:
    return multiply(left, power(right, -1.0))


def with_prefix(prefix: float, unit: UnitLike) -> DerivedUnit:
    """Apply the power-of-ten ``prefix`` to ``unit``.

    The prefix goes to the first component with exponent exactly one, so
    ``kilo(meter / hour)`` is km/h. When no such component exists a
    dimensionless placeholder carrying the prefix is prepended.
    """

    components = list(as_derived(unit).components)
    for index, component in enumerate(components):
        if component.exponent == 1.0:
            components[index] = replace(component, prefix=component.prefix + prefix)
            return DerivedUnit(tuple(components))
    return DerivedUnit((Component(float(prefix), UNITY_BASE, 1.0), *components))


def _prefixer(value: float, name: str) -> Callable[[UnitLike], DerivedUnit]:
    def apply(unit: UnitLike) -> DerivedUnit:
        return with_prefix(value, unit)

    apply.__name__ = apply.__qualname__ = name
    apply.__doc__ = f"Apply the {name} prefix (10^{value:g})."
    return apply


atto = _prefixer(-18.0, "atto")
femto = _prefixer(-15.0, "femto")
pico = _prefixer(-12.0, "pico")
nano = _prefixer(-9.0, "nano")
micro = _prefixer(-6.0, "micro")
milli = _prefixer(-3.0, "milli")
centi = _prefixer(-2.0, "centi")
deci = _prefixer(-1.0, "deci")
deca = _prefixer(1.0, "deca")
hecto = _prefixer(2.0, "hecto")
kilo = _prefixer(3.0, "kilo")
mega = _prefixer(6.0, "mega")
giga = _prefixer(9.0, "giga")
tera = _prefixer(12.0, "tera")
peta = _prefixer(15.0, "peta")
exa = _prefixer(18.0, "exa")


__all__ = [
    "Component",
    "DerivedUnit",
    "UnitLike",
    "as_derived",
    "atto",
    "centi",
    "deca",
    "deci",
    "divide",
    "exa",
    "femto",
    "from_base_unit",
    "giga",
    "hecto",
    "kilo",
    "mega",
    "micro",
    "milli",
    "multiply",
    "nano",
    "peta",
    "pico",
    "power",
    "product",
    "simplify",
    "tera",
    "unity",
    "with_prefix",
]
