"""Property tests for the monoid structure of derived units."""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given

from unitalgebra.catalog.si import GRAM, METER, SECOND, meter
from unitalgebra.catalog.time import MINUTE
from unitalgebra.units import (
    UNITY_BASE,
    Component,
    DerivedUnit,
    divide,
    hecto,
    kilo,
    multiply,
    power,
    simplify,
    unity,
    with_prefix,
)

_components = st.builds(
    Component,
    st.sampled_from([-3.0, -1.5, 0.0, 0.5, 3.0]),
    st.sampled_from([METER, SECOND, GRAM, MINUTE, UNITY_BASE]),
    st.integers(min_value=-3, max_value=3).map(float),
)
units = st.lists(_components, max_size=5).map(lambda items: DerivedUnit(tuple(items)))
# One component per base unit, so moving a prefix never merges components.
distinct_units = st.lists(_components, max_size=5, unique_by=lambda c: c.base_unit).map(
    lambda items: DerivedUnit(tuple(items))
)
small_exponents = st.integers(min_value=-3, max_value=3).map(float)


@given(units)
def test_unity_is_identity(unit: DerivedUnit) -> None:
    assert multiply(unity, unit) == unit
    assert multiply(unit, unity) == unit


@given(units, units, units)
def test_multiply_is_associative(a: DerivedUnit, b: DerivedUnit, c: DerivedUnit) -> None:
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


@given(units, units)
def test_multiply_is_commutative(a: DerivedUnit, b: DerivedUnit) -> None:
    assert multiply(a, b) == multiply(b, a)
    assert multiply(a, b).components == multiply(b, a).components


@given(units)
def test_simplify_is_idempotent(unit: DerivedUnit) -> None:
    once = simplify(unit)
    assert simplify(once).components == once.components


@given(units)
def test_power_one_and_self_division(unit: DerivedUnit) -> None:
    assert power(unit, 1.0) == simplify(unit)
    assert divide(unit, unit) == unity


@given(units, small_exponents, small_exponents)
def test_power_composes(unit: DerivedUnit, a: float, b: float) -> None:
    assert power(power(unit, a), b) == power(unit, a * b)


@given(units, st.sampled_from([-6.0, -3.0, 3.0, 9.0]))
def test_prefixed_units_keep_equivalence_laws(unit: DerivedUnit, prefix: float) -> None:
    first = with_prefix(prefix, unit)
    second = with_prefix(prefix, DerivedUnit(unit.components))
    assert first == first
    assert first == second
    assert second == first
    assert hash(first) == hash(second)
    assert multiply(first, unity) == second


def test_prefix_placement_is_transitive():
    via_placeholder = multiply(kilo(unity), meter)
    direct = kilo(meter)
    split = multiply(with_prefix(1.0, unity), hecto(meter))
    assert via_placeholder == direct
    assert direct == split
    assert via_placeholder == split
    assert split == via_placeholder
    assert len({via_placeholder, direct, split}) == 1


@given(distinct_units, st.sampled_from([-6.0, -1.5, 0.5, 3.0]))
def test_prefix_placement_is_transitive_for_any_unit(unit: DerivedUnit, prefix: float) -> None:
    via_placeholder = multiply(with_prefix(prefix, unity), unit)
    direct = with_prefix(prefix, unit)
    split = multiply(with_prefix(prefix - 1.0, unity), with_prefix(1.0, unit))
    assert via_placeholder == direct
    assert direct == split
    assert via_placeholder == split
    assert hash(via_placeholder) == hash(split)
