"""Unit algebra: base units, derived units, standardization and rendering."""

from .base import (
    UNITY_BASE,
    BaseUnit,
    NonStandard,
    Standard,
    UnitKind,
    make_non_standard,
    make_standard,
)
from .derived import (
    Component,
    DerivedUnit,
    UnitLike,
    as_derived,
    atto,
    centi,
    deca,
    deci,
    divide,
    exa,
    femto,
    from_base_unit,
    giga,
    hecto,
    kilo,
    mega,
    micro,
    milli,
    multiply,
    nano,
    peta,
    pico,
    power,
    product,
    simplify,
    tera,
    unity,
    with_prefix,
)
from .render import (
    PREFIXES,
    RenderedUnit,
    exponent_symbol,
    prefix_name,
    prefix_symbol,
    to_string,
    to_string_with_prefix,
)
from .standard import conversion_factor, to_standard_unit

__all__ = [
    "BaseUnit",
    "Component",
    "DerivedUnit",
    "NonStandard",
    "PREFIXES",
    "RenderedUnit",
    "Standard",
    "UNITY_BASE",
    "UnitKind",
    "UnitLike",
    "as_derived",
    "atto",
    "centi",
    "conversion_factor",
    "deca",
    "deci",
    "divide",
    "exa",
    "exponent_symbol",
    "femto",
    "from_base_unit",
    "giga",
    "hecto",
    "kilo",
    "make_non_standard",
    "make_standard",
    "mega",
    "micro",
    "milli",
    "multiply",
    "nano",
    "peta",
    "pico",
    "power",
    "prefix_name",
    "prefix_symbol",
    "product",
    "simplify",
    "tera",
    "to_standard_unit",
    "to_string",
    "to_string_with_prefix",
    "unity",
    "with_prefix",
]
