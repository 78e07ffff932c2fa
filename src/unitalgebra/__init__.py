"""unitalgebra - symbolic algebra for physical units."""

from . import catalog, units
from .errors import UnitAlgebraError, UnitDefinitionError, UnknownUnitError
from .units import (
    BaseUnit,
    Component,
    DerivedUnit,
    NonStandard,
    RenderedUnit,
    Standard,
    conversion_factor,
    divide,
    from_base_unit,
    make_non_standard,
    make_standard,
    multiply,
    power,
    prefix_name,
    simplify,
    to_standard_unit,
    to_string,
    to_string_with_prefix,
    unity,
    with_prefix,
)
from .version import __version__

__all__ = [
    "BaseUnit",
    "Component",
    "DerivedUnit",
    "NonStandard",
    "RenderedUnit",
    "Standard",
    "UnitAlgebraError",
    "UnitDefinitionError",
    "UnknownUnitError",
    "catalog",
    "conversion_factor",
    "divide",
    "from_base_unit",
    "make_non_standard",
    "make_standard",
    "multiply",
    "power",
    "prefix_name",
    "simplify",
    "to_standard_unit",
    "to_string",
    "to_string_with_prefix",
    "units",
    "unity",
    "with_prefix",
    "__version__",
]
