"""Tests for catalog symbol lookup."""

import pytest

from unitalgebra.catalog import DEFAULT_CATALOG, UnitCatalog
from unitalgebra.catalog.si import METER, SECOND, meter, second
from unitalgebra.catalog.time import HOUR, MINUTE, hour, minute
from unitalgebra.errors import UnitDefinitionError, UnknownUnitError
from unitalgebra.units import make_standard, to_standard_unit


def test_default_catalog_resolves_short_long_and_alias():
    assert DEFAULT_CATALOG.get("min") == minute
    assert DEFAULT_CATALOG.get("hour") == hour
    assert DEFAULT_CATALOG.get("hr") == hour
    assert DEFAULT_CATALOG.get("metre") == meter
    assert DEFAULT_CATALOG.get_base("s") is SECOND


def test_default_catalog_contents():
    assert "wk" in DEFAULT_CATALOG
    assert "furlong" not in DEFAULT_CATALOG
    assert len(DEFAULT_CATALOG) == 11
    assert DEFAULT_CATALOG.symbols() == sorted(DEFAULT_CATALOG.symbols())
    assert HOUR in list(DEFAULT_CATALOG)


def test_catalog_units_standardize():
    assert to_standard_unit(DEFAULT_CATALOG.get("d")) == (second, 86400.0)
    assert to_standard_unit(DEFAULT_CATALOG.get("week")) == (second, 604800.0)


def test_unknown_symbol_raises_key_error():
    with pytest.raises(UnknownUnitError) as excinfo:
        DEFAULT_CATALOG.get("furlong")
    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "Unknown unit symbol 'furlong'"


def test_conflicting_symbol_is_rejected():
    catalog = UnitCatalog([METER])
    with pytest.raises(UnitDefinitionError) as excinfo:
        catalog.register(make_standard("mile", "m"))
    assert excinfo.value.symbol == "m"
    assert catalog.get("m") == meter


def test_registering_same_unit_again_adds_aliases():
    catalog = UnitCatalog([MINUTE])
    catalog.register(MINUTE, aliases=["mins"])
    assert catalog.get("mins") == minute
    assert len(catalog) == 1


def test_copy_is_independent():
    clone = DEFAULT_CATALOG.copy()
    clone.register(make_standard("byte", "B"))
    assert "B" in clone
    assert "B" not in DEFAULT_CATALOG
