"""Named unit catalogs."""

from .definitions import UnitDefinitionModel, load_definitions
from .registry import DEFAULT_CATALOG, UnitCatalog

__all__ = ["DEFAULT_CATALOG", "UnitCatalog", "UnitDefinitionModel", "load_definitions"]
