"""Exception types raised at the edges of the unit algebra."""

from __future__ import annotations


class UnitAlgebraError(Exception):
    """Base class for errors raised by :mod:`unitalgebra`."""


class UnitDefinitionError(UnitAlgebraError, ValueError):
    """Raised when a unit definition is malformed or conflicts with another."""

    def __init__(self, message: str, symbol: str | None = None) -> None:
        suffix = f" ({symbol})" if symbol else ""
        super().__init__(f"{message}{suffix}")
        self.message = message
        self.symbol = symbol


class UnknownUnitError(UnitAlgebraError, KeyError):
    """Raised when a catalog lookup does not match any registered unit."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Unknown unit symbol '{self.symbol}'"


__all__ = ["UnitAlgebraError", "UnitDefinitionError", "UnknownUnitError"]
