# -*- coding: utf-8 -*-
"""
metricconv Data Models

Pydantic v2 value models shared by the conversion stages. Every model is
frozen: a value is built once by the stage that produces it and never
mutated afterwards.

Enumerations:
    - RootUnit: The seven SI base units

Models:
    - PrefixDefinition: One row of an SI prefix table
    - Query: A parsed ``<number> <unit> = <unit>`` line
    - ResolvedUnit: A unit token split into prefix and root unit
    - ConversionResult: The converted quantity and its unit
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Enumerations
# =============================================================================


class RootUnit(str, Enum):
    """SI base units, keyed by symbol."""

    METER = "m"
    GRAM = "g"
    SECOND = "s"
    AMPERE = "A"
    KELVIN = "K"
    CANDELA = "cd"
    MOLE = "mol"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def unit_name(self) -> str:
        """Lower-case unit name, e.g. ``"meter"``."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.value


class PrefixDefinition(NamedTuple):
    """SI prefix symbol, its name and its power of ten."""

    symbol: str
    name: str
    exponent: int


# =============================================================================
# Value models
# =============================================================================


class Query(BaseModel):
    """One parsed conversion request."""

    model_config = ConfigDict(frozen=True)

    quantity: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Quantity to convert"
    )
    quantity_text: str = Field(
        ..., description="Quantity token exactly as entered, used for echoing"
    )
    source_unit: str = Field(..., description="Unit token to convert from")
    target_unit: str = Field(..., description="Unit token to convert to")


class ResolvedUnit(BaseModel):
    """A unit token split into its SI prefix and root unit."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Full unit token, e.g. 'kg'")
    prefix: str = Field(..., description="Prefix symbol, '' when unprefixed")
    root_unit: RootUnit
    exponent: int = Field(..., ge=-24, le=24, description="Power of ten of the prefix")
    multiplier: float = Field(..., gt=0, description="Scale relative to the root unit")

    @model_validator(mode="after")
    def _check_symbol(self) -> "ResolvedUnit":
        if self.symbol != f"{self.prefix}{self.root_unit.symbol}":
            raise ValueError(
                f"symbol {self.symbol!r} does not match "
                f"{self.prefix!r} + {self.root_unit.symbol!r}"
            )
        return self


class ConversionResult(BaseModel):
    """Converted quantity together with the query that produced it."""

    model_config = ConfigDict(frozen=True)

    quantity: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Converted quantity"
    )
    unit: str = Field(..., description="Target unit token as entered")
    query: Query


__all__ = [
    "RootUnit",
    "PrefixDefinition",
    "Query",
    "ResolvedUnit",
    "ConversionResult",
]
