# -*- coding: utf-8 -*-
"""
SI Prefix Conversion

Converts a quantity between two units built on the same SI root unit, e.g.
kg -> g or mm -> km. Fails loudly on unknown or incompatible units.

Supports:
- Root units: m, g, s, A, K, cd, mol
- Prefixes: yocto (y) through yotta (Y), plus centi, deci, deca, hecto
"""

import logging
import math
from typing import Optional

from metricconv.exceptions import (
    ConversionOverflow,
    InvalidNumber,
    NegativeNumber,
    RootUnitMismatch,
)
from metricconv.models import ConversionResult, Query, ResolvedUnit
from metricconv.unit_resolver import UnitResolver

logger = logging.getLogger(__name__)


class UnitConverter:
    """
    Converter between SI-prefixed units.

    GUARANTEES:
    - Same input -> same output
    - Unknown prefix or root unit -> UnknownPrefix / UnknownRootUnit
    - Different root units -> RootUnitMismatch
    - No rounding beyond float arithmetic
    """

    def __init__(self, resolver: Optional[UnitResolver] = None):
        """Initialize unit converter"""
        self.resolver = resolver or UnitResolver()

    def convert(self, query: Query) -> ConversionResult:
        """
        Convert the quantity of a query to its target unit.

        Args:
            query: Parsed query

        Returns:
            ConversionResult carrying the converted quantity and target unit

        Raises:
            UnknownRootUnit: If either unit has no SI root unit
            UnknownPrefix: If either unit has an unknown prefix
            RootUnitMismatch: If the units have different root units
            ConversionOverflow: If the result does not fit in a float
        """
        source = self.resolver.resolve(query.source_unit)
        target = self.resolver.resolve(query.target_unit)
        self._check_compatible(source, target)

        quantity = query.quantity * source.multiplier / target.multiplier
        if not math.isfinite(quantity):
            # the product alone may overflow while the result still fits
            quantity = query.quantity * (source.multiplier / target.multiplier)
        if not math.isfinite(quantity):
            raise ConversionOverflow(query.quantity_text, query.source_unit, query.target_unit)

        logger.debug(
            "Converted %s %s -> %r %s",
            query.quantity, query.source_unit, quantity, query.target_unit,
        )
        return ConversionResult(quantity=quantity, unit=query.target_unit, query=query)

    def convert_value(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert a bare value from one unit to another.

        Args:
            value: Non-negative value to convert
            from_unit: Source unit (e.g., 'kg')
            to_unit: Target unit (e.g., 'g')

        Returns:
            Converted value as float

        Raises:
            InvalidNumber: If the value is nan or infinite
            NegativeNumber: If the value is below zero
        """
        if not math.isfinite(value):
            raise InvalidNumber(repr(value), context={"reason": "not finite"})
        if value < 0:
            raise NegativeNumber(repr(value), value=value)

        query = Query(
            quantity=value,
            quantity_text=repr(float(value)),
            source_unit=from_unit,
            target_unit=to_unit,
        )
        return self.convert(query).quantity

    def is_compatible(self, unit1: str, unit2: str) -> bool:
        """
        Check if two units resolve and share a root unit.

        Args:
            unit1: First unit
            unit2: Second unit

        Returns:
            True if compatible, False otherwise
        """
        if not (self.resolver.is_valid(unit1) and self.resolver.is_valid(unit2)):
            return False
        first = self.resolver.resolve(unit1)
        second = self.resolver.resolve(unit2)
        return first.root_unit == second.root_unit

    def _check_compatible(self, source: ResolvedUnit, target: ResolvedUnit) -> None:
        if source.root_unit != target.root_unit:
            raise RootUnitMismatch(
                source_root=source.root_unit.symbol,
                target_root=target.root_unit.symbol,
                source_unit=source.symbol,
                target_unit=target.symbol,
            )


__all__ = ["UnitConverter"]
