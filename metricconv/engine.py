# -*- coding: utf-8 -*-
"""
Conversion Engine

Composes the three conversion stages into one call on a raw query line:

    raw line -> parse_query -> UnitResolver (x2) -> UnitConverter -> result

Example:
    >>> from metricconv.engine import convert, format_result
    >>> format_result(convert("1 kg = g"))
    '1 kg = 1000.0 g'
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from metricconv.converter import UnitConverter
from metricconv.exceptions import MetricConverterException
from metricconv.models import ConversionResult
from metricconv.query_parser import parse_query
from metricconv.unit_resolver import UnitResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionOutcome:
    """Either a result or the error that stopped the conversion."""

    line: str
    result: Optional[ConversionResult] = None
    error: Optional[MetricConverterException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ConversionEngine:
    """Parses, resolves and converts query lines."""

    def __init__(self, converter: Optional[UnitConverter] = None):
        self.converter = converter or UnitConverter(UnitResolver())

    def convert(self, raw_line: str) -> ConversionResult:
        """
        Convert a raw query line.

        Args:
            raw_line: Query such as "1 kg = g"

        Returns:
            ConversionResult

        Raises:
            MetricConverterException: The first parse, resolve or
                compatibility error encountered
        """
        query = parse_query(raw_line)
        return self.converter.convert(query)

    def try_convert(self, raw_line: str) -> ConversionOutcome:
        """Convert a raw query line, capturing conversion errors."""
        try:
            return ConversionOutcome(line=raw_line, result=self.convert(raw_line))
        except MetricConverterException as e:
            logger.info("Conversion of %r failed: [%s] %s", raw_line, e.error_code, e)
            return ConversionOutcome(line=raw_line, error=e)

    @staticmethod
    def format_result(result: ConversionResult) -> str:
        """Render ``<quantity> <unit> = <converted> <unit>``."""
        query = result.query
        return (
            f"{query.quantity_text} {query.source_unit} = "
            f"{result.quantity!r} {result.unit}"
        )


@lru_cache(maxsize=1)
def _engine() -> ConversionEngine:
    return ConversionEngine()


def convert(raw_line: str) -> ConversionResult:
    """Convert a raw query line with the shared engine."""
    return _engine().convert(raw_line)


def format_result(result: ConversionResult) -> str:
    """Render a ConversionResult for display."""
    return ConversionEngine.format_result(result)


__all__ = [
    "ConversionEngine",
    "ConversionOutcome",
    "convert",
    "format_result",
]
