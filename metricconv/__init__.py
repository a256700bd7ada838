"""
metricconv: SI Prefix Unit Converter
====================================

Converts quantities between SI-prefixed units that share a root unit,
from queries such as ``1 kg = g``.

Key Components:
    - query_parser: ``<number> <unit> = <unit>`` parsing
    - unit_resolver: SI prefix and root-unit tables and lookup
    - converter: UnitConverter
    - engine: ConversionEngine, the composed ``convert(raw_line)``
    - exceptions: MetricConverterException hierarchy
    - config: METRICCONV_ environment configuration
    - cli: Typer command-line driver

Example:
    >>> from metricconv import convert, format_result
    >>> format_result(convert("1 kg = g"))
    '1 kg = 1000.0 g'
"""

from ._version import __version__

from metricconv.models import (
    RootUnit,
    PrefixDefinition,
    Query,
    ResolvedUnit,
    ConversionResult,
)
from metricconv.exceptions import (
    MetricConverterException,
    QueryException,
    MalformedQuery,
    InvalidNumber,
    NegativeNumber,
    UnitException,
    UnknownRootUnit,
    UnknownPrefix,
    RootUnitMismatch,
    ConversionOverflow,
)
from metricconv.query_parser import parse_query
from metricconv.unit_resolver import UnitResolver, resolve_unit
from metricconv.converter import UnitConverter
from metricconv.engine import (
    ConversionEngine,
    ConversionOutcome,
    convert,
    format_result,
)

__all__ = [
    "__version__",
    # Models
    "RootUnit",
    "PrefixDefinition",
    "Query",
    "ResolvedUnit",
    "ConversionResult",
    # Exceptions
    "MetricConverterException",
    "QueryException",
    "MalformedQuery",
    "InvalidNumber",
    "NegativeNumber",
    "UnitException",
    "UnknownRootUnit",
    "UnknownPrefix",
    "RootUnitMismatch",
    "ConversionOverflow",
    # Stages
    "parse_query",
    "UnitResolver",
    "resolve_unit",
    "UnitConverter",
    "ConversionEngine",
    "ConversionOutcome",
    "convert",
    "format_result",
]
