"""metricconv Exception Hierarchy.

This module provides the exception hierarchy for metricconv with rich error
context for debugging and user feedback.

Exception Hierarchy:
    MetricConverterException (base)
    ├── QueryException
    │   ├── MalformedQuery
    │   ├── InvalidNumber
    │   └── NegativeNumber
    └── UnitException
        ├── UnknownRootUnit
        ├── UnknownPrefix
        ├── RootUnitMismatch
        └── ConversionOverflow

All exceptions include rich context:
- error_code: Unique error identifier
- token: The offending input token (when there is one)
- context: Dictionary with error-specific details
- timestamp: When the error occurred

Example:
    >>> from metricconv.exceptions import UnknownPrefix
    >>> raise UnknownPrefix(token="Xg", prefix="X")
"""

import json
import re
from datetime import datetime
from typing import Any, Dict, Optional


# ==============================================================================
# Base Exception
# ==============================================================================

class MetricConverterException(Exception):
    """Base exception for all metricconv errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error identifier (e.g., "MC_QUERY_INVALID_NUMBER")
        token: Offending input token, if any
        context: Dictionary with error-specific details
        timestamp: When the error occurred
    """

    ERROR_PREFIX = "MC"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        token: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception with rich context.

        Args:
            message: Human-readable error message
            error_code: Unique error identifier (auto-generated if not provided)
            token: Offending input token
            context: Dictionary with error-specific details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.token = token
        self.context = dict(context or {})
        if token is not None:
            self.context.setdefault("token", token)
        self.timestamp = datetime.now()

    def _generate_error_code(self) -> str:
        """Generate error code based on exception class.

        Returns:
            Error code like "MC_QUERY_MALFORMED_QUERY"
        """
        class_name = self.__class__.__name__
        # CamelCase -> SCREAMING_SNAKE_CASE
        error_type = re.sub(r'(?<!^)(?=[A-Z])', '_', class_name).upper()
        return f"{self.ERROR_PREFIX}_{error_type}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "token": self.token,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        """Convert exception to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"token={self.token!r})"
        )


# ==============================================================================
# Query Exceptions
# ==============================================================================

class QueryException(MetricConverterException):
    """Base exception for errors in the shape or number of a query line."""
    ERROR_PREFIX = "MC_QUERY"


class MalformedQuery(QueryException):
    """Query line is not of the form ``<number> <unit> = <unit>``.

    Example:
        >>> raise MalformedQuery(line="1 kg g", token_count=3)
    """

    def __init__(
        self,
        line: str,
        token_count: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = dict(context or {})
        context["line"] = line
        if token_count is not None:
            context["token_count"] = token_count
        super().__init__(
            f"'{line}' is not a valid query, expected '<number> <unit> = <unit>'",
            token=line,
            context=context,
        )


class InvalidNumber(QueryException):
    """First token of a query is not a finite decimal number."""

    def __init__(self, token: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"'{token}' is not a valid number",
            token=token,
            context=context,
        )


class NegativeNumber(QueryException):
    """Quantity of a query is below zero."""

    def __init__(
        self,
        token: str,
        value: Optional[float] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = dict(context or {})
        if value is not None:
            context["value"] = value
        super().__init__(
            f"'{token}' is a negative number, quantities must be zero or greater",
            token=token,
            context=context,
        )


# ==============================================================================
# Unit Exceptions
# ==============================================================================

class UnitException(MetricConverterException):
    """Base exception for unit resolution and compatibility errors."""
    ERROR_PREFIX = "MC_UNIT"


class UnknownRootUnit(UnitException):
    """Unit token does not end with a recognized SI root unit.

    Example:
        >>> raise UnknownRootUnit(token="xyz", valid_units=["m", "g"])
    """

    def __init__(
        self,
        token: str,
        valid_units: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = dict(context or {})
        if valid_units:
            context["valid_units"] = valid_units
        super().__init__(
            f"'{token}' is not a valid unit, it does not end with an SI base unit",
            token=token,
            context=context,
        )


class UnknownPrefix(UnitException):
    """Prefix part of a unit token is not an SI prefix."""

    def __init__(
        self,
        token: str,
        prefix: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = dict(context or {})
        context["prefix"] = prefix
        self.prefix = prefix
        super().__init__(
            f"'{prefix}' in '{token}' is not a valid SI prefix",
            token=token,
            context=context,
        )


class RootUnitMismatch(UnitException):
    """Source and target units are built on different root units.

    Example:
        >>> raise RootUnitMismatch(source_root="g", target_root="m")
    """

    def __init__(
        self,
        source_root: str,
        target_root: str,
        source_unit: Optional[str] = None,
        target_unit: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = dict(context or {})
        context["source_root"] = source_root
        context["target_root"] = target_root
        self.source_root = source_root
        self.target_root = target_root
        source_unit = source_unit or source_root
        target_unit = target_unit or target_root
        super().__init__(
            f"cannot convert '{source_unit}' to '{target_unit}', "
            f"root units '{source_root}' and '{target_root}' do not match",
            token=target_unit,
            context=context,
        )


class ConversionOverflow(UnitException):
    """Converted quantity is too large for a float.

    Example:
        >>> raise ConversionOverflow(quantity_text="1e300", source_unit="Ym", target_unit="ym")
    """

    def __init__(
        self,
        quantity_text: str,
        source_unit: str,
        target_unit: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = dict(context or {})
        context["source_unit"] = source_unit
        context["target_unit"] = target_unit
        super().__init__(
            f"'{quantity_text} {source_unit}' is too large to express in '{target_unit}'",
            token=quantity_text,
            context=context,
        )


# ==============================================================================
# Exception Utilities
# ==============================================================================

def format_exception_chain(exc: Exception) -> str:
    """Format exception chain for logging/display.

    Args:
        exc: Exception to format

    Returns:
        Formatted string with full exception chain
    """
    lines = []
    current = exc

    while current is not None:
        if isinstance(current, MetricConverterException):
            lines.append(f"[{current.error_code}] {current}")
            lines.append(f"  Context: {current.context}")
        else:
            lines.append(f"{type(current).__name__}: {current}")

        current = getattr(current, "__cause__", None)

    return "\n".join(lines)


__all__ = [
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
    "format_exception_chain",
]
