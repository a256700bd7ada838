# -*- coding: utf-8 -*-
"""
Query Parser

Turns one line of user input of the form ``<number> <unit> = <unit>`` into a
Query. Tokens are separated by single spaces; the line is not otherwise
normalized.
"""

import logging
import math
import re

from metricconv.exceptions import InvalidNumber, MalformedQuery, NegativeNumber
from metricconv.models import Query

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = " "
EQUALS_TOKEN = "="
QUERY_TOKEN_COUNT = 4

# ASCII digits only, optional sign, fraction and exponent. No underscores.
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_quantity(token: str) -> float:
    """
    Parse the quantity token of a query.

    Args:
        token: Number text, e.g. "1", "0.5", "2e3"

    Returns:
        Quantity as a non-negative float (``-0`` becomes ``0.0``)

    Raises:
        InvalidNumber: If the token is not a finite decimal number
        NegativeNumber: If the number is below zero
    """
    if not DECIMAL_PATTERN.fullmatch(token):
        raise InvalidNumber(token, context={"reason": "not a decimal literal"})

    value = float(token)

    if not math.isfinite(value):
        raise InvalidNumber(token, context={"reason": "not finite"})

    if value < 0:
        raise NegativeNumber(token, value=value)

    # -0.0 + 0.0 == 0.0
    return value + 0.0


def parse_query(line: str) -> Query:
    """
    Parse a conversion query.

    Args:
        line: Query text, e.g. "1 kg = g"

    Returns:
        Parsed Query

    Raises:
        MalformedQuery: If the line is not exactly four tokens with "=" third
        InvalidNumber: If the first token is not a number
        NegativeNumber: If the number is negative
    """
    tokens = line.split(TOKEN_SEPARATOR)

    if len(tokens) != QUERY_TOKEN_COUNT:
        raise MalformedQuery(line, token_count=len(tokens))

    quantity_text, source_unit, equals, target_unit = tokens
    if equals != EQUALS_TOKEN:
        raise MalformedQuery(line, token_count=len(tokens), context={"separator": equals})

    quantity = parse_quantity(quantity_text)

    logger.debug(
        "Parsed query %r: quantity=%s source=%s target=%s",
        line, quantity, source_unit, target_unit,
    )
    return Query(
        quantity=quantity,
        quantity_text=quantity_text,
        source_unit=source_unit,
        target_unit=target_unit,
    )


__all__ = ["parse_query", "parse_quantity"]
