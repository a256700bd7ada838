# -*- coding: utf-8 -*-
"""
SI Unit Resolver

Splits a unit token such as ``kg`` or ``dam`` into its SI prefix and root
unit and computes the prefix multiplier.

Tables:
- Root units: m, g, s, A, K, cd, mol
- Prefixes c..h: c, d, (none), da, h
- Prefixes y..Y: y, z, a, f, p, n, u, m, (none), k, M, G, T, P, E, Z, Y

All tables are read-only mappings built once at import. Lookups are exact
string matches and report "not found" as None.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from metricconv.exceptions import UnknownPrefix, UnknownRootUnit
from metricconv.models import PrefixDefinition, ResolvedUnit, RootUnit

logger = logging.getLogger(__name__)


# Suffix test order. No symbol here is a suffix of another one.
ROOT_UNITS: Tuple[RootUnit, ...] = (
    RootUnit.METER,
    RootUnit.GRAM,
    RootUnit.SECOND,
    RootUnit.AMPERE,
    RootUnit.KELVIN,
    RootUnit.CANDELA,
    RootUnit.MOLE,
)

CENTI_HECTO_PREFIXES: Tuple[PrefixDefinition, ...] = (
    PrefixDefinition("c", "centi", -2),
    PrefixDefinition("d", "deci", -1),
    PrefixDefinition("", "", 0),
    PrefixDefinition("da", "deca", 1),
    PrefixDefinition("h", "hecto", 2),
)

YOCTO_YOTTA_PREFIXES: Tuple[PrefixDefinition, ...] = (
    PrefixDefinition("y", "yocto", -24),
    PrefixDefinition("z", "zepto", -21),
    PrefixDefinition("a", "atto", -18),
    PrefixDefinition("f", "femto", -15),
    PrefixDefinition("p", "pico", -12),
    PrefixDefinition("n", "nano", -9),
    PrefixDefinition("u", "micro", -6),
    PrefixDefinition("m", "milli", -3),
    PrefixDefinition("", "", 0),
    PrefixDefinition("k", "kilo", 3),
    PrefixDefinition("M", "mega", 6),
    PrefixDefinition("G", "giga", 9),
    PrefixDefinition("T", "tera", 12),
    PrefixDefinition("P", "peta", 15),
    PrefixDefinition("E", "exa", 18),
    PrefixDefinition("Z", "zetta", 21),
    PrefixDefinition("Y", "yotta", 24),
)


def _exponent_table(prefixes: Tuple[PrefixDefinition, ...]) -> Mapping[str, int]:
    return MappingProxyType({p.symbol: p.exponent for p in prefixes})


CENTI_HECTO_EXPONENTS = _exponent_table(CENTI_HECTO_PREFIXES)
YOCTO_YOTTA_EXPONENTS = _exponent_table(YOCTO_YOTTA_PREFIXES)

PREFIX_TABLES: Tuple[Mapping[str, int], ...] = (
    CENTI_HECTO_EXPONENTS,
    YOCTO_YOTTA_EXPONENTS,
)


def find_root_unit(token: str) -> Optional[RootUnit]:
    """Return the first root unit the token ends with, or None."""
    for root_unit in ROOT_UNITS:
        if token.endswith(root_unit.symbol):
            return root_unit
    return None


def find_prefix_exponent(prefix: str) -> Optional[int]:
    """Return the power of ten for an exact prefix symbol, or None."""
    for table in PREFIX_TABLES:
        exponent = table.get(prefix)
        if exponent is not None:
            return exponent
    return None


class UnitResolver:
    """
    Resolves SI-prefixed unit tokens.

    Stateless apart from the read-only tables above; one instance can be
    shared between threads.

    Usage:
        >>> resolver = UnitResolver()
        >>> unit = resolver.resolve("kg")
        >>> unit.prefix, unit.root_unit, unit.multiplier
        ('k', <RootUnit.GRAM: 'g'>, 1000.0)
    """

    def resolve(self, token: str) -> ResolvedUnit:
        """
        Resolve a unit token.

        Args:
            token: Unit token, e.g. "kg", "mm", "dam", "mol"

        Returns:
            ResolvedUnit with prefix, root unit and multiplier

        Raises:
            UnknownRootUnit: If the token has no SI root-unit suffix
            UnknownPrefix: If the rest of the token is not an SI prefix
        """
        root_unit = find_root_unit(token)
        if root_unit is None:
            raise UnknownRootUnit(token, valid_units=[r.symbol for r in ROOT_UNITS])

        prefix = token[: len(token) - len(root_unit.symbol)]
        exponent = find_prefix_exponent(prefix)
        if exponent is None:
            raise UnknownPrefix(token, prefix)

        resolved = ResolvedUnit(
            symbol=token,
            prefix=prefix,
            root_unit=root_unit,
            exponent=exponent,
            multiplier=10.0 ** exponent,
        )
        logger.debug(
            "Resolved %r: prefix=%r root=%s multiplier=%r",
            token, prefix, root_unit.symbol, resolved.multiplier,
        )
        return resolved

    def is_valid(self, token: str) -> bool:
        """Check whether a token resolves to a unit."""
        root_unit = find_root_unit(token)
        if root_unit is None:
            return False
        prefix = token[: len(token) - len(root_unit.symbol)]
        return find_prefix_exponent(prefix) is not None

    def list_root_units(self) -> List[RootUnit]:
        """List the supported root units in suffix test order."""
        return list(ROOT_UNITS)

    def list_prefixes(self) -> List[PrefixDefinition]:
        """
        List every distinct prefix ordered by exponent.

        The unprefixed entry appears once even though both tables define it.
        """
        seen: Dict[str, PrefixDefinition] = {}
        for prefix in CENTI_HECTO_PREFIXES + YOCTO_YOTTA_PREFIXES:
            seen.setdefault(prefix.symbol, prefix)
        return sorted(seen.values(), key=lambda p: p.exponent)


_default_resolver = UnitResolver()


def resolve_unit(token: str) -> ResolvedUnit:
    """Resolve a unit token with the shared resolver."""
    return _default_resolver.resolve(token)


__all__ = [
    "ROOT_UNITS",
    "CENTI_HECTO_PREFIXES",
    "YOCTO_YOTTA_PREFIXES",
    "CENTI_HECTO_EXPONENTS",
    "YOCTO_YOTTA_EXPONENTS",
    "UnitResolver",
    "find_root_unit",
    "find_prefix_exponent",
    "resolve_unit",
]
