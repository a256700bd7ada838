"""
Conversion Engine Tests

This test suite validates:
- Converter arithmetic (quantity * source / target multiplier)
- Root unit compatibility
- The composed ``convert(raw_line)`` and its error precedence
- Result formatting
- Round trips between compatible units
"""

import pytest
from pydantic import ValidationError

from metricconv.engine import ConversionEngine, convert, format_result
from metricconv.exceptions import (
    ConversionOverflow,
    InvalidNumber,
    MalformedQuery,
    NegativeNumber,
    RootUnitMismatch,
    UnknownPrefix,
    UnknownRootUnit,
)
from metricconv.models import ConversionResult, Query


# ==================== CONVERTER ====================

class TestUnitConverter:

    def test_kilogram_to_gram(self, converter):
        query = Query(quantity=1, quantity_text="1", source_unit="kg", target_unit="g")

        result = converter.convert(query)

        assert result.quantity == 1000.0
        assert result.unit == "g"
        assert result.query == query

    def test_gram_to_kilogram(self, converter):
        assert converter.convert_value(2, "g", "kg") == 0.002

    def test_same_unit(self, converter):
        assert converter.convert_value(7.5, "mol", "mol") == 7.5

    def test_zero(self, converter):
        assert converter.convert_value(0, "Ym", "ym") == 0.0

    def test_centi_to_milli(self, converter):
        assert converter.convert_value(3, "cm", "mm") == pytest.approx(30.0)

    def test_extreme_prefixes(self, converter):
        assert converter.convert_value(1, "Ys", "ys") == pytest.approx(1e48)

    def test_mismatch(self, converter):
        query = Query(quantity=1, quantity_text="1", source_unit="kg", target_unit="m")

        with pytest.raises(RootUnitMismatch) as exc_info:
            converter.convert(query)

        assert exc_info.value.source_root == "g"
        assert exc_info.value.target_root == "m"

    def test_negative_value(self, converter):
        with pytest.raises(NegativeNumber):
            converter.convert_value(-1, "kg", "g")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_value(self, converter, value):
        with pytest.raises(InvalidNumber) as exc_info:
            converter.convert_value(value, "kg", "g")
        assert exc_info.value.context["reason"] == "not finite"

    def test_overflow(self, converter):
        query = Query(quantity=1e300, quantity_text="1e300", source_unit="Ym", target_unit="ym")

        with pytest.raises(ConversionOverflow) as exc_info:
            converter.convert(query)

        assert exc_info.value.token == "1e300"
        assert exc_info.value.context["target_unit"] == "ym"

    def test_large_quantity_that_fits(self, converter):
        assert converter.convert_value(1e300, "Ym", "Ym") == 1e300
        assert converter.convert_value(1e300, "ym", "Ym") == pytest.approx(1e252)

    def test_result_must_be_finite(self):
        query = Query(quantity=1, quantity_text="1", source_unit="kg", target_unit="g")

        with pytest.raises(ValidationError):
            ConversionResult(quantity=float("inf"), unit="g", query=query)
        with pytest.raises(ValidationError):
            Query(quantity=float("nan"), quantity_text="nan", source_unit="kg", target_unit="g")

    def test_is_compatible(self, converter):
        assert converter.is_compatible("km", "mm")
        assert converter.is_compatible("cd", "kcd")
        assert not converter.is_compatible("kg", "m")
        assert not converter.is_compatible("kg", "xyz")
        assert not converter.is_compatible("Kg", "g")


# ==================== ENGINE ====================

class TestConvert:

    def test_kilogram_to_gram(self):
        result = convert("1 kg = g")

        assert result.quantity == 1000.0
        assert format_result(result) == "1 kg = 1000.0 g"

    def test_echoes_quantity_as_typed(self):
        assert format_result(convert("5 km = m")) == "5 km = 5000.0 m"
        assert format_result(convert("2.50 g = kg")) == "2.50 g = 0.0025 kg"

    def test_mismatch(self):
        with pytest.raises(RootUnitMismatch) as exc_info:
            convert("1 kg = m")
        assert (exc_info.value.source_root, exc_info.value.target_root) == ("g", "m")

    def test_negative(self):
        with pytest.raises(NegativeNumber):
            convert("-1 kg = g")

    def test_unknown_root_unit(self):
        with pytest.raises(UnknownRootUnit):
            convert("1 xyz = g")

    def test_unknown_prefix(self):
        with pytest.raises(UnknownPrefix):
            convert("1 Xg = g")

    def test_invalid_number(self):
        with pytest.raises(InvalidNumber):
            convert("abc kg = g")

    def test_malformed(self):
        with pytest.raises(MalformedQuery):
            convert("1 kg g")

    def test_source_unit_is_checked_before_target(self):
        with pytest.raises(UnknownRootUnit) as exc_info:
            convert("1 xyz = Xg")
        assert exc_info.value.token == "xyz"

    def test_unit_errors_come_before_mismatch(self):
        with pytest.raises(UnknownPrefix):
            convert("1 kg = Xm")

    def test_number_is_checked_before_units(self):
        with pytest.raises(InvalidNumber):
            convert("abc xyz = g")

    def test_overflow(self):
        with pytest.raises(ConversionOverflow):
            convert("1e300 Ym = ym")


class TestTryConvert:

    def test_success(self, engine):
        outcome = engine.try_convert("1 kg = g")

        assert outcome.ok
        assert outcome.result.quantity == 1000.0
        assert outcome.error is None

    def test_failure_is_captured(self, engine):
        outcome = engine.try_convert("1 kg = m")

        assert not outcome.ok
        assert outcome.result is None
        assert isinstance(outcome.error, RootUnitMismatch)
        assert outcome.line == "1 kg = m"


class TestRoundTrip:

    @pytest.mark.parametrize("quantity", [0.0, 1.0, 0.125, 42.0, 12345.678, 1e-9, 3e12])
    @pytest.mark.parametrize("source,target", [
        ("kg", "g"),
        ("mm", "km"),
        ("cd", "Mcd"),
        ("das", "ns"),
        ("hA", "pA"),
        ("ymol", "Ymol"),
        ("cK", "dK"),
    ])
    def test_round_trip(self, engine, quantity, source, target):
        forward = engine.convert(f"{quantity!r} {source} = {target}")
        back = engine.convert(f"{forward.quantity!r} {target} = {source}")

        assert back.quantity == pytest.approx(quantity, rel=1e-12)


class TestFormatResult:

    def test_static_and_module_level_agree(self, engine):
        result = engine.convert("3 hm = dam")

        assert ConversionEngine.format_result(result) == format_result(result)
        assert format_result(result).startswith("3 hm = ")
        assert format_result(result).endswith(" dam")
