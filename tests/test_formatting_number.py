from decimal import Decimal

import pytest

from chainnorm import (
    FormattingError,
    NumberFormatOptions,
    RoundingMode,
    format_native_currency,
    format_number,
    format_units,
    parse_integer,
)


def test_format_number_groups_integer():
    assert format_number(1234567, {"decimals": 0}) == "1,234,567"
    assert format_number(0) == "0"
    assert format_number("000123") == "123"
    assert format_number(999) == "999"


def test_format_number_default_two_decimals():
    assert format_number("1234.5678") == "1,234.57"
    assert format_number("1234.5") == "1,234.5"
    assert format_number(0.1) == "0.1"
    assert format_number(Decimal("2.345")) == "2.35"
    assert format_number("0xff") == "255"


def test_format_number_pads_decimals():
    assert format_number("1.5", {"decimals": 4, "padDecimals": True}) == "1.5000"
    assert format_number(7, NumberFormatOptions(decimals=2, pad_decimals=True)) == "7.00"
    assert format_number(7, NumberFormatOptions(decimals=0, pad_decimals=True)) == "7"


@pytest.mark.parametrize("value, decimals, mode, expected", [
    ("1.234", 2, RoundingMode.ROUND, "1.23"),
    ("1.235", 2, RoundingMode.ROUND, "1.24"),
    ("1.2349", 2, RoundingMode.ROUND, "1.23"),
    ("1.231", 2, RoundingMode.CEIL, "1.24"),
    ("1.2300", 2, RoundingMode.CEIL, "1.23"),
    ("1.239", 2, RoundingMode.TRUNCATE, "1.23"),
    ("1.239", 2, RoundingMode.FLOOR, "1.23"),
    ("0.05", 1, RoundingMode.ROUND, "0.1"),
    ("0.005", 2, RoundingMode.ROUND, "0.01"),
    ("9.5", 0, RoundingMode.ROUND, "10"),
    ("9.4", 0, RoundingMode.ROUND, "9"),
    ("9.001", 0, RoundingMode.CEIL, "10"),
])
def test_rounding_modes(value, decimals, mode, expected):
    options = NumberFormatOptions(decimals=decimals, rounding_mode=mode)
    assert format_number(value, options) == expected


def test_rounding_carries_into_integer_part():
    assert format_number("999.996", {"decimals": 2, "groupSeparator": ""}) == "1000.00"
    assert format_number("999.996", {"decimals": 2}) == "1,000.00"
    assert format_number("99999.999", {"decimals": 2, "roundingMode": "CEIL"}) == "100,000.00"


def test_separators_prefix_suffix():
    options = {"groupSeparator": ".", "decimalSeparator": ",", "prefix": "€ ", "suffix": " EUR"}
    assert format_number("1234567.891", options) == "€ 1.234.567,89 EUR"
    assert format_number(1234, {"groupSeparator": "\\", "decimals": 0}) == "1\\234"


@pytest.mark.parametrize("value, decimals", [
    ("0", 3),
    ("1.5", 2),
    ("123456789.987654321", 4),
    ("42.999999", 2),
    (10**30, 6),
])
def test_padding_fixes_fraction_length_and_keeps_integer(value, decimals):
    options = NumberFormatOptions(decimals=decimals, pad_decimals=True, rounding_mode=RoundingMode.TRUNCATE)
    formatted = format_number(value, options)
    integer_part, fraction = formatted.split(".")
    assert len(fraction) == decimals
    assert int(integer_part.replace(",", "")) == int(str(value).split(".")[0])


@pytest.mark.parametrize("value", [-1, "-1.5", "abc", "1e5", "", True, None, float("nan"), [1]])
def test_format_number_rejects_bad_values(value):
    with pytest.raises(FormattingError) as excinfo:
        format_number(value)
    assert excinfo.value.category == "number"
    assert excinfo.value.value is value


def test_format_number_rejects_unknown_rounding_mode():
    options = {"roundingMode": "BANKERS"}
    with pytest.raises(FormattingError) as excinfo:
        format_number("1.234", options)
    assert excinfo.value.options is options

    constructed = NumberFormatOptions.model_construct(rounding_mode="BANKERS")
    with pytest.raises(FormattingError):
        format_number("1.234", constructed)


def test_options_accept_both_key_styles_and_are_frozen():
    assert NumberFormatOptions.model_validate({"padDecimals": True}).pad_decimals is True
    assert NumberFormatOptions.model_validate({"pad_decimals": True}).pad_decimals is True
    options = NumberFormatOptions()
    with pytest.raises(Exception):
        options.decimals = 4
    assert options.decimals == 2


def test_native_currency():
    assert format_native_currency(10**18) == "1"
    assert format_native_currency(1_500_000_000_000_000_000) == "1.5"
    assert format_native_currency(1_234_567_890_123_456_789) == "1.234568"
    assert format_native_currency("1234000000000000000000") == "1,234"
    assert format_native_currency(1_500_000_000_000_000_000, {"symbol": "ETH"}) == "1.5 ETH"
    assert format_native_currency(2_500_000, {"unitDecimals": 6, "symbol": "ATOM"}) == "2.5 ATOM"
    assert format_native_currency(1, {"decimals": 2}) == "0.00"


def test_native_currency_rejects_negative_and_fractional_input():
    with pytest.raises(FormattingError) as excinfo:
        format_native_currency(-1)
    assert excinfo.value.category == "native currency"
    with pytest.raises(FormattingError):
        format_native_currency("1.5")


def test_format_units():
    assert format_units(1_500_000_000, 9) == "1.5"
    assert format_units(1, 18) == "0.000000000000000001"
    assert format_units(0, 18) == "0"
    assert format_units(5, 0) == "5"
    assert format_units(2**256 - 1, 18).startswith("115792089237316195423570985008687907853269984665640564039457")


@pytest.mark.parametrize("value, expected", [
    (5, 5),
    ("42", 42),
    (" 7 ", 7),
    ("0x10", 16),
    (3.0, 3),
    (Decimal("12"), 12),
    ("-3", -3),
])
def test_parse_integer(value, expected):
    assert parse_integer(value) == expected


@pytest.mark.parametrize("value", [True, 1.5, "1.5", "1_000", "0x", None, Decimal("NaN")])
def test_parse_integer_rejects(value):
    with pytest.raises((TypeError, ValueError)):
        parse_integer(value)


@pytest.mark.parametrize("options", [
    {"roundingmode": "TRUNCATE"},
    {"decimals": 2, "thousandsSeparator": " "},
])
def test_format_number_rejects_unknown_option_keys(options):
    with pytest.raises(FormattingError) as excinfo:
        format_number("1.239", options)
    assert excinfo.value.options is options
