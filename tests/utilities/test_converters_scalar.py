# tests/utilities/test_converters_scalar.py
from datetime import datetime
from decimal import Decimal

import pytest

from qif_codec.utilities.converters_scalar import (
    format_amount,
    to_datetime,
    to_decimal,
    to_unsigned_int,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("500.00", Decimal("500.00")),
        ("-200", Decimal("-200")),
        ("+7.5", Decimal("7.5")),
        (" 12.30 ", Decimal("12.30")),
        ("1,234.56", Decimal("1234.56")),
        ("-3,188,000", Decimal("-3188000")),
        ("0.123456", Decimal("0.123456")),
        (".5", Decimal("0.5")),
        ("1.5E2", Decimal("150")),
        ("2e-2", Decimal("0.02")),
    ],
)
def test_to_decimal_accepts_plain_amounts(text, expected):
    assert to_decimal(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "abc",
        "-",
        "1.2.3",
        "12abc",
        "12 34",
        "1,5",
        "12,34.5",
        "$50.00",
        "(1,234.56)",
        "12.5-",
        "−3.5",
        "1_000",
        "١٢",
        "NaN",
        "Infinity",
        "1.5E",
    ],
)
def test_to_decimal_rejects_malformed_amounts(text):
    with pytest.raises(ValueError):
        to_decimal(text)


def test_to_decimal_numeric_fast_paths():
    assert to_decimal(Decimal("1.10")) == Decimal("1.10")
    assert to_decimal(7) == Decimal(7)
    assert to_decimal(0.1) == Decimal("0.1")
    with pytest.raises(ValueError):
        to_decimal(True)


@pytest.mark.parametrize("text, expected", [("1260", 1260), (" 42 ", 42), ("0", 0)])
def test_to_unsigned_int(text, expected):
    assert to_unsigned_int(text) == expected


@pytest.mark.parametrize("text", ["", "-5", "+5", "12a", "1.0", "Deposit"])
def test_to_unsigned_int_rejects(text):
    with pytest.raises(ValueError):
        to_unsigned_int(text)


def test_to_datetime_is_naive_midnight():
    # Act
    dt = to_datetime("02/29/2024", "%m/%d/%Y")

    # Assert
    assert dt == datetime(2024, 2, 29, 0, 0, 0)
    assert dt.tzinfo is None


def test_to_datetime_wrong_pattern_raises():
    with pytest.raises(ValueError):
        to_datetime("2024-02-29", "%m/%d/%Y")


@pytest.mark.parametrize(
    "value, expected",
    [(Decimal("500"), "500.00"), (Decimal("-12.3"), "-12.30"), (Decimal("50.000"), "50.00")],
)
def test_format_amount_two_decimals(value, expected):
    assert format_amount(value) == expected
