# qif_codec/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Final


def to_decimal(value: Any) -> Decimal:
    """
    Convert a QIF amount (or a number) to Decimal.

    Strings must be a plain decimal number after trimming: an optional sign,
    digits with an optional '.' fraction and an optional exponent
    ("500", "-12.34", "1.5E2"). Commas are accepted only as proper thousands
    groups ("-3,188.32"). No rounding is applied.

    Raises:
        ValueError: for anything else, including currency symbols, inner
            spaces, stray letters, misplaced commas and non-finite values.

    Examples:
        to_decimal("-3,188.32")        -> Decimal('-3188.32')
        to_decimal("1.5E2")            -> Decimal('1.5E+2')
        to_decimal("12abc")            -> ValueError
    """
    # Fast-path for numeric types
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError("Refusing to convert bool to Decimal")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # Avoid binary float artifacts
        return Decimal(str(value))

    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    cleaned = clean_number_like_string(value)

    try:
        result = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e
    if not result.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return result


def clean_number_like_string(value: str) -> str:
    """
    Trim ``value`` and drop thousands separators. Anything that is not a
    plain decimal literal is rejected here rather than rewritten.
    """
    s = value.strip()
    if not s:
        raise ValueError("Empty string cannot be converted to Decimal")
    if _GROUPED.fullmatch(s):
        return s.replace(",", "")
    if not _PLAIN.fullmatch(s):
        raise ValueError(f"Not a decimal amount: {value!r}")
    return s


def to_unsigned_int(value: str) -> int:
    """
    Parse a check number. Only plain ASCII digits are accepted.

    Raises:
        ValueError: for empty, signed or non-numeric input.
    """
    s = value.strip()
    if not _UNSIGNED.fullmatch(s):
        raise ValueError(f"Not an unsigned integer: {value!r}")
    return int(s)


def to_datetime(value: str, pattern: str) -> datetime:
    """
    Parse a ``D`` line remainder with a ``strptime`` pattern
    (``DateFormat.machine_pattern``).

    The result is a naive datetime at midnight, interpreted as local time.

    Raises
    ------
    ValueError
        If the text does not match the pattern.
    """
    return datetime.strptime(value.strip(), pattern)


def format_amount(value: Decimal) -> str:
    """Render an amount with exactly two decimal places."""
    return f"{value:.2f}"


_UNSIGNED: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_PLAIN: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_GROUPED: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]{1,3}(?:,[0-9]{3})+(?:\.[0-9]*)?")
