from .config_logging import LOGGING, configure_logging
from .converters_scalar import format_amount, to_datetime, to_decimal, to_unsigned_int
from .core_util import (
    empty_to_none,
    is_null_or_whitespace,
    open_for_read,
    open_for_write,
    split_tag,
)

__all__ = [
    "is_null_or_whitespace",
    "empty_to_none",
    "split_tag",
    "to_datetime",
    "to_decimal",
    "to_unsigned_int",
    "format_amount",
    "open_for_read",
    "open_for_write",
    "LOGGING",
    "configure_logging",
]
