# qif_codec/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from typing_extensions import Protocol, runtime_checkable

from .enum_cleared_status import EnumClearedStatus
from .enum_date_format import DateFormat
from .i_equatable import IEquatable
from .i_split import ISplit
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IEquatable, IToDict, Protocol):
    """Structural shape of a non-investment QIF transaction."""

    date: datetime
    check_number: Optional[int]
    vendor: str
    address: str
    amount: Decimal
    category: Optional[str]
    memo: str
    status: Optional[EnumClearedStatus]
    splits: Sequence[ISplit]

    def emit_qif(self, date_format: DateFormat = ...) -> str: ...
