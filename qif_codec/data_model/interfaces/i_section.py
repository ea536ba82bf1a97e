# qif_codec/data_model/interfaces/i_section.py
from __future__ import annotations

from typing import Sequence

from typing_extensions import Protocol, runtime_checkable

from .enum_account_type import AccountType
from .enum_date_format import DateFormat
from .i_equatable import IEquatable
from .i_to_dict import IToDict
from .i_transaction import ITransaction


@runtime_checkable
class ISection(IEquatable, IToDict, Protocol):
    """All transactions of one account type, headed by ``!Type:<code>``."""

    account_type: AccountType
    transactions: Sequence[ITransaction]

    def merge_transaction(self, transaction: ITransaction) -> "ISection": ...
    def emit_qif(self, date_format: DateFormat = ...) -> str: ...
