# qif_codec/data_model/interfaces/i_qif_document.py
from __future__ import annotations

from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .enum_account_type import AccountType
from .enum_date_format import DateFormat
from .i_section import ISection
from .i_to_dict import IToDict


@runtime_checkable
class IQifDocument(IToDict, Protocol):
    # --- data ---
    cash: Optional[ISection]
    bank: Optional[ISection]
    credit_card: Optional[ISection]
    liability: Optional[ISection]
    asset: Optional[ISection]

    # --- behavior ---
    def section_for(self, account_type: AccountType) -> Optional[ISection]: ...
    def sections(self) -> list[ISection]: ...
    def emit_qif(self, date_format: DateFormat = ...) -> str: ...
