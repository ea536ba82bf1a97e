# qif_codec/data_model/interfaces/enum_account_type.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class AccountType(Enum):
    """
    Non-investment account types, valued by their ``!Type:`` header code.
    Declaration order is the order sections are written to a document.
    """

    CASH = "Cash"
    BANK = "Bank"
    CREDIT_CARD = "CCard"
    LIABILITY = "Oth L"
    ASSET = "Oth A"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Optional["AccountType"]:
        """Return the type for an exact header code, or None."""
        for account_type in cls:
            if account_type.value == code:
                return account_type
        return None

    def __str__(self) -> str:
        return self.value
