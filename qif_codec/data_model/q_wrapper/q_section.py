from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Optional

from pyparsing import ParseException, Regex, StringEnd, Suppress

from qif_codec.data_model.interfaces import (
    DEFAULT_DATE_FORMAT,
    AccountType,
    DateFormat,
    IEquatable,
    ISection,
    IToDict,
    RecursiveDictStr,
    TransactionBuildingError,
)

from . import qif_codes as emit_q
from .q_transaction import QTransaction, parse_transaction

log = logging.getLogger(__name__)

# !Type:<code>, where the code is 4-9 letters and may contain inner spaces ("Oth L")
_TYPE_HEADER = (
    Suppress(emit_q.type_header().code)
    + Regex(r"[A-Za-z](?:[A-Za-z ]{2,7})[A-Za-z]").leave_whitespace()("code")
    + StringEnd()
)


def header_code(line: str) -> Optional[str]:
    """Return the code of a ``!Type:`` header line, or None if it is not one."""
    try:
        return _TYPE_HEADER.parse_string(line.strip(), parse_all=True)["code"]
    except ParseException:
        return None


def first_line(block: str) -> str:
    lines = block.splitlines()
    return lines[0] if lines else ""


def extract_account_type(block: str) -> Optional[AccountType]:
    """Account type named by the block's header line, if any."""
    code = header_code(first_line(block))
    if code is None:
        return None
    return AccountType.from_code(code)


@dataclass(frozen=True)
class QSection:
    """
    All transactions of one account type.

    Merging never replaces a transaction: an incoming one is appended only
    when no equal transaction is already present.
    """

    account_type: AccountType
    transactions: tuple[QTransaction, ...] = ()

    @classmethod
    def build(
        cls, account_type_code: str, transactions: Iterable[QTransaction] = ()
    ) -> Optional["QSection"]:
        account_type = AccountType.from_code(account_type_code)
        if account_type is None:
            return None
        return cls(account_type=account_type, transactions=tuple(transactions))

    @property
    def header(self) -> str:
        return emit_q.type_header().line(self.account_type.code)

    def contains(self, transaction: QTransaction) -> bool:
        return any(t == transaction for t in self.transactions)

    def merge_transaction(self, transaction: QTransaction) -> "QSection":
        if self.contains(transaction):
            return self
        return replace(self, transactions=(*self.transactions, transaction))

    def merge_section(self, other: "QSection") -> "QSection":
        """Merge every transaction of ``other`` (same account type) into this one."""
        if other.account_type != self.account_type:
            raise ValueError(
                f"Cannot merge a {other.account_type.code} section into {self.account_type.code}"
            )
        merged = self
        for transaction in other.transactions:
            merged = merged.merge_transaction(transaction)
        return merged

    def emit_qif(self, date_format: DateFormat = DEFAULT_DATE_FORMAT) -> str:
        parts = [f"{self.header}\r\n"]
        parts.extend(f"{t.emit_qif(date_format)}\r\n\r\n" for t in self.transactions)
        return "".join(parts)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "type": self.account_type.code,
            "transactions": [t.to_dict() for t in self.transactions],
        }


def parse_section(
    block: str, date_format: DateFormat = DEFAULT_DATE_FORMAT
) -> Optional[QSection]:
    """
    Parse a block that starts with a ``!Type:`` header.

    The rest of the block is read as a single transaction, which is
    included when it is valid. Returns None when the header is missing or
    names an unknown account type.
    """
    account_type = extract_account_type(block)
    if account_type is None:
        return None
    section = QSection(account_type=account_type)
    result = parse_transaction(block, date_format)
    if isinstance(result, TransactionBuildingError):
        log.debug("%s header without a usable transaction: %s", account_type.code, result)
        return section
    return section.merge_transaction(result)


if TYPE_CHECKING:
    _is_i_section: type[ISection] = QSection
    _is_IToDict: type[IToDict] = QSection
    _is_IEquatable: type[IEquatable] = QSection
