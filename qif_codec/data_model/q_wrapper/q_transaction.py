from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union

from qif_codec.data_model.interfaces import (
    DEFAULT_DATE_FORMAT,
    DateFormat,
    EnumClearedStatus,
    IEquatable,
    IToDict,
    ITransaction,
    RecursiveDictStr,
    TransactionBuildingError,
)
from qif_codec.utilities.converters_scalar import (
    format_amount,
    to_datetime,
    to_decimal,
    to_unsigned_int,
)
from qif_codec.utilities.core_util import empty_to_none, split_tag

from . import qif_codes as emit_q
from .q_split import QSplit, SplitDraft

log = logging.getLogger(__name__)

TransactionResult = Union["QTransaction", TransactionBuildingError]


@dataclass(frozen=True)
class QTransaction:
    """
    Represents a single non-investment QIF transaction.

    Instances come from ``TransactionDraft.finalize`` or
    ``parse_transaction``; both guarantee date, vendor and amount are set.
    """

    date: datetime
    vendor: str
    address: str
    amount: Decimal
    check_number: Optional[int] = None
    category: Optional[str] = None
    memo: str = ""
    status: Optional[EnumClearedStatus] = None
    splits: tuple[QSplit, ...] = ()

    def __post_init__(self) -> None:
        # N0 is written as absent and read back as None
        if self.check_number is not None and self.check_number <= 0:
            object.__setattr__(self, "check_number", None)
        if not isinstance(self.splits, tuple):
            object.__setattr__(self, "splits", tuple(self.splits))

    @staticmethod
    def draft() -> "TransactionDraft":
        return TransactionDraft()

    # region Parser/Emitter

    def emit_qif(self, date_format: DateFormat = DEFAULT_DATE_FORMAT) -> str:
        """
        Returns the QIF representation of this transaction, ending in ``^``.
        """
        lines = [
            emit_q.date().line(self.date.strftime(date_format.machine_pattern)),
            emit_q.amount_transaction1().line(format_amount(self.amount)),
            emit_q.cleared_status().line(self.status or ""),
            emit_q.check_number().line(
                self.check_number if self.check_number is not None else ""
            ),
            emit_q.payee().line(self.vendor),
            emit_q.memo().line(self.memo),
            emit_q.address().line(self.address),
            emit_q.category().line(self.category or ""),
        ]
        lines.extend(split.emit_qif() for split in self.splits)
        lines.append(emit_q.end_of_entry().code)
        return "\r\n".join(lines)

    # endregion Parser/Emitter

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the QTransaction instance to a dictionary representation.
        """
        d: dict[str, RecursiveDictStr] = {
            "date": self.date.date().isoformat(),
            "vendor": self.vendor,
            "address": self.address,
            "amount": str(self.amount),
        }

        def _addif(key: str, value: object, default_value: object) -> None:
            if value != default_value:
                d[key] = str(value)

        _addif("check_number", self.check_number, None)
        _addif("category", self.category, None)
        _addif("memo", self.memo, "")
        _addif("status", self.status.name if self.status else None, None)
        if self.splits:
            d["splits"] = [s.to_dict() for s in self.splits]
        return d


@dataclass(frozen=True)
class TransactionDraft:
    """
    Transaction fields collected so far.

    Every ``with_*`` method returns a new draft; empty text counts as absent
    and a check number of zero is dropped.
    """

    date: Optional[datetime] = None
    check_number: Optional[int] = None
    vendor: Optional[str] = None
    address: Optional[str] = None
    amount: Optional[Decimal] = None
    category: Optional[str] = None
    memo: Optional[str] = None
    status: Optional[EnumClearedStatus] = None
    splits: tuple[QSplit, ...] = field(default_factory=tuple)

    def with_date(self, date: Optional[datetime]) -> "TransactionDraft":
        return replace(self, date=date)

    def with_check_number(self, check_number: int) -> "TransactionDraft":
        return replace(self, check_number=check_number if check_number > 0 else None)

    def with_vendor(self, vendor: str) -> "TransactionDraft":
        return replace(self, vendor=empty_to_none(vendor))

    def with_address(self, address: str) -> "TransactionDraft":
        return replace(self, address=empty_to_none(address))

    def with_amount(self, amount: Decimal) -> "TransactionDraft":
        return replace(self, amount=amount)

    def with_category(self, category: str) -> "TransactionDraft":
        return replace(self, category=empty_to_none(category))

    def with_memo(self, memo: str) -> "TransactionDraft":
        return replace(self, memo=empty_to_none(memo))

    def with_status(self, status: Optional[EnumClearedStatus]) -> "TransactionDraft":
        return replace(self, status=status)

    def with_split(self, split: QSplit) -> "TransactionDraft":
        return replace(self, splits=(*self.splits, split))

    def resolved_address(self) -> Optional[str]:
        """The explicit address, falling back to the vendor."""
        return self.address if self.address is not None else self.vendor

    def finalize(self) -> TransactionResult:
        """
        Build the transaction or report the first missing field.

        Checked in order: date, vendor, amount.
        """
        if self.date is None:
            return TransactionBuildingError.NO_DATE
        if self.vendor is None:
            return TransactionBuildingError.NO_VENDOR
        if self.amount is None:
            return TransactionBuildingError.NO_AMOUNT
        return QTransaction(
            date=self.date,
            check_number=self.check_number,
            vendor=self.vendor,
            address=self.resolved_address() or self.vendor,
            amount=self.amount,
            category=self.category,
            memo=self.memo or "",
            status=self.status,
            splits=self.splits,
        )


# region Line parsing


def _parse_date(value: str, date_format: DateFormat) -> Optional[datetime]:
    try:
        return to_datetime(value, date_format.machine_pattern)
    except ValueError:
        log.debug("Unparsable date %r for format %s", value, date_format)
        return None


def _parse_decimal(value: str) -> Optional[Decimal]:
    try:
        return to_decimal(value)
    except ValueError:
        log.debug("Unparsable amount %r", value)
        return None


def _current_split(pending: list[SplitDraft]) -> SplitDraft:
    """Last split draft, starting one when none exists yet."""
    if not pending:
        pending.append(SplitDraft())
    return pending[-1]


def parse_transaction(
    block: str, date_format: DateFormat = DEFAULT_DATE_FORMAT
) -> TransactionResult:
    """
    Parse one ``^``-free block of record lines into a transaction.

    Lines are dispatched on their first character. A ``%`` split line uses
    the transaction amount seen *so far*, so it only resolves when the
    ``T``/``U`` line comes first.
    """
    draft = TransactionDraft()
    pending: list[SplitDraft] = []

    for line in block.splitlines():
        code, value = split_tag(line)
        if code == emit_q.date().code:
            draft = draft.with_date(_parse_date(value, date_format))
        elif code in (
            emit_q.amount_transaction1().code,
            emit_q.amount_transaction2().code,
        ):
            amount = _parse_decimal(value)
            if amount is not None:
                draft = draft.with_amount(amount)
        elif code == emit_q.check_number().code:
            try:
                draft = draft.with_check_number(to_unsigned_int(value))
            except ValueError:
                pass
        elif code == emit_q.payee().code:
            draft = draft.with_vendor(value)
        elif code == emit_q.address().code:
            draft = draft.with_address(value)
        elif code == emit_q.category().code:
            draft = draft.with_category(value)
        elif code == emit_q.memo().code:
            draft = draft.with_memo(value)
        elif code == emit_q.cleared_status().code:
            draft = draft.with_status(EnumClearedStatus.from_char(value))
        elif code == emit_q.category_split().code:
            pending.append(SplitDraft().with_category(value))
        elif code == emit_q.memo_split().code:
            pending[-1] = _current_split(pending).with_memo(value)
        elif code == emit_q.amount_split().code:
            current = _current_split(pending)
            amount = _parse_decimal(value)
            if amount is not None:
                pending[-1] = current.with_amount(amount)
        elif code == emit_q.percent_split().code:
            current = _current_split(pending)
            percentage = _parse_decimal(value)
            if percentage is not None:
                pending[-1] = current.with_amount_via_percentage(
                    draft.amount, percentage
                )

    for split_draft in pending:
        split = split_draft.finalize()
        if split is not None:
            draft = draft.with_split(split)
        else:
            log.debug("Dropping split without an amount: %r", split_draft)

    return draft.finalize()


# endregion Line parsing


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
    _is_IEquatable: type[IEquatable] = QTransaction
