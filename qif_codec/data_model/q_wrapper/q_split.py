from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from qif_codec.utilities.converters_scalar import format_amount
from qif_codec.utilities.core_util import empty_to_none

from ..interfaces import IEquatable, ISplit, IToDict, RecursiveDictStr
from . import qif_codes as emit_q


@dataclass(frozen=True)
class QSplit:
    """
    Represents a single QIF split: part of a transaction's amount assigned
    to its own category and memo.
    """

    category: Optional[str]
    memo: str
    amount: Decimal

    @classmethod
    def build(
        cls,
        category: Optional[str] = None,
        memo: Optional[str] = None,
        amount: Optional[Decimal] = None,
    ) -> Optional["QSplit"]:
        """Return a split, or None when no amount is given."""
        draft = SplitDraft()
        if category is not None:
            draft = draft.with_category(category)
        if memo is not None:
            draft = draft.with_memo(memo)
        if amount is not None:
            draft = draft.with_amount(amount)
        return draft.finalize()

    def emit_qif(self) -> str:
        """
        Returns the QIF representation of this split (S, E and $ lines).
        """
        return "\r\n".join(
            [
                emit_q.category_split().line(self.category or ""),
                emit_q.memo_split().line(self.memo),
                emit_q.amount_split().line(format_amount(self.amount)),
            ]
        )

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the QSplit to a dictionary representation.
        """
        d: dict[str, RecursiveDictStr] = {"amount": str(self.amount)}
        if self.category is not None:
            d["category"] = self.category
        if self.memo:
            d["memo"] = self.memo
        return d


@dataclass(frozen=True)
class SplitDraft:
    """Split fields collected so far; nothing is required until ``finalize``."""

    category: Optional[str] = None
    memo: Optional[str] = None
    amount: Optional[Decimal] = None

    def with_category(self, category: str) -> "SplitDraft":
        return replace(self, category=empty_to_none(category))

    def with_memo(self, memo: str) -> "SplitDraft":
        return replace(self, memo=empty_to_none(memo))

    def with_amount(self, amount: Decimal) -> "SplitDraft":
        return replace(self, amount=amount)

    def with_amount_via_percentage(
        self, base_amount: Optional[Decimal], percentage: Decimal
    ) -> "SplitDraft":
        """
        Set the amount to ``percentage`` percent of ``base_amount``.
        Without a base the draft is returned unchanged.
        """
        if base_amount is None:
            return self
        return replace(self, amount=base_amount * (percentage / Decimal(100)))

    def finalize(self) -> Optional[QSplit]:
        if self.amount is None:
            return None
        return QSplit(category=self.category, memo=self.memo or "", amount=self.amount)


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
    _is_IEquatable: type[IEquatable] = QSplit
