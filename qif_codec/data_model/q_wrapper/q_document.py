from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from qif_codec.data_model.interfaces import (
    DEFAULT_DATE_FORMAT,
    AccountType,
    DateFormat,
    IQifDocument,
    IToDict,
    RecursiveDictStr,
)

from .q_section import QSection
from .q_transaction import QTransaction

# account type -> attribute holding its section
_SLOTS: dict[AccountType, str] = {
    AccountType.CASH: "cash",
    AccountType.BANK: "bank",
    AccountType.CREDIT_CARD: "credit_card",
    AccountType.LIABILITY: "liability",
    AccountType.ASSET: "asset",
}


@dataclass(frozen=True)
class QifDocument:
    """
    Represents a complete QIF file: at most one section per account type.

    Sections are always written in the order Cash, Bank, CreditCard,
    Liability, Asset, whatever order they were added in.
    """

    cash: Optional[QSection] = None
    bank: Optional[QSection] = None
    credit_card: Optional[QSection] = None
    liability: Optional[QSection] = None
    asset: Optional[QSection] = None

    def section_for(self, account_type: AccountType) -> Optional[QSection]:
        return getattr(self, _SLOTS[account_type])

    def sections(self) -> list[QSection]:
        """Present sections in emission order."""
        return [s for t in AccountType if (s := self.section_for(t)) is not None]

    def is_empty(self) -> bool:
        return not self.sections()

    def merge_section(self, section: QSection) -> "QifDocument":
        """
        Fill the slot for ``section``'s type, or merge its transactions into
        the section already there.
        """
        existing = self.section_for(section.account_type)
        merged = section if existing is None else existing.merge_section(section)
        return replace(self, **{_SLOTS[section.account_type]: merged})

    def add_transaction(
        self, account_type: AccountType, transaction: QTransaction
    ) -> "QifDocument":
        """
        Merge ``transaction`` into an existing section. Without a section
        of that type the document is returned unchanged.
        """
        existing = self.section_for(account_type)
        if existing is None:
            return self
        return replace(
            self, **{_SLOTS[account_type]: existing.merge_transaction(transaction)}
        )

    def emit_qif(self, date_format: DateFormat = DEFAULT_DATE_FORMAT) -> str:
        """
        Returns the complete QIF file content as a string.
        """
        return "".join(section.emit_qif(date_format) for section in self.sections())

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            _SLOTS[section.account_type]: section.to_dict()
            for section in self.sections()
        }

    # region Parser/Emitter and file helpers

    @classmethod
    def from_text(
        cls, text: str, date_format: DateFormat = DEFAULT_DATE_FORMAT
    ) -> "QifDocument":
        from ..qif_parsers_emitters.qif_file_parser_emitter import (
            QifFileParserEmitter,
        )

        return QifFileParserEmitter().parse(text, date_format)

    @classmethod
    def load_from_path(
        cls,
        path: Path | str,
        encoding: str = "utf-8",
        date_format: DateFormat = DEFAULT_DATE_FORMAT,
    ) -> "QifDocument":
        from qif_codec.controllers.qif_loader import load_document

        return load_document(Path(path), encoding=encoding, date_format=date_format)

    def save(
        self,
        path: Path | str,
        encoding: str = "utf-8",
        date_format: DateFormat = DEFAULT_DATE_FORMAT,
    ) -> None:
        from qif_codec.controllers.qif_loader import save_document

        save_document(self, Path(path), encoding=encoding, date_format=date_format)

    # endregion Parser/Emitter and file helpers


if TYPE_CHECKING:
    _is_IQifDocument: type[IQifDocument] = QifDocument
    _is_IToDict: type[IToDict] = QifDocument
