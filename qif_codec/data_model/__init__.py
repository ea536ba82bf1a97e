# qif_codec/data_model/__init__.py
from .interfaces import (
    DEFAULT_DATE_FORMAT,
    AccountType,
    DateFormat,
    EnumClearedStatus,
    IParserEmitter,
    IQifDocument,
    ISection,
    ISplit,
    ITransaction,
    QifFileError,
    TransactionBuildingError,
)
from .q_wrapper import (
    QifCode,
    QifDocument,
    QSection,
    QSplit,
    QTransaction,
    SplitDraft,
    TransactionDraft,
    parse_section,
    parse_transaction,
)
from .qif_parsers_emitters import DocumentAccumulator, QifFileParserEmitter

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "AccountType",
    "DateFormat",
    "EnumClearedStatus",
    "QifFileError",
    "TransactionBuildingError",
    "IParserEmitter",
    "IQifDocument",
    "ISection",
    "ISplit",
    "ITransaction",
    "QifCode",
    "QSplit",
    "SplitDraft",
    "QTransaction",
    "TransactionDraft",
    "QSection",
    "QifDocument",
    "parse_transaction",
    "parse_section",
    "DocumentAccumulator",
    "QifFileParserEmitter",
]
