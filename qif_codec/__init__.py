"""
Read and write Quicken Interchange Format (QIF) documents.
"""

from .data_model import (
    DEFAULT_DATE_FORMAT,
    AccountType,
    DateFormat,
    EnumClearedStatus,
    QifDocument,
    QifFileError,
    QifFileParserEmitter,
    QSection,
    QSplit,
    QTransaction,
    SplitDraft,
    TransactionBuildingError,
    TransactionDraft,
    parse_section,
    parse_transaction,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "AccountType",
    "DateFormat",
    "EnumClearedStatus",
    "QifDocument",
    "QifFileError",
    "QifFileParserEmitter",
    "QSection",
    "QSplit",
    "QTransaction",
    "SplitDraft",
    "TransactionBuildingError",
    "TransactionDraft",
    "parse_section",
    "parse_transaction",
]
