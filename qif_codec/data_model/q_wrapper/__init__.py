# qif_codec/data_model/q_wrapper/__init__.py

from .q_document import QifDocument
from .q_section import QSection, extract_account_type, parse_section
from .q_split import QSplit, SplitDraft
from .q_transaction import QTransaction, TransactionDraft, parse_transaction
from .qif_code import QifCode

__all__ = [
    "QifCode",
    "QSplit",
    "SplitDraft",
    "QTransaction",
    "TransactionDraft",
    "parse_transaction",
    "QSection",
    "extract_account_type",
    "parse_section",
    "QifDocument",
]
