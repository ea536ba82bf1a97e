# qif_codec/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the QIF data model.
"""

from .enum_account_type import AccountType
from .enum_cleared_status import EnumClearedStatus
from .enum_date_format import DEFAULT_DATE_FORMAT, DateFormat
from .errors import QifFileError, TransactionBuildingError
from .i_equatable import IEquatable
from .i_parser_emitter import IParserEmitter
from .i_qif_document import IQifDocument
from .i_section import ISection
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction

__all__ = [
    "AccountType",
    "DateFormat",
    "DEFAULT_DATE_FORMAT",
    "EnumClearedStatus",
    "QifFileError",
    "TransactionBuildingError",
    "IEquatable",
    "IParserEmitter",
    "IQifDocument",
    "ISection",
    "ISplit",
    "IToDict",
    "ITransaction",
    "RecursiveDictStr",
]
