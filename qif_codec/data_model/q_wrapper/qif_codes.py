# qif_codec/data_model/q_wrapper/qif_codes.py
"""
Record-line codes for non-investment QIF transactions and their splits.

Each factory returns a ``QifCode`` describing one line tag.
"""
from __future__ import annotations

from .qif_code import QifCode

_BANKING = "Banking, Cash, Credit Card, Other Asset, Other Liability"
_SPLITS = "Splits"


def date() -> QifCode:
    return QifCode("D", "Date", _BANKING, "D01/02/2025")


def amount_transaction1() -> QifCode:
    return QifCode("T", "Amount of the transaction", _BANKING, "T-12.34")


def amount_transaction2() -> QifCode:
    return QifCode("U", "Amount of the transaction (duplicate of T)", _BANKING, "U-12.34")


def cleared_status() -> QifCode:
    return QifCode("C", "Cleared status: X cleared, * reconciled", _BANKING, "CX")


def check_number() -> QifCode:
    return QifCode("N", "Check number", _BANKING, "N1260")


def payee() -> QifCode:
    return QifCode("P", "Payee / vendor", _BANKING, "PSam Hill Credit Union")


def memo() -> QifCode:
    return QifCode("M", "Memo", _BANKING, "MOpen Account")


def address() -> QifCode:
    return QifCode("A", "Address of payee", _BANKING, "A12 Main Street")


def category() -> QifCode:
    return QifCode("L", "Category or transfer account", _BANKING, "LOpening Balance")


def category_split() -> QifCode:
    return QifCode("S", "Category in split", _SPLITS, "SOpening Balance")


def memo_split() -> QifCode:
    return QifCode("E", "Memo in split", _SPLITS, "EBonus for new Account")


def amount_split() -> QifCode:
    return QifCode("$", "Dollar amount of split", _SPLITS, "$50.00")


def percent_split() -> QifCode:
    return QifCode("%", "Percentage of split, of the transaction amount", _SPLITS, "%10")


def end_of_entry() -> QifCode:
    return QifCode("^", "End of the entry", "All", "^")


def type_header() -> QifCode:
    return QifCode("!Type:", "Section header naming the account type", "All", "!Type:Bank")
