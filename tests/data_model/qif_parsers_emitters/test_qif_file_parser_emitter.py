# tests/data_model/qif_parsers_emitters/test_qif_file_parser_emitter.py
from datetime import datetime
from decimal import Decimal

import pytest

from qif_codec.data_model import (
    AccountType,
    DateFormat,
    EnumClearedStatus,
    QifDocument,
    QifFileParserEmitter,
    QSection,
    QSplit,
    QTransaction,
    TransactionDraft,
)
from qif_codec.data_model.qif_parsers_emitters import DocumentAccumulator


@pytest.fixture
def pe() -> QifFileParserEmitter:
    return QifFileParserEmitter()


def _mk_txn(vendor: str, amount: str = "10", day: int = 1, **extra) -> QTransaction:
    draft = (
        TransactionDraft()
        .with_date(datetime(2024, 5, day))
        .with_vendor(vendor)
        .with_amount(Decimal(amount))
    )
    for split in extra.get("splits", ()):
        draft = draft.with_split(split)
    if "status" in extra:
        draft = draft.with_status(extra["status"])
    result = draft.finalize()
    assert isinstance(result, QTransaction)
    return result


_BANK_FILE = (
    "!Type:Bank\r\n"
    "D05/01/2024\r\nT100.00\r\nPFirst\r\n^\r\n"
    "D05/02/2024\r\nT-20.00\r\nPSecond\r\n^\r\n"
    "D05/03/2024\r\nT3.50\r\nPThird\r\n^\r\n"
)


# ---------- split_blocks ----------


def test_split_blocks_trims_each_block(pe):
    assert pe.split_blocks("  a \r\n^\r\n b\n^") == ["a", "b", ""]


def test_split_blocks_keeps_inner_spaces(pe):
    assert pe.split_blocks("!Type:Oth L\nPMy Vendor^") == ["!Type:Oth L\nPMy Vendor", ""]


# ---------- parse ----------


def test_parse_header_block_then_bare_transactions(pe):
    # Act
    doc = pe.parse(_BANK_FILE)

    # Assert
    assert [t.vendor for t in doc.bank.transactions] == ["First", "Second", "Third"]
    assert doc.bank.transactions[1].amount == Decimal("-20.00")
    assert doc.sections() == [doc.bank]


def test_parse_unknown_header_contributes_nothing(pe):
    # Arrange
    text = "!Type:Mystery\nD05/01/2024\nT1\nPHidden\n^\nD05/02/2024\nT2\nPAlso hidden\n^\n"

    # Act
    doc = pe.parse(text)

    # Assert
    assert doc.is_empty()


def test_parse_unknown_header_block_is_skipped_but_section_continues(pe):
    # Arrange
    text = (
        "!Type:Bank\nD05/01/2024\nT1\nPFirst\n^\n"
        "!Type:Mystery\nD05/02/2024\nT2\nPHidden\n^\n"
        "D05/03/2024\nT3\nPAfter\n^\n"
    )

    # Act
    doc = pe.parse(text)

    # Assert
    assert [t.vendor for t in doc.bank.transactions] == ["First", "After"]
    assert doc.sections() == [doc.bank]


def test_parse_transaction_before_any_header_is_dropped(pe):
    # Arrange
    text = "D05/01/2024\nT1\nPOrphan\n^\n!Type:Cash\nD05/02/2024\nT2\nPKept\n^\n"

    # Act
    doc = pe.parse(text)

    # Assert
    assert doc.sections() == [QSection(AccountType.CASH, (_mk_txn("Kept", "2", day=2),))]


def test_parse_deduplicates_repeated_transactions(pe):
    # Arrange
    block = "D05/01/2024\nT1\nPSame\n^\n"
    text = "!Type:Bank\n" + block + block + "!Type:Bank\n" + block

    # Act
    doc = pe.parse(text)

    # Assert
    assert doc.bank.transactions == (_mk_txn("Same", "1"),)


def test_parse_invalid_blocks_are_skipped(pe):
    # Arrange
    text = "!Type:Bank\n^\nT1\nPNo date\n^\nnot qif at all\n^\nD05/03/2024\nT3\nPGood\n^\n^^"

    # Act
    doc = pe.parse(text)

    # Assert
    assert doc.bank.transactions == (_mk_txn("Good", "3", day=3),)


def test_parse_multiple_sections_and_switching(pe):
    # Arrange
    text = (
        "!Type:CCard\nD05/01/2024\nT-5\nPCard one\n^\n"
        "!Type:Cash\nD05/02/2024\nT-6\nPCash one\n^\n"
        "D05/03/2024\nT-7\nPCash two\n^\n"
        "!Type:CCard\nD05/04/2024\nT-8\nPCard two\n^\n"
    )

    # Act
    doc = pe.parse(text)

    # Assert
    assert [t.vendor for t in doc.credit_card.transactions] == ["Card one", "Card two"]
    assert [t.vendor for t in doc.cash.transactions] == ["Cash one", "Cash two"]
    assert [s.account_type for s in doc.sections()] == [
        AccountType.CASH,
        AccountType.CREDIT_CARD,
    ]


def test_parse_empty_text_is_empty_document(pe):
    assert pe.parse("") == QifDocument()
    assert pe.parse("  \r\n ^ \r\n") == QifDocument()


def test_parse_with_other_date_format(pe):
    doc = pe.parse("!Type:Bank\nD2024-05-01\nT10\nPA\n^", DateFormat.FULL_YEAR_MONTH_DAY)
    assert doc.bank.transactions == (_mk_txn("A"),)


def test_fold_block_tracks_current_type(pe):
    # Arrange
    acc = DocumentAccumulator()

    # Act
    acc = pe.fold_block(acc, "!Type:Oth A")
    after_unknown = pe.fold_block(acc, "!Type:Unknown")

    # Assert
    assert acc.current_type is AccountType.ASSET
    assert acc.document.asset == QSection(AccountType.ASSET)
    assert after_unknown.current_type is AccountType.ASSET
    assert after_unknown.document == acc.document


# ---------- emit / round trip ----------


def test_emit_matches_document_emit(pe):
    doc = pe.parse(_BANK_FILE)
    assert pe.emit(doc) == doc.emit_qif()
    assert pe.emit(doc, DateFormat.MONTH_DAY_SHORT_YEAR).startswith("!Type:Bank\r\nD05/01/24\r\n")


def test_document_round_trip(pe):
    # Arrange
    split = QSplit(category="Groceries", memo="Half", amount=Decimal("5"))
    doc = (
        QifDocument()
        .merge_section(QSection(AccountType.CASH, (_mk_txn("Market", splits=[split, split]),)))
        .merge_section(
            QSection(
                AccountType.BANK,
                (
                    _mk_txn("Payroll", "2500.00", status=EnumClearedStatus.CLEARED),
                    _mk_txn("Rent", "-1200.00", day=3),
                ),
            )
        )
        .merge_section(QSection(AccountType.LIABILITY, (_mk_txn("Loan", "-99.99"),)))
    )

    # Act
    once = pe.emit(doc)
    parsed = pe.parse(once)

    # Assert
    assert parsed == doc
    assert pe.emit(parsed) == once
