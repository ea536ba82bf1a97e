# qif_codec/data_model/interfaces/errors.py
from __future__ import annotations

from enum import Enum
from pathlib import Path


class TransactionBuildingError(Enum):
    """
    Why a transaction draft could not be finalized.

    Members are returned (not raised) by ``TransactionDraft.finalize`` and
    ``parse_transaction``; they mean "this transaction is unusable", not
    "the document is corrupt".
    """

    NO_DATE = "Date could not be found or parsed."
    NO_VENDOR = "Vendor not found."
    NO_AMOUNT = "No Amount value found."

    @property
    def message(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class QifFileError(OSError):
    """
    A QIF file could not be read or written.

    Wraps the underlying ``OSError`` or ``UnicodeError``; the original is
    available as ``__cause__``.
    """

    def __init__(self, path: Path | str, reason: str, errno: int | None = None):
        super().__init__(errno, reason, str(path))
        self.path = Path(path)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.reason}: {self.path}"
