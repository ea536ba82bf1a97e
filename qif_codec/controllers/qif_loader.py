# qif_codec/controllers/qif_loader.py
from __future__ import annotations

import logging
from pathlib import Path

from qif_codec.data_model import (
    DEFAULT_DATE_FORMAT,
    DateFormat,
    QifDocument,
    QifFileError,
    QifFileParserEmitter,
)
from qif_codec.utilities.core_util import open_for_read, open_for_write

log = logging.getLogger(__name__)


def read_qif_text(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a whole QIF file as text. Line endings are kept as written.

    Raises
    ------
    QifFileError
        If the file cannot be opened, read or decoded.
    """
    try:
        with open_for_read(path=path, binary=False, encoding=encoding, newline="") as f:
            return f.read()
    except OSError as e:
        raise QifFileError(path, e.strerror or str(e), e.errno) from e
    except UnicodeError as e:
        raise QifFileError(path, f"Cannot decode as {encoding}") from e


def load_document(
    path: Path,
    encoding: str = "utf-8",
    date_format: DateFormat = DEFAULT_DATE_FORMAT,
) -> QifDocument:
    """
    Read and parse a QIF file.

    Parsing itself never fails; only file-system and decoding problems
    raise ``QifFileError``.
    """
    text = read_qif_text(path, encoding=encoding)
    document = QifFileParserEmitter().parse(text, date_format)
    log.info("Loaded %s: %d section(s)", path, len(document.sections()))
    return document


def save_document(
    document: QifDocument,
    path: Path,
    encoding: str = "utf-8",
    date_format: DateFormat = DEFAULT_DATE_FORMAT,
) -> None:
    """
    Write ``document`` to ``path`` verbatim, replacing any existing file.

    Raises
    ------
    QifFileError
        If the file cannot be written or encoded.
    """
    text = QifFileParserEmitter().emit(document, date_format)
    try:
        with open_for_write(path, encoding=encoding, newline="") as f:
            f.write(text)
    except OSError as e:
        raise QifFileError(path, e.strerror or str(e), e.errno) from e
    except UnicodeError as e:
        raise QifFileError(path, f"Cannot encode as {encoding}") from e
    log.info("Saved %s (%d characters)", path, len(text))
