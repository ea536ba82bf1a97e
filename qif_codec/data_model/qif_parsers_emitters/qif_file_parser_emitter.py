from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import TYPE_CHECKING, Optional

from qif_codec.data_model.interfaces import (
    DEFAULT_DATE_FORMAT,
    AccountType,
    DateFormat,
    IParserEmitter,
    TransactionBuildingError,
)
from qif_codec.data_model.q_wrapper import QifDocument
from qif_codec.data_model.q_wrapper import qif_codes as emit_q
from qif_codec.data_model.q_wrapper.q_section import (
    first_line,
    header_code,
    parse_section,
)
from qif_codec.data_model.q_wrapper.q_transaction import parse_transaction
from qif_codec.utilities.core_util import is_null_or_whitespace

log = logging.getLogger(__name__)

BLOCK_DELIMITER = emit_q.end_of_entry().code


@dataclass(frozen=True)
class DocumentAccumulator:
    """
    State carried from one block to the next while parsing a document.

    ``current_type`` is the account type of the most recent recognized
    section header; bare transaction
    blocks are filed under it. Blocks with an unrecognized header are
    skipped and leave it unchanged.
    """

    document: QifDocument = QifDocument()
    current_type: Optional[AccountType] = None


class QifFileParserEmitter(IParserEmitter[QifDocument]):
    """Parse QIF text into a QifDocument and emit it back to text."""

    # --- required by IParserEmitter ---

    def parse(
        self, unparsed_string: str, date_format: DateFormat = DEFAULT_DATE_FORMAT
    ) -> QifDocument:
        """
        Parse a whole document. Never raises: blocks that are neither a
        section nor a transaction contribute nothing.
        """
        blocks = self.split_blocks(unparsed_string)
        final = reduce(
            lambda acc, block: self.fold_block(acc, block, date_format),
            blocks,
            DocumentAccumulator(),
        )
        log.debug(
            "Parsed %d block(s) into %d section(s)",
            len(blocks),
            len(final.document.sections()),
        )
        return final.document

    def emit(
        self, item: QifDocument, date_format: DateFormat = DEFAULT_DATE_FORMAT
    ) -> str:
        return item.emit_qif(date_format)

    # ------- internal parsing helpers -------

    def split_blocks(self, text: str) -> list[str]:
        """
        Split on ``^`` (both record terminator and block delimiter) and trim
        surrounding whitespace from each block.
        """
        return [block.strip() for block in text.split(BLOCK_DELIMITER)]

    def fold_block(
        self,
        acc: DocumentAccumulator,
        block: str,
        date_format: DateFormat = DEFAULT_DATE_FORMAT,
    ) -> DocumentAccumulator:
        """Fold one block into the accumulator."""
        if is_null_or_whitespace(block):
            return acc

        section = parse_section(block, date_format)
        if section is not None:
            return DocumentAccumulator(
                document=acc.document.merge_section(section),
                current_type=section.account_type,
            )

        code = header_code(first_line(block))
        if code is not None:
            log.debug("Skipping section with unsupported type %r", code)
            return acc

        result = parse_transaction(block, date_format)
        if isinstance(result, TransactionBuildingError):
            log.debug("Skipping block that is not a transaction (%s)", result.name)
            return acc

        if acc.current_type is None:
            log.debug("Dropping transaction outside of any section")
            return acc

        return replace(
            acc, document=acc.document.add_transaction(acc.current_type, result)
        )


if TYPE_CHECKING:
    _is_parser_emitter: type[IParserEmitter[QifDocument]] = QifFileParserEmitter
