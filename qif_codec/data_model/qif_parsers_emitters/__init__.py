from .qif_file_parser_emitter import DocumentAccumulator, QifFileParserEmitter

__all__ = ["DocumentAccumulator", "QifFileParserEmitter"]
