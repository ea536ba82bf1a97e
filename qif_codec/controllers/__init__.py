from .qif_loader import load_document, read_qif_text, save_document

__all__ = ["load_document", "read_qif_text", "save_document"]
