#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
"""

from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import IO, Any, Literal, Optional, overload

# zero-width joiner, text and emoji variation selectors
_GRAPHEME_EXTENDERS = frozenset("\u200d\ufe0e\ufe0f")

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def empty_to_none(s: str) -> Optional[str]:
    """QIF writes absent text fields as a bare tag; map ``""`` back to None."""
    return s if s else None


def split_tag(line: str) -> tuple[str, str]:
    """
    Split a record line into its tag and the remainder.

    The tag is the first user-perceived character: the first code point
    together with any combining marks, zero-width joiners or variation
    selectors that follow it. A tag letter carrying a combining accent
    (U+0301) therefore matches no field code, and the mark never leaks into
    the value.
    """
    if not line:
        return "", ""
    end = 1
    while end < len(line) and _extends_grapheme(line[end]):
        end += 1
    return line[:end], line[end:]


def _extends_grapheme(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M") or ch in _GRAPHEME_EXTENDERS


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


def open_for_write(path: Path, **kwargs: Any) -> IO[str]:
    return open(path, "w", **kwargs)


# endregion Common functions
