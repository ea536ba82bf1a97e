from __future__ import annotations

from decimal import Decimal
from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .i_equatable import IEquatable
from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IEquatable, IToDict, Protocol):
    """Structural shape of a split row (S/E/$) that can be emitted."""

    category: Optional[str]
    memo: str
    amount: Decimal

    def emit_qif(self) -> str: ...
