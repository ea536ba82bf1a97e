# qif_codec/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing_extensions import Protocol, TypeAlias, runtime_checkable

RecursiveDictStr: TypeAlias = (
    str | None | list["RecursiveDictStr"] | dict[str, "RecursiveDictStr"]
)


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> dict[str, RecursiveDictStr]: ...
