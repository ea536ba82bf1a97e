from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QifCode:
    code: str
    description: str
    used_in: str
    example: str

    def line(self, value: object = "") -> str:
        """Render one record line: the code followed by ``value``."""
        return f"{self.code}{value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QifCode):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)
