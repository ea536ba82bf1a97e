from enum import Enum
from typing import Optional


class EnumClearedStatus(Enum):
    """
    Enum representing the cleared status of a transaction.
    """

    CLEARED = "X"
    RECONCILED = "*"

    @classmethod
    def from_char(cls, char: str) -> Optional["EnumClearedStatus"]:
        """
        Convert the remainder of a ``C`` line to a status.
        Anything other than ``X`` or ``*`` means "no status".
        """
        for status in cls:
            if status.value == char:
                return status
        return None

    def __str__(self) -> str:
        return self.value
