# qif_codec/data_model/interfaces/enum_date_format.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class DateFormat(Enum):
    """
    Date layouts understood by the ``D`` line of a transaction.

    Each member carries a human-readable pattern (what a user would type)
    and the matching ``strptime``/``strftime`` pattern.
    """

    MONTH_DAY_FULL_YEAR = ("mm/dd/yyyy", "%m/%d/%Y")
    MONTH_DAY_SHORT_YEAR = ("mm/dd/yy", "%m/%d/%y")
    FULL_YEAR_MONTH_DAY = ("yyyy-mm-dd", "%Y-%m-%d")

    @property
    def human_pattern(self) -> str:
        return self.value[0]

    @property
    def machine_pattern(self) -> str:
        return self.value[1]

    @classmethod
    def from_human(cls, text: str) -> Optional["DateFormat"]:
        """
        Look up a format by either of its patterns.

        ``"mm/dd/yyyy"`` and ``"%m/%d/%Y"`` both resolve to
        ``MONTH_DAY_FULL_YEAR``; anything unrecognized returns None.
        """
        for fmt in cls:
            if text in fmt.value:
                return fmt
        return None

    def __str__(self) -> str:
        return self.human_pattern


DEFAULT_DATE_FORMAT = DateFormat.MONTH_DAY_FULL_YEAR
