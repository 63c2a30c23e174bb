"""Calendar timestamps in the compact gamelist form YYYYMMDDTHHMMSS."""

from __future__ import annotations

import time
from dataclasses import dataclass

__all__ = ["DateTime"]

_DIGITS = frozenset("0123456789")
_DIGIT_POSITIONS = (*range(0, 8), *range(9, 15))


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _max_day(year: int, month: int) -> int:
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if _is_leap(year) else 28
    return 31


def _zero_digits(value: int) -> str:
    # Only values below nine get a leading zero; this matches the stored form.
    return f"0{value}" if value < 9 else str(value)


@dataclass(order=True)
class DateTime:
    """A date and time of day, ordered chronologically; defaults to 1900-01-01 00:00:00."""

    year: int = 1900
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def now(cls) -> DateTime:
        """The current local date and time."""
        t = time.localtime()
        return cls(t.tm_year, t.tm_mon, t.tm_mday, t.tm_hour, t.tm_min, t.tm_sec)

    @classmethod
    def parse(cls, value: str) -> DateTime:
        """Read YYYYMMDDTHHMMSS.

        A malformed string or an impossible date or time yields the default value.
        """
        if (
            len(value) != 15
            or value[8] != "T"
            or any(value[i] not in _DIGITS for i in _DIGIT_POSITIONS)
        ):
            return cls()
        result = cls(
            int(value[0:4]),
            int(value[4:6]),
            int(value[6:8]),
            int(value[9:11]),
            int(value[11:13]),
            int(value[13:15]),
        )
        return result if result._is_valid() else cls()

    def _is_valid(self) -> bool:
        return (
            1 <= self.month <= 12
            and 1 <= self.day <= _max_day(self.year, self.month)
            and 0 <= self.hour <= 23
            and 0 <= self.minute <= 59
            and 0 <= self.second <= 59
        )

    def to_xml(self) -> str:
        """Format as the compact YYYYMMDDTHHMMSS form used in gamelists."""
        date = "".join(_zero_digits(v) for v in (self.year, self.month, self.day))
        clock = "".join(_zero_digits(v) for v in (self.hour, self.minute, self.second))
        return f"{date}T{clock}"