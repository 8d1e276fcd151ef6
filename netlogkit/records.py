"""Record types for log dates and per-address connection counts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return int(match.group())


@total_ordering
@dataclass(eq=False)
class LogDate:
    """A day-month-year date; equality and ordering look at the day only."""

    day: int
    month: int
    year: int

    @classmethod
    def parse(cls, text: str) -> "LogDate":
        """Parse a date written as DD-M-YYYY."""
        day_digits = []
        month_digits = []
        year_digits = []
        for position, char in enumerate(text):
            if position in (0, 1):
                day_digits.append(char)
            elif position == 3 or (position == 4 and char != "-"):
                month_digits.append(char)
            elif 5 <= position <= 8:
                year_digits.append(char)
        return cls(
            _leading_int("".join(day_digits)),
            _leading_int("".join(month_digits)),
            _leading_int("".join(year_digits)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogDate):
            return NotImplemented
        return self.day == other.day

    def __lt__(self, other: "LogDate") -> bool:
        if not isinstance(other, LogDate):
            return NotImplemented
        return self.day < other.day

    def __hash__(self) -> int:
        return hash(self.day)

    def __str__(self) -> str:
        return f"{self.day}-{self.month}-{self.year}"


@dataclass(eq=False)
class Connection:
    """An address with how often it was contacted.

    Equality looks at the address; ordering looks at the frequency.
    """

    ip: str = ""
    frequency: int = 0
    days_in_a_row: int = 0
    days_seen: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Connection):
            return NotImplemented
        return self.ip == other.ip

    def __hash__(self) -> int:
        return hash(self.ip)

    def __lt__(self, other: "Connection") -> bool:
        if not isinstance(other, Connection):
            return NotImplemented
        return self.frequency < other.frequency

    def __gt__(self, other: "Connection") -> bool:
        if not isinstance(other, Connection):
            return NotImplemented
        return self.frequency > other.frequency

    def __str__(self) -> str:
        return f"iP: {self.ip} Frecuencia: {self.frequency}"