"""Calendar dates without a time of day."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fastdate.errors import Error

_ZERO = ord("0")


def _digit(raw: bytes, index: int, error: str) -> int:
    value = raw[index] - _ZERO
    if not 0 <= value <= 9:
        raise Error(error)
    return value


def _days_in_month(year: int, month: int) -> int:
    if month in (1, 3, 5, 7, 8, 10, 12):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        leap = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
        return 29 if leap else 28
    raise Error("OutOfRangeMonth")


@dataclass(frozen=True)
class Date:
    """A calendar date: ``day`` 1..31, ``mon`` 1..12, ``year`` 0..9999.

    ``str(date)`` gives ``YYYY-MM-DD``; :meth:`from_str` reads it back.
    """

    day: int
    mon: int
    year: int

    @classmethod
    def from_str(cls, s: str) -> Date:
        """Parse ``YYYY?MM?DD`` from the start of ``s``.

        The separators are not checked and anything after the tenth
        character is ignored.
        """
        raw = s.encode("utf-8")
        if len(raw) < 10:
            raise Error("TooShort")
        year = 0
        for index in range(4):
            year = year * 10 + _digit(raw, index, "InvalidCharYear")
        month = _digit(raw, 5, "InvalidCharMonth") * 10 + _digit(
            raw, 6, "InvalidCharMonth"
        )
        day = _digit(raw, 8, "InvalidCharDay") * 10 + _digit(raw, 9, "InvalidCharDay")
        max_days = _days_in_month(year, month)
        if not 1 <= day <= max_days:
            raise Error("OutOfRangeDay")
        return cls(day=day, mon=month, year=year)

    def set_day(self, arg: int) -> Date:
        """Return a copy with ``day`` set; values outside 1..31 are ignored."""
        if not 1 <= arg <= 31:
            return self
        return replace(self, day=arg)

    def set_mon(self, arg: int) -> Date:
        """Return a copy with ``mon`` set; values outside 1..12 are ignored."""
        if not 1 <= arg <= 12:
            return self
        return replace(self, mon=arg)

    def set_year(self, arg: int) -> Date:
        """Return a copy with ``year`` set; values outside 0..9999 are ignored."""
        if not 0 <= arg <= 9999:
            return self
        return replace(self, year=arg)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.mon:02d}-{self.day:02d}"