"""Times of day with nanosecond precision."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta

from fastdate.errors import Error

_ZERO = ord("0")
_FRACTION_DIGITS = 9


def _is_digit(raw: bytes, index: int) -> bool:
    return index < len(raw) and 0 <= raw[index] - _ZERO <= 9


def _digit(raw: bytes, index: int, error: str) -> int:
    if not _is_digit(raw, index):
        raise Error(error)
    return raw[index] - _ZERO


@dataclass(frozen=True)
class Time:
    """A time of day: ``hour`` 0..23, ``minute`` and ``sec`` 0..59,
    ``nano`` 0..999999999.

    ``str(time)`` gives ``hh:mm:ss`` followed by the fraction with its
    trailing zeros removed, if there is one.
    """

    nano: int = 0
    sec: int = 0
    minute: int = 0
    hour: int = 0

    @classmethod
    def parse_prefix(cls, text: str, offset: int) -> tuple[Time, int]:
        """Parse ``hh:mm:ss[.fraction]`` starting at byte ``offset``.

        Returns the time and the number of bytes it took up. Anything after
        it is ignored. An offset past the end gives midnight and length 0.
        """
        raw = text.encode("utf-8")
        if len(raw) < offset:
            return cls(), 0
        if len(raw) - offset < 5:
            raise Error("TooShort")
        hour = _digit(raw, offset, "InvalidCharHour") * 10 + _digit(
            raw, offset + 1, "InvalidCharHour"
        )
        minute = _digit(raw, offset + 3, "InvalidCharMinute") * 10 + _digit(
            raw, offset + 4, "InvalidCharMinute"
        )
        if hour > 23:
            raise Error("OutOfRangeHour")
        if minute > 59:
            raise Error("OutOfRangeMinute")
        second = _digit(raw, offset + 6, "InvalidCharSecond") * 10 + _digit(
            raw, offset + 7, "InvalidCharSecond"
        )
        if second > 59:
            raise Error("OutOfRangeSecond")
        length = 8
        nano = 0
        separator = raw[offset + 8 : offset + 9]
        if separator in (b".", b","):
            length = 9
            start = offset + length
            end = start
            while _is_digit(raw, end):
                if end - start >= _FRACTION_DIGITS:
                    raise Error("SecondFractionTooLong")
                end += 1
            if end == start:
                raise Error("SecondFractionMissing")
            digits = raw[start:end].decode("ascii")
            nano = int(digits.ljust(_FRACTION_DIGITS, "0"))
            length += end - start
        return cls(nano=nano, sec=second, minute=minute, hour=hour), length

    @classmethod
    def from_str(cls, s: str) -> Time:
        """Parse ``hh:mm:ss[.fraction]`` from the start of ``s``."""
        return cls.parse_prefix(s, 0)[0]

    def set_nano(self, arg: int) -> Time:
        """Return a copy with the nanoseconds set."""
        return replace(self, nano=arg)

    def set_micro(self, arg: int) -> Time:
        """Return a copy with the fraction set from microseconds."""
        return replace(self, nano=arg * 1000)

    def set_sec(self, arg: int) -> Time:
        """Return a copy with the seconds set."""
        return replace(self, sec=arg)

    def set_minute(self, arg: int) -> Time:
        """Return a copy with the minutes set."""
        return replace(self, minute=arg)

    def set_hour(self, arg: int) -> Time:
        """Return a copy with the hours set."""
        return replace(self, hour=arg)

    def micro(self) -> int:
        """Return the fraction of the second in whole microseconds."""
        return self.nano // 1000

    @classmethod
    def from_duration(cls, d: timedelta) -> Time:
        """Split a non-negative duration into hours, minutes, seconds and fraction."""
        if d < timedelta(0):
            raise ValueError(f"duration must not be negative: {d}")
        total_us = d // timedelta(microseconds=1)
        secs, micros = divmod(total_us, 1_000_000)
        hour = secs // 3600
        minute = secs // 60 - hour * 60
        sec = secs - hour * 3600 - minute * 60
        return cls(nano=micros * 1000, sec=sec, minute=minute, hour=hour)

    def to_duration(self) -> timedelta:
        """Return the time since midnight; nanoseconds below a microsecond are dropped."""
        return timedelta(
            hours=self.hour,
            minutes=self.minute,
            seconds=self.sec,
            microseconds=self.nano // 1000,
        )

    def __str__(self) -> str:
        text = f"{self.hour:02d}:{self.minute:02d}:{self.sec:02d}"
        if self.nano:
            text += "." + f"{self.nano:09d}".rstrip("0")
        return text