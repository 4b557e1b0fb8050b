"""Instants on the time line, shown at a fixed UTC offset."""

from __future__ import annotations

import functools
import time as _time
from datetime import datetime, timedelta, timezone

from fastdate.clock import Time
from fastdate.date import Date
from fastdate.errors import Error
from fastdate.localtime import offset_sec as _local_offset
from fastdate.rfc3339 import format_pattern, parse_rfc3339, render_rfc3339, split_offset

_NANOS_PER_SEC = 1_000_000_000
_SECS_PER_DAY = 86_400
_MAX_OFFSET = 86_399
_MAX_WHOLE_OFFSET = 25 * 3600 + 59 * 60 + 59
_MIN_YEAR = -9999
_MAX_YEAR = 9999
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICRO = timedelta(microseconds=1)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    return a - b * _trunc_div(a, b)


def _days_from_civil(year: int, mon: int, day: int) -> int:
    year -= mon <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (mon + (-3 if mon > 2 else 9)) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def _civil_from_days(days: int) -> tuple[int, int, int]:
    days += 719468
    era = days // 146097
    doe = days - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    mon = mp + 3 if mp < 10 else mp - 9
    return yoe + era * 400 + (mon <= 2), mon, day


def _duration_nanos(d: timedelta) -> int:
    if not isinstance(d, timedelta):
        raise TypeError(f"expected a timedelta, got {type(d).__name__}")
    return (d // _ONE_MICRO) * 1000


@functools.total_ordering
class DateTime:
    """An instant with nanosecond precision and the UTC offset it is shown at.

    Equality, hashing and ordering look at the instant only, never at the
    offset. ``str(dt)`` gives RFC 3339 with the offset.
    """

    __slots__ = ("_nanos", "_offset", "_fields")

    def __init__(self, unix_nanos: int, offset: int = 0) -> None:
        if not -_MAX_WHOLE_OFFSET <= offset <= _MAX_WHOLE_OFFSET:
            raise Error(f"offset out of range: {offset}")
        local = unix_nanos + offset * _NANOS_PER_SEC
        secs, nano = divmod(local, _NANOS_PER_SEC)
        days, sod = divmod(secs, _SECS_PER_DAY)
        year, mon, day = _civil_from_days(days)
        if not _MIN_YEAR <= year <= _MAX_YEAR:
            raise OverflowError(f"year {year} is out of range")
        hour, rest = divmod(sod, 3600)
        minute, sec = divmod(rest, 60)
        self._nanos = unix_nanos
        self._offset = offset
        self._fields = (year, mon, day, hour, minute, sec, nano)

    @classmethod
    def _from_fields(
        cls,
        year: int,
        mon: int,
        day: int,
        hour: int,
        minute: int,
        sec: int,
        nano: int,
        offset: int,
    ) -> DateTime:
        secs = (
            _days_from_civil(year, mon, day) * _SECS_PER_DAY
            + hour * 3600
            + minute * 60
            + sec
            - offset
        )
        return cls(secs * _NANOS_PER_SEC + nano, offset)

    @classmethod
    def _from_rfc3339(cls, text: str, original: str) -> DateTime:
        try:
            fields = parse_rfc3339(text)
        except Error as exc:
            raise Error(f"{exc} of '{original}'") from None
        return cls._from_fields(*fields)

    # construction

    @classmethod
    def utc(cls) -> DateTime:
        """Return the current time at offset zero."""
        return cls(_time.time_ns(), 0)

    @classmethod
    def now(cls) -> DateTime:
        """Return the current time at the local offset."""
        return cls.utc().set_offset(_local_offset())

    @classmethod
    def from_timestamp(cls, sec: int) -> DateTime:
        """Build from whole seconds since the epoch, at offset zero."""
        return cls(sec * _NANOS_PER_SEC, 0)

    @classmethod
    def from_timestamp_micros(cls, micros: int) -> DateTime:
        """Build from microseconds since the epoch, at offset zero."""
        return cls(micros * 1000, 0)

    @classmethod
    def from_timestamp_millis(cls, ms: int) -> DateTime:
        """Build from milliseconds since the epoch, at offset zero."""
        return cls(ms * 1_000_000, 0)

    @classmethod
    def from_timestamp_nano(cls, nano: int) -> DateTime:
        """Build from nanoseconds since the epoch, at offset zero."""
        return cls(nano, 0)

    @classmethod
    def from_datetime(cls, value: datetime, offset: int = 0) -> DateTime:
        """Build from a standard datetime, shown at ``offset`` seconds.

        A naive datetime is taken to be in UTC.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        nanos = ((value - _EPOCH) // _ONE_MICRO) * 1000
        return cls(nanos, 0).set_offset(offset)

    def to_datetime(self) -> datetime:
        """Return an aware standard datetime; precision drops to microseconds."""
        value = _EPOCH + timedelta(microseconds=self._nanos // 1000)
        return value.astimezone(timezone(timedelta(seconds=self._offset)))

    @classmethod
    def from_date(cls, date: Date, offset: int = 0) -> DateTime:
        """Midnight of ``date`` as seen at ``offset`` seconds east of UTC."""
        text = f"{date.year:04d}-{date.mon:02d}-{date.day:02d} 00:00:00.000000000Z"
        return cls.from_str(text).set_offset(offset).add_sub_sec(-offset)

    @classmethod
    def from_time(cls, time: Time) -> DateTime:
        """``time`` on 0000-01-01 in UTC."""
        text = (
            f"0000-01-01 {time.hour:02d}:{time.minute:02d}:{time.sec:02d}"
            f".{time.nano:09d}Z"
        )
        return cls.from_str(text)

    @classmethod
    def combine(cls, date: Date, time: Time, offset: int = 0) -> DateTime:
        """``date`` at ``time`` as seen at ``offset`` seconds east of UTC."""
        text = (
            f"{date.year:04d}-{date.mon:02d}-{date.day:02d} "
            f"{time.hour:02d}:{time.minute:02d}:{time.sec:02d}.{time.nano:09d}Z"
        )
        return cls.from_str(text).set_offset(offset).add_sub_sec(-offset)

    # parsing

    @classmethod
    def from_str_default(cls, arg: str, default_offset: int) -> DateTime:
        """Parse an RFC 3339-like text; without an offset use ``default_offset``.

        Accepts a bare date, a space instead of ``T``, a space before the
        offset and an offset of hours only such as ``+08``.
        """
        v = arg
        if len(v) == 10:
            v += "T00:00:00.00"
        if len(v) > 10 and v[10] != "T":
            v = v[:10] + "T" + v[11:]
        have_offset = None
        if v.endswith("Z"):
            v = v[:-1] + "+00:00"
            have_offset = len(v) - 6
        else:
            if len(v) >= 6 and v[len(v) - 6] in "+-":
                have_offset = len(v) - 6
            if len(v) >= 3 and v[len(v) - 3] in "+-":
                have_offset = len(v) - 3
                v += ":00"
        if have_offset is not None and have_offset >= 1:
            space = have_offset - 1
            if len(v) > space and v[space] == " ":
                v = v[:space] + v[space + 1 :]
        if have_offset is None:
            if not -_MAX_WHOLE_OFFSET <= default_offset <= _MAX_WHOLE_OFFSET:
                raise Error(f"offset out of range: {default_offset}")
            h, m, _ = split_offset(default_offset)
            sign = "+" if h >= 0 and m >= 0 else "-"
            v += f"{sign}{abs(h):02d}:{abs(m):02d}"
        return cls._from_rfc3339(v, arg)

    @classmethod
    def from_str(cls, arg: str) -> DateTime:
        """Parse an RFC 3339-like text; without an offset use the local one."""
        return cls.from_str_default(arg, _local_offset())

    @classmethod
    def parse(cls, format: str, arg: str) -> DateTime:
        """Parse ``arg`` by the positions of the tokens in ``format``.

        Tokens are ``YYYY``, ``MM``, ``DD``, ``hh``, ``mm``, ``ss``,
        ``.000000``, ``.000000000``, ``+00:00`` and ``Z``. Without ``Z`` or
        ``+00:00`` the local offset is used.
        """
        fmt = format.encode("utf-8")
        raw = arg.encode("utf-8")

        def take(token: str, width: int) -> bytes | None:
            pos = fmt.find(token.encode("ascii"))
            if pos < 0:
                return None
            chunk = raw[pos : pos + width]
            if len(chunk) < width:
                raise Error(f"warn '{token}'")
            return chunk

        head = bytearray(b"0000-00-00T00:00:00")
        for token, width, start in (
            ("YYYY", 4, 0),
            ("MM", 2, 5),
            ("DD", 2, 8),
            ("hh", 2, 11),
            ("mm", 2, 14),
            ("ss", 2, 17),
        ):
            chunk = take(token, width)
            if chunk is not None:
                head[start : start + width] = chunk
        pieces = [bytes(head)]
        fraction = take(".000000000", 10)
        if fraction is None:
            fraction = take(".000000", 7)
        if fraction is not None:
            pieces.append(fraction)
        have_offset = False
        if b"Z" in fmt:
            pieces.append(b"Z")
            have_offset = True
        zone = take("+00:00", 6)
        if zone is not None:
            pieces.append(zone)
            have_offset = True
        if not have_offset:
            local = _local_offset()
            h, m, _ = split_offset(local)
            sign = "+" if local >= 0 else "-"
            pieces.append(f"{sign}{abs(h):02d}:{abs(m):02d}".encode("ascii"))
        try:
            text = b"".join(pieces).decode("utf-8")
        except UnicodeDecodeError:
            text = ""
        return cls._from_rfc3339(text, arg)

    # changes

    def set_offset(self, offset_sec: int) -> DateTime:
        """Show the same instant at another offset, clamped to ±86399 seconds."""
        offset_sec = max(-_MAX_OFFSET, min(_MAX_OFFSET, offset_sec))
        return DateTime(self._nanos, offset_sec)

    def add_duration(self, d: timedelta) -> DateTime:
        """Return the instant ``d`` later."""
        return DateTime(self._nanos + _duration_nanos(d), self._offset)

    def sub_duration(self, d: timedelta) -> DateTime:
        """Return the instant ``d`` earlier."""
        return DateTime(self._nanos - _duration_nanos(d), self._offset)

    def add_sub_sec(self, sec: int) -> DateTime:
        """Move by ``sec`` seconds, forward or backward."""
        return DateTime(self._nanos + sec * _NANOS_PER_SEC, self._offset)

    def set_nano(self, nano: int) -> DateTime:
        """Replace the fraction of the second, given in microseconds."""
        current = self.nano()
        if nano == current:
            return self
        return DateTime(self._nanos - current + nano * 1000, self._offset)

    # comparison

    def before(self, other: DateTime) -> bool:
        """Whether this instant comes before ``other``."""
        return self < other

    def after(self, other: DateTime) -> bool:
        """Whether this instant comes after ``other``."""
        return self > other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    # timestamps

    def unix_timestamp(self) -> int:
        """Whole seconds since the epoch, rounded down."""
        return self._nanos // _NANOS_PER_SEC

    def unix_timestamp_micros(self) -> int:
        """Microseconds since the epoch, rounded toward zero."""
        return _trunc_div(self._nanos, 1000)

    def unix_timestamp_millis(self) -> int:
        """Milliseconds since the epoch, rounded toward zero."""
        return _trunc_div(self._nanos, 1_000_000)

    def unix_timestamp_nano(self) -> int:
        """Nanoseconds since the epoch."""
        return self._nanos

    # fields

    def week_day(self) -> int:
        """Day of the week, Monday = 1 through Sunday = 7."""
        days = _trunc_div(self.unix_timestamp(), _SECS_PER_DAY) - 11017
        wday = _trunc_mod(3 + days, 7)
        if wday <= 0:
            wday += 7
        return wday

    def nano(self) -> int:
        return self._fields[6]

    def ms(self) -> int:
        return self._fields[6] // 1_000_000

    def micro(self) -> int:
        return self._fields[6] // 1000

    def sec(self) -> int:
        return self._fields[5]

    def minute(self) -> int:
        return self._fields[4]

    def hour(self) -> int:
        return self._fields[3]

    def day(self) -> int:
        return self._fields[2]

    def mon(self) -> int:
        return self._fields[1]

    def year(self) -> int:
        return self._fields[0]

    def offset(self) -> int:
        """Seconds east of UTC."""
        return self._offset

    def offset_hms(self) -> tuple[int, int, int]:
        """The offset as hours, minutes and seconds, each with its sign."""
        return split_offset(self._offset)

    def date(self) -> Date:
        """The calendar date at this offset."""
        year, mon, day = self._fields[:3]
        return Date(day=day, mon=mon, year=year)

    def time(self) -> Time:
        """The time of day at this offset."""
        _, _, _, hour, minute, sec, nano = self._fields
        return Time(nano=nano, sec=sec, minute=minute, hour=hour)

    # rendering

    def format(self, fmt: str) -> str:
        """Fill a pattern such as ``YYYY-MM-DD hh:mm:ss.000000+00:00``."""
        return format_pattern(fmt, *self._fields, self._offset)

    def display(self, zone: bool = False) -> str:
        """RFC 3339 text, with the offset when ``zone`` is true."""
        return render_rfc3339(*self._fields, self._offset, zone)

    def display_stand(self) -> str:
        """``YYYY-MM-DD hh:mm:ss[.fraction]`` without an offset."""
        text = self.display(False)
        return text[:10] + " " + text[11:]

    def __str__(self) -> str:
        return self.display(True)

    def __repr__(self) -> str:
        return f"DateTime('{self}')"

    # arithmetic

    def __add__(self, other: object) -> DateTime:
        if isinstance(other, timedelta):
            return self.add_duration(other)
        return NotImplemented

    def __sub__(self, other: object) -> DateTime | timedelta:
        if isinstance(other, timedelta):
            return self.sub_duration(other)
        if isinstance(other, DateTime):
            return timedelta(microseconds=(self._nanos - other._nanos) // 1000)
        return NotImplemented