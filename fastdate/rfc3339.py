"""Reading and writing RFC 3339 timestamps and the token-based format patterns."""

from __future__ import annotations

import calendar
import re

from fastdate.clock import Time
from fastdate.errors import Error

_FRACTION_DIGITS = 9

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))",
    re.ASCII,
)

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _days_in_month(year: int, mon: int) -> int:
    if mon == 2 and calendar.isleap(year):
        return 29
    return _MONTH_DAYS[mon - 1]


def split_offset(offset: int) -> tuple[int, int, int]:
    """Split an offset in seconds into hours, minutes and seconds.

    All three parts carry the sign of the offset.
    """
    sign = -1 if offset < 0 else 1
    hours, rest = divmod(abs(offset), 3600)
    minutes, seconds = divmod(rest, 60)
    return sign * hours, sign * minutes, sign * seconds


def parse_rfc3339(text: str) -> tuple[int, int, int, int, int, int, int, int]:
    """Parse a full RFC 3339 timestamp.

    Returns ``(year, mon, day, hour, minute, sec, nano, offset)`` with the
    offset in seconds east of UTC. Fraction digits past the ninth are
    ignored. Raises :class:`Error` when the text is not a valid timestamp.
    """
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise Error(f"invalid RFC 3339 datetime: '{text}'")
    year, mon, day, hour, minute, sec = (int(part) for part in match.group(1, 2, 3, 4, 5, 6))
    if not 1 <= mon <= 12:
        raise Error("the 'month' component could not be parsed")
    if not 1 <= day <= _days_in_month(year, mon):
        raise Error("the 'day' component could not be parsed")
    if hour > 23:
        raise Error("the 'hour' component could not be parsed")
    if minute > 59:
        raise Error("the 'minute' component could not be parsed")
    if sec > 59:
        raise Error("the 'second' component could not be parsed")

    fraction = match.group(7)
    nano = 0
    if fraction is not None:
        nano = int(fraction[:_FRACTION_DIGITS].ljust(_FRACTION_DIGITS, "0"))

    offset = 0
    if match.group(8) is None:
        off_hour = int(match.group(10))
        off_minute = int(match.group(11))
        if off_hour > 23:
            raise Error("the 'offset hour' component could not be parsed")
        if off_minute > 59:
            raise Error("the 'offset minute' component could not be parsed")
        offset = off_hour * 3600 + off_minute * 60
        if match.group(9) == "-":
            offset = -offset
    return year, mon, day, hour, minute, sec, nano, offset


def render_rfc3339(
    year: int,
    mon: int,
    day: int,
    hour: int,
    minute: int,
    sec: int,
    nano: int,
    offset: int,
    zone: bool,
) -> str:
    """Render a timestamp as ``YYYY-MM-DDThh:mm:ss[.fraction]``.

    The fraction loses its trailing zeros and is left out when zero. With
    ``zone`` the offset follows: ``Z`` for zero, otherwise ``+hh:mm`` with
    ``:ss`` added when the offset has seconds.
    """
    text = f"{year:04d}-{mon:02d}-{day:02d}T" + str(
        Time(nano=nano, sec=sec, minute=minute, hour=hour)
    )
    if not zone:
        return text
    if offset == 0:
        return text + "Z"
    h, m, s = (abs(part) for part in split_offset(offset))
    sign = "+" if offset >= 0 else "-"
    text += f"{sign}{h:02d}:{m:02d}"
    if s:
        text += f":{s:02d}"
    return text


def format_pattern(
    fmt: str,
    year: int,
    mon: int,
    day: int,
    hour: int,
    minute: int,
    sec: int,
    nano: int,
    offset: int,
) -> str:
    """Fill a pattern with the given fields.

    Tokens are ``YYYY``, ``MM``, ``DD``, ``hh``, ``mm``, ``ss``,
    ``.000000`` (microseconds), ``.000000000`` (nanoseconds) and
    ``+00:00`` (offset). Everything else is copied as it stands.
    """
    h, m, _ = split_offset(offset)
    sign = "+" if offset >= 0 else "-"
    replacements = (
        ("YYYY", f"{year:04d}"),
        ("MM", f"{mon:02d}"),
        ("DD", f"{day:02d}"),
        ("hh", f"{hour:02d}"),
        ("mm", f"{minute:02d}"),
        ("ss", f"{sec:02d}"),
    )
    result = ""
    for index, char in enumerate(fmt):
        result += char
        if result.endswith(".000000000"):
            result = result[: -len(".000000000")] + f".{nano:09d}"
        elif result.endswith(".000000"):
            if index + 3 < len(fmt) and fmt[index + 1 : index + 4] == "000":
                continue
            result = result[: -len(".000000")] + f".{nano // 1000:06d}"
        elif result.endswith("+00:00"):
            result = result[: -len("+00:00")] + f"{sign}{abs(h):02d}:{abs(m):02d}"
        else:
            for token, value in replacements:
                if result.endswith(token):
                    result = result[: -len(token)] + value
                    break
    return result