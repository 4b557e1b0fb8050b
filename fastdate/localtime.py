"""System clock access, local time breakdown and the process-wide UTC offset."""

from __future__ import annotations

import calendar
import threading
import time
from dataclasses import dataclass

_NANOS_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class Timespec:
    """A time value in whole seconds since the epoch plus nanoseconds."""

    sec: int
    nsec: int = 0

    @classmethod
    def now(cls) -> Timespec:
        """Return the current time in UTC."""
        total = time.time_ns()
        if total < 0:
            raise RuntimeError("system time before Unix epoch")
        sec, nsec = divmod(total, _NANOS_PER_SEC)
        return cls(sec, nsec)

    def local(self) -> Tm:
        """Break this time down in the system's local time zone."""
        lt = time.localtime(self.sec)
        utcoff = lt.tm_gmtoff
        if utcoff is None:
            utcoff = calendar.timegm(lt) - self.sec
        return Tm(
            tm_sec=lt.tm_sec,
            tm_min=lt.tm_min,
            tm_hour=lt.tm_hour,
            tm_mday=lt.tm_mday,
            tm_mon=lt.tm_mon - 1,
            tm_year=lt.tm_year - 1900,
            tm_wday=(lt.tm_wday + 1) % 7,
            tm_yday=lt.tm_yday - 1,
            tm_isdst=lt.tm_isdst,
            tm_utcoff=int(utcoff),
            tm_nsec=self.nsec,
        )


@dataclass
class Tm:
    """A broken-down calendar time.

    Months count from 0, years from 1900, week days from Sunday = 0 and
    year days from 0. ``tm_utcoff`` is seconds east of UTC.
    """

    tm_sec: int = 0
    tm_min: int = 0
    tm_hour: int = 0
    tm_mday: int = 0
    tm_mon: int = 0
    tm_year: int = 0
    tm_wday: int = 0
    tm_yday: int = 0
    tm_isdst: int = 0
    tm_utcoff: int = 0
    tm_nsec: int = 0

    def to_timespec(self) -> Timespec:
        """Convert back to seconds since the epoch.

        A zero offset is read as UTC; any other offset is read as the
        system's local time.
        """
        fields = (
            self.tm_year + 1900,
            self.tm_mon + 1,
            self.tm_mday,
            self.tm_hour,
            self.tm_min,
            self.tm_sec,
        )
        if self.tm_utcoff == 0:
            sec = calendar.timegm(fields)
        else:
            sec = int(
                time.mktime(
                    fields
                    + ((self.tm_wday + 6) % 7, self.tm_yday + 1, self.tm_isdst)
                )
            )
        return Timespec(sec, self.tm_nsec)


_lock = threading.Lock()
_offset: int | None = None


def offset_sec() -> int:
    """Return the UTC offset in seconds used for local times.

    The first call reads it from the system; later calls reuse that value
    until :func:`set_offset_sec` changes it.
    """
    global _offset
    with _lock:
        if _offset is None:
            _offset = Timespec.now().local().tm_utcoff
        return _offset


def set_offset_sec(sec: int) -> None:
    """Set the UTC offset in seconds used for local times."""
    global _offset
    with _lock:
        _offset = int(sec)