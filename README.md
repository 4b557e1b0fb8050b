# fastdate

Small, dependency-free date and time values with RFC 3339 parsing and
rendering, token-based patterns and fixed UTC offsets.

## Install

```
pip install fastdate
```

## Values

- `fastdate.date.Date`: a calendar day with `year`, `mon` and `day`.
  `Date.from_str` reads `YYYY-MM-DD` (any separators, anything after the
  tenth character ignored); `str()` writes it back. `set_day`, `set_mon`
  and `set_year` return a copy and ignore out-of-range values.
- `fastdate.clock.Time`: a time of day with `hour`, `minute`, `sec` and
  `nano`. `Time.from_str` reads `hh:mm:ss[.fraction]` with up to nine
  fraction digits; `str()` drops trailing zeros of the fraction.
  `Time.from_duration` and `to_duration` convert to and from `timedelta`.
- `fastdate.datetimes.DateTime`: an instant with nanosecond precision and
  a fixed UTC offset in seconds. Equality, hashing and ordering compare the
  instant only.

All values are immutable; every change returns a new value.

```python
from fastdate.date import Date
from fastdate.clock import Time
from fastdate.datetimes import DateTime

str(Date.from_str("2022-12-13"))             # '2022-12-13'
str(Time.from_str("11:12:13.123456"))        # '11:12:13.123456'

dt = DateTime.from_str("2022-12-12 00:00:00.000000+09:00")
str(dt)                                      # '2022-12-12T00:00:00+09:00'
dt.offset()                                  # 32400
dt.date(), dt.time()                         # Date and Time at that offset
```

`DateTime.from_str` accepts a bare date, a space instead of `T`, a space
before the offset, `Z`, and hour-only offsets such as `+08`. Text without an
offset is read in the local offset; `DateTime.from_str_default(text, offset)`
uses the given offset instead.

`DateTime.combine(date, time, offset)`, `DateTime.from_date(date, offset)`
and `DateTime.from_time(time)` build values from the parts;
`DateTime.from_datetime` and `to_datetime` convert to and from the standard
`datetime` (microsecond precision).

## Patterns

`DateTime.parse` and `DateTime.format` understand the tokens `YYYY`, `MM`,
`DD`, `hh`, `mm`, `ss`, `.000000`, `.000000000` and `+00:00`; `parse` also
takes `Z`. `parse` reads each field at the position its token has in the
pattern, and uses the local offset when the pattern has neither `Z` nor
`+00:00`.

```python
dt = DateTime.parse("YYYY-MM-DD hh:mm:ss.000000Z", "2022-12-13 11:12:14.123456Z")
dt.format("YYYY/MM/DD hh:mm:ss.000000")      # '2022/12/13 11:12:14.123456'
```

The lower-level helpers `parse_rfc3339`, `render_rfc3339`, `format_pattern`
and `split_offset` live in `fastdate.rfc3339`.

## Offsets and arithmetic

```python
from fastdate.durations import from_minute

dt = DateTime.from_str("2013-10-06 00:00:00Z")
str(dt + from_minute(1))                     # '2013-10-06T00:01:00Z'
str(dt.set_offset(8 * 3600))                 # '2013-10-06T08:00:00+08:00'
dt.add_sub_sec(-1).display_stand()           # '2013-10-05 23:59:59'
```

`set_offset` clamps the offset to ±86399 seconds. Adding or subtracting a
`timedelta` moves the instant; subtracting two `DateTime` values gives a
`timedelta` (whole microseconds). `fastdate.durations` has `from_minute`,
`from_hour` and `from_day`, which reject negative counts.

Timestamps convert both ways with `from_timestamp`, `from_timestamp_millis`,
`from_timestamp_micros`, `from_timestamp_nano` and the matching
`unix_timestamp*` methods. `week_day()` returns Monday = 1 through
Sunday = 7. `display(zone)` gives RFC 3339 text, with the offset when
`zone` is true.

## Local offset

`fastdate.localtime.offset_sec()` returns the machine's UTC offset in
seconds, read once and cached; `set_offset_sec(sec)` overrides it for the
process. `Timespec` and `Tm` give the current time and its local breakdown.

## Errors

Parse failures raise `fastdate.errors.Error`, a `ValueError` whose text is
the message alone (for example `OutOfRangeDay` or `SecondFractionTooLong`).

## What it does not do

There is no command-line tool. Offsets are fixed numbers of seconds: there
are no named time zones and no daylight-saving rules beyond reading the
machine's current offset once.