"""Date, time and datetime values with RFC 3339 parsing, patterns and fixed UTC offsets."""

__version__ = "0.3.34"
__all__ = ["clock", "date", "datetimes", "durations", "errors", "localtime", "rfc3339"]