"""Helpers that build durations from minutes, hours and days."""

from datetime import timedelta


def _check(value: int, unit: str) -> int:
    if value < 0:
        raise ValueError(f"{unit} must not be negative: {value}")
    return value


def from_minute(minute: int) -> timedelta:
    """Return a duration of ``minute`` minutes."""
    return timedelta(seconds=_check(minute, "minute") * 60)


def from_hour(hour: int) -> timedelta:
    """Return a duration of ``hour`` hours."""
    return from_minute(_check(hour, "hour") * 60)


def from_day(day: int) -> timedelta:
    """Return a duration of ``day`` days."""
    return from_hour(_check(day, "day") * 24)