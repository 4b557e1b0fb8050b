import pytest

from fastdate.date import Date
from fastdate.errors import Error


def test_date_empty():
    with pytest.raises(Error):
        Date.from_str("")


def test_too_short_message():
    with pytest.raises(Error) as info:
        Date.from_str("202-02-01")
    assert str(info.value) == "TooShort"


def test_from_str():
    assert str(Date.from_str("2022-12-13")) == "2022-12-13"


@pytest.mark.parametrize(
    "text", ["2022-04-13", "2022-06-13", "2022-09-13", "2022-11-13", "2022-02-13"]
)
def test_from_str_short_months(text):
    assert str(Date.from_str(text)) == text


def test_from_str_leap():
    assert str(Date.from_str("2024-02-13")) == "2024-02-13"
    assert Date.from_str("2024-02-29") == Date(day=29, mon=2, year=2024)


def test_non_leap_feb_29():
    with pytest.raises(Error) as info:
        Date.from_str("2023-02-29")
    assert str(info.value) == "OutOfRangeDay"


def test_century_non_leap():
    with pytest.raises(Error):
        Date.from_str("1900-02-29")
    assert Date.from_str("2000-02-29").day == 29


def test_from_str_mon_out():
    with pytest.raises(Error) as info:
        Date.from_str("2024-14-13")
    assert str(info.value) == "OutOfRangeMonth"


def test_from_str_day_zero():
    with pytest.raises(Error):
        Date.from_str("2024-14-0")


def test_from_str_day_out():
    with pytest.raises(Error) as info:
        Date.from_str("2024-02-40")
    assert str(info.value) == "OutOfRangeDay"


@pytest.mark.parametrize(
    "text, message",
    [
        ("20x2-12-13", "InvalidCharYear"),
        ("2022-1x-13", "InvalidCharMonth"),
        ("2022-12-x3", "InvalidCharDay"),
    ],
)
def test_invalid_chars(text, message):
    with pytest.raises(Error) as info:
        Date.from_str(text)
    assert str(info.value) == message


def test_set_day():
    d = Date.from_str("2024-02-01").set_day(1)
    assert str(d) == "2024-02-01"
    assert d.day == 1
    assert str(Date.from_str("2024-02-01").set_day(0)) == "2024-02-01"
    assert str(Date.from_str("2024-02-01").set_day(50)) == "2024-02-01"
    assert Date.from_str("2024-02-01").set_day(9).day == 9


def test_set_mon():
    d = Date.from_str("2024-02-01").set_mon(2)
    assert str(d) == "2024-02-01"
    assert d.mon == 2
    assert str(Date.from_str("2024-02-01").set_mon(0)) == "2024-02-01"
    assert str(Date.from_str("2024-02-01").set_mon(50)) == "2024-02-01"
    assert Date.from_str("2024-02-01").set_mon(7).mon == 7


def test_set_year():
    d = Date.from_str("2024-02-01").set_year(2024)
    assert str(d) == "2024-02-01"
    assert d.year == 2024
    assert str(Date.from_str("2024-02-01").set_year(-1)) == "2024-02-01"
    assert str(Date.from_str("2024-02-01").set_year(10000)) == "2024-02-01"
    assert Date.from_str("2024-02-01").set_year(1999).year == 1999


def test_round_trip():
    d = Date.from_str("2024-02-01")
    assert Date.from_str(str(d)) == d
    assert hash(Date.from_str(str(d))) == hash(d)


def test_from_str_slashes():
    assert str(Date.from_str("2022/12/13")) == "2022-12-13"


def test_trailing_text_ignored():
    assert str(Date.from_str("2022-12-13 11:12:13.123456")) == "2022-12-13"


def test_small_year_padding():
    assert str(Date(day=1, mon=1, year=0)) == "0000-01-01"