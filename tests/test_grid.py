from datetime import date, datetime, timezone, timedelta

import pytest

from availabilities.services.slots.exceptions import InvalidTimestamp
from availabilities.services.slots.grid import (
    advance,
    day_key,
    parse_date,
    parse_timestamp,
    slot_label,
)


def test_day_key_truncates_to_iso_date():
    assert day_key(datetime(2022, 1, 3, 23, 59)) == "2022-01-03"
    assert day_key(date(2022, 1, 3)) == "2022-01-03"


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2022, 1, 3, 9, 0), "9:00"),
        (datetime(2022, 1, 3, 9, 30), "9:30"),
        (datetime(2022, 1, 3, 14, 0), "14:00"),
        (datetime(2022, 1, 3, 0, 0), "0:00"),
        (datetime(2022, 1, 3, 9, 5), "9:05"),
    ],
)
def test_slot_label_reads_minute_verbatim(value, expected):
    assert slot_label(value) == expected


def test_slot_label_snaps_to_half_hour():
    assert slot_label(datetime(2022, 1, 3, 9, 5), snap=True) == "9:00"
    assert slot_label(datetime(2022, 1, 3, 9, 45), snap=True) == "9:30"


def test_advance_rolls_over_year_boundary():
    assert advance(datetime(2021, 12, 31, 23, 45), 30) == datetime(2022, 1, 1, 0, 15)


def test_advance_rolls_over_month_boundary():
    assert advance(datetime(2022, 2, 28, 23, 30), 30) == datetime(2022, 3, 1, 0, 0)


def test_parse_timestamp_accepts_iso_strings():
    assert parse_timestamp("2022-01-03T09:00:00") == datetime(2022, 1, 3, 9, 0)
    assert parse_timestamp("2022-01-03 09:30") == datetime(2022, 1, 3, 9, 30)
    assert parse_timestamp("2022-01-03T09:00:00Z") == datetime(2022, 1, 3, 9, 0)


def test_parse_timestamp_keeps_wall_clock_of_aware_datetime():
    aware = datetime(2022, 1, 3, 9, 0, tzinfo=timezone(timedelta(hours=3)))
    assert parse_timestamp(aware) == datetime(2022, 1, 3, 9, 0)


def test_parse_timestamp_reads_epoch_milliseconds_as_utc():
    assert parse_timestamp(1641200400000) == datetime(2022, 1, 3, 9, 0)


def test_parse_timestamp_date_is_midnight():
    assert parse_timestamp(date(2022, 1, 3)) == datetime(2022, 1, 3, 0, 0)


@pytest.mark.parametrize("value", ["not a date", "2022-13-01", None, True, object()])
def test_parse_timestamp_rejects_garbage(value):
    with pytest.raises(InvalidTimestamp):
        parse_timestamp(value)


def test_invalid_timestamp_is_a_value_error():
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")


def test_parse_date():
    assert parse_date("2022-01-01") == date(2022, 1, 1)
    assert parse_date(datetime(2022, 1, 1, 18, 30)) == date(2022, 1, 1)
    assert parse_date(date(2022, 1, 1)) == date(2022, 1, 1)
