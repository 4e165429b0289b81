from datetime import date

from availabilities.services.slots.horizon import build_horizon, resolve_weekly_day


def test_build_horizon_seven_days_from_reference():
    assert build_horizon(date(2022, 1, 1)) == [
        "2022-01-01",
        "2022-01-02",
        "2022-01-03",
        "2022-01-04",
        "2022-01-05",
        "2022-01-06",
        "2022-01-07",
    ]


def test_build_horizon_crosses_year_boundary():
    horizon = build_horizon(date(2021, 12, 29))
    assert horizon[0] == "2021-12-29"
    assert horizon[-1] == "2022-01-04"
    assert horizon == sorted(horizon)


def test_build_horizon_leap_day():
    assert "2024-02-29" in build_horizon(date(2024, 2, 27))


def test_resolve_weekly_day_steps_whole_weeks_forward():
    horizon = build_horizon(date(2022, 1, 8))
    assert resolve_weekly_day(date(2022, 1, 3), horizon) == "2022-01-10"
    assert resolve_weekly_day(date(2021, 11, 1), horizon) == "2022-01-10"


def test_resolve_weekly_day_inside_horizon_is_itself():
    horizon = build_horizon(date(2022, 1, 1))
    assert resolve_weekly_day(date(2022, 1, 3), horizon) == "2022-01-03"


def test_resolve_weekly_day_after_horizon_is_none():
    horizon = build_horizon(date(2022, 1, 1))
    assert resolve_weekly_day(date(2022, 1, 10), horizon) is None


def test_resolve_weekly_day_short_horizon_may_miss():
    horizon = build_horizon(date(2022, 1, 1), days=2)
    assert resolve_weekly_day(date(2021, 12, 27), horizon) is None
