from datetime import date
from datetime import datetime

import pytest

from heatmap_calendar.dates import InvalidDateError
from heatmap_calendar.dates import day_count
from heatmap_calendar.dates import get_month_end
from heatmap_calendar.dates import get_month_start
from heatmap_calendar.dates import get_week_end
from heatmap_calendar.dates import get_week_start
from heatmap_calendar.dates import normalize_date


def test_normalize_date_passes_none_through() -> None:
    assert normalize_date(None) is None


def test_normalize_date_drops_time_of_day() -> None:
    assert normalize_date(datetime(2020, 1, 15, 23, 59)) == date(2020, 1, 15)
    assert normalize_date(date(2020, 1, 15)) == date(2020, 1, 15)


@pytest.mark.parametrize(
    "raw_value",
    ["2020-01-15", "2020-01-15T00:00:00", "2020-01-15T11:00:00Z", " 2020-01-15 "],
)
def test_normalize_date_parses_iso_strings(raw_value: str) -> None:
    assert normalize_date(raw_value) == date(2020, 1, 15)


def test_normalize_date_reads_epoch_milliseconds_in_local_time() -> None:
    timestamp_ms = datetime(2020, 1, 15, 12, 0).timestamp() * 1000

    assert normalize_date(timestamp_ms) == date(2020, 1, 15)
    assert normalize_date(int(timestamp_ms)) == date(2020, 1, 15)


@pytest.mark.parametrize("raw_value", ["not-a-date", "", True, [2020, 1, 15]])
def test_normalize_date_rejects_invalid_values(raw_value) -> None:
    with pytest.raises(InvalidDateError):
        normalize_date(raw_value)


def test_week_boundaries_run_sunday_to_saturday() -> None:
    wednesday = date(2020, 1, 15)

    assert get_week_start(wednesday) == date(2020, 1, 12)
    assert get_week_end(wednesday) == date(2020, 1, 18)
    assert get_week_start(date(2020, 1, 12)) == date(2020, 1, 12)
    assert get_week_end(date(2020, 1, 18)) == date(2020, 1, 18)


def test_week_boundaries_cross_year_end() -> None:
    assert get_week_start(date(2021, 1, 1)) == date(2020, 12, 27)
    assert get_week_end(date(2020, 12, 30)) == date(2021, 1, 2)


def test_month_boundaries() -> None:
    assert get_month_start(date(2020, 2, 10)) == date(2020, 2, 1)
    assert get_month_end(date(2020, 2, 10)) == date(2020, 2, 29)
    assert get_month_end(date(2021, 2, 10)) == date(2021, 2, 28)
    assert get_month_end(date(2020, 12, 5)) == date(2020, 12, 31)


def test_day_count_is_inclusive() -> None:
    assert day_count(date(2020, 1, 12), date(2020, 1, 18)) == 7
    assert day_count(date(2020, 1, 1), date(2020, 1, 1)) == 1
    assert day_count(date(2020, 1, 1), date(2020, 12, 31)) == 366
