"""Calendar heatmap data model.

Turns sparse observations into a dense, colored day-by-day calendar and
splits that calendar into week or month rows for display.
"""

import logging
import math
from collections.abc import Callable
from collections.abc import Sequence
from datetime import date
from datetime import timedelta
from typing import Literal

from heatmap_calendar.dates import DateLike
from heatmap_calendar.dates import ONE_DAY
from heatmap_calendar.dates import day_count
from heatmap_calendar.dates import get_month_end
from heatmap_calendar.dates import get_month_start
from heatmap_calendar.dates import get_week_end
from heatmap_calendar.dates import get_week_start
from heatmap_calendar.dates import normalize_date
from heatmap_calendar.models import Day
from heatmap_calendar.models import DayValue
from heatmap_calendar.models import Observation

logger = logging.getLogger(__name__)

View = Literal["weekly", "monthly"]


def get_day(
    data: Sequence[Observation],
    offset: int,
    start_date: date,
    start_day_of_month: int,
) -> DayValue:
    """Aggregate the value of a single calendar day.

    The target day is `start_day_of_month + offset` counted from the first of
    `start_date`'s month, rolling over into later months as needed.
    Observations without a date are ignored; unparseable dates raise
    `InvalidDateError`.
    """

    month_start = get_month_start(normalize_date(start_date))
    day = month_start + timedelta(days=start_day_of_month - 1 + offset)
    next_day = day + ONE_DAY

    value = 0
    for observation in data:
        observed = normalize_date(observation.date)
        if observed is not None and day <= observed < next_day:
            value += observation.value

    return DayValue(date=day, value=value)


def get_color(colors: Sequence[str], max_value: float, value: float) -> str | None:
    """Pick the color bucket for value relative to max_value.

    Bucket `i` starts at intensity `i / len(colors)`. Returns None when the
    scale is empty or the value is zero so the caller can apply its own
    empty color.
    """

    if not colors or not value:
        return None

    if max_value:
        intensity = value / max_value
    else:
        intensity = math.copysign(math.inf, value)

    color = colors[0]
    for i in range(1, len(colors)):
        if intensity < i / len(colors):
            return color
        color = colors[i]

    return colors[-1]


def resolve_range(
    start_date: DateLike | None = None,
    end_date: DateLike | None = None,
    view: View | str = "weekly",
    today: date | None = None,
) -> tuple[date, date]:
    """Widen the requested dates to whole weeks or whole months."""

    if today is None:
        today = date.today()

    start = normalize_date(start_date) if start_date is not None else today
    end = normalize_date(end_date) if end_date is not None else today

    if view == "monthly":
        return get_month_start(start), get_month_end(end)
    return get_week_start(start), get_week_end(end)


def get_calendar(
    colors: Sequence[str],
    data: Sequence[Observation],
    empty_color: str,
    start_date: DateLike | None = None,
    end_date: DateLike | None = None,
    view: View | str = "weekly",
    today: date | None = None,
) -> list[Day]:
    """Build the dense, colored calendar for the requested view.

    Missing dates default to today. Any view other than "monthly" is treated
    as weekly.
    """

    start, end = resolve_range(start_date, end_date, view, today)
    total_days = day_count(start, end)

    # Parse each observation date once instead of once per day.
    observations = [
        Observation(date=normalize_date(item.date), value=item.value) for item in data
    ]

    max_value = 0
    day_values: list[DayValue] = []
    for offset in range(total_days):
        day_value = get_day(observations, offset, start, start.day)
        if day_value.value > max_value:
            max_value = day_value.value
        day_values.append(day_value)

    logger.debug(
        "Built %s calendar %s..%s with %d days (max=%s)",
        view,
        start.isoformat(),
        end.isoformat(),
        total_days,
        max_value,
    )

    return [
        Day(
            date=day_value.date,
            value=day_value.value,
            color=get_color(colors, max_value, day_value.value) or empty_color,
        )
        for day_value in day_values
    ]


def _starts_week(index: int, day: Day, previous: Day | None) -> bool:
    # day and previous are unused; rows start by position alone.
    return index % 7 == 0


def _starts_month(index: int, day: Day, previous: Day | None) -> bool:
    if previous is None:
        return True
    return (day.date.year, day.date.month) != (previous.date.year, previous.date.month)


def _chunk(
    calendar: Sequence[Day],
    starts_row: Callable[[int, Day, Day | None], bool],
    allow_overflow: bool,
    start_date: DateLike | None,
    end_date: DateLike | None,
) -> list[list[Day]]:
    start_bound = normalize_date(start_date)
    end_bound = normalize_date(end_date)

    rows: list[list[Day]] = []
    previous: Day | None = None
    for index, day in enumerate(calendar):
        if starts_row(index, day, previous):
            rows.append([])
        previous = day

        if allow_overflow or (
            (start_bound is None or day.date >= start_bound)
            and (end_bound is None or day.date <= end_bound)
        ):
            rows[-1].append(day)

    return [row for row in rows if row]


def chunk_weeks(
    allow_overflow: bool,
    calendar: Sequence[Day],
    start_date: DateLike | None = None,
    end_date: DateLike | None = None,
) -> list[list[Day]]:
    """Split a calendar into rows of seven entries.

    Rows follow the calendar's own position, not the weekday of each date, so
    a calendar that does not open on a week start yields shifted rows. Days
    outside the bounds are dropped unless allow_overflow is set, and rows
    left empty are removed.
    """

    rows = _chunk(calendar, _starts_week, allow_overflow, start_date, end_date)
    logger.debug("Chunked %d days into %d week rows", len(calendar), len(rows))
    return rows


def chunk_months(
    allow_overflow: bool,
    calendar: Sequence[Day],
    start_date: DateLike | None = None,
    end_date: DateLike | None = None,
) -> list[list[Day]]:
    """Split a calendar into one row per calendar month."""

    rows = _chunk(calendar, _starts_month, allow_overflow, start_date, end_date)
    logger.debug("Chunked %d days into %d month rows", len(calendar), len(rows))
    return rows
