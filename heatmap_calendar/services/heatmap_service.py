import logging
from datetime import date

from heatmap_calendar.api.schemas.heatmap import CalendarRequest
from heatmap_calendar.api.schemas.heatmap import RowsRequest
from heatmap_calendar.dates import day_count
from heatmap_calendar.dates import normalize_date
from heatmap_calendar.models import Day
from heatmap_calendar.services.calendar_service import chunk_months
from heatmap_calendar.services.calendar_service import chunk_weeks
from heatmap_calendar.services.calendar_service import get_calendar
from heatmap_calendar.services.calendar_service import resolve_range
from heatmap_calendar.settings import Settings

logger = logging.getLogger(__name__)


class CalendarRangeTooLargeError(Exception):
    """Raised when the resolved calendar spans more days than allowed."""

    def __init__(self, total_days: int, limit: int) -> None:
        super().__init__(f"Calendar spans {total_days} days, limit is {limit}")
        self.total_days = total_days
        self.limit = limit


class InvalidCalendarRangeError(Exception):
    """Raised when the start date falls after the end date."""


def build_calendar(
    payload: CalendarRequest,
    settings: Settings,
    today: date | None = None,
) -> tuple[str, list[Day]]:
    """Resolve request defaults from settings and build the calendar."""

    requested_start = normalize_date(payload.start_date)
    requested_end = normalize_date(payload.end_date)
    if (
        requested_start is not None
        and requested_end is not None
        and requested_start > requested_end
    ):
        raise InvalidCalendarRangeError("start_date must be before or equal to end_date")

    view = payload.view or settings.default_view
    start, end = resolve_range(payload.start_date, payload.end_date, view, today)
    total_days = day_count(start, end)
    if total_days < 1:
        raise InvalidCalendarRangeError("start_date must be before or equal to end_date")
    if total_days > settings.max_calendar_days:
        raise CalendarRangeTooLargeError(total_days, settings.max_calendar_days)

    colors = payload.colors if payload.colors is not None else settings.default_colors
    empty_color = (
        payload.empty_color
        if payload.empty_color is not None
        else settings.default_empty_color
    )

    calendar = get_calendar(
        colors=colors,
        data=payload.data,
        empty_color=empty_color,
        start_date=payload.start_date,
        end_date=payload.end_date,
        view=view,
        today=today,
    )
    return view, calendar


def build_calendar_payload(
    payload: CalendarRequest,
    settings: Settings,
    today: date | None = None,
) -> dict[str, object]:
    """Build the calendar response body for a request."""

    view, calendar = build_calendar(payload, settings, today)
    return {
        "view": view,
        "start_date": calendar[0].date,
        "end_date": calendar[-1].date,
        "max": max(day.value for day in calendar),
        "total": sum(day.value for day in calendar),
        "days": calendar,
    }


def build_rows_payload(
    payload: RowsRequest,
    settings: Settings,
    today: date | None = None,
) -> dict[str, object]:
    """Build the calendar and split it into week or month rows.

    The request's own start and end dates bound the rows, so days that
    were only added to complete a week or month are dropped unless
    `allow_overflow` is set.
    """

    view, calendar = build_calendar(payload, settings, today)
    chunk = chunk_months if payload.group_by == "months" else chunk_weeks
    rows = chunk(
        payload.allow_overflow,
        calendar,
        payload.start_date,
        payload.end_date,
    )
    logger.debug("Built %d %s rows for %s view", len(rows), payload.group_by, view)
    return {"view": view, "group_by": payload.group_by, "rows": rows}
