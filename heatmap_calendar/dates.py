from datetime import date
from datetime import datetime
from datetime import timedelta

MILLISECONDS_PER_DAY = 86_400_000
ONE_DAY = timedelta(milliseconds=MILLISECONDS_PER_DAY)

DateLike = date | datetime | str | int | float


class InvalidDateError(ValueError):
    """Raised when a date-like value cannot be collapsed to a calendar day."""


def parse_iso_datetime(raw_value: str) -> datetime:
    return datetime.fromisoformat(raw_value.strip().replace("Z", "+00:00"))


def normalize_date(value: DateLike | None) -> date | None:
    """Collapse a date-like value to a calendar day.

    Accepts dates, datetimes, ISO-8601 strings and numbers of milliseconds
    since the Unix epoch (read in local time). `None` is returned unchanged
    so callers can pass optional bounds straight through.

    Raises:
        InvalidDateError: If the value has an unsupported type or cannot be
            parsed.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return parse_iso_datetime(value).date()
        except ValueError as exc:
            raise InvalidDateError(f"Invalid date string: {value!r}") from exc

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000).date()
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidDateError(f"Invalid timestamp: {value!r}") from exc

    raise InvalidDateError(f"Unsupported date value: {value!r}")


def get_week_start(day: date) -> date:
    """Return the Sunday that opens the week containing day."""

    weekday = (day.weekday() + 1) % 7
    return day - timedelta(days=weekday)


def get_week_end(day: date) -> date:
    """Return the Saturday that closes the week containing day."""

    return get_week_start(day) + timedelta(days=6)


def get_month_start(day: date) -> date:
    return day.replace(day=1)


def get_month_end(day: date) -> date:
    if day.month == 12:
        next_month = date(day.year + 1, 1, 1)
    else:
        next_month = date(day.year, day.month + 1, 1)
    return next_month - ONE_DAY


def day_count(start: date, end: date) -> int:
    """Inclusive number of calendar days between start and end."""

    return (end - start) // ONE_DAY + 1
