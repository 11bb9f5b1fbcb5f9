from datetime import date
from datetime import datetime
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

from heatmap_calendar.models import Day
from heatmap_calendar.models import Observation


class CalendarRequest(BaseModel):
    """Options for building a calendar; omitted fields use app settings."""

    colors: list[str] | None = None
    data: list[Observation] = Field(default_factory=list)
    empty_color: str | None = None
    start_date: date | datetime | str | int | float | None = None
    end_date: date | datetime | str | int | float | None = None
    view: Literal["weekly", "monthly"] | None = None


class RowsRequest(CalendarRequest):
    """Calendar options plus how to split the calendar into rows."""

    group_by: Literal["weeks", "months"] = "weeks"
    allow_overflow: bool = False


class CalendarResponse(BaseModel):
    """Dense calendar payload with the resolved range."""

    view: Literal["weekly", "monthly"]
    start_date: date
    end_date: date
    max: int | float
    total: int | float
    days: list[Day]


class RowsResponse(BaseModel):
    """Calendar days grouped into display rows."""

    view: Literal["weekly", "monthly"]
    group_by: Literal["weeks", "months"]
    rows: list[list[Day]]
