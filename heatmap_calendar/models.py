from datetime import date
from datetime import datetime

from pydantic import BaseModel
from pydantic import ConfigDict


class Observation(BaseModel):
    """Timestamped value fed into the calendar; several may share a day."""

    model_config = ConfigDict(frozen=True)

    date: date | datetime | str | int | float | None
    value: int | float


class DayValue(BaseModel):
    """Aggregated value of one calendar day, before coloring."""

    model_config = ConfigDict(frozen=True)

    date: date
    value: int | float


class Day(BaseModel):
    """Single colored calendar entry."""

    model_config = ConfigDict(frozen=True)

    date: date
    value: int | float
    color: str
