import logging

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Request

from heatmap_calendar.api.schemas.heatmap import CalendarRequest
from heatmap_calendar.api.schemas.heatmap import CalendarResponse
from heatmap_calendar.api.schemas.heatmap import RowsRequest
from heatmap_calendar.api.schemas.heatmap import RowsResponse
from heatmap_calendar.dates import InvalidDateError
from heatmap_calendar.services.heatmap_service import CalendarRangeTooLargeError
from heatmap_calendar.services.heatmap_service import InvalidCalendarRangeError
from heatmap_calendar.services.heatmap_service import build_calendar_payload
from heatmap_calendar.services.heatmap_service import build_rows_payload
from heatmap_calendar.settings import Settings


router = APIRouter()
logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    """Return the settings the running app was created with."""

    return request.app.state.settings


@router.get("/")
async def root() -> dict[str, str]:
    """Return a basic service greeting."""

    return {"message": "Hello World"}


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.post("/heatmap/calendar", response_model=CalendarResponse)
def create_calendar(
    payload: CalendarRequest,
    settings: Settings = Depends(get_settings),
) -> dict[str, object]:
    """Return the dense, colored calendar for the requested range."""

    try:
        return build_calendar_payload(payload, settings)
    except InvalidDateError as exc:
        logger.warning("Rejected calendar request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except InvalidCalendarRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CalendarRangeTooLargeError as exc:
        logger.warning("Rejected calendar request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/heatmap/rows", response_model=RowsResponse)
def create_rows(
    payload: RowsRequest,
    settings: Settings = Depends(get_settings),
) -> dict[str, object]:
    """Return the calendar grouped into week or month rows."""

    try:
        return build_rows_payload(payload, settings)
    except InvalidDateError as exc:
        logger.warning("Rejected rows request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except InvalidCalendarRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CalendarRangeTooLargeError as exc:
        logger.warning("Rejected rows request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
