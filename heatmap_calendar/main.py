from fastapi import FastAPI

from heatmap_calendar.api.routes.heatmap import router
from heatmap_calendar.core.middleware import CalendarRateLimitMiddleware
from heatmap_calendar.core.observability import configure_logging
from heatmap_calendar.core.observability import init_sentry
from heatmap_calendar.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application from settings."""

    if settings is None:
        settings = Settings()

    configure_logging(settings)
    init_sentry(settings)

    app = FastAPI(title="heatmap-calendar")
    app.state.settings = settings
    app.add_middleware(
        CalendarRateLimitMiddleware,
        requests_per_window=settings.rate_limit_per_minute,
        window_seconds=settings.rate_limit_window_seconds,
    )
    app.include_router(router)
    return app


app = create_app()
