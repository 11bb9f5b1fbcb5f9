from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    List values such as `DEFAULT_COLORS` are given as JSON arrays.
    """

    default_colors: list[str] = Field(
        default_factory=lambda: ["#9be9a8", "#40c463", "#30a14e", "#216e39"]
    )
    default_empty_color: str = "#ebedf0"
    default_view: Literal["weekly", "monthly"] = "weekly"
    max_calendar_days: int = 3660
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1
    rate_limit_per_minute: int = 30
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
