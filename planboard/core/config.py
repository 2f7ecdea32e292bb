from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "Planboard"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Board defaults
    DEFAULT_VIEW_MODE: Literal["month", "quarter", "year"] = "quarter"
    # Width of the scrollable day track, excluding the unit label column
    TRACK_WIDTH_PIXELS: float = Field(default=1000.0, gt=0)
    MIN_BAR_WIDTH_PERCENT: float = Field(default=0.5, ge=0, le=100)
    DEFAULT_STAGE_DURATION_DAYS: int = Field(default=14, ge=1)
    WORKER_MAX_LOAD: int = Field(default=5, ge=1)

    # Edit permission for the single planner session served over HTTP
    PLANNER_CAN_EDIT: bool = True

    @model_validator(mode="after")
    def _normalize_log_level(self) -> Self:
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        return self


settings = Settings()
