from __future__ import annotations

from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field, validator

DEFAULT_PATHS: Dict[str, str] = {
    "/google": "https://google.com",
    "/youtube": "https://youtube.com",
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class QuizConfig(BaseModel):
    """Settings for the timed quiz runner."""

    limit: int = Field(30, ge=0, description="Overall quiz deadline in seconds.")
    csv_path: Path = Field(
        Path("problems.csv"), description="CSV file in the format 'question,answer'."
    )


class RedirectConfig(BaseModel):
    """Settings for the path redirector and its example server."""

    data_path: Path | None = Field(
        None, description="YAML or JSON file with path/url records."
    )
    host: str = Field("127.0.0.1")
    port: int = Field(8080, ge=1, le=65535)
    default_paths: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_PATHS))

    @validator("default_paths")
    def paths_are_absolute(cls, value: Dict[str, str]) -> Dict[str, str]:
        """Request paths always start with a slash, so keys without one could never match."""
        for path in value:
            if not path.startswith("/"):
                raise ValueError(f"default path must start with '/': {path!r}")
        return value


class LoggingConfig(BaseModel):
    """Controls for logging output and format."""

    level: str = Field("WARNING")
    json_output: bool = False

    @validator("level")
    def known_level(cls, value: str) -> str:
        """Accept only levels that both stdlib logging and uvicorn understand."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}: {value!r}")
        return level


class Settings(BaseModel):
    """Top-level configuration aggregating the per-component settings."""

    quiz: QuizConfig = Field(default_factory=QuizConfig)
    redirect: RedirectConfig = Field(default_factory=RedirectConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
