"""Runtime settings, read from ``CODE_ANALYZER_*`` environment variables."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AnalyzerSettings(BaseSettings):
    """Analyzer settings."""

    model_config = SettingsConfigDict(env_prefix="CODE_ANALYZER_", case_sensitive=False)

    log_level: str = "INFO"
    log_json: bool = False
    max_workers: int = Field(default=4, ge=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> AnalyzerSettings:
    return AnalyzerSettings()
