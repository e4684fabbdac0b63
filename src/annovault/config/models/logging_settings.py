"""Logging configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from annovault.shared.constants import LoggingConfig


class LoggingSettings(BaseModel):
    """Logging configuration.

    This class manages logging behavior including level, file output and
    console rendering.
    """

    level: str = Field(default=LoggingConfig.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="JSON log file path")
    use_rich_console: bool = Field(default=True, description="Render console logs with Rich")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            msg = f"Invalid logging level: {value}"
            raise ValueError(msg)
        return level


__all__ = ["LoggingSettings"]
