"""AnnoVault Settings Configuration Model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from annovault.config.models.cache_settings import CacheSettings
from annovault.config.models.logging_settings import LoggingSettings


class Settings(BaseSettings):
    """Settings facade providing unified configuration access.

    Values come from defaults, ``ANNOVAULT_`` environment variables such as
    ``ANNOVAULT_CACHE__DEBUG=true``, and a TOML file passed to
    ``from_toml_file``. Values present in the file take precedence over
    the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANNOVAULT_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from a TOML file, falling back to the environment for missing sections."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file."""

        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json", exclude_none=True)

        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)
