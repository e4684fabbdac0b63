"""Cache configuration model.

This module contains the cache configuration model for the cached reader:
staleness checking and backend selection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from annovault.shared.constants import ReaderDefaults, SimpleCacheConfig


class CacheSettings(BaseModel):
    """Cache configuration.

    This class manages the cached reader's debug (staleness checking) mode
    and the persistent backend it stores annotations in.
    """

    debug: bool = Field(
        default=ReaderDefaults.DEBUG,
        description="Re-validate cached entries against source modification times",
    )
    backend: Literal["memory", "filesystem"] = Field(
        default="filesystem",
        description="Cache backend (memory, filesystem)",
    )
    directory: Path = Field(
        default=Path(SimpleCacheConfig.DEFAULT_DIRECTORY),
        description="Directory of the filesystem backend",
    )


__all__ = ["CacheSettings"]
