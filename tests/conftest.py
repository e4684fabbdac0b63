"""
Pytest configuration and shared fixtures for AnnoVault tests.

This module provides common fixtures and configuration that can be used
across all test modules in the project.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from sample_app import Controller, RecordingReader

from annovault.core.declarations import MethodDeclaration, PropertyDeclaration
from annovault.services import ArrayCache, ArrayCachePool
from annovault.shared.constants import LoggingConfig


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop ANNOVAULT_* variables so settings come from defaults only."""
    for name in list(os.environ):
        if name.startswith("ANNOVAULT_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Generator[None, None, None]:
    """Undo handler changes made by setup_structured_logger.

    A configured package logger stops propagating, which would hide its
    records from caplog in later tests.
    """
    logger = logging.getLogger(LoggingConfig.ROOT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield

    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def delegate() -> RecordingReader:
    """Delegate reader that records each call it receives."""
    return RecordingReader()


@pytest.fixture
def item_pool() -> ArrayCachePool:
    """Empty in-memory item pool."""
    return ArrayCachePool()


@pytest.fixture
def simple_cache() -> ArrayCache:
    """Empty in-memory legacy key/value cache."""
    return ArrayCache()


@pytest.fixture
def hello_action() -> MethodDeclaration:
    """Reference to Controller.hello_action."""
    return MethodDeclaration.of(Controller, "hello_action")


@pytest.fixture
def title_property() -> PropertyDeclaration:
    """Reference to Controller.title."""
    return PropertyDeclaration.of(Controller, "title")


@pytest.fixture
def source_files(tmp_path: Path) -> dict[str, Path]:
    """Create one source file per declaration of a small hierarchy.

    Returns:
        Mapping of declaration role to its source file path.
    """
    files = {}
    for role in ("controller", "parent", "grandparent", "mixin", "nested_mixin", "mixin_parent", "interface"):
        path = tmp_path / f"{role}.py"
        path.write_text(f"# {role}\n", encoding="utf-8")
        files[role] = path
    return files
