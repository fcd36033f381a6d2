"""Shared pytest fixtures for the audpl test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from audpl.config.config import Config
from audpl.config.paths import CONFIG_FILE_NAME
from audpl.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run each test from a temporary directory and drop the cached config."""

    monkeypatch.chdir(tmp_path)
    Config.reset()
    try:
        yield (tmp_path / CONFIG_FILE_NAME).resolve()
    finally:
        Config.reset()


@pytest.fixture
def restore_logger() -> Iterator[None]:
    """Reinstall the default handlers after a test reconfigures logging."""

    try:
        yield None
    finally:
        _ = setup_logger()
