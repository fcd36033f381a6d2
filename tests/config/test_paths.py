"""Tests for configuration path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from audpl.config.paths import CONFIG_FILE_NAME, default_config_path


def test_default_is_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The config file lives in the working directory."""

    nested = tmp_path / "project"
    nested.mkdir()
    monkeypatch.chdir(nested)

    assert default_config_path() == (nested / CONFIG_FILE_NAME).resolve()


def test_environment_does_not_change_location(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Environment variables play no part in locating the file."""

    monkeypatch.setenv("AUDPL_CONFIG", str(tmp_path / "elsewhere.toml"))

    assert default_config_path() == (tmp_path / CONFIG_FILE_NAME).resolve()
