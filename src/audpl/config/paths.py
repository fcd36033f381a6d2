"""Path resolution for the optional configuration file.

Policy: the file is ``audpl.toml`` in the current working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final


CONFIG_FILE_NAME: Final[str] = "audpl.toml"


def default_config_path() -> Path:
    """Get the path of the TOML config file in the working directory."""

    return (Path.cwd() / CONFIG_FILE_NAME).resolve()


__all__ = ["CONFIG_FILE_NAME", "default_config_path"]
