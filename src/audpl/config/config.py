"""Configuration management for audpl.

The codec itself never reads configuration; only logging setup does.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from audpl.config.paths import default_config_path
from audpl.platform.logging import logger, setup_logger


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Optional rotating log file
    log_file: Path | None = _path_field()

    # Cached instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                value = Path(value) if value.strip() else None
                setattr(self, f.name, value)
            if value is not None and not isinstance(value, Path):
                raise ConfigError(f"{f.name} must be a path string, got {value!r}")

    def save(self, path: Path | None = None) -> Path:
        """Save configuration as commented TOML.

        Args:
            path: Destination. Defaults to ``default_config_path()``.

        Returns:
            Path: File that was written.
        """
        config_dict = asdict(self)
        target = path or default_config_path()

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

        logger.debug("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# audpl configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/audpl.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration, reusing the cached instance when possible.

        A missing file yields defaults; nothing is written to disk.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds bad values.
        """
        config_file = path or default_config_path()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"invalid TOML in {config_file}") from e

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key %r", key)
                del config_dict[key]

            instance = cls(**config_dict)
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


def configure_logging(
    config: Config | None = None,
    console_level: int = logging.INFO,
) -> logging.Logger:
    """Apply the configured log file to the package logger.

    Args:
        config: Configuration to apply. Loaded from disk when omitted.
        console_level: Threshold for the console handler.

    Returns:
        logging.Logger: The reconfigured ``audpl`` logger.
    """
    configuration = config or Config.load()
    return setup_logger(log_file=configuration.log_file, console_level=console_level)


__all__ = ["Config", "ConfigError", "configure_logging"]
