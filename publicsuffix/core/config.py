"""Configuration management for publicsuffix."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .constants import CONFIG_FILE, CONFIG_VERSION, DEFAULT_SETTINGS
from .models import MatchOptions

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


def validate_settings(settings: dict[str, Any]) -> list[str]:
    """Validate a settings mapping and return list of errors."""
    errors = []

    for key in settings:
        if key not in DEFAULT_SETTINGS:
            errors.append(f"Unknown setting '{key}'")

    if not isinstance(settings.get("ignore_private", False), bool):
        errors.append("'ignore_private' must be a boolean")

    data_file = settings.get("data_file")
    if data_file is not None and not isinstance(data_file, str):
        errors.append("'data_file' must be a string or null")

    return errors


def resolve_options(options: MatchOptions | dict[str, Any] | None = None) -> MatchOptions:
    """
    Normalize API options into MatchOptions.

    Args:
        options: A MatchOptions, a mapping such as {"ignore_private": True}, or None

    Returns:
        MatchOptions instance

    Raises:
        ConfigError: If the mapping has unknown keys or invalid values
    """
    if options is None:
        return MatchOptions()
    if isinstance(options, MatchOptions):
        return options

    unknown = sorted(set(options) - set(MatchOptions().to_dict()))
    if unknown:
        raise ConfigError(f"Unknown option(s): {', '.join(unknown)}")
    if not isinstance(options.get("ignore_private", False), bool):
        raise ConfigError("'ignore_private' must be a boolean")
    return MatchOptions.from_dict(options)


class ConfigManager:
    """Manages configuration loading, validation, and persistence."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else CONFIG_FILE
        self._config: dict[str, Any] = {}
        self.load()

    def _create_default_config(self) -> dict[str, Any]:
        """Generate default configuration."""
        return {
            "version": CONFIG_VERSION,
            "settings": DEFAULT_SETTINGS.copy(),
        }

    def _validate_config(self, config: Any) -> list[str]:
        """Validate configuration and return list of errors."""
        if not isinstance(config, dict):
            return ["Configuration must be a JSON object"]

        errors = []

        if not isinstance(config.get("version"), int):
            errors.append("Missing or invalid 'version' field")

        settings = config.get("settings")
        if not isinstance(settings, dict):
            errors.append("Missing or invalid 'settings' field")
        else:
            errors.extend(validate_settings(settings))

        return errors

    def load(self) -> None:
        """Load configuration from file, using defaults if it doesn't exist."""
        if not self.config_path.exists():
            logger.debug("Config file not found at %s, using defaults", self.config_path)
            self._config = self._create_default_config()
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {self.config_path}: {e}") from e

        errors = self._validate_config(loaded_config)
        if errors:
            for error in errors:
                logger.error("Config validation error: %s", error)
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

        # Fill in settings added since the file was written
        settings = DEFAULT_SETTINGS.copy()
        settings.update(loaded_config["settings"])
        loaded_config["settings"] = settings

        self._config = loaded_config
        logger.debug("Configuration loaded from %s", self.config_path)

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2)
        logger.debug("Configuration saved to %s", self.config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Return a copy of the current configuration."""
        return self._config.copy()

    @property
    def settings(self) -> dict[str, Any]:
        """Return application settings."""
        return self._config.get("settings", {}).copy()

    @property
    def match_options(self) -> MatchOptions:
        """Return the configured matching options."""
        return MatchOptions(ignore_private=self.settings.get("ignore_private", False))

    @property
    def data_file(self) -> Path | None:
        """Return the configured suffix list path, or None for the bundled list."""
        data_file = self.settings.get("data_file")
        return Path(data_file).expanduser() if data_file else None

    def update_settings(self, **kwargs: Any) -> None:
        """Update settings with provided values after validation."""
        errors = validate_settings(kwargs)
        if errors:
            raise ConfigError(f"Invalid settings: {'; '.join(errors)}")
        self._config.setdefault("settings", {}).update(kwargs)
