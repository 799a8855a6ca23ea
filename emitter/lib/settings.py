"""Settings for the emitter command-line driver, read from an ini file."""

from __future__ import annotations

import configparser
import logging
import os
from typing import Any

SECTION = "EMITTER"


class SettingsManager:
    """Single source of truth for driver settings.

    Reads settings from the [EMITTER] section of an ini file. Missing files
    and missing options fall back to DEFAULTS.
    """

    # Default values for all settings (single source of truth)
    DEFAULTS = {
        "log_level": logging.WARNING,
        "log_dir": "",
        "echo_template": "{listener}: {payload}",
        "strict": False,
    }

    def __init__(self, config_file_path: str | None = None) -> None:
        self._config_obj = configparser.ConfigParser(interpolation=None)
        self.config_file_path = config_file_path

        if config_file_path:
            if not os.path.exists(config_file_path):
                logging.debug(f"Config file not found, using defaults: {config_file_path}")
            else:
                logging.debug(f"Using config file: {config_file_path}")
                self._config_obj.read(config_file_path, encoding="utf-8")

    def get(self, setting: str, default_value: Any = None) -> Any:
        """Get a setting value, auto-converting to bool/int/float."""
        if not self._config_obj.has_section(SECTION):
            return default_value

        try:
            value = self._config_obj.get(SECTION, setting)
            return self._convert_value(value)
        except (configparser.NoOptionError, ValueError):
            return default_value

    def get_or_default(self, setting: str) -> Any:
        """Get a setting value, falling back to DEFAULTS if not set."""
        return self.get(setting, self.DEFAULTS.get(setting))

    def _convert_value(self, val: Any) -> Any:
        """Convert a string to bool/int/float if applicable, otherwise return as-is."""
        if not isinstance(val, str):
            return val

        val_lower = val.lower()
        if val_lower in ("true", "yes", "on"):
            return True
        if val_lower in ("false", "no", "off"):
            return False

        # Try numeric conversion: integer first, then float
        stripped = val.lstrip("-")
        if stripped.isdigit():
            return int(val)
        if stripped.replace(".", "", 1).isdigit():
            return float(val)

        return val

    def resolve(self, **cli_overrides: Any) -> dict[str, Any]:
        """Merge every setting into a dict.

        Priority: CLI argument (if provided) > config file > DEFAULTS

        Args:
            **cli_overrides: CLI arguments that should override config values
        """
        resolved = {}
        for name, default in self.DEFAULTS.items():
            cli_value = cli_overrides.get(name)

            # Boolean flags use store_true, so False means "not passed"
            cli_provided = cli_value is True if isinstance(default, bool) else cli_value is not None

            if cli_provided:
                resolved[name] = cli_value
            else:
                resolved[name] = self.get(name, default)
        return resolved
