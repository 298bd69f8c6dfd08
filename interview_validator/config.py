import os
import pathlib
from typing import Any, Dict, Optional

import pytz
import yaml
from appdirs import user_config_dir

from .exceptions import ConfigError
from .utils.dates import get_timezone


class ConfigManager:
    """Manages persisted defaults for the interview validator CLI."""

    CONFIG_PATH = pathlib.Path(user_config_dir("interview-validator")) / "config.yml"

    DEFAULT_TIMEZONE = "UTC"
    DEFAULT_DURATION_MINUTES = 30

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.config_path = pathlib.Path(config_path) if config_path else self.CONFIG_PATH
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file."""
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    self._data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to load config: {e}")

            if not isinstance(self._data, dict):
                raise ConfigError(f"Config file {self.config_path} must contain a mapping")

    def save(self) -> None:
        """Save configuration to file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w') as f:
                yaml.safe_dump(self._data, f, default_flow_style=False)
            os.chmod(self.config_path, 0o600)
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}")

    def get_timezone(self) -> str:
        """Get configured timezone name."""
        return self._data.get('timezone', self.DEFAULT_TIMEZONE)

    def get_tzinfo(self) -> pytz.BaseTzInfo:
        try:
            return get_timezone(self.get_timezone())
        except ValueError as e:
            raise ConfigError(str(e))

    def set_timezone(self, tz_name: str) -> None:
        """Set timezone after checking it is a known IANA name."""
        try:
            get_timezone(tz_name)
        except ValueError as e:
            raise ConfigError(str(e))
        self._data['timezone'] = tz_name
        self.save()

    def get_default_duration(self) -> int:
        """Get default interview duration in minutes."""
        return int(self._data.get('default_duration_minutes', self.DEFAULT_DURATION_MINUTES))

    def set_default_duration(self, minutes: int) -> None:
        if minutes < 0:
            raise ConfigError("Default duration cannot be negative")
        self._data['default_duration_minutes'] = minutes
        self.save()

    def as_dict(self) -> Dict[str, Any]:
        return {
            'timezone': self.get_timezone(),
            'default_duration_minutes': self.get_default_duration(),
        }
