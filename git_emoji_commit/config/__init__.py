"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from git_emoji_commit.git.staged import DEFAULT_EXCLUDED_PATHS, DEFAULT_WARNING_THRESHOLD


@dataclass
class Config:
    """User configuration with sensible defaults."""
    check_updates: bool = True
    staged_files_warning_threshold: int = DEFAULT_WARNING_THRESHOLD
    excluded_paths: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_PATHS))
    update_timeout: float = 5.0  # seconds

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.check_updates, bool):
            warnings.append(f"Invalid check_updates '{self.check_updates}', using {str(defaults.check_updates).lower()}")
            self.check_updates = defaults.check_updates

        threshold = self.staged_files_warning_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
            warnings.append(f"Invalid staged_files_warning_threshold '{threshold}', using {defaults.staged_files_warning_threshold}")
            self.staged_files_warning_threshold = defaults.staged_files_warning_threshold

        if not isinstance(self.excluded_paths, list) or not all(isinstance(p, str) for p in self.excluded_paths):
            warnings.append(f"Invalid excluded_paths '{self.excluded_paths}', using {defaults.excluded_paths}")
            self.excluded_paths = defaults.excluded_paths

        timeout = self.update_timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            warnings.append(f"Invalid update_timeout '{timeout}', using {defaults.update_timeout}")
            self.update_timeout = defaults.update_timeout

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading configuration."""

    CONFIG_FILENAME = ".gecrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
]
