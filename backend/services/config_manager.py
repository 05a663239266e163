"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        try:
            # 1. explicit argument, 2. environment variable
            config_dir = config_dir or os.environ.get("DIFF_WORKBENCH_CONFIG_DIR")

            # 3. home directory ~/.diff_workbench
            if not config_dir:
                config_dir = os.path.expanduser("~/.diff_workbench")

            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                print(f"Warning: Cannot write to {config_dir}: {e}")
                self._config_file = None

            # Fallback: temp directory when the preferred path is unusable
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "diff_workbench"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"Critical Error in ConfigManager init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "diff_workbench_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next get_instance() rereads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling in missing defaults"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Error loading config: {e}")
            return self._default_config()

        config = self._default_config()
        for section, value in stored.items():
            if isinstance(value, dict) and isinstance(config.get(section), dict):
                config[section].update(value)
            else:
                config[section] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {
                "inlineHighlight": True,  # word-level highlighting of modified lines
                "cacheSize": 64,  # memoized (baseline, working) pairs
            },
            "session": {
                "maxSessions": 256,  # least recently used sessions are closed beyond this
                "eventQueueSize": 64,  # pending SSE events per subscriber
            },
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def diff_settings(self) -> dict[str, Any]:
        """Diff engine options merged over their defaults"""
        settings = dict(self._default_config()["diff"])
        settings.update(self.get_config().get("diff", {}))
        return settings

    def session_settings(self) -> dict[str, Any]:
        """Session store options merged over their defaults"""
        settings = dict(self._default_config()["session"])
        settings.update(self.get_config().get("session", {}))
        return settings
