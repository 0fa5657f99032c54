"""
Configuration Manager
======================

Manages saved configuration: the backup file location and the last knowledge
file opened.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict

log = logging.getLogger(__name__)

DEFAULT_BACKUP_FILE = "knowledge_backup.txt"
CONFIG_ENV_VAR = "KNOWLEDGE_BASE_CONFIG"


class ConfigManager:
    """Manages saved configuration for the knowledge manager."""

    DEFAULT_CONFIG: Dict[str, str] = {
        "backup_file": DEFAULT_BACKUP_FILE,
        "last_file": ""
    }

    @classmethod
    def get_config_file(cls) -> Path:
        """Get the configuration file path.

        KNOWLEDGE_BASE_CONFIG overrides the default, which sits in the
        working directory next to the backup file.
        """
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override)
        return Path.cwd() / "knowledge_config.json"

    @classmethod
    def load(cls) -> Dict[str, str]:
        """Load saved configuration.

        Returns:
            Dictionary containing configuration values, with defaults for missing keys
        """
        config_file = cls.get_config_file()
        config = cls.DEFAULT_CONFIG.copy()

        if config_file.exists():
            try:
                saved = json.loads(config_file.read_text(encoding="utf-8"))
                if isinstance(saved, dict):
                    config.update({k: str(v) for k, v in saved.items() if v is not None})
                else:
                    log.warning("Ignoring malformed config %s", config_file)
            except (json.JSONDecodeError, OSError) as e:
                log.warning("Cannot read config %s: %s", config_file, e)

        return config

    @classmethod
    def save(cls, **values: str) -> None:
        """Save configuration to file.

        Only known keys with non-empty values are updated.

        Args:
            values: Configuration values keyed by name (backup_file, last_file)
        """
        config_file = cls.get_config_file()
        config = cls.load()

        for key, value in values.items():
            if key in cls.DEFAULT_CONFIG and value:
                config[key] = str(value)

        try:
            config_file.write_text(
                json.dumps(config, indent=2),
                encoding="utf-8"
            )
        except OSError as e:
            log.warning("Cannot write config %s: %s", config_file, e)

    @classmethod
    def get_backup_path(cls) -> Path:
        """Path of the backup file, always written on save."""
        return Path(cls.load().get("backup_file") or DEFAULT_BACKUP_FILE)

    @classmethod
    def get_last_file(cls) -> str:
        return cls.load().get("last_file", "")
