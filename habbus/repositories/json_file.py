"""
JSON file repository for per-guild configuration persistence.
"""

import json
import logging
import os
from pathlib import Path
from typing import Union

from habbus.exceptions import ConfigPersistenceError
from habbus.models.guild_config import GuildConfig
from habbus.repositories.base import GuildConfigRepository

logger = logging.getLogger(__name__)


class JsonFileGuildConfigRepository(GuildConfigRepository):
    """
    Repository that snapshots every guild's settings to one JSON file.

    The file is read once, at construction. Afterwards the in-memory map
    is authoritative and every save rewrites the whole document through
    a temporary file and an atomic rename.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self._path = Path(path)
        self._load()

    @property
    def path(self) -> Path:
        """Get the settings file path."""
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            logger.info("No settings file at %s, starting empty", self._path)
            return
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                document = json.load(f)
            if not isinstance(document, dict):
                raise ValueError("settings document is not an object")
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self._path, e)
            return

        for guild_id, record in document.items():
            if isinstance(record, dict):
                self._configs[str(guild_id)] = GuildConfig.from_dict(record)
        logger.info("Loaded settings for %d guild(s) from %s", len(self._configs), self._path)

    def save(self, guild_id: str, config: GuildConfig) -> None:
        with self._lock:
            self._configs[str(guild_id)] = config
            document = {gid: cfg.to_dict() for gid, cfg in self._configs.items()}
            self._write(document)

    def _write(self, document: dict) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.error("Failed to write settings file %s: %s", self._path, e)
            raise ConfigPersistenceError(self._path, e) from e
