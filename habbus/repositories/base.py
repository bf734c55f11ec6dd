"""
Base repository defining the guild configuration storage interface.
"""

from abc import ABC, abstractmethod
import threading
from typing import Dict, List

from habbus.models.guild_config import GuildConfig


class GuildConfigRepository(ABC):
    """
    Abstract base class for guild configuration storage.

    Implementations keep an authoritative in-memory map of guild ID to
    GuildConfig. Callers depend only on this interface, which lets the
    bot and the dashboard share one store and lets tests swap in the
    in-memory variant.
    """

    def __init__(self):
        self._configs: Dict[str, GuildConfig] = {}
        self._lock = threading.RLock()

    def get(self, guild_id: str) -> GuildConfig:
        """
        Get the configuration of a guild, creating defaults when missing.

        The created record is kept in memory only; it reaches storage on
        the next save.
        """
        guild_id = str(guild_id)
        with self._lock:
            config = self._configs.get(guild_id)
            if config is None:
                config = GuildConfig()
                self._configs[guild_id] = config
            return config

    def guild_ids(self) -> List[str]:
        """Return a snapshot of the guild IDs currently held in memory."""
        with self._lock:
            return list(self._configs.keys())

    @abstractmethod
    def save(self, guild_id: str, config: GuildConfig) -> None:
        """
        Replace the configuration of a guild and persist the whole map.

        Args:
            guild_id: Guild whose record is replaced.
            config: Fully-populated configuration.
        """
        pass
