"""
In-memory guild configuration repository.
"""

from habbus.models.guild_config import GuildConfig
from habbus.repositories.base import GuildConfigRepository


class InMemoryGuildConfigRepository(GuildConfigRepository):
    """Repository without durability, for tests and throwaway runs."""

    def save(self, guild_id: str, config: GuildConfig) -> None:
        with self._lock:
            self._configs[str(guild_id)] = config
