"""
Data models for HabbusBot.

These dataclasses provide type-safe representations of persisted
entities and enable cleaner interfaces between layers.
"""

from habbus.models.guild_config import BotStatus, GuildConfig

__all__ = [
    "BotStatus",
    "GuildConfig",
]
