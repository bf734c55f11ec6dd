"""
Repository layer for guild configuration storage.

Repositories provide an abstraction over persistence, enabling:
- Testability: the in-memory variant replaces the file in unit tests
- Consistency: one interface for the bot and the dashboard
"""

from habbus.repositories.base import GuildConfigRepository
from habbus.repositories.json_file import JsonFileGuildConfigRepository
from habbus.repositories.memory import InMemoryGuildConfigRepository

__all__ = [
    "GuildConfigRepository",
    "JsonFileGuildConfigRepository",
    "InMemoryGuildConfigRepository",
]
