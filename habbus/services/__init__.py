"""
Service layer providing business logic.

Services encapsulate business operations and coordinate between
repositories, the Discord API and the web dashboard.
"""

from habbus.services.guild_config import GuildConfigService
from habbus.services.automod import AutomodService
from habbus.services.message import MessageService
from habbus.services.appearance import AppearanceService

__all__ = [
    "GuildConfigService",
    "AutomodService",
    "MessageService",
    "AppearanceService",
]
