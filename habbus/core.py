"""
Core Bot class - Main Discord bot instance.

This module provides the Bot class which extends commands.Bot
with the services shared by the cogs and the web dashboard.
"""

import asyncio
import logging
from concurrent.futures import Future
from typing import Optional

import discord
from discord.ext import commands

from habbus.config import STARTUP_ACTIVITY
from habbus.models.guild_config import GuildConfig
from habbus.services.appearance import AppearanceService
from habbus.services.automod import AutomodService
from habbus.services.guild_config import GuildConfigService
from habbus.services.message import MessageService

logger = logging.getLogger(__name__)


def _log_sync_failure(future: Future) -> None:
    """Done-callback reporting an appearance sync that raised."""
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error("Appearance sync failed: %s", error, exc_info=error)


def default_intents() -> discord.Intents:
    """Intents needed for automod, message logs and member logs."""
    return discord.Intents(guilds=True, messages=True, message_content=True, members=True)


class Bot(commands.Bot):
    """
    Main Discord bot class with custom attributes.

    Attributes:
        token: Discord bot token for authentication.
        config_service: Shared per-guild configuration service.
        message_service: Sends logs, greetings and warnings.
        automod_service: Message filter policy.
        appearance_service: Applies nickname/avatar/presence settings.
        main_loop: Event loop the bot runs on, known once ready.
        startup_presence_set: Flag so reconnects keep the dashboard presence.
    """

    def __init__(self, config_service: GuildConfigService, token: str,
                 intents: Optional[discord.Intents] = None):
        """
        Initialize the bot.

        Args:
            config_service: Guild configuration service shared with the dashboard.
            token: Bot authentication token.
            intents: Discord intents configuration.
        """
        super().__init__(command_prefix=self._resolve_prefix, intents=intents or default_intents())
        self.token = token
        self.config_service = config_service
        self.message_service = MessageService(self)
        self.automod_service = AutomodService()
        self.appearance_service = AppearanceService(self)
        self.main_loop: Optional[asyncio.AbstractEventLoop] = None
        self.startup_presence_set = False

    def _resolve_prefix(self, bot, message: discord.Message) -> str:
        """Text command prefix, configurable per guild."""
        if message.guild is None:
            return GuildConfig().prefix
        return self.config_service.get(message.guild.id).prefix

    def load_cogs(self) -> None:
        """Register the moderation and event cogs."""
        from habbus.commands import events, moderation

        moderation.setup(self)
        events.setup(self)

    async def on_ready(self):
        self.main_loop = asyncio.get_running_loop()
        if self.startup_presence_set:
            logger.info("Reconnected as %s", self.user)
            return
        self.startup_presence_set = True
        try:
            await self.change_presence(
                status=discord.Status.online,
                activity=discord.Game(name=STARTUP_ACTIVITY),
            )
        except discord.HTTPException as e:
            logger.warning("Could not set startup presence: %s", e)
        logger.info("Bot ready as %s in %d guild(s)", self.user, len(self.guilds))

    def schedule_appearance_sync(self, guild_id: int | str, config: GuildConfig,
                                 nickname: Optional[str] = None,
                                 update_avatar: bool = False) -> Optional[Future]:
        """
        Queue an appearance sync on the bot loop from another thread.

        Returns:
            The concurrent future, or None when the bot is not running yet.
        """
        if self.main_loop is None or self.main_loop.is_closed():
            logger.info("Bot loop not running, appearance sync for guild %s skipped", guild_id)
            return None
        future = asyncio.run_coroutine_threadsafe(
            self.appearance_service.apply(guild_id, config, nickname, update_avatar),
            self.main_loop,
        )
        future.add_done_callback(_log_sync_failure)
        return future

    def run_bot(self) -> None:
        """Start the bot using the configured token."""
        self.run(self.token)
