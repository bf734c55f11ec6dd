"""
Guild event listeners: automod, message logs, welcomes and member logs.
"""

import logging

import discord
from discord.ext import commands

from habbus.services import permissions
from habbus.services.automod import AutomodService
from habbus.services.guild_config import GuildConfigService
from habbus.services.message import MessageService

logger = logging.getLogger(__name__)


class EventsCog(commands.Cog):
    """Cog reacting to message and member events."""

    def __init__(self, bot: discord.Bot, config_service: GuildConfigService,
                 message_service: MessageService, automod_service: AutomodService):
        self.bot = bot
        self.config_service = config_service
        self.message_service = message_service
        self.automod_service = automod_service

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        """Delete messages that break the guild's automod rules."""
        if message.author.bot or message.guild is None:
            return
        config = self.config_service.get(message.guild.id)
        if str(message.channel.id) in config.ignored_channels:
            return
        if permissions.bypasses_automod(message.author, config):
            return

        violation = self.automod_service.find_violation(message.content, config)
        if violation is None:
            return

        try:
            await message.delete()
        except discord.HTTPException as e:
            logger.warning("Automod could not delete message %s: %s", message.id, e)
            return
        logger.info("Automod removed message from %s in guild %s (%s)", message.author, message.guild.id, violation)
        await self.message_service.send_automod_warning(message, config, violation)

    @commands.Cog.listener()
    async def on_message_delete(self, message: discord.Message):
        if message.guild is None or message.author.bot:
            return
        config = self.config_service.get(message.guild.id)
        await self.message_service.send_deleted_message_log(message, config)

    @commands.Cog.listener()
    async def on_member_join(self, member: discord.Member):
        config = self.config_service.get(member.guild.id)
        await self.message_service.send_welcome(member, config)
        await self.message_service.send_member_log(member, config, joined=True)

    @commands.Cog.listener()
    async def on_member_remove(self, member: discord.Member):
        config = self.config_service.get(member.guild.id)
        await self.message_service.send_member_log(member, config, joined=False)


def setup(bot: discord.Bot, config_service: GuildConfigService = None,
          message_service: MessageService = None, automod_service: AutomodService = None):
    """Set up event listeners cog."""
    config_service = config_service or getattr(bot, "config_service", None)
    message_service = message_service or getattr(bot, "message_service", None)
    automod_service = automod_service or getattr(bot, "automod_service", None) or AutomodService()
    if config_service is None or message_service is None:
        raise ValueError("config_service and message_service are required for EventsCog")
    bot.add_cog(EventsCog(bot, config_service, message_service, automod_service))
