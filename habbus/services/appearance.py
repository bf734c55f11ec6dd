"""
Applies a guild's saved appearance settings to the live bot.
"""

import logging
from typing import Optional

import discord

from habbus.forms import data_uri_bytes
from habbus.models.guild_config import BotStatus, GuildConfig

logger = logging.getLogger(__name__)


class AppearanceService:
    """
    Pushes nickname, avatar and presence changes to Discord.

    Every step is independent: a failure is logged and the remaining
    steps still run.
    """

    def __init__(self, bot: discord.Bot):
        self.bot = bot

    @staticmethod
    def build_presence(config: GuildConfig) -> tuple[discord.Status, discord.Activity]:
        """Translate stored presence settings into py-cord objects."""
        status = discord.Status(BotStatus.coerce(config.bot_status).value)
        try:
            activity_type = discord.ActivityType(config.activity_type)
        except ValueError:
            activity_type = discord.ActivityType.playing
        return status, discord.Activity(type=activity_type, name=config.activity_text)

    async def apply(self, guild_id: int | str, config: GuildConfig, nickname: Optional[str] = None,
                    update_avatar: bool = False) -> None:
        """
        Sync the bot with a freshly saved configuration.

        Args:
            guild_id: Guild the settings belong to.
            config: The saved configuration.
            nickname: Nickname submitted with the save; skipped when empty.
            update_avatar: Whether a new avatar was uploaded with the save.
        """
        guild = self.bot.get_guild(int(guild_id))
        if guild is None:
            logger.info("Guild %s is not cached, skipping appearance sync", guild_id)
            return

        if nickname:
            try:
                await guild.me.edit(nick=nickname)
            except discord.DiscordException as e:
                logger.warning("Could not set nickname in guild %s: %s", guild_id, e)

        if update_avatar and config.bot_avatar.startswith("data:"):
            try:
                await self.bot.user.edit(avatar=data_uri_bytes(config.bot_avatar))
            except (discord.DiscordException, ValueError) as e:
                logger.warning("Could not update avatar from guild %s settings: %s", guild_id, e)

        status, activity = self.build_presence(config)
        try:
            await self.bot.change_presence(status=status, activity=activity)
        except discord.DiscordException as e:
            logger.warning("Could not change presence: %s", e)
