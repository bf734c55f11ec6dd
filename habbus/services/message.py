"""
Message service for Discord messaging operations.

Moderation logs, welcome greetings, member logs and automod warnings
all go through this service so channel resolution and send failures are
handled in one place.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import discord

from habbus.config import AUTOMOD_WARNING_TTL, DEFAULT_EMBED_COLOR
from habbus.messages import t
from habbus.models.guild_config import GuildConfig
from habbus.services.automod import BAD_WORDS_VIOLATION

logger = logging.getLogger(__name__)


class MessageService:
    """
    Service for sending Discord messages and embeds.

    Attributes:
        bot: The Discord bot instance
    """

    def __init__(self, bot: discord.Bot):
        self.bot = bot

    @staticmethod
    def resolve_channel(guild: discord.Guild, channel_id: Optional[str]):
        """Return the cached guild channel for a configured ID, if any."""
        if not channel_id:
            return None
        try:
            return guild.get_channel(int(channel_id))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def parse_color(color_hex: Optional[str]) -> discord.Color:
        """Convert '#RRGGBB' or 'RRGGBB' into a Color, defaulting on bad input."""
        for candidate in (color_hex, DEFAULT_EMBED_COLOR):
            clean = (candidate or "").strip().lstrip("#")
            if len(clean) != 6:
                continue
            try:
                return discord.Color(int(clean, 16))
            except ValueError:
                continue
        return discord.Color.red()

    @staticmethod
    def format_timestamp(tz_name: str, now: Optional[datetime] = None) -> str:
        """Format a moment in the guild's time zone, falling back to UTC."""
        try:
            zone = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            zone = timezone.utc
        now = now or datetime.now(timezone.utc)
        return now.astimezone(zone).strftime("%d/%m/%Y, %H:%M:%S")

    async def _send(self, channel, *args, **kwargs) -> bool:
        try:
            await channel.send(*args, **kwargs)
            return True
        except discord.HTTPException as e:
            logger.error("Failed to send message to channel %s: %s", getattr(channel, "id", "?"), e)
            return False

    async def send_mod_log(
        self,
        guild: discord.Guild,
        config: GuildConfig,
        title: str,
        description: str,
        color: int,
        moderator: str,
    ) -> bool:
        """Post a moderation action embed to the guild's log channel."""
        channel = self.resolve_channel(guild, config.log_channel)
        if channel is None:
            return False

        embed = discord.Embed(title=title, description=description, color=color)
        embed.set_footer(text=t(
            config.language,
            "log_footer",
            moderator=moderator,
            time=self.format_timestamp(config.timezone),
        ))
        return await self._send(channel, embed=embed)

    async def send_welcome(self, member: discord.Member, config: GuildConfig) -> bool:
        """Greet a new member when welcomes are enabled."""
        if not (config.welcome_enabled and config.welcome_channel):
            return False
        channel = self.resolve_channel(member.guild, config.welcome_channel)
        if channel is None:
            return False

        content = (
            config.welcome_message
            .replace("{user}", f"<@{member.id}>")
            .replace("{server}", member.guild.name)
        )
        embed = discord.Embed(
            description=t(config.language, "welcome_embed"),
            color=self.parse_color(config.embed_color),
        )
        return await self._send(channel, content=content, embed=embed)

    async def send_member_log(self, member: discord.Member, config: GuildConfig, joined: bool) -> bool:
        """Log a member join or leave."""
        if not (config.log_members and config.log_channel):
            return False
        channel = self.resolve_channel(member.guild, config.log_channel)
        if channel is None:
            return False
        key = "member_joined" if joined else "member_left"
        return await self._send(channel, t(config.language, key, member=str(member)))

    async def send_deleted_message_log(self, message: discord.Message, config: GuildConfig) -> bool:
        """Log the content of a deleted message."""
        if not (config.log_messages and config.log_channel):
            return False
        channel = self.resolve_channel(message.guild, config.log_channel)
        if channel is None:
            return False
        content = message.content or t(config.language, "attachment")
        return await self._send(
            channel,
            t(config.language, "deleted_message", author=str(message.author), content=content),
        )

    async def send_automod_warning(self, message: discord.Message, config: GuildConfig, violation: str) -> bool:
        """Post a short-lived warning after automod removed a message."""
        key = "automod_language" if violation == BAD_WORDS_VIOLATION else "automod_spam"
        return await self._send(
            message.channel,
            t(config.language, key, user=message.author.mention),
            delete_after=AUTOMOD_WARNING_TTL,
        )
