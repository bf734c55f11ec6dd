"""
Moderation slash commands cog.

This cog handles:
- /ping - Websocket latency
- /habbus - Bot name and version
- /ban, /kick, /mute - Role-gated moderation actions
"""

import logging
from datetime import timedelta
from typing import Optional

import discord
from discord.ext import commands
from discord.commands import Option

from habbus.config import BAN_COLOR, BOT_NAME, BOT_VERSION, KICK_COLOR, MUTE_COLOR
from habbus.messages import t
from habbus.models.guild_config import GuildConfig
from habbus.services import permissions
from habbus.services.guild_config import GuildConfigService
from habbus.services.message import MessageService

logger = logging.getLogger(__name__)

# Discord caps member timeouts at 28 days
MAX_MUTE_MINUTES = 28 * 24 * 60


class ModerationCog(commands.Cog):
    """Cog for moderation commands."""

    def __init__(self, bot: discord.Bot, config_service: GuildConfigService,
                 message_service: MessageService):
        """
        Initialize the moderation cog.

        Args:
            bot: The Discord bot instance
            config_service: Guild configuration service
            message_service: Service used for moderation logs
        """
        self.bot = bot
        self.config_service = config_service
        self.message_service = message_service

    async def _load_config(self, ctx: discord.ApplicationContext) -> Optional[GuildConfig]:
        """
        Return the guild config, or None after replying when the command
        cannot run here (outside a guild or in an ignored channel).
        """
        if ctx.guild is None:
            await ctx.respond(t("es", "error"), ephemeral=True)
            return None
        config = self.config_service.get(ctx.guild.id)
        if str(ctx.channel_id) in config.ignored_channels:
            await ctx.respond(t(config.language, "disabled_here"), ephemeral=True)
            return None
        return config

    async def _reply(self, ctx: discord.ApplicationContext, config: GuildConfig, content: str):
        await ctx.respond(content, ephemeral=config.ephemeral_replies)

    async def _deny(self, ctx: discord.ApplicationContext, config: GuildConfig, key: str):
        await ctx.respond(t(config.language, key), ephemeral=True)

    @commands.slash_command(name="ping", description="🏓 Latencia")
    async def ping(self, ctx: discord.ApplicationContext):
        config = await self._load_config(ctx)
        if config is None:
            return
        await self._reply(ctx, config, t(config.language, "pong", latency=round(self.bot.latency * 1000)))

    @commands.slash_command(name="habbus", description="🎄 Info")
    async def info(self, ctx: discord.ApplicationContext):
        config = await self._load_config(ctx)
        if config is None:
            return
        await self._reply(ctx, config, t(config.language, "info", name=BOT_NAME, version=BOT_VERSION))

    @commands.slash_command(name="ban", description="🔨 Banear")
    async def ban(
        self,
        ctx: discord.ApplicationContext,
        usuario: Option(discord.User, "Usuario a banear", required=True),
        razon: Option(str, "Razón", required=False, default=None),
    ):
        """Ban a user. Open to the admin and mod tiers."""
        config = await self._load_config(ctx)
        if config is None:
            return
        if not permissions.can_ban(ctx.author, config):
            await self._deny(ctx, config, "no_permission")
            return

        reason = razon or t(config.language, "no_reason")
        try:
            await ctx.guild.ban(usuario, reason=t(config.language, "audit_reason", moderator=str(ctx.author), reason=reason))
        except discord.HTTPException as e:
            logger.warning("Ban of %s in guild %s failed: %s", usuario.id, ctx.guild.id, e)
            await self._deny(ctx, config, "error")
            return

        await self._reply(ctx, config, t(config.language, "banned", target=str(usuario)))
        await self.message_service.send_mod_log(
            ctx.guild,
            config,
            title=t(config.language, "log_ban_title"),
            description="\n".join([
                t(config.language, "log_user", target=str(usuario)),
                t(config.language, "log_reason", reason=reason),
            ]),
            color=BAN_COLOR,
            moderator=str(ctx.author),
        )

    @commands.slash_command(name="kick", description="🦶 Expulsar")
    async def kick(
        self,
        ctx: discord.ApplicationContext,
        usuario: Option(discord.User, "Usuario a expulsar", required=True),
        razon: Option(str, "Razón", required=False, default=None),
    ):
        """Kick a member. Mod tier only."""
        config = await self._load_config(ctx)
        if config is None:
            return
        if not permissions.can_kick(ctx.author, config):
            await self._deny(ctx, config, "no_permission")
            return

        reason = razon or t(config.language, "no_reason")
        try:
            member = await ctx.guild.fetch_member(usuario.id)
            await member.kick(reason=t(config.language, "audit_reason", moderator=str(ctx.author), reason=reason))
        except discord.HTTPException as e:
            logger.warning("Kick of %s in guild %s failed: %s", usuario.id, ctx.guild.id, e)
            await self._deny(ctx, config, "error")
            return

        await self._reply(ctx, config, t(config.language, "kicked", target=str(usuario)))
        await self.message_service.send_mod_log(
            ctx.guild,
            config,
            title=t(config.language, "log_kick_title"),
            description="\n".join([
                t(config.language, "log_user", target=str(usuario)),
                t(config.language, "log_reason", reason=reason),
            ]),
            color=KICK_COLOR,
            moderator=str(ctx.author),
        )

    @commands.slash_command(name="mute", description="😶 Silenciar")
    async def mute(
        self,
        ctx: discord.ApplicationContext,
        usuario: Option(discord.User, "Usuario a silenciar", required=True),
        minutos: Option(int, "Minutos", required=True, min_value=1, max_value=MAX_MUTE_MINUTES),
        razon: Option(str, "Razón", required=False, default=None),
    ):
        """Time a member out. Mod tier only."""
        config = await self._load_config(ctx)
        if config is None:
            return
        if not permissions.can_mute(ctx.author, config):
            await self._deny(ctx, config, "no_permission")
            return

        reason = razon or t(config.language, "no_reason")
        try:
            member = await ctx.guild.fetch_member(usuario.id)
            await member.timeout_for(
                timedelta(minutes=minutos),
                reason=t(config.language, "audit_reason", moderator=str(ctx.author), reason=reason),
            )
        except discord.HTTPException as e:
            logger.warning("Timeout of %s in guild %s failed: %s", usuario.id, ctx.guild.id, e)
            await self._deny(ctx, config, "error")
            return

        await self._reply(ctx, config, t(config.language, "muted", target=str(usuario), minutes=minutos))
        await self.message_service.send_mod_log(
            ctx.guild,
            config,
            title=t(config.language, "log_mute_title"),
            description="\n".join([
                t(config.language, "log_user", target=str(usuario)),
                t(config.language, "log_duration", minutes=minutos),
                t(config.language, "log_reason", reason=reason),
            ]),
            color=MUTE_COLOR,
            moderator=str(ctx.author),
        )


def setup(bot: discord.Bot, config_service: GuildConfigService = None,
          message_service: MessageService = None):
    """Set up moderation commands cog."""
    config_service = config_service or getattr(bot, "config_service", None)
    message_service = message_service or getattr(bot, "message_service", None)
    if config_service is None or message_service is None:
        raise ValueError("config_service and message_service are required for ModerationCog")
    bot.add_cog(ModerationCog(bot, config_service, message_service))
