"""
Role-based permission checks for moderation commands and automod.

All checks are pure predicates over a member's roles and a guild's
configured allow-lists.
"""

from typing import Iterable, Optional

import discord

from habbus.config import ADMINISTRATOR_PERMISSION
from habbus.models.guild_config import GuildConfig


def has_administrator(member: Optional[discord.Member]) -> bool:
    """Return whether a member holds the guild Administrator permission."""
    if member is None:
        return False
    permissions = getattr(member, "guild_permissions", None)
    return bool(permissions and permissions.administrator)


def is_authorized(member: Optional[discord.Member], allowed_role_ids: Optional[Iterable[str]]) -> bool:
    """
    Decide whether a member may act under an allow-list of role IDs.

    Administrators are always authorized. Otherwise an empty or missing
    allow-list authorizes nobody, and any single matching role suffices.
    """
    if has_administrator(member):
        return True
    if member is None or not allowed_role_ids:
        return False
    allowed = {str(role_id) for role_id in allowed_role_ids}
    if not allowed:
        return False
    return any(str(role.id) in allowed for role in getattr(member, "roles", []))


def can_ban(member: Optional[discord.Member], config: GuildConfig) -> bool:
    """Bans are open to the admin and mod tiers."""
    return is_authorized(member, config.admin_role) or is_authorized(member, config.mod_role)


def can_kick(member: Optional[discord.Member], config: GuildConfig) -> bool:
    """Kicks are gated on the mod tier only."""
    return is_authorized(member, config.mod_role)


def can_mute(member: Optional[discord.Member], config: GuildConfig) -> bool:
    """Timeouts are gated on the mod tier only."""
    return is_authorized(member, config.mod_role)


def bypasses_automod(member: Optional[discord.Member], config: GuildConfig) -> bool:
    """Staff of either tier are never filtered by automod."""
    return is_authorized(member, config.admin_role) or is_authorized(member, config.mod_role)


def administers_guild(permissions: int | str | None) -> bool:
    """Check the Administrator bit of an OAuth guild permission bitmask."""
    try:
        value = int(permissions or 0)
    except (TypeError, ValueError):
        return False
    return value & ADMINISTRATOR_PERMISSION == ADMINISTRATOR_PERMISSION
