"""
Guild configuration model for per-server settings.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping

from habbus.config import (
    DEFAULT_EMBED_COLOR,
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEZONE,
    STARTUP_ACTIVITY,
)
from habbus.forms import as_id_list, parse_int


class BotStatus(str, Enum):
    """Presence states the dashboard can pick for the bot."""

    ONLINE = "online"
    IDLE = "idle"
    DND = "dnd"
    INVISIBLE = "invisible"

    @classmethod
    def coerce(cls, value: Any) -> "BotStatus":
        """Return the matching status, or ONLINE for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.ONLINE


def _key(name: str) -> dict:
    return {"key": name}


@dataclass
class GuildConfig:
    """
    Settings for one Discord guild.

    Attribute names are snake_case; the persisted JSON document and the
    dashboard form use the camelCase key stored in each field's metadata.

    Attributes:
        prefix: Text command prefix.
        language: Reply language code ('es' or 'en').
        timezone: IANA zone used for moderation log timestamps.
        ignored_channels: Channel IDs where commands and automod are disabled.
        ephemeral_replies: Whether command replies are only visible to the invoker.
        bot_nickname: Nickname the bot uses in this guild.
        bot_avatar: Avatar image as a data URI, or empty.
        embed_color: Hex color for welcome embeds.
        bot_status: One of the BotStatus values.
        activity_type: Discord activity type code.
        activity_text: Activity name shown in the presence.
        welcome_enabled: Whether new members are greeted.
        welcome_channel: Channel ID for greetings.
        welcome_message: Greeting template with {user} and {server}.
        admin_role: Role IDs of the admin tier.
        mod_role: Role IDs of the mod tier.
        mute_role: Role ID used for mutes.
        automod_bad_words: Delete messages containing banned words.
        automod_links: Delete messages containing invite links.
        log_channel: Channel ID for moderation logs.
        log_messages: Log deleted messages.
        log_members: Log member joins and leaves.
    """

    prefix: str = field(default="!", metadata=_key("prefix"))
    language: str = field(default=DEFAULT_LANGUAGE, metadata=_key("language"))
    timezone: str = field(default=DEFAULT_TIMEZONE, metadata=_key("timezone"))
    ignored_channels: list[str] = field(default_factory=list, metadata=_key("ignoredChannels"))
    ephemeral_replies: bool = field(default=False, metadata=_key("ephemeralReplies"))
    bot_nickname: str = field(default="Habbus", metadata=_key("botNickname"))
    bot_avatar: str = field(default="", metadata=_key("botAvatar"))
    embed_color: str = field(default=DEFAULT_EMBED_COLOR, metadata=_key("embedColor"))
    bot_status: str = field(default=BotStatus.ONLINE.value, metadata=_key("botStatus"))
    activity_type: int = field(default=0, metadata=_key("activityType"))
    activity_text: str = field(default=STARTUP_ACTIVITY, metadata=_key("activityText"))
    welcome_enabled: bool = field(default=False, metadata=_key("welcomeEnabled"))
    welcome_channel: str = field(default="", metadata=_key("welcomeChannel"))
    welcome_message: str = field(default="¡Bienvenido {user} a {server}!", metadata=_key("welcomeMessage"))
    admin_role: list[str] = field(default_factory=list, metadata=_key("adminRole"))
    mod_role: list[str] = field(default_factory=list, metadata=_key("modRole"))
    mute_role: str = field(default="", metadata=_key("muteRole"))
    automod_bad_words: bool = field(default=False, metadata=_key("automodBadWords"))
    automod_links: bool = field(default=False, metadata=_key("automodLinks"))
    log_channel: str = field(default="", metadata=_key("logChannel"))
    log_messages: bool = field(default=False, metadata=_key("logMessages"))
    log_members: bool = field(default=False, metadata=_key("logMembers"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GuildConfig":
        """
        Build a config from a persisted record, backfilling defaults.

        Legacy shapes are upgraded on the way in: a role field stored as a
        single string becomes a one-element list, and missing or null
        values take their defaults. Unknown keys are ignored.
        """
        config = cls()
        for f in fields(cls):
            key = f.metadata["key"]
            value = data.get(key)
            if value is None or (value == "" and f.name == "timezone"):
                continue
            setattr(config, f.name, _coerce(f.type, value, getattr(config, f.name)))
        config.bot_status = BotStatus.coerce(config.bot_status).value
        return config

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase document stored on disk."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.metadata["key"]] = list(value) if isinstance(value, list) else value
        return result


def _coerce(annotation, value: Any, default: Any) -> Any:
    if annotation == list[str]:
        return as_id_list(value)
    if annotation is bool:
        return value if isinstance(value, bool) else default
    if annotation is int:
        return parse_int(value, default)
    return str(value)


FIELD_KEYS: dict[str, str] = {f.name: f.metadata["key"] for f in fields(GuildConfig)}
