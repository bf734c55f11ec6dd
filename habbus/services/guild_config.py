"""
Service for guild-level bot configuration.
"""

import dataclasses
import logging
import threading
from typing import Any, Mapping, Optional

from habbus.exceptions import MissingGuildIdError
from habbus.forms import as_id_list, avatar_data_uri, decode_checkbox, first_value, parse_int
from habbus.models.guild_config import FIELD_KEYS, GuildConfig
from habbus.repositories.base import GuildConfigRepository

logger = logging.getLogger(__name__)

# Always replaced; a missing form key clears the list
LIST_FIELDS = ("admin_role", "mod_role", "ignored_channels")

# Overwritten only when the form submits them
TEXT_FIELDS = (
    "prefix",
    "language",
    "timezone",
    "welcome_message",
    "welcome_channel",
    "embed_color",
    "bot_nickname",
    "log_channel",
    "bot_status",
    "activity_text",
    "mute_role",
)

# Checkbox toggles; an unchecked box is simply absent from the form
TOGGLE_FIELDS = (
    "welcome_enabled",
    "automod_bad_words",
    "automod_links",
    "log_messages",
    "log_members",
    "ephemeral_replies",
)


class GuildConfigService:
    """Business logic wrapper for guild configuration reads and saves."""

    def __init__(self, repository: GuildConfigRepository):
        self.repo = repository
        self._save_lock = threading.Lock()

    def get(self, guild_id: int | str) -> GuildConfig:
        """Get guild settings, creating defaults when missing."""
        return self.repo.get(str(guild_id))

    def save(
        self,
        guild_id: Optional[int | str],
        fields: Mapping[str, Any],
        avatar: Optional[tuple[bytes, str]] = None,
    ) -> GuildConfig:
        """
        Merge submitted dashboard fields into a guild's settings and persist.

        Args:
            guild_id: Target guild.
            fields: Sparse camelCase form values. List fields may hold a
                single value or a sequence.
            avatar: Optional uploaded image as (bytes, mimetype).

        Returns:
            The stored configuration.

        Raises:
            MissingGuildIdError: guild_id is empty.
            ConfigPersistenceError: the settings file could not be written.
        """
        if guild_id is None or str(guild_id) == "":
            raise MissingGuildIdError("guildId is required")
        gid = str(guild_id)

        with self._save_lock:
            current = self.get(gid)
            changes = self._decode(fields)
            if avatar is not None:
                content, mimetype = avatar
                changes["bot_avatar"] = avatar_data_uri(content, mimetype)
            updated = GuildConfig.from_dict(dataclasses.replace(current, **changes).to_dict())
            self.repo.save(gid, updated)

        logger.info("Saved settings for guild %s (%d field(s) submitted)", gid, len(fields))
        return updated

    @staticmethod
    def _decode(fields: Mapping[str, Any]) -> dict[str, Any]:
        """Translate camelCase form values into GuildConfig attribute changes."""
        changes: dict[str, Any] = {}
        for name in LIST_FIELDS:
            changes[name] = as_id_list(fields.get(FIELD_KEYS[name]))
        for name in TEXT_FIELDS:
            key = FIELD_KEYS[name]
            value = first_value(fields.get(key))
            if value is not None:
                changes[name] = str(value)
        changes["activity_type"] = parse_int(first_value(fields.get(FIELD_KEYS["activity_type"])), 0)
        for name in TOGGLE_FIELDS:
            changes[name] = decode_checkbox(fields.get(FIELD_KEYS[name]))
        return changes

    def is_channel_ignored(self, guild_id: int | str, channel_id: int | str) -> bool:
        """Return whether commands are disabled in a channel."""
        return str(channel_id) in self.get(guild_id).ignored_channels
