"""
Tests for habbus/services/guild_config.py - GuildConfigService.
"""

import json
import threading

import pytest

from habbus.exceptions import MissingGuildIdError
from habbus.models.guild_config import GuildConfig
from habbus.repositories import JsonFileGuildConfigRepository
from habbus.services.guild_config import GuildConfigService


class TestGuildConfigService:
    """Tests for configuration reads and dashboard saves."""

    def test_get_unseen_guild_returns_defaults(self, config_service):
        assert config_service.get(999) == GuildConfig()

    def test_save_example_from_checkbox_form(self, config_service):
        config_service.save("g1", {"adminRole": "r1", "welcomeEnabled": "on"})

        expected = GuildConfig(admin_role=["r1"], welcome_enabled=True)
        assert config_service.get("g1") == expected

    def test_round_trip_reflects_every_submitted_field(self, config_service):
        fields = {
            "prefix": "?",
            "language": "en",
            "timezone": "Europe/Madrid",
            "ignoredChannels": ["10", "11"],
            "ephemeralReplies": "on",
            "botNickname": "Habbie",
            "embedColor": "#00ff00",
            "botStatus": "idle",
            "activityType": "3",
            "activityText": "la pista",
            "welcomeEnabled": "on",
            "welcomeChannel": "20",
            "welcomeMessage": "Hola {user}",
            "adminRole": "30",
            "modRole": ["31", "32"],
            "muteRole": "33",
            "automodBadWords": "on",
            "automodLinks": "on",
            "logChannel": "40",
            "logMessages": "on",
            "logMembers": "on",
        }

        config = config_service.save("g2", fields)

        assert config == config_service.get("g2")
        assert config.to_dict() == {
            **fields,
            "ignoredChannels": ["10", "11"],
            "ephemeralReplies": True,
            "botAvatar": "",
            "activityType": 3,
            "welcomeEnabled": True,
            "adminRole": ["30"],
            "automodBadWords": True,
            "automodLinks": True,
            "logMessages": True,
            "logMembers": True,
        }

    def test_missing_list_fields_are_cleared(self, config_service):
        config_service.save("g", {"adminRole": ["1", "2"], "ignoredChannels": "5"})
        config_service.save("g", {"prefix": "!"})

        config = config_service.get("g")
        assert config.admin_role == []
        assert config.ignored_channels == []

    def test_unchecked_toggles_turn_off(self, config_service):
        config_service.save("g", {"logMembers": "on", "automodLinks": "on"})
        config_service.save("g", {})

        config = config_service.get("g")
        assert config.log_members is False
        assert config.automod_links is False

    def test_absent_text_fields_keep_previous_values(self, config_service):
        config_service.save("g", {"prefix": "?", "muteRole": "77"})
        config_service.save("g", {"language": "en"})

        config = config_service.get("g")
        assert config.prefix == "?"
        assert config.mute_role == "77"
        assert config.language == "en"

    def test_repeated_text_field_keeps_first_value(self, config_service):
        config = config_service.save("g", {"prefix": ["?", "$"], "activityType": ["2", "5"]})

        assert config.prefix == "?"
        assert config.activity_type == 2

    def test_fractional_activity_type_is_truncated(self, config_service):
        assert config_service.save("g", {"activityType": "3.5"}).activity_type == 3

    def test_activity_type_defaults_to_zero(self, config_service):
        config_service.save("g", {"activityType": "2"})
        assert config_service.get("g").activity_type == 2

        config_service.save("g", {"activityType": "nope"})
        assert config_service.get("g").activity_type == 0

    def test_save_stores_avatar_upload_as_data_uri(self, config_service):
        config = config_service.save("g", {}, avatar=(b"GIF89a", "image/gif"))

        assert config.bot_avatar == "data:image/gif;base64,R0lGODlh"

    def test_avatar_kept_when_no_upload(self, config_service):
        config_service.save("g", {}, avatar=(b"GIF89a", "image/gif"))
        config_service.save("g", {"prefix": "?"})

        assert config_service.get("g").bot_avatar.startswith("data:image/gif")

    @pytest.mark.parametrize("guild_id", [None, ""])
    def test_missing_guild_id_is_rejected(self, config_service, guild_id):
        with pytest.raises(MissingGuildIdError):
            config_service.save(guild_id, {"prefix": "?"})

    def test_saving_identical_input_twice_is_idempotent(self, settings_path):
        service = GuildConfigService(JsonFileGuildConfigRepository(settings_path))
        fields = {"adminRole": ["1", "2"], "modRole": "3", "ignoredChannels": ["4"], "logMembers": "on"}

        service.save("g", fields)
        first = json.loads(settings_path.read_text(encoding="utf-8"))
        service.save("g", fields)
        second = json.loads(settings_path.read_text(encoding="utf-8"))

        assert first == second
        assert second["g"]["adminRole"] == ["1", "2"]

    def test_concurrent_saves_to_different_guilds_are_all_persisted(self, settings_path):
        service = GuildConfigService(JsonFileGuildConfigRepository(settings_path))
        threads = [
            threading.Thread(target=service.save, args=(str(i), {"prefix": str(i)}))
            for i in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        document = json.loads(settings_path.read_text(encoding="utf-8"))
        assert {gid: record["prefix"] for gid, record in document.items()} == {str(i): str(i) for i in range(20)}

    def test_is_channel_ignored(self, config_service):
        config_service.save("g", {"ignoredChannels": ["500"]})

        assert config_service.is_channel_ignored("g", 500) is True
        assert config_service.is_channel_ignored("g", 501) is False
