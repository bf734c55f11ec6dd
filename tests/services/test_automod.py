"""
Tests for habbus/services/automod.py - AutomodService.
"""

import pytest

from habbus.models.guild_config import GuildConfig
from habbus.services.automod import BAD_WORDS_VIOLATION, LINKS_VIOLATION, AutomodService


@pytest.fixture
def automod():
    return AutomodService(bad_words=["tonto", "Idiota"])


class TestAutomodService:
    """Tests for violation detection."""

    def test_bad_word_is_case_insensitive(self, automod):
        config = GuildConfig(automod_bad_words=True)

        assert automod.find_violation("Eres un IDIOTA", config) == BAD_WORDS_VIOLATION

    def test_invite_link(self, automod):
        config = GuildConfig(automod_links=True)

        assert automod.find_violation("únete a discord.gg/abc", config) == LINKS_VIOLATION

    def test_disabled_filters_ignore_everything(self, automod):
        assert automod.find_violation("tonto discord.gg/abc", GuildConfig()) is None

    def test_bad_words_take_precedence(self, automod):
        config = GuildConfig(automod_bad_words=True, automod_links=True)

        assert automod.find_violation("tonto discord.gg/abc", config) == BAD_WORDS_VIOLATION

    def test_clean_and_empty_messages(self, automod):
        config = GuildConfig(automod_bad_words=True, automod_links=True)

        assert automod.find_violation("hola a todos", config) is None
        assert automod.find_violation("", config) is None
        assert automod.find_violation(None, config) is None

    def test_default_word_list_is_loaded(self):
        assert AutomodService().bad_words
