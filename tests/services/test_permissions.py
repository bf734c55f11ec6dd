"""
Tests for habbus/services/permissions.py - role gates.
"""

import pytest

from habbus.models.guild_config import GuildConfig
from habbus.services import permissions


class TestIsAuthorized:
    """Tests for allow-list evaluation."""

    def test_administrator_always_passes(self, member_factory):
        admin = member_factory(administrator=True)

        assert permissions.is_authorized(admin, []) is True
        assert permissions.is_authorized(admin, None) is True

    def test_empty_allow_list_denies(self, member_factory):
        assert permissions.is_authorized(member_factory(role_ids=["1"]), []) is False

    def test_any_matching_role_suffices(self, member_factory):
        member = member_factory(role_ids=["7", "8"])

        assert permissions.is_authorized(member, ["1", "8"]) is True
        assert permissions.is_authorized(member, ["1", "2"]) is False

    def test_no_member(self):
        assert permissions.is_authorized(None, ["1"]) is False

    def test_user_without_roles(self):
        class User:
            id = 1

        assert permissions.is_authorized(User(), ["1"]) is False


class TestTiers:
    """Tests for command tiers."""

    @pytest.fixture
    def config(self):
        return GuildConfig(admin_role=["100"], mod_role=["200"])

    def test_admin_role_can_ban_but_not_kick_or_mute(self, member_factory, config):
        member = member_factory(role_ids=["100"])

        assert permissions.can_ban(member, config) is True
        assert permissions.can_kick(member, config) is False
        assert permissions.can_mute(member, config) is False

    def test_mod_role_can_do_everything(self, member_factory, config):
        member = member_factory(role_ids=["200"])

        assert permissions.can_ban(member, config) is True
        assert permissions.can_kick(member, config) is True
        assert permissions.can_mute(member, config) is True

    def test_unprivileged_member(self, member_factory, config):
        member = member_factory(role_ids=["300"])

        assert permissions.can_ban(member, config) is False
        assert permissions.bypasses_automod(member, config) is False

    def test_staff_bypasses_automod(self, member_factory, config):
        assert permissions.bypasses_automod(member_factory(role_ids=["100"]), config) is True
        assert permissions.bypasses_automod(member_factory(role_ids=["200"]), config) is True

    def test_unconfigured_guild_only_allows_administrators(self, member_factory):
        config = GuildConfig()

        assert permissions.can_ban(member_factory(role_ids=["1"]), config) is False
        assert permissions.can_kick(member_factory(administrator=True), config) is True


@pytest.mark.parametrize("value,expected", [
    ("8", True),
    (8, True),
    ("2147483647", True),
    ("0", False),
    ("4", False),
    (None, False),
    ("garbage", False),
])
def test_administers_guild(value, expected):
    assert permissions.administers_guild(value) is expected
