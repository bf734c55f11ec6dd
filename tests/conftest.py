"""
Shared pytest fixtures for HabbusBot tests.
"""

import os
import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def settings_path(tmp_path):
    """Path of a settings file inside a temporary directory."""
    return tmp_path / "settings.json"


@pytest.fixture
def memory_repository():
    """Create an empty in-memory guild config repository."""
    from habbus.repositories import InMemoryGuildConfigRepository

    return InMemoryGuildConfigRepository()


@pytest.fixture
def config_service(memory_repository):
    """Create a GuildConfigService over the in-memory repository."""
    from habbus.services.guild_config import GuildConfigService

    return GuildConfigService(memory_repository)


# ============================================================================
# Discord Fakes
# ============================================================================

class FakeMember(SimpleNamespace):
    """SimpleNamespace with a configurable str() like discord.Member."""

    def __str__(self):
        return self.display


@pytest.fixture
def member_factory():
    """Factory for member stand-ins: member_factory(role_ids, administrator=False)."""
    def _make(role_ids=(), administrator=False, member_id=42, display="user#0001", guild=None):
        return FakeMember(
            id=member_id,
            roles=[SimpleNamespace(id=int(role_id)) for role_id in role_ids],
            guild_permissions=SimpleNamespace(administrator=administrator),
            bot=False,
            mention=f"<@{member_id}>",
            display=display,
            guild=guild,
        )
    return _make


@pytest.fixture
def text_channel():
    """A text channel whose send() is awaitable."""
    channel = Mock()
    channel.id = 500
    channel.send = AsyncMock()
    return channel


@pytest.fixture
def guild(text_channel):
    """A guild that resolves channel 500 and nothing else."""
    g = Mock()
    g.id = 1000
    g.name = "Habbus Hotel"
    g.get_channel = Mock(side_effect=lambda cid: text_channel if cid == 500 else None)
    return g


@pytest.fixture
def http_error():
    """Factory for discord.HTTPException instances."""
    import discord

    def _make(status=403, message="Missing Permissions"):
        return discord.HTTPException(Mock(status=status, reason="Forbidden"), message)
    return _make
