"""
Tests for habbus/core.py - ready handling and appearance sync scheduling.
"""

import logging
from concurrent.futures import Future
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from habbus.core import Bot, _log_sync_failure


@pytest.fixture
def fake_bot():
    return SimpleNamespace(
        main_loop=None,
        startup_presence_set=False,
        change_presence=AsyncMock(),
        user="HabbusBot#0001",
        guilds=[],
    )


class TestOnReady:

    @pytest.mark.asyncio
    async def test_startup_presence_set_once(self, fake_bot):
        await Bot.on_ready(fake_bot)
        await Bot.on_ready(fake_bot)

        fake_bot.change_presence.assert_awaited_once()
        assert fake_bot.main_loop is not None


class TestSyncFailureLogging:

    def test_exception_is_logged(self, caplog):
        future = Future()
        future.set_exception(RuntimeError("avatar rejected"))

        with caplog.at_level(logging.ERROR, logger="habbus.core"):
            _log_sync_failure(future)

        assert "avatar rejected" in caplog.text

    def test_success_is_quiet(self, caplog):
        future = Future()
        future.set_result(None)

        with caplog.at_level(logging.ERROR, logger="habbus.core"):
            _log_sync_failure(future)

        assert caplog.records == []

    def test_no_loop_skips_scheduling(self, fake_bot):
        assert Bot.schedule_appearance_sync(fake_bot, "1000", None) is None
