"""
Web dashboard for per-guild configuration.
"""

from habbus.web.app import create_app
from habbus.web.oauth import DiscordOAuthClient

__all__ = [
    "create_app",
    "DiscordOAuthClient",
]
