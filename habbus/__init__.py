"""
HabbusBot package - moderation bot and configuration dashboard.

This package contains the bot core, the per-guild configuration store,
the moderation cogs and the Flask dashboard.
"""

from habbus.core import Bot
from habbus.environment import Environment

__all__ = [
    'Bot',
    'Environment',
]
