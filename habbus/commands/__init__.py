"""
Discord cogs for HabbusBot.

ModerationCog carries the slash commands; EventsCog reacts to message
and member events.
"""

from habbus.commands.moderation import ModerationCog
from habbus.commands.events import EventsCog

__all__ = [
    "ModerationCog",
    "EventsCog",
]
