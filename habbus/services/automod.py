"""
Automod policy: decides whether a message must be removed.
"""

from typing import Iterable, Optional

from habbus.config import BAD_WORDS, INVITE_MARKER
from habbus.models.guild_config import GuildConfig

BAD_WORDS_VIOLATION = "bad_words"
LINKS_VIOLATION = "links"


class AutomodService:
    """
    Keyword and invite-link filter.

    Attributes:
        bad_words: Lowercase words that trigger deletion.
        invite_marker: Substring identifying invite links.
    """

    def __init__(self, bad_words: Iterable[str] = BAD_WORDS, invite_marker: str = INVITE_MARKER):
        self.bad_words = [word.lower() for word in bad_words]
        self.invite_marker = invite_marker

    def contains_bad_word(self, content: str) -> bool:
        lowered = content.lower()
        return any(word in lowered for word in self.bad_words)

    def contains_invite(self, content: str) -> bool:
        return self.invite_marker in content

    def find_violation(self, content: Optional[str], config: GuildConfig) -> Optional[str]:
        """
        Return the violation a message commits under a guild's settings.

        Banned words are checked before invite links; at most one
        violation is reported since the message is deleted either way.
        """
        if not content:
            return None
        if config.automod_bad_words and self.contains_bad_word(content):
            return BAD_WORDS_VIOLATION
        if config.automod_links and self.contains_invite(content):
            return LINKS_VIOLATION
        return None
