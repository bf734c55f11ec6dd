"""
Centralized configuration for HabbusBot.

This module contains the paths and constants shared by the bot
and the web dashboard.
"""

from pathlib import Path

# ============================================================================
# Paths
# ============================================================================

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.absolute()

# Data directory
DATA_DIR = PROJECT_ROOT / "data"

# Per-guild settings file
SETTINGS_PATH = DATA_DIR / "settings.json"

# Daily log files
LOGS_DIR = PROJECT_ROOT / "logs"


# ============================================================================
# Bot Identity
# ============================================================================

BOT_NAME = "HabbusBot"
BOT_VERSION = "2.0"

# Presence shown right after login
STARTUP_ACTIVITY = "Navidad en Habbus"


# ============================================================================
# Guild Defaults
# ============================================================================

DEFAULT_TIMEZONE = "America/Bogota"
DEFAULT_LANGUAGE = "es"
DEFAULT_EMBED_COLOR = "#ff0f0f"


# ============================================================================
# Automod
# ============================================================================

BAD_WORDS = ["tonto", "estupido", "idiota", "bobo", "mierda"]

# Invite links are matched by this marker
INVITE_MARKER = "discord.gg/"

# Seconds before automod warnings are removed
AUTOMOD_WARNING_TTL = 5


# ============================================================================
# Moderation Log Colors
# ============================================================================

BAN_COLOR = 0xFF0000
KICK_COLOR = 0xFFA500
MUTE_COLOR = 0xFFFF00


# ============================================================================
# Web Interface Settings
# ============================================================================

WEB_HOST = "0.0.0.0"
WEB_PORT = 3000

DISCORD_API_BASE = "https://discord.com/api/v10"
OAUTH_SCOPE = "identify guilds"

# Administrator bit in a guild permission bitmask
ADMINISTRATOR_PERMISSION = 0x8

# Avatar uploads larger than this are rejected
MAX_UPLOAD_BYTES = 8 * 1024 * 1024

# Image types Discord accepts as an avatar
AVATAR_MIMETYPES = ("image/png", "image/jpeg", "image/gif", "image/webp")

# Number of log lines kept for the dashboard
MAX_LOGS = 100
