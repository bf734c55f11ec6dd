"""
User-facing message catalog.

Replies follow the guild's configured language; unknown languages fall
back to Spanish.
"""

from habbus.config import DEFAULT_LANGUAGE

MESSAGES = {
    "es": {
        "disabled_here": "🚫 Desactivado aquí.",
        "no_permission": "⛔ Sin permisos.",
        "error": "❌ Error.",
        "no_reason": "Sin razón",
        "pong": "¡Pong! 🏓 {latency}ms",
        "info": "🎅 **{name}** v{version}",
        "banned": "🔨 **{target}** baneado.",
        "kicked": "🦶 **{target}** expulsado.",
        "muted": "😶 **{target}** silenciado ({minutes}m).",
        "audit_reason": "Por: {moderator} | {reason}",
        "log_ban_title": "🔨 Ban",
        "log_kick_title": "🦶 Kick",
        "log_mute_title": "😶 Mute",
        "log_user": "**Usuario:** {target}",
        "log_reason": "**Razón:** {reason}",
        "log_duration": "**Tiempo:** {minutes}m",
        "log_footer": "Mod: {moderator} • {time}",
        "automod_language": "🚫 {user}, lenguaje.",
        "automod_spam": "🚫 {user}, no spam.",
        "deleted_message": "🗑️ **Borrado**\n👤 {author}\n💬 {content}",
        "attachment": "Adjunto",
        "welcome_embed": "Bienvenido!",
        "member_joined": "🟢 Entrada: {member}",
        "member_left": "🔴 Salida: {member}",
    },
    "en": {
        "disabled_here": "🚫 Disabled here.",
        "no_permission": "⛔ Missing permissions.",
        "error": "❌ Error.",
        "no_reason": "No reason",
        "pong": "Pong! 🏓 {latency}ms",
        "info": "🎅 **{name}** v{version}",
        "banned": "🔨 **{target}** banned.",
        "kicked": "🦶 **{target}** kicked.",
        "muted": "😶 **{target}** muted ({minutes}m).",
        "audit_reason": "By: {moderator} | {reason}",
        "log_ban_title": "🔨 Ban",
        "log_kick_title": "🦶 Kick",
        "log_mute_title": "😶 Mute",
        "log_user": "**User:** {target}",
        "log_reason": "**Reason:** {reason}",
        "log_duration": "**Duration:** {minutes}m",
        "log_footer": "Mod: {moderator} • {time}",
        "automod_language": "🚫 {user}, language.",
        "automod_spam": "🚫 {user}, no spam.",
        "deleted_message": "🗑️ **Deleted**\n👤 {author}\n💬 {content}",
        "attachment": "Attachment",
        "welcome_embed": "Welcome!",
        "member_joined": "🟢 Joined: {member}",
        "member_left": "🔴 Left: {member}",
    },
}


def t(language: str, key: str, **kwargs) -> str:
    """Look up and format a message in the given language."""
    catalog = MESSAGES.get(language) or MESSAGES[DEFAULT_LANGUAGE]
    return catalog[key].format(**kwargs)
