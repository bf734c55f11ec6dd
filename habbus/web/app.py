"""
Flask dashboard: Discord login, guild picker and the settings form.

The app shares the bot's GuildConfigService, so a save is visible to
the cogs immediately.
"""

import logging
import os
import secrets
from typing import Optional

from flask import Flask, abort, jsonify, redirect, render_template, request, session, url_for

from habbus.config import AVATAR_MIMETYPES, MAX_UPLOAD_BYTES
from habbus.exceptions import ConfigPersistenceError, MissingGuildIdError, OAuthError
from habbus.forms import flatten_form
from habbus.logger import LogBuffer
from habbus.services.guild_config import GuildConfigService
from habbus.services.permissions import administers_guild
from habbus.web.oauth import DiscordOAuthClient

logger = logging.getLogger(__name__)


def _admin_guilds(guilds: list) -> list[dict]:
    """Keep only guilds the user administers, trimmed for the session cookie."""
    return [
        {"id": str(g["id"]), "name": g.get("name", "Unknown"), "icon": g.get("icon")}
        for g in guilds
        if administers_guild(g.get("permissions"))
    ]


def _guild_details(bot, guild_id: str) -> tuple[list[dict], list[dict]]:
    """Text channels and assignable roles of a guild the bot is in."""
    if bot is None:
        return [], []
    try:
        guild = bot.get_guild(int(guild_id))
    except ValueError:
        return [], []
    if guild is None:
        return [], []

    channels = [{"id": str(c.id), "name": c.name} for c in guild.text_channels]
    roles = [
        {"id": str(r.id), "name": r.name, "color": str(r.color)}
        for r in sorted(guild.roles, key=lambda r: r.position, reverse=True)
        if not r.is_default()
    ]
    return channels, roles


def create_app(
    config_service: GuildConfigService,
    bot=None,
    oauth: Optional[DiscordOAuthClient] = None,
    log_buffer: Optional[LogBuffer] = None,
    secret_key: Optional[str] = None,
) -> Flask:
    """
    Build the dashboard application.

    Args:
        config_service: Guild configuration service shared with the bot.
        bot: Running Bot instance, used for guild lookups and appearance sync.
        oauth: Discord OAuth2 client for login.
        log_buffer: In-memory log handler served by /api/logs.
        secret_key: Session signing key.
    """
    app = Flask(__name__,
                template_folder=os.path.abspath(os.path.join(os.path.dirname(__file__), 'templates')))
    app.secret_key = secret_key or os.urandom(24)
    app.config['MAX_CONTENT_LENGTH'] = MAX_UPLOAD_BYTES

    @app.errorhandler(MissingGuildIdError)
    def missing_guild_id(e):
        return "Falta ID", 400

    @app.errorhandler(ConfigPersistenceError)
    def persistence_failed(e):
        logger.error("Settings save failed: %s", e)
        return "Error", 500

    @app.route('/')
    def index():
        return render_template('index.html', user=session.get('user'))

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/login')
    def login():
        if oauth is None:
            return "OAuth no configurado", 500
        state = secrets.token_urlsafe(16)
        session['oauth_state'] = state
        return redirect(oauth.authorize_url(state))

    @app.route('/callback')
    def callback():
        code = request.args.get('code')
        if not code:
            return "Falta código", 400
        if oauth is None:
            return "OAuth no configurado", 500
        if request.args.get('state') != session.pop('oauth_state', None):
            return redirect(url_for('index'))

        try:
            token = oauth.exchange_code(code)
            user = oauth.fetch_user(token)
            guilds = oauth.fetch_guilds(token)
        except OAuthError as e:
            logger.warning("Login failed: %s", e)
            return redirect(url_for('index'))

        session['user'] = {
            'id': str(user.get('id')),
            'username': user.get('username'),
            'avatar': user.get('avatar'),
        }
        session['guilds'] = _admin_guilds(guilds)
        logger.info("Dashboard login by %s", session['user']['username'])
        return redirect(url_for('dashboard'))

    @app.route('/logout')
    def logout():
        session.clear()
        return redirect(url_for('index'))

    @app.route('/invite')
    def invite():
        if oauth is None:
            return "OAuth no configurado", 500
        return redirect(oauth.invite_url())

    @app.route('/api/logs')
    def api_logs():
        if 'user' not in session:
            abort(403)
        return jsonify(log_buffer.entries() if log_buffer else [])

    @app.route('/dashboard')
    def dashboard():
        if 'user' not in session:
            return redirect(url_for('index'))

        servers = session.get('guilds', [])
        admin_ids = {g['id'] for g in servers}
        selected_guild_id = request.args.get('guild')
        if not selected_guild_id and servers:
            selected_guild_id = servers[0]['id']
        if selected_guild_id and selected_guild_id not in admin_ids:
            abort(403)

        channels, roles = _guild_details(bot, selected_guild_id) if selected_guild_id else ([], [])
        config = config_service.get(selected_guild_id) if selected_guild_id else None
        ready = bot is not None and bot.is_ready()
        stats = {
            'servers': len(bot.guilds) if ready else 0,
            'ping': round(bot.latency * 1000) if ready else 0,
            'status': 'Online' if ready else 'Offline',
        }
        return render_template(
            'dashboard.html',
            user=session['user'],
            config=config,
            stats=stats,
            servers=servers,
            selected_guild_id=selected_guild_id,
            channels=channels,
            roles=roles,
        )

    @app.route('/save-config', methods=['POST'])
    def save_config():
        if 'user' not in session:
            return "No auth", 403

        fields = flatten_form(request.form)
        guild_id = fields.get('guildId')
        admin_ids = {g['id'] for g in session.get('guilds', [])}
        if guild_id and guild_id not in admin_ids:
            return "Forbidden", 403

        avatar = None
        upload = request.files.get('botAvatarFile')
        if upload and upload.filename:
            if upload.mimetype not in AVATAR_MIMETYPES:
                return "Imagen no válida", 400
            avatar = (upload.read(), upload.mimetype)

        config = config_service.save(guild_id, fields, avatar)
        if bot is not None:
            bot.schedule_appearance_sync(guild_id, config, fields.get('botNickname'), avatar is not None)
        return "", 200

    return app
