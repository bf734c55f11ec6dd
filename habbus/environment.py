"""
Environment configuration loader.

This module loads environment variables from .env file
for bot and dashboard configuration.
"""

import os
from dotenv import load_dotenv

from habbus.config import SETTINGS_PATH, WEB_PORT


class Environment:
    """
    Environment configuration container.

    Loads and provides access to environment variables
    needed for bot and dashboard operation.

    Attributes:
        bot_token: Discord bot authentication token.
        client_id: OAuth2 application ID.
        client_secret: OAuth2 application secret.
        callback_url: OAuth2 redirect URI registered for the dashboard.
        secret_key: Flask session signing key.
        port: Dashboard HTTP port.
        settings_path: JSON file holding per-guild settings.
    """

    def __init__(self):
        """Load environment variables from .env file."""
        load_dotenv()
        self.bot_token: str = os.getenv('DISCORD_BOT_TOKEN', '')
        self.client_id: str = os.getenv('DISCORD_CLIENT_ID', '')
        self.client_secret: str = os.getenv('DISCORD_CLIENT_SECRET', '')
        self.port: int = int(os.getenv('PORT', WEB_PORT))
        self.callback_url: str = os.getenv(
            'DISCORD_CALLBACK_URL', f'http://localhost:{self.port}/callback'
        )
        self.secret_key: str = os.getenv('FLASK_SECRET_KEY', 'navidad')
        self.settings_path: str = os.getenv('HABBUS_SETTINGS_PATH', str(SETTINGS_PATH))

    def validate(self) -> list[str]:
        """Return the names of required variables that are not set."""
        missing = []
        if not self.bot_token:
            missing.append('DISCORD_BOT_TOKEN')
        if not self.client_id:
            missing.append('DISCORD_CLIENT_ID')
        if not self.client_secret:
            missing.append('DISCORD_CLIENT_SECRET')
        return missing
