"""
Discord OAuth2 client used by the dashboard login.
"""

from typing import Optional
from urllib.parse import urlencode

import requests

from habbus.config import DISCORD_API_BASE, OAUTH_SCOPE
from habbus.exceptions import OAuthError


class DiscordOAuthClient:
    """
    Thin wrapper around Discord's OAuth2 and identity endpoints.

    Attributes:
        client_id: Application ID.
        client_secret: Application secret.
        redirect_uri: Callback URL registered for the application.
    """

    def __init__(self, client_id: str, client_secret: str, redirect_uri: str,
                 api_base: str = DISCORD_API_BASE, timeout: int = 15):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.api_base = api_base
        self.timeout = timeout

    def authorize_url(self, state: Optional[str] = None) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": OAUTH_SCOPE,
        }
        if state:
            params["state"] = state
        return f"{self.api_base}/oauth2/authorize?{urlencode(params)}"

    def invite_url(self) -> str:
        params = {
            "client_id": self.client_id,
            "permissions": "8",
            "scope": "bot applications.commands",
        }
        return f"{self.api_base}/oauth2/authorize?{urlencode(params)}"

    def exchange_code(self, code: str) -> str:
        """Trade an authorization code for an access token."""
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
        }
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        payload = self._request("post", "/oauth2/token", data=data, headers=headers)
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise OAuthError("Token response did not include an access token")
        return token

    def fetch_user(self, access_token: str) -> dict:
        return self._request("get", "/users/@me", headers=self._bearer(access_token))

    def fetch_guilds(self, access_token: str) -> list:
        guilds = self._request("get", "/users/@me/guilds", headers=self._bearer(access_token))
        if not isinstance(guilds, list):
            raise OAuthError("Unexpected guild list response")
        return guilds

    @staticmethod
    def _bearer(access_token: str) -> dict:
        return {"Authorization": f"Bearer {access_token}"}

    def _request(self, method: str, path: str, **kwargs):
        try:
            response = requests.request(method, f"{self.api_base}{path}", timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise OAuthError(f"Discord API call {path} failed: {e}") from e
