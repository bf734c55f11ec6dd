"""
Tests for habbus/web/oauth.py - DiscordOAuthClient.
"""

from unittest.mock import Mock, patch
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from habbus.exceptions import OAuthError
from habbus.web.oauth import DiscordOAuthClient


@pytest.fixture
def oauth():
    return DiscordOAuthClient("123", "secret", "http://localhost:3000/callback", api_base="https://discord.test/api")


def _response(payload, status=200):
    response = Mock()
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status}")
    return response


class TestUrls:

    def test_authorize_url(self, oauth):
        url = urlparse(oauth.authorize_url("xyz"))
        query = parse_qs(url.query)

        assert url.path == "/api/oauth2/authorize"
        assert query["scope"] == ["identify guilds"]
        assert query["state"] == ["xyz"]
        assert query["redirect_uri"] == ["http://localhost:3000/callback"]

    def test_invite_url_requests_administrator(self, oauth):
        query = parse_qs(urlparse(oauth.invite_url()).query)

        assert query["permissions"] == ["8"]
        assert query["scope"] == ["bot applications.commands"]


class TestRequests:

    @patch("habbus.web.oauth.requests.request")
    def test_exchange_code(self, mock_request, oauth):
        mock_request.return_value = _response({"access_token": "tok"})

        assert oauth.exchange_code("abc") == "tok"
        method, url = mock_request.call_args.args
        assert method == "post"
        assert url == "https://discord.test/api/oauth2/token"
        assert mock_request.call_args.kwargs["data"]["code"] == "abc"

    @patch("habbus.web.oauth.requests.request")
    def test_exchange_without_token(self, mock_request, oauth):
        mock_request.return_value = _response({"error": "invalid_grant"})

        with pytest.raises(OAuthError):
            oauth.exchange_code("abc")

    @patch("habbus.web.oauth.requests.request")
    def test_http_error_is_wrapped(self, mock_request, oauth):
        mock_request.return_value = _response({}, status=401)

        with pytest.raises(OAuthError):
            oauth.fetch_user("tok")

    @patch("habbus.web.oauth.requests.request")
    def test_fetch_guilds_sends_bearer(self, mock_request, oauth):
        mock_request.return_value = _response([{"id": "1"}])

        assert oauth.fetch_guilds("tok") == [{"id": "1"}]
        assert mock_request.call_args.kwargs["headers"] == {"Authorization": "Bearer tok"}

    @patch("habbus.web.oauth.requests.request")
    def test_fetch_guilds_rejects_non_list(self, mock_request, oauth):
        mock_request.return_value = _response({"message": "401: Unauthorized"})

        with pytest.raises(OAuthError):
            oauth.fetch_guilds("tok")
