from typing import Dict, Optional
from urllib.parse import urlencode

import requests

from sportify.config import (
    SCOPES,
    SPOTIFY_AUTH_URL,
    SPOTIFY_CLIENT_ID,
    SPOTIFY_CLIENT_SECRET,
    SPOTIFY_HTTP_TIMEOUT,
    SPOTIFY_REDIRECT_URI,
    SPOTIFY_TOKEN_URL,
)
from sportify.core import log_step

from .client import spotify_get


class SpotifyAuthError(Exception):
    """Raised when the authorization code cannot be exchanged for a token."""


def build_spotify_auth_url(state: Optional[str] = None) -> str:
    """
    Build the Spotify authorize URL the frontend redirects the user to.
    """
    auth_query_parameters = {
        "response_type": "code",
        "redirect_uri": SPOTIFY_REDIRECT_URI,
        "scope": " ".join(SCOPES),
        "client_id": SPOTIFY_CLIENT_ID or "",
    }
    if state:
        auth_query_parameters["state"] = state
    return f"{SPOTIFY_AUTH_URL}?{urlencode(auth_query_parameters)}"


def exchange_code_for_token(code: str) -> Dict:
    """
    Exchange an authorization code for an access token.

    The token is handed back to the caller as-is; nothing is persisted here.
    """
    log_step("Exchanging Spotify authorization code for a token...")
    token_data = {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": SPOTIFY_REDIRECT_URI,
        "client_id": SPOTIFY_CLIENT_ID,
        "client_secret": SPOTIFY_CLIENT_SECRET,
    }
    try:
        r = requests.post(SPOTIFY_TOKEN_URL, data=token_data, timeout=SPOTIFY_HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise SpotifyAuthError(f"Token request failed: {e}") from e

    if not r.ok:
        raise SpotifyAuthError(f"Token request rejected (status={r.status_code}).")

    token_info = r.json()
    if "access_token" not in token_info:
        raise SpotifyAuthError("Token response has no access_token.")
    return token_info


def get_user_info(access_token: str) -> Dict[str, Optional[str]]:
    data = spotify_get(access_token, "/me")
    return {
        "id": data.get("id"),
        "display_name": data.get("display_name"),
        "email": data.get("email"),
    }
