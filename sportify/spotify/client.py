"""Thin HTTP layer over the Spotify Web API.

Every call carries the user's bearer token and the configured timeout. A
non-success status, a transport error or a body that is not JSON is turned
into ProviderFetchFailed so callers only deal with one failure type.
"""

from typing import Any, Dict, Optional

import requests

from sportify.config import SPOTIFY_API_BASE, SPOTIFY_HTTP_TIMEOUT
from sportify.core import ProviderFetchFailed


def spotify_headers(access_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


def _decode(r: requests.Response) -> Dict[str, Any]:
    if not r.ok:
        raise ProviderFetchFailed(
            r.status_code, f"Spotify returned {r.status_code} for {r.url}"
        )
    if not r.content:
        return {}
    try:
        data = r.json()
    except ValueError as e:
        raise ProviderFetchFailed(r.status_code, "Spotify returned invalid JSON.") from e
    if not isinstance(data, dict):
        raise ProviderFetchFailed(r.status_code, "Unexpected Spotify payload.")
    return data


def spotify_get(
    access_token: str,
    path: str,
    params: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    GET {SPOTIFY_API_BASE}{path} and return the decoded JSON object.
    """
    try:
        r = requests.get(
            f"{SPOTIFY_API_BASE}{path}",
            headers=spotify_headers(access_token),
            params=params,
            timeout=SPOTIFY_HTTP_TIMEOUT,
        )
    except requests.RequestException as e:
        raise ProviderFetchFailed(None, f"Spotify request failed: {e}") from e
    return _decode(r)


def spotify_post(
    access_token: str,
    path: str,
    payload: Dict[str, Any],
) -> Dict[str, Any]:
    try:
        r = requests.post(
            f"{SPOTIFY_API_BASE}{path}",
            headers=spotify_headers(access_token),
            json=payload,
            timeout=SPOTIFY_HTTP_TIMEOUT,
        )
    except requests.RequestException as e:
        raise ProviderFetchFailed(None, f"Spotify request failed: {e}") from e
    return _decode(r)
