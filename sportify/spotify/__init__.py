"""Public façade for the sportify.spotify package.

This module exposes the Spotify Web API integration: authentication, track
listings, tempo lookup and playlist creation. Callers should import these
symbols from this façade instead of the internal modules.
"""

from .audio_features import (
    TempoLookupMode,
    get_tempos_batched,
    get_tempos_per_id,
    get_track_tempos,
)
from .auth import (
    SpotifyAuthError,
    build_spotify_auth_url,
    exchange_code_for_token,
    get_user_info,
)
from .client import spotify_get, spotify_headers, spotify_post
from .playlists import create_playlist
from .sources import TrackSource, TrackSourceType
from .tracks import get_recently_played_tracks, get_saved_tracks, parse_track_item

__all__ = [
    "build_spotify_auth_url",
    "exchange_code_for_token",
    "get_user_info",
    "SpotifyAuthError",
    "spotify_get",
    "spotify_post",
    "spotify_headers",
    "get_recently_played_tracks",
    "get_saved_tracks",
    "parse_track_item",
    "TempoLookupMode",
    "get_tempos_per_id",
    "get_tempos_batched",
    "get_track_tempos",
    "create_playlist",
    "TrackSource",
    "TrackSourceType",
]
