from typing import List

from sportify.core import log_info, log_step

from .audio_features import chunked
from .auth import get_user_info
from .client import spotify_post

# Spotify accepts at most 100 uris per "add items" call
PLAYLIST_ADD_BATCH_MAX = 100


def create_playlist(
    access_token: str,
    name: str,
    track_ids: List[str],
    public: bool = False,
    collaborative: bool = False,
) -> str:
    """
    Create a playlist in the current user's account and fill it with
    `track_ids`, in order. Returns the new playlist id.
    """
    user_id = get_user_info(access_token)["id"]

    log_step(f"Creating Spotify playlist '{name}'...")
    created = spotify_post(
        access_token,
        f"/users/{user_id}/playlists",
        {
            "name": name,
            "public": public,
            "collaborative": collaborative,
        },
    )
    playlist_id = created["id"]

    for batch in chunked(track_ids, PLAYLIST_ADD_BATCH_MAX):
        spotify_post(
            access_token,
            f"/playlists/{playlist_id}/tracks",
            {"uris": [f"spotify:track:{track_id}" for track_id in batch]},
        )

    log_info(f"Playlist {playlist_id} created with {len(track_ids)} tracks.")
    return playlist_id
