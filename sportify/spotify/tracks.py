from datetime import datetime
from typing import Any, Dict, List, Optional

from sportify.config import RECENTLY_PLAYED_MAX_LIMIT, SAVED_TRACKS_PAGE_MAX
from sportify.core import (
    InvalidParameter,
    ProviderFetchFailed,
    Track,
    log_info,
    log_progress,
    log_step,
    log_warning,
)

from .client import spotify_get


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    if not isinstance(value, str):
        raise TypeError(f"timestamp is not a string: {value!r}")
    # Spotify uses a trailing "Z" for UTC
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_track_item(item: Dict[str, Any], timestamp_field: str) -> Optional[Track]:
    """
    Turn one `items[]` entry of a Spotify listing into a Track.

    Returns None for entries without a playable track (removed tracks, local
    files without an id). Raises KeyError / TypeError / ValueError when the
    entry does not have the expected shape.
    """
    if not isinstance(item, dict):
        raise TypeError(f"listing entry is not an object: {item!r}")

    t = item.get("track")
    if not t:
        return None
    if not isinstance(t, dict):
        raise TypeError(f"track is not an object: {t!r}")
    if not t.get("id"):
        return None

    album = t.get("album")
    if not isinstance(album, dict):
        raise TypeError(f"track {t['id']} has no album object")

    artists = t.get("artists") or []
    images = album.get("images") or []
    first_image = images[0] if images and isinstance(images[0], dict) else {}

    return Track(
        id=t["id"],
        title=t["name"],
        artist=artists[0]["name"] if artists else "",
        album=album["name"],
        artwork_url=first_image.get("url"),
        played_or_added_at=_parse_timestamp(item.get(timestamp_field)),
        duration_seconds=int(t["duration_ms"]) // 1000,
    )


def _parse_page(data: Dict[str, Any], timestamp_field: str) -> List[Track]:
    items = data.get("items") or []
    if not isinstance(items, list):
        raise ProviderFetchFailed(None, "Spotify listing has no items array.")

    tracks: List[Track] = []
    for item in items:
        try:
            track = parse_track_item(item, timestamp_field)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ProviderFetchFailed(
                None, f"Malformed track item in Spotify response: {e!r}"
            ) from e
        if track is None:
            log_warning("Skipping listing entry without a playable track.")
            continue
        tracks.append(track)
    return tracks


def get_recently_played_tracks(access_token: str, limit: int = 10) -> List[Track]:
    """
    Most recent plays, newest first.

    `limit` is clamped to [1, 50]. Spotify has no stable cursor for this
    listing, so two calls may overlap; no deduplication is performed.
    """
    limit = max(1, min(limit, RECENTLY_PLAYED_MAX_LIMIT))
    log_step(f"Fetching {limit} recently played tracks from Spotify...")

    data = spotify_get(
        access_token, "/me/player/recently-played", params={"limit": limit}
    )
    tracks = _parse_page(data, "played_at")

    log_info(f"{len(tracks)} recently played tracks fetched.")
    return tracks


def get_saved_tracks(
    access_token: str,
    page_size: int = SAVED_TRACKS_PAGE_MAX,
    total_cap: int = 200,
) -> List[Track]:
    """
    Saved ("liked") tracks, fetched page by page at offsets 0, page, 2*page...

    Stops once `total_cap` tracks were fetched or a page comes back empty.
    Any failing page aborts the whole fetch: pages already retrieved are
    dropped and ProviderFetchFailed propagates.
    """
    if page_size < 1 or total_cap < 1:
        raise InvalidParameter("page_size and total_cap must be positive.")

    page_size = min(page_size, SAVED_TRACKS_PAGE_MAX)
    estimated_pages = (total_cap + page_size - 1) // page_size
    log_step(f"Fetching up to {total_cap} saved tracks from Spotify...")

    tracks: List[Track] = []
    offset = 0
    page = 0
    while len(tracks) < total_cap:
        page += 1
        data = spotify_get(
            access_token,
            "/me/tracks",
            params={"limit": page_size, "offset": offset},
        )
        if not data.get("items"):
            break

        tracks.extend(_parse_page(data, "added_at"))
        offset += page_size
        log_progress(page, estimated_pages, prefix="  Saved tracks pages")

    tracks = tracks[:total_cap]
    log_info(f"{len(tracks)} saved tracks fetched.")
    return tracks
