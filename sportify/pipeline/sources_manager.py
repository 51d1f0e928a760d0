from typing import List

from sportify.core import Track, log_info, log_step
from sportify.spotify import (
    TrackSource,
    TrackSourceType,
    get_recently_played_tracks,
    get_saved_tracks,
    get_track_tempos,
)

from .tempo_filter import filter_tracks_by_tempo


def fetch_tracks_for_source(access_token: str, source: TrackSource) -> List[Track]:
    """Fetch the candidate tracks described by a TrackSource.

    Recently played sources are a single call; saved-track sources are paged
    until their cap or the end of the library. Failures propagate as
    ProviderFetchFailed, without partial results.
    """
    if source.source_type == TrackSourceType.RECENTLY_PLAYED:
        return get_recently_played_tracks(access_token, limit=source.limit)

    if source.source_type == TrackSourceType.SAVED:
        return get_saved_tracks(
            access_token,
            page_size=source.page_size,
            total_cap=source.total_cap,
        )

    raise ValueError(f"Unsupported TrackSourceType: {source.source_type!r}")


def get_tracks_by_bpm(
    access_token: str,
    source: TrackSource,
    target_bpm: int,
    threshold: int,
    max_workers: int = 1,
) -> List[Track]:
    """
    Candidate tracks from `source` whose tempo is within `threshold` BPM of
    `target_bpm`, in source order. May be empty.
    """
    tracks = fetch_tracks_for_source(access_token, source)
    if not tracks:
        log_info(f"{source.label or source.source_type.value}: no candidate tracks.")
        return []

    tempo_map = get_track_tempos(
        access_token,
        [t.id for t in tracks],
        mode=source.tempo_lookup,
        max_workers=max_workers,
    )

    log_step(f"Filtering {len(tracks)} tracks on {target_bpm} ± {threshold} BPM...")
    matches = filter_tracks_by_tempo(tracks, tempo_map, target_bpm, threshold)
    log_info(f"{len(matches)} tracks match the tempo band.")
    return matches
