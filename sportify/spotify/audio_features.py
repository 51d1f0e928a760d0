"""Tempo lookup through the Spotify audio-features endpoints.

Two forms are supported:

  - per id   : one GET /audio-features/{id} per track
  - batched  : GET /audio-features?ids=... with at most 100 ids per call

Both are tolerant to partial failure: an id (or a whole batch) whose lookup
fails is logged and left out of the returned mapping, the other lookups go on.
This is the only place in the pipeline where a failing Spotify call does not
abort the request.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from sportify.config import AUDIO_FEATURES_BATCH_MAX
from sportify.core import (
    ProviderFetchFailed,
    TempoBatchFailed,
    TempoRecord,
    log_info,
    log_step,
    log_warning,
)

from .client import spotify_get


class TempoLookupMode(str, Enum):
    PER_ID = "per_id"
    BATCHED = "batched"


def chunked(items: List[str], size: int) -> List[List[str]]:
    if size < 1:
        raise ValueError("Chunk size must be positive.")
    return [items[i : i + size] for i in range(0, len(items), size)]


def _parse_tempo_record(entry: Any) -> Optional[TempoRecord]:
    """
    Build a TempoRecord from one audio-features object, or None when the
    entry is null or carries no usable tempo.
    """
    if not isinstance(entry, dict):
        return None
    track_id = entry.get("id")
    tempo = entry.get("tempo")
    if not track_id or isinstance(tempo, bool) or not isinstance(tempo, (int, float)):
        return None
    return TempoRecord(track_id=track_id, tempo=float(tempo))


def _fetch_tempo_for_id(access_token: str, track_id: str) -> Optional[float]:
    try:
        data = spotify_get(access_token, f"/audio-features/{track_id}")
    except ProviderFetchFailed as e:
        raise TempoBatchFailed([track_id], e.status) from e

    tempo = data.get("tempo")
    if isinstance(tempo, bool) or not isinstance(tempo, (int, float)):
        return None
    return float(tempo)


def _fetch_tempo_batch(access_token: str, track_ids: List[str]) -> Dict[str, float]:
    try:
        data = spotify_get(
            access_token, "/audio-features", params={"ids": ",".join(track_ids)}
        )
    except ProviderFetchFailed as e:
        raise TempoBatchFailed(track_ids, e.status) from e

    entries = data.get("audio_features")
    if not isinstance(entries, list):
        raise TempoBatchFailed(track_ids)

    wanted = set(track_ids)
    tempos: Dict[str, float] = {}
    for entry in entries:
        record = _parse_tempo_record(entry)
        if record is None or record.track_id not in wanted:
            continue
        tempos[record.track_id] = record.tempo
    return tempos


def get_tempos_per_id(access_token: str, track_ids: Iterable[str]) -> Dict[str, float]:
    """
    Resolve tempos with one call per track id.

    Ids whose call fails, or whose payload has no tempo, are simply missing
    from the result.
    """
    ids = list(dict.fromkeys(track_ids))
    log_step(f"Fetching tempo for {len(ids)} tracks (one call per track)...")

    tempos: Dict[str, float] = {}
    for track_id in ids:
        try:
            tempo = _fetch_tempo_for_id(access_token, track_id)
        except TempoBatchFailed as e:
            log_warning(f"Tempo lookup failed for track {track_id} (status={e.status}).")
            continue
        if tempo is None:
            log_warning(f"No tempo available for track {track_id}.")
            continue
        tempos[track_id] = tempo

    log_info(f"Tempo resolved for {len(tempos)}/{len(ids)} tracks.")
    return tempos


def get_tempos_batched(
    access_token: str,
    track_ids: Iterable[str],
    batch_size: int = AUDIO_FEATURES_BATCH_MAX,
    max_workers: int = 1,
) -> Dict[str, float]:
    """
    Resolve tempos with one call per chunk of at most `batch_size` ids
    (capped at the provider limit of 100).

    A failing chunk is logged and its ids left out; the other chunks are not
    affected. With max_workers > 1 the chunks are fetched from a thread pool;
    the mapping is complete once this function returns either way.
    """
    ids = list(dict.fromkeys(track_ids))
    batches = chunked(ids, min(batch_size, AUDIO_FEATURES_BATCH_MAX))
    log_step(f"Fetching tempo for {len(ids)} tracks in {len(batches)} batch(es)...")

    tempos: Dict[str, float] = {}

    def _on_failure(e: TempoBatchFailed) -> None:
        log_warning(
            f"Tempo batch of {len(e.track_ids)} tracks failed (status={e.status}); "
            f"skipping these tracks."
        )

    if max_workers <= 1 or len(batches) <= 1:
        for batch in batches:
            try:
                tempos.update(_fetch_tempo_batch(access_token, batch))
            except TempoBatchFailed as e:
                _on_failure(e)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(_fetch_tempo_batch, access_token, batch)
                for batch in batches
            ]
            for future in as_completed(futures):
                try:
                    tempos.update(future.result())
                except TempoBatchFailed as e:
                    _on_failure(e)

    log_info(f"Tempo resolved for {len(tempos)}/{len(ids)} tracks.")
    return tempos


def get_track_tempos(
    access_token: str,
    track_ids: Iterable[str],
    mode: TempoLookupMode = TempoLookupMode.BATCHED,
    max_workers: int = 1,
) -> Dict[str, float]:
    if mode == TempoLookupMode.PER_ID:
        return get_tempos_per_id(access_token, track_ids)
    if mode == TempoLookupMode.BATCHED:
        return get_tempos_batched(access_token, track_ids, max_workers=max_workers)
    raise ValueError(f"Unsupported TempoLookupMode: {mode!r}")
