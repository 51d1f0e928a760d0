from typing import Dict, Iterable, List

from sportify.core import Track


def tempo_band(target_bpm: int, threshold: int) -> tuple[int, int]:
    return target_bpm - threshold, target_bpm + threshold


def filter_tracks_by_tempo(
    tracks: Iterable[Track],
    tempo_map: Dict[str, float],
    target_bpm: int,
    threshold: int,
) -> List[Track]:
    """
    Keep the tracks whose tempo lies in [target - threshold, target + threshold]
    (both bounds included), in input order.

    Tracks without an entry in `tempo_map` are dropped. An empty result is a
    valid outcome here; callers decide whether it is an error.
    """
    low, high = tempo_band(target_bpm, threshold)
    return [
        t for t in tracks if t.id in tempo_map and low <= tempo_map[t.id] <= high
    ]
