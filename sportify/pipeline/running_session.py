"""Running-session playlist assembly.

Given a pace (min/km), a distance (km) and the runner's height (cm), this
module derives a target musical tempo and a duration budget, pulls the user's
tracks matching that tempo, and trims the list so that it fits the budget.

Cadence model:
  meters/min    = 1000 / pace
  stride length = 0.413 * height(m)
  cadence       = round(meters/min / stride length)     (steps per minute)
  target BPM    = cadence // 2                           (two steps per beat)

Duration model:
  session  = pace * distance * 60 seconds
  budget   = session * 1.4   (margin so the runner can skip tracks)
"""

import math
from typing import List, Optional, Sequence

from sportify.config import (
    BPM_THRESHOLD,
    DURATION_MARGIN,
    RUNNING_SESSION_TRACK_CAP,
    SESSION_PLAYLIST_NAME,
    STRIDE_LENGTH_COEFFICIENT,
    TEMPO_LOOKUP_WORKERS,
)
from sportify.core import (
    InvalidParameter,
    NoMatchingTracks,
    PlaylistProposal,
    Track,
    format_duration,
    log_info,
    log_section,
    log_step,
    log_success,
)
from sportify.spotify import TrackSource

from .sources_manager import get_tracks_by_bpm


def _require_positive(name: str, value: float) -> None:
    if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
        raise InvalidParameter(f"{name} must be a positive number (got {value!r}).")


def calculate_cadence(pace: float, height: float) -> int:
    """Steps per minute for a runner of `height` cm running at `pace` min/km."""
    _require_positive("pace", pace)
    _require_positive("height", height)

    try:
        meters_per_minute = 1000 / pace
        stride_length = STRIDE_LENGTH_COEFFICIENT * (height / 100)
        cadence = meters_per_minute / stride_length
        return round(cadence)
    except (ZeroDivisionError, OverflowError) as e:
        raise InvalidParameter(
            f"No usable cadence for pace={pace!r}, height={height!r}."
        ) from e


def calculate_target_bpm(pace: float, height: float) -> int:
    return calculate_cadence(pace, height) // 2


def calculate_needed_duration(pace: float, distance: float) -> float:
    """Duration budget in seconds, margin included."""
    _require_positive("pace", pace)
    _require_positive("distance", distance)
    needed = pace * distance * 60 * DURATION_MARGIN
    if not math.isfinite(needed):
        raise InvalidParameter(
            f"No usable duration for pace={pace!r}, distance={distance!r}."
        )
    return needed


def trim_to_duration(tracks: Sequence[Track], budget_seconds: float) -> List[Track]:
    """
    Drop tracks from the end until the total duration fits `budget_seconds`.

    Interior tracks are never removed and at least one track is always kept,
    even when that track alone is longer than the budget.
    """
    total = sum(t.duration_seconds for t in tracks)
    end = len(tracks)

    while total > budget_seconds and end > 1:
        end -= 1
        dropped = tracks[end]
        total -= dropped.duration_seconds
        log_info(
            f"Removing track: {dropped.title} ({dropped.duration_seconds}s), "
            f"total {format_duration(total)}, budget {format_duration(budget_seconds)}"
        )

    return list(tracks[:end])


def _format_number(value: float) -> str:
    # shortest round-trip form, without a trailing ".0" on whole numbers
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def build_session_name(distance: float, pace: float, target_bpm: int) -> str:
    return SESSION_PLAYLIST_NAME.format(
        distance=_format_number(distance),
        pace=_format_number(pace),
        bpm=target_bpm,
    )


def assemble_session_playlist(
    access_token: str,
    pace: float,
    distance: float,
    height: int,
    *,
    source: Optional[TrackSource] = None,
    threshold: int = BPM_THRESHOLD,
    max_workers: int = TEMPO_LOOKUP_WORKERS,
) -> PlaylistProposal:
    """
    Build the playlist proposal for one running session.

    Raises:
      - InvalidParameter     : pace, distance or height not strictly positive
      - ProviderFetchFailed  : the track listing could not be fetched
      - NoMatchingTracks     : no track falls within the tempo band
    """
    _require_positive("distance", distance)
    target_bpm = calculate_target_bpm(pace, height)
    needed_duration = calculate_needed_duration(pace, distance)

    log_section(f"Running session {_format_number(distance)}km @ {_format_number(pace)}min/km")
    log_info(f"BPM: {target_bpm}, duration budget: {format_duration(needed_duration)}")

    if source is None:
        source = TrackSource.saved(total_cap=RUNNING_SESSION_TRACK_CAP)

    tracks = get_tracks_by_bpm(
        access_token,
        source,
        target_bpm=target_bpm,
        threshold=threshold,
        max_workers=max_workers,
    )
    if not tracks:
        raise NoMatchingTracks(
            f"No track found within {target_bpm} ± {threshold} BPM."
        )

    log_step(f"Fitting {len(tracks)} tracks into {format_duration(needed_duration)}...")
    trimmed = trim_to_duration(tracks, needed_duration)

    proposal = PlaylistProposal(
        name=build_session_name(distance, pace, target_bpm),
        target_bpm=target_bpm,
        needed_duration_seconds=int(needed_duration),
        tracks=trimmed,
    )
    log_success(
        f"Proposal ready: {len(trimmed)} tracks, "
        f"{format_duration(proposal.total_duration_seconds)} of "
        f"{format_duration(proposal.needed_duration_seconds)}."
    )
    return proposal
