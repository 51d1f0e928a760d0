"""Public façade for the sportify.pipeline package.

This module exposes the tempo pipeline: candidate retrieval per track source,
tempo filtering and running-session playlist assembly. Other packages should
import pipeline behaviour from this façade instead of the internal submodules.
"""

from .running_session import (
    assemble_session_playlist,
    build_session_name,
    calculate_cadence,
    calculate_needed_duration,
    calculate_target_bpm,
    trim_to_duration,
)
from .sources_manager import fetch_tracks_for_source, get_tracks_by_bpm
from .tempo_filter import filter_tracks_by_tempo, tempo_band

__all__ = [
    "assemble_session_playlist",
    "build_session_name",
    "calculate_cadence",
    "calculate_needed_duration",
    "calculate_target_bpm",
    "trim_to_duration",
    "fetch_tracks_for_source",
    "get_tracks_by_bpm",
    "filter_tracks_by_tempo",
    "tempo_band",
]
