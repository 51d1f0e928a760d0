"""Track sources for the tempo pipeline.

This module defines small data structures describing where candidate tracks
come from (recent plays or the saved-tracks library) and how their tempo is
looked up.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sportify.config import SAVED_TRACKS_PAGE_MAX

from .audio_features import TempoLookupMode


class TrackSourceType(str, Enum):
    """Type of track source used in the pipeline."""

    RECENTLY_PLAYED = "recently_played"
    SAVED = "saved"


@dataclass(frozen=True)
class TrackSource:
    """Description of a track source.

    For recently played tracks only `limit` is used (1..50, single call).
    For saved tracks `page_size` and `total_cap` drive the pagination.
    """

    source_type: TrackSourceType
    limit: int = 20
    page_size: int = SAVED_TRACKS_PAGE_MAX
    total_cap: int = 200
    tempo_lookup: TempoLookupMode = TempoLookupMode.BATCHED
    label: Optional[str] = None

    @classmethod
    def recently_played(
        cls,
        limit: int = 20,
        tempo_lookup: TempoLookupMode = TempoLookupMode.PER_ID,
    ) -> "TrackSource":
        return cls(
            source_type=TrackSourceType.RECENTLY_PLAYED,
            limit=limit,
            tempo_lookup=tempo_lookup,
            label="Recently played",
        )

    @classmethod
    def saved(
        cls,
        page_size: int = SAVED_TRACKS_PAGE_MAX,
        total_cap: int = 200,
        tempo_lookup: TempoLookupMode = TempoLookupMode.BATCHED,
    ) -> "TrackSource":
        return cls(
            source_type=TrackSourceType.SAVED,
            page_size=page_size,
            total_cap=total_cap,
            tempo_lookup=tempo_lookup,
            label="Saved tracks",
        )
