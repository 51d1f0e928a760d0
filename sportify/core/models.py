from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class Track:
    """
    A Spotify track as seen by the running-session pipeline.

    - played_or_added_at : "played_at" for recently played items,
                           "added_at" for saved tracks
    - duration_seconds   : provider duration_ms // 1000 (truncated)
    """

    id: str
    title: str
    artist: str
    album: str
    artwork_url: Optional[str]
    played_or_added_at: Optional[datetime]
    duration_seconds: int


@dataclass(frozen=True)
class TempoRecord:
    track_id: str
    tempo: float


class PlaylistProposal(BaseModel):
    """
    Playlist proposed for a running session.

    - target_bpm              : midpoint of the tempo band used for filtering
    - needed_duration_seconds : duration budget (session duration + margin),
                                not the duration actually reached by `tracks`
    - tracks                  : in the order produced by the track source
    """

    name: str
    target_bpm: int
    needed_duration_seconds: int
    tracks: List[Track]

    @property
    def total_duration_seconds(self) -> int:
        return sum(t.duration_seconds for t in self.tracks)
