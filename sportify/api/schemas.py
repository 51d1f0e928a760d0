from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from sportify.core import PlaylistProposal, Track


class TrackInfo(BaseModel):
    id: str
    title: str
    artist: str
    album: str
    artwork_url: Optional[str] = None
    played_or_added_at: Optional[datetime] = None
    duration_seconds: int

    @classmethod
    def from_track(cls, track: Track) -> "TrackInfo":
        return cls(
            id=track.id,
            title=track.title,
            artist=track.artist,
            album=track.album,
            artwork_url=track.artwork_url,
            played_or_added_at=track.played_or_added_at,
            duration_seconds=track.duration_seconds,
        )


def to_track_infos(tracks: List[Track]) -> List[TrackInfo]:
    return [TrackInfo.from_track(t) for t in tracks]


class UserInfo(BaseModel):
    display_name: Optional[str] = None
    email: Optional[str] = None


class TempoTracksResponse(BaseModel):
    bpm_target: int
    threshold: int
    tracks: List[TrackInfo]


class NewPlaylistRequest(BaseModel):
    name: str = ""
    visible: bool = False
    collaborative: bool = False
    song_ids: List[str] = Field(default_factory=list)


class NewPlaylistResponse(BaseModel):
    id: str
    name: str
    tracks_count: int


class PlaylistProposalResponse(BaseModel):
    name: str
    bpm: int
    needed_duration_seconds: int
    total_duration_seconds: int
    songs: List[TrackInfo]

    @classmethod
    def from_proposal(cls, proposal: PlaylistProposal) -> "PlaylistProposalResponse":
        return cls(
            name=proposal.name,
            bpm=proposal.target_bpm,
            needed_duration_seconds=proposal.needed_duration_seconds,
            total_duration_seconds=proposal.total_duration_seconds,
            songs=to_track_infos(proposal.tracks),
        )
