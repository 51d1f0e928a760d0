from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from sportify.core import log_step
from sportify.pipeline import get_tracks_by_bpm
from sportify.spotify import (
    TempoLookupMode,
    TrackSource,
    create_playlist,
    get_recently_played_tracks,
    get_user_info,
)

from ..deps import get_access_token
from ..schemas import (
    NewPlaylistRequest,
    NewPlaylistResponse,
    TempoTracksResponse,
    TrackInfo,
    UserInfo,
    to_track_infos,
)

router = APIRouter()


@router.get("/userinfo", response_model=UserInfo)
def userinfo(access_token: str = Depends(get_access_token)) -> UserInfo:
    info = get_user_info(access_token)
    return UserInfo(display_name=info["display_name"], email=info["email"])


@router.get("/recently-played", response_model=List[TrackInfo])
def recently_played(
    limit: int = Query(default=10, ge=1, le=50),
    access_token: str = Depends(get_access_token),
) -> List[TrackInfo]:
    return to_track_infos(get_recently_played_tracks(access_token, limit=limit))


@router.get("/recently-played/bpm", response_model=TempoTracksResponse)
def recently_played_by_bpm(
    bpm_target: int = Query(default=90, gt=0),
    threshold: int = Query(default=5, ge=0),
    limit: int = Query(default=20, ge=1, le=50),
    access_token: str = Depends(get_access_token),
) -> TempoTracksResponse:
    """
    Recently played tracks within `threshold` BPM of `bpm_target`, tempo
    looked up track by track.
    """
    source = TrackSource.recently_played(limit=limit, tempo_lookup=TempoLookupMode.PER_ID)
    tracks = get_tracks_by_bpm(access_token, source, bpm_target, threshold)
    return TempoTracksResponse(
        bpm_target=bpm_target, threshold=threshold, tracks=to_track_infos(tracks)
    )


@router.get("/saved/bpm", response_model=TempoTracksResponse)
def saved_by_bpm(
    bpm_target: int = Query(default=90, gt=0),
    threshold: int = Query(default=10, ge=0),
    page_size: int = Query(default=50, ge=1, le=50),
    total_cap: int = Query(default=200, ge=1),
    access_token: str = Depends(get_access_token),
) -> TempoTracksResponse:
    """
    Saved tracks within `threshold` BPM of `bpm_target`, tempo looked up in
    batches of 100 ids.
    """
    source = TrackSource.saved(page_size=page_size, total_cap=total_cap)
    tracks = get_tracks_by_bpm(access_token, source, bpm_target, threshold)
    return TempoTracksResponse(
        bpm_target=bpm_target, threshold=threshold, tracks=to_track_infos(tracks)
    )


@router.post("/playlist", response_model=NewPlaylistResponse, status_code=201)
def new_playlist(
    payload: NewPlaylistRequest,
    access_token: str = Depends(get_access_token),
) -> NewPlaylistResponse:
    if not payload.name.strip():
        raise HTTPException(status_code=400, detail="Playlist name is required.")
    if not payload.song_ids:
        raise HTTPException(status_code=400, detail="At least one song is required.")

    log_step(f"Creating playlist '{payload.name}' ({len(payload.song_ids)} songs)...")
    playlist_id = create_playlist(
        access_token,
        payload.name,
        payload.song_ids,
        public=payload.visible,
        collaborative=payload.collaborative,
    )
    return NewPlaylistResponse(
        id=playlist_id, name=payload.name, tracks_count=len(payload.song_ids)
    )
