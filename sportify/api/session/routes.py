from fastapi import APIRouter, Depends, Query

from sportify.pipeline import assemble_session_playlist

from ..deps import get_access_token
from ..schemas import PlaylistProposalResponse

router = APIRouter()


@router.get("/playlist", response_model=PlaylistProposalResponse)
def session_playlist(
    pace: float = Query(..., description="Pace in minutes per kilometer."),
    distance: float = Query(..., description="Distance in kilometers."),
    height: int = Query(..., description="Runner height in centimeters."),
    access_token: str = Depends(get_access_token),
) -> PlaylistProposalResponse:
    """
    Playlist proposal for a running session.

    Parameter validation happens in the pipeline so that a zero or negative
    value comes back as a 400 with the same payload as other domain errors.
    """
    proposal = assemble_session_playlist(access_token, pace, distance, height)
    return PlaylistProposalResponse.from_proposal(proposal)
