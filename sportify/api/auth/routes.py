from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import RedirectResponse

from sportify.config import ACCESS_TOKEN_COOKIE, FRONTEND_URL
from sportify.core import log_success
from sportify.spotify import build_spotify_auth_url, exchange_code_for_token

router = APIRouter()


@router.get("/url")
def get_auth_url() -> dict:
    """
    Spotify authorize URL, for a frontend that redirects by itself.
    """
    return {"auth_url": build_spotify_auth_url()}


@router.get("/login")
def login() -> RedirectResponse:
    return RedirectResponse(build_spotify_auth_url(), status_code=307)


@router.get("/callback")
def auth_callback(
    code: str | None = Query(default=None),
    error: str | None = Query(default=None),
) -> RedirectResponse:
    """
    Spotify redirect target: exchanges the code, stores the access token in
    an http-only cookie and sends the user back to the frontend.
    """
    if error:
        raise HTTPException(
            status_code=400,
            detail=f"Spotify authorization failed: {error}",
        )

    if not code:
        raise HTTPException(status_code=400, detail="Missing 'code' parameter.")

    token_info = exchange_code_for_token(code)

    response = RedirectResponse(f"{FRONTEND_URL}/callback", status_code=303)
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token_info["access_token"],
        max_age=int(token_info.get("expires_in", 3600)),
        httponly=True,
        samesite="lax",
    )
    log_success("Spotify authorization complete.")
    return response


@router.get("/logout")
def logout() -> RedirectResponse:
    response = RedirectResponse(FRONTEND_URL, status_code=303)
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return response
