from typing import NoReturn, Optional

from fastapi import Cookie, Header, HTTPException, status

from sportify.config import ACCESS_TOKEN_COOKIE
from sportify.spotify import build_spotify_auth_url


def raise_unauth(message: str = "Spotify authorization required.") -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={
            "status": "unauthenticated",
            "message": message,
            "auth_url": build_spotify_auth_url(),
        },
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_access_token(
    authorization: Optional[str] = Header(default=None),
    spotify_access_token: Optional[str] = Cookie(
        default=None, alias=ACCESS_TOKEN_COOKIE
    ),
) -> str:
    """
    Spotify bearer token of the caller: `Authorization: Bearer ...` header
    first, then the cookie set by /auth/callback.
    """
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()

    if spotify_access_token:
        return spotify_access_token

    raise_unauth()
