from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sportify.core import (
    InvalidParameter,
    NoMatchingTracks,
    ProviderFetchFailed,
    log_error,
    log_warning,
)
from sportify.spotify import SpotifyAuthError, build_spotify_auth_url


async def provider_fetch_failed_handler(
    request: Request, exc: ProviderFetchFailed
) -> JSONResponse:
    if exc.status == 401:
        return JSONResponse(
            status_code=401,
            content={
                "detail": {
                    "status": "unauthenticated",
                    "message": "Spotify rejected the access token.",
                    "auth_url": build_spotify_auth_url(),
                }
            },
        )

    log_error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=502,
        content={
            "detail": {
                "status": "provider_error",
                "message": str(exc),
                "provider_status": exc.status,
            }
        },
    )


async def no_matching_tracks_handler(
    request: Request, exc: NoMatchingTracks
) -> JSONResponse:
    log_warning(f"{request.url.path}: {exc}")
    return JSONResponse(
        status_code=404,
        content={"detail": {"status": "no_matching_tracks", "message": str(exc)}},
    )


async def invalid_parameter_handler(
    request: Request, exc: InvalidParameter
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": {"status": "invalid_parameter", "message": str(exc)}},
    )


async def spotify_auth_error_handler(
    request: Request, exc: SpotifyAuthError
) -> JSONResponse:
    log_error(f"Spotify authorization failed: {exc}")
    return JSONResponse(
        status_code=400,
        content={"detail": {"status": "auth_error", "message": str(exc)}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProviderFetchFailed, provider_fetch_failed_handler)
    app.add_exception_handler(NoMatchingTracks, no_matching_tracks_handler)
    app.add_exception_handler(InvalidParameter, invalid_parameter_handler)
    app.add_exception_handler(SpotifyAuthError, spotify_auth_error_handler)
