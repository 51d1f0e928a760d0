"""Domain errors raised by the Spotify integration and the session pipeline."""

from typing import Optional


class SportifyError(Exception):
    """Base class for every error surfaced to the API layer."""


class ProviderFetchFailed(SportifyError):
    """
    A primary track-listing call against Spotify failed.

    The whole retrieval is aborted; no partial result is returned.
    `status` is the HTTP status returned by Spotify (None when the request
    never got a response).
    """

    def __init__(self, status: Optional[int], message: str = "") -> None:
        self.status = status
        super().__init__(message or f"Spotify request failed (status={status}).")


class TempoBatchFailed(SportifyError):
    """
    Soft failure of a tempo lookup (one id or one batch of ids).

    Absorbed inside the tempo lookup: the ids are left out of the tempo map.
    """

    def __init__(self, track_ids, status: Optional[int] = None) -> None:
        self.track_ids = list(track_ids)
        self.status = status
        super().__init__(
            f"Tempo lookup failed for {len(self.track_ids)} track(s) (status={status})."
        )


class NoMatchingTracks(SportifyError):
    """No track matched the tempo band of a running session."""


class InvalidParameter(SportifyError):
    """A running parameter (pace, distance, height) is not usable."""
