from datetime import datetime, timezone

import pytest

from sportify.core import InvalidParameter, ProviderFetchFailed
from sportify.pipeline import fetch_tracks_for_source
from sportify.spotify import (
    TrackSource,
    get_recently_played_tracks,
    get_saved_tracks,
    parse_track_item,
)

from spotify_fakes import FakeResponse, make_item, saved_library


def test_parse_track_item_maps_fields_and_truncates_duration() -> None:
    item = make_item("abc", duration_ms=215_999, timestamp_field="played_at")

    track = parse_track_item(item, "played_at")

    assert track is not None
    assert track.id == "abc"
    assert track.title == "Song abc"
    assert track.artist == "Main Artist"
    assert track.album == "Album abc"
    assert track.artwork_url == "https://i.scdn.co/image/abc"
    assert track.duration_seconds == 215
    assert track.played_or_added_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_parse_track_item_without_images_or_timestamp() -> None:
    item = make_item("abc", timestamp=None)
    item["track"]["album"]["images"] = []

    track = parse_track_item(item, "added_at")

    assert track is not None
    assert track.artwork_url is None
    assert track.played_or_added_at is None


def test_parse_track_item_skips_missing_track() -> None:
    assert parse_track_item({"track": None, "added_at": None}, "added_at") is None


def test_recently_played_clamps_limit_to_provider_cap(spotify) -> None:
    spotify.route(
        "/me/player/recently-played",
        lambda path, params: {
            "items": [make_item("a", timestamp_field="played_at"),
                      make_item("a", timestamp_field="played_at")]
        },
    )

    tracks = get_recently_played_tracks("token", limit=500)

    assert spotify.params("/me/player/recently-played") == [{"limit": 50}]
    # repeated plays are kept as-is
    assert [t.id for t in tracks] == ["a", "a"]


def test_recently_played_failure_raises_provider_error(spotify) -> None:
    spotify.route(
        "/me/player/recently-played",
        lambda path, params: FakeResponse(429, {"error": {"status": 429}}),
    )

    with pytest.raises(ProviderFetchFailed) as excinfo:
        get_recently_played_tracks("token", limit=10)

    assert excinfo.value.status == 429


def test_saved_tracks_pages_until_cap(spotify) -> None:
    library = [f"t{i}" for i in range(300)]
    spotify.route("/me/tracks", saved_library(library))

    tracks = get_saved_tracks("token", page_size=50, total_cap=120)

    offsets = [p["offset"] for p in spotify.params("/me/tracks")]
    assert offsets == [0, 50, 100]
    assert [t.id for t in tracks] == library[:120]


def test_saved_tracks_stops_on_empty_page(spotify) -> None:
    library = [f"t{i}" for i in range(70)]
    spotify.route("/me/tracks", saved_library(library))

    tracks = get_saved_tracks("token", page_size=50, total_cap=1000)

    offsets = [p["offset"] for p in spotify.params("/me/tracks")]
    assert offsets == [0, 50, 100]
    assert len(tracks) == 70


def test_saved_tracks_caps_page_size_at_fifty(spotify) -> None:
    spotify.route("/me/tracks", saved_library([f"t{i}" for i in range(10)]))

    get_saved_tracks("token", page_size=80, total_cap=100)

    assert spotify.params("/me/tracks")[0] == {"limit": 50, "offset": 0}


def test_saved_tracks_failure_discards_fetched_pages(spotify) -> None:
    library_handler = saved_library([f"t{i}" for i in range(200)])

    def handler(path, params):
        if params["offset"] >= 100:
            return FakeResponse(500, {"error": {"status": 500}})
        return library_handler(path, params)

    spotify.route("/me/tracks", handler)

    with pytest.raises(ProviderFetchFailed) as excinfo:
        get_saved_tracks("token", page_size=50, total_cap=200)

    assert excinfo.value.status == 500
    assert len(spotify.params("/me/tracks")) == 3


def test_saved_tracks_malformed_item_is_a_provider_error(spotify) -> None:
    broken = make_item("x")
    del broken["track"]["duration_ms"]
    spotify.route("/me/tracks", lambda path, params: {"items": [broken]})

    with pytest.raises(ProviderFetchFailed) as excinfo:
        get_saved_tracks("token", page_size=50, total_cap=50)

    assert excinfo.value.status is None


def test_saved_tracks_null_album_is_a_provider_error(spotify) -> None:
    broken = make_item("x")
    broken["track"]["album"] = None
    spotify.route("/me/tracks", lambda path, params: {"items": [broken]})

    with pytest.raises(ProviderFetchFailed) as excinfo:
        get_saved_tracks("token", page_size=50, total_cap=50)

    assert excinfo.value.status is None


@pytest.mark.parametrize(
    "payload",
    [
        {"items": ["oops"]},
        {"items": [{"track": "oops", "added_at": None}]},
        {"items": {"track": None}},
    ],
)
def test_recently_played_unexpected_shapes_are_provider_errors(spotify, payload) -> None:
    spotify.route("/me/player/recently-played", lambda path, params: payload)

    with pytest.raises(ProviderFetchFailed) as excinfo:
        get_recently_played_tracks("token", limit=10)

    assert excinfo.value.status is None


def test_saved_tracks_rejects_non_positive_paging() -> None:
    with pytest.raises(InvalidParameter):
        get_saved_tracks("token", page_size=0, total_cap=10)


def test_fetch_tracks_for_source_dispatches_on_type(spotify) -> None:
    spotify.route("/me/tracks", saved_library(["s1", "s2"]))
    spotify.route(
        "/me/player/recently-played",
        lambda path, params: {"items": [make_item("r1", timestamp_field="played_at")]},
    )

    saved = fetch_tracks_for_source("token", TrackSource.saved(total_cap=10))
    recent = fetch_tracks_for_source("token", TrackSource.recently_played(limit=5))

    assert [t.id for t in saved] == ["s1", "s2"]
    assert [t.id for t in recent] == ["r1"]
    assert spotify.params("/me/player/recently-played") == [{"limit": 5}]
