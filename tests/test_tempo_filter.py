from sportify.core import Track
from sportify.pipeline import filter_tracks_by_tempo, tempo_band


def _make_track(track_id: str, duration_seconds: int = 200) -> Track:
    return Track(
        id=track_id,
        title=f"Track {track_id}",
        artist="Test Artist",
        album="Test Album",
        artwork_url=None,
        played_or_added_at=None,
        duration_seconds=duration_seconds,
    )


def test_tempo_band_is_symmetric() -> None:
    assert tempo_band(120, 10) == (110, 130)


def test_filter_includes_both_bounds() -> None:
    tracks = [_make_track("low"), _make_track("high"), _make_track("mid")]
    tempo_map = {"low": 110.0, "high": 130.0, "mid": 121.7}

    result = filter_tracks_by_tempo(tracks, tempo_map, target_bpm=120, threshold=10)

    assert [t.id for t in result] == ["low", "high", "mid"]


def test_filter_excludes_tempos_just_outside_band() -> None:
    tracks = [_make_track("a"), _make_track("b"), _make_track("c")]
    tempo_map = {"a": 109.99, "b": 130.01, "c": 115.0}

    result = filter_tracks_by_tempo(tracks, tempo_map, target_bpm=120, threshold=10)

    assert [t.id for t in result] == ["c"]


def test_filter_preserves_input_order_not_tempo_order() -> None:
    tracks = [_make_track(i) for i in ["t1", "t2", "t3", "t4", "t5"]]
    tempo_map = {"t1": 128.0, "t2": 90.0, "t3": 112.0, "t4": 120.0, "t5": 119.0}

    result = filter_tracks_by_tempo(tracks, tempo_map, target_bpm=120, threshold=10)

    assert [t.id for t in result] == ["t1", "t3", "t4", "t5"]
    for t in result:
        assert 110 <= tempo_map[t.id] <= 130


def test_filter_drops_tracks_without_tempo() -> None:
    tracks = [_make_track("known"), _make_track("unknown")]

    result = filter_tracks_by_tempo(tracks, {"known": 100.0}, target_bpm=100, threshold=0)

    assert [t.id for t in result] == ["known"]


def test_filter_can_return_empty_list() -> None:
    tracks = [_make_track("a")]

    assert filter_tracks_by_tempo(tracks, {"a": 60.0}, 150, 10) == []
    assert filter_tracks_by_tempo([], {}, 150, 10) == []
