import pytest

from spotify_fakes import FakeSpotify


@pytest.fixture
def spotify(monkeypatch) -> FakeSpotify:
    """Route every Spotify Web API call of the app to an in-memory fake."""
    fake = FakeSpotify()
    monkeypatch.setattr("sportify.spotify.client.requests.get", fake.get)
    monkeypatch.setattr("sportify.spotify.client.requests.post", fake.post)
    return fake
