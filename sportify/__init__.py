"""Running-session playlists built from a Spotify listening history."""

__version__ = "0.1.0"
