from dotenv import load_dotenv
import os

load_dotenv()

# Spotify credentials (REQUIRED for the OAuth flow)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")
SPOTIFY_REDIRECT_URI = os.getenv(
    "SPOTIFY_REDIRECT_URI", "http://127.0.0.1:5000/auth/callback"
)

# Spotify API constants
SPOTIFY_AUTH_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

SCOPES = [
    "user-read-email",
    "user-read-recently-played",
    "user-library-read",
    "playlist-modify-public",
    "playlist-modify-private",
]

# Seconds, applied to every call made against Spotify
SPOTIFY_HTTP_TIMEOUT = float(os.getenv("SPOTIFY_HTTP_TIMEOUT", "10"))

# Level name for the "sportify" logger (DEBUG, INFO, WARNING...)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Hard caps imposed by the Spotify Web API
RECENTLY_PLAYED_MAX_LIMIT = 50
SAVED_TRACKS_PAGE_MAX = 50
AUDIO_FEATURES_BATCH_MAX = 100

# Frontend (single-page app) driving the login
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:8080")
ACCESS_TOKEN_COOKIE = "spotify_access_token"

# Running session model
STRIDE_LENGTH_COEFFICIENT = 0.413
DURATION_MARGIN = 1.4
BPM_THRESHOLD = 10
RUNNING_SESSION_TRACK_CAP = int(os.getenv("RUNNING_SESSION_TRACK_CAP", "200"))
TEMPO_LOOKUP_WORKERS = int(os.getenv("TEMPO_LOOKUP_WORKERS", "1"))

# Playlist name template for running sessions
SESSION_PLAYLIST_NAME = "Running Session - {distance}km - {pace}min/km - {bpm} BPM"
