from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sportify import __version__
from sportify.api.auth.routes import router as auth_router
from sportify.api.errors import register_exception_handlers
from sportify.api.health import router as health_router
from sportify.api.session.routes import router as session_router
from sportify.api.spotify.routes import router as spotify_router
from sportify.config import FRONTEND_URL
from sportify.core import configure_logging

configure_logging()

app = FastAPI(
    title="Sportify API",
    version=__version__,
    description="Backend API for tempo-matched running-session playlists.",
)

# The frontend sends the access-token cookie along, hence credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type"],
)

register_exception_handlers(app)

app.include_router(health_router, tags=["health"])
app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(spotify_router, prefix="/spotify", tags=["spotify"])
app.include_router(session_router, prefix="/runningsession", tags=["running-session"])
