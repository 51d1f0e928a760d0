"""ASGI entrypoint.

Run with:
    uvicorn api_main:app --port 5000
"""

import uvicorn

from sportify.api.fastapi_app import app

__all__ = ["app"]


if __name__ == "__main__":
    uvicorn.run("api_main:app", host="127.0.0.1", port=5000)
