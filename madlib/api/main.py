"""FastAPI adapter for hosts that deliver chat messages over HTTP.

The chat grammar is still the only command surface: POST a message, get the
plugin's replies back. The listing route is read-only.
"""

from __future__ import annotations

from fastapi import FastAPI

from madlib.api.routes import register_routes
from madlib.config import settings

tags_metadata = [
    {
        "name": "Messages",
        "description": "Chat messages forwarded by the bot host"
    },
    {
        "name": "Madlibs",
        "description": "Read-only view of stored madlibs"
    },
]

app = FastAPI(
    title=settings.api_title,
    version='1.0.0',
    description='Madlib templating plugin',
    openapi_tags=tags_metadata
)

# Register all API routes
register_routes(app)
