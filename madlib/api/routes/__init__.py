from fastapi import FastAPI

from .messages import router as messages_router
from .madlibs import router as madlibs_router

def register_routes(app: FastAPI):
    app.include_router(messages_router, prefix="/v1")
    app.include_router(madlibs_router, prefix="/v1")
