from fastapi import FastAPI

from .auth import router as auth_router
from .initiative_images import router as initiative_images_router
from .initiatives import router as initiatives_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(initiative_images_router, prefix=API_PREFIX)
    app.include_router(initiatives_router, prefix=API_PREFIX)
