"""API routers for the REST API."""

from campus.web.routers.buildings import router as buildings_router
from campus.web.routers.doors import router as doors_router
from campus.web.routers.passages import router as passages_router

__all__ = [
    "buildings_router",
    "doors_router",
    "passages_router",
]
