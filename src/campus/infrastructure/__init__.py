"""Infrastructure layer - document store and repository implementations."""

from .document_store import Document, DocumentStore
from .repositories import BuildingRepository, FloorRepository, PassageRepository

__all__ = [
    "BuildingRepository",
    "Document",
    "DocumentStore",
    "FloorRepository",
    "PassageRepository",
]
