"""In-memory document store.

Documents are plain dicts keyed by their ``domainId`` inside named
collections. Reads and writes go through deep copies so callers can never
mutate stored state by accident.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)

Document = dict[str, Any]

__all__ = ["Document", "DocumentStore"]


class DocumentStore:
    """Named collections of JSON-like documents, keyed by ``domainId``."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Document]] = {}
        self._lock = threading.Lock()

    def _collection(self, name: str) -> dict[str, Document]:
        return self._collections.setdefault(name, {})

    def get(self, collection: str, domain_id: str) -> Document | None:
        """Return a copy of the document with the given id, or None."""
        with self._lock:
            document = self._collection(collection).get(domain_id)
            return copy.deepcopy(document) if document is not None else None

    def upsert(self, collection: str, document: Document) -> Document:
        """Insert or replace a document by its ``domainId``.

        Raises:
            KeyError: If the document has no ``domainId``.
        """
        domain_id = document["domainId"]
        with self._lock:
            items = self._collection(collection)
            action = "Updated" if domain_id in items else "Inserted"
            items[domain_id] = copy.deepcopy(document)
        logger.debug(f"{action} {collection} document {domain_id}")
        return copy.deepcopy(document)

    def find(
        self, collection: str, predicate: Callable[[Document], bool] | None = None
    ) -> list[Document]:
        """Return copies of the documents matching predicate, in insertion order.

        The predicate runs on a snapshot taken outside the lock, so it may
        itself read from the store.
        """
        with self._lock:
            documents = copy.deepcopy(list(self._collection(collection).values()))
        return [document for document in documents if predicate is None or predicate(document)]

    def count(self, collection: str) -> int:
        with self._lock:
            return len(self._collection(collection))

    def collections(self) -> Iterator[str]:
        return iter(list(self._collections))

    def clear(self) -> None:
        """Drop every collection."""
        with self._lock:
            self._collections.clear()
