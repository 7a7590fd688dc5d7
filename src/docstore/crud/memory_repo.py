"""In-memory document store: upsert by id, lookup, and filtered search"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import RLock
from typing import Callable
from uuid import uuid4

from loguru import logger

from docstore.core.models import Document, SearchRequest
from docstore.core.search import matches
from docstore.crud.repo import DocumentRepo


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


@dataclass
class DocumentStore(DocumentRepo):
    """Dict-backed DocumentRepo. Holds its own copies; callers always receive copies.

    Storage, clock and id factory can be injected for isolated tests.
    """
    _docs: dict[str, Document] = field(default_factory=dict)
    clock: Callable[[], datetime] = _utcnow
    id_factory: Callable[[], str] = _new_id
    _lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    def save(self, doc: Document) -> Document:
        """Upsert doc by id and return the stored state.

        A missing id is generated. An existing entry keeps its original created
        timestamp regardless of what doc carries; a new entry keeps the given
        created or gets the current time.
        """
        if doc is None:
            raise ValueError("Cannot save None; a Document is required")

        stored = doc.model_copy(deep=True)
        if not stored.id:
            stored.id = self.id_factory()

        with self._lock:
            existing = self._docs.get(stored.id)
            if existing is not None:
                stored.created = existing.created
            elif stored.created is None:
                stored.created = self.clock()
            self._docs[stored.id] = stored

        logger.debug(f"{'updated' if existing is not None else 'created'} document {stored.id}")
        return stored.model_copy(deep=True)

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return a copy of the document stored under doc_id, or None."""
        with self._lock:
            doc = self._docs.get(doc_id)
        return doc.model_copy(deep=True) if doc is not None else None

    def search(self, request: SearchRequest) -> list[Document]:
        """Return copies of every stored document matching all criteria in request."""
        if request is None:
            raise ValueError("Cannot search with None; pass SearchRequest() to match everything")

        with self._lock:
            docs = list(self._docs.values())
        results = [d.model_copy(deep=True) for d in docs if matches(d, request)]
        logger.debug(f"search matched {len(results)} of {len(docs)} document(s)")
        return results

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._docs
