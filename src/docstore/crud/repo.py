from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.core.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert by id; assigns id and created when missing."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest) -> list[Document]:
        raise NotImplementedError
