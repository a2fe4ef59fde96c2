from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert doc by id, assigning an id when missing. Returns the stored doc."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        raise NotImplementedError
