"""In-memory document store: upsert, id lookup, and filtered search"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from docstore.config import Settings
from docstore.core.search import search_documents
from docstore.crud.ids import IdGenerator
from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MemoryRepo(DocumentRepo):
    ids: IdGenerator = field(default_factory=IdGenerator)
    clock: Callable[[], datetime] = utcnow
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, doc: Document) -> Document:
        """Insert or replace doc. created is always reset to the current time."""
        doc_id = doc.id or self.ids.next()
        saved = doc.model_copy(update={"id": doc_id, "created": self.clock()})
        self._docs[doc_id] = saved
        logger.debug("Saved document %s", doc_id)
        return saved

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None) -> list[Document]:
        return search_documents(self._docs.values(), request)

    def all(self) -> list[Document]:
        return list(self._docs.values())

    def __len__(self) -> int:
        return len(self._docs)


def make_repo(settings: Settings) -> MemoryRepo:
    """Empty store whose ids start at settings.id_start."""
    return MemoryRepo(ids=IdGenerator(start=settings.id_start))
