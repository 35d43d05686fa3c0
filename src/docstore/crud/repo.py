from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.crud.models import Document, SearchCriteria

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert doc, assigning an id when it has none. Returns doc."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, criteria: SearchCriteria | None = None) -> list[Document]:
        raise NotImplementedError
