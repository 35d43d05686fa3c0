from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from docstore.core.utils.ids import new_id
from docstore.crud.filters import matches
from docstore.crud.models import Document, SearchCriteria
from docstore.crud.repo import DocumentRepo
from docstore.util.log import logger


@dataclass
class DocumentStore(DocumentRepo):
    """Dict-backed document repository keyed by document id."""
    id_factory: Callable[[], str] = new_id
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, doc: Document) -> Document:
        """Upsert doc in place.

        An empty id is replaced with a fresh one. A known id keeps the
        created timestamp of the stored copy; every other field comes from doc.
        """
        if not isinstance(doc, Document):
            raise TypeError(f"Expected Document, got {type(doc).__name__}")

        if doc.id:
            existing = self._docs.get(doc.id)
            if existing is not None:
                doc.created = existing.created
                logger.debug("Updated document %s", doc.id)
            else:
                logger.debug("Inserted document %s", doc.id)
        else:
            doc.id = self.id_factory()
            logger.debug("Inserted document with generated id %s", doc.id)

        self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, criteria: SearchCriteria | None = None) -> list[Document]:
        """Return stored documents matching all criteria; None matches everything."""
        if criteria is None:
            criteria = SearchCriteria()
        found = [d for d in self._docs.values() if matches(d, criteria)]
        logger.debug("Search matched %d of %d documents", len(found), len(self._docs))
        return found

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs
