"""Search predicates: one per criteria dimension, combined with AND"""

from datetime import datetime
from typing import Optional

from docstore.crud.models import Document, SearchCriteria


def matches_title_prefixes(doc: Document, prefixes: Optional[list[str]]) -> bool:
    """True if no prefixes are given or the title starts with any of them."""
    if not prefixes:
        return True
    if doc.title is None:
        return False
    return any(doc.title.startswith(p) for p in prefixes)


def matches_content(doc: Document, contents: Optional[list[str]]) -> bool:
    """True if no substrings are given or the content contains any of them."""
    if not contents:
        return True
    if doc.content is None:
        return False
    return any(c in doc.content for c in contents)


def matches_author(doc: Document, author_ids: Optional[list[str]]) -> bool:
    """True if no author ids are given or the document's author is one of them."""
    if not author_ids:
        return True
    return doc.author is not None and doc.author.id in author_ids


def matches_created_range(
    doc: Document,
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    ) -> bool:
    """True if created falls within [created_from, created_to].

    Either bound may be None (open). A document with no created timestamp
    fails as soon as one bound is set.
    """
    if created_from is not None and (doc.created is None or doc.created < created_from):
        return False
    if created_to is not None and (doc.created is None or doc.created > created_to):
        return False
    return True


def matches(doc: Document, criteria: SearchCriteria) -> bool:
    """True if doc satisfies every dimension of criteria."""
    return (
        matches_title_prefixes(doc, criteria.title_prefixes)
        and matches_content(doc, criteria.contains_contents)
        and matches_author(doc, criteria.author_ids)
        and matches_created_range(doc, criteria.created_from, criteria.created_to)
    )
