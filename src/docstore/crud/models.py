"""Document, author and search criteria models held by the store"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC so every stored instant is comparable."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


Instant = Annotated[datetime, AfterValidator(_as_utc)]


class Author(BaseModel):
    """Immutable author reference attached to a document."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored document. id is assigned by the store when left empty."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[Instant] = None


class SearchCriteria(BaseModel):
    """Search filter; a None or empty field places no constraint on its dimension."""
    model_config = ConfigDict(frozen=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[Instant] = None   # inclusive lower bound
    created_to:        Optional[Instant] = None   # inclusive upper bound
