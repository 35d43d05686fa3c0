"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import Author, Document


@pytest.fixture(name="now")
def now_fixture():
    """A single reference instant shared by documents and criteria in a test."""
    return datetime.now(timezone.utc)


@pytest.fixture(name="author1")
def author1_fixture():
    return Author(id="author1", name="Author One")


@pytest.fixture(name="author2")
def author2_fixture():
    return Author(id="author2", name="Author Two")


@pytest.fixture(name="store")
def store_fixture():
    """An empty in-memory store."""
    return DocumentStore()


@pytest.fixture(name="seeded")
def seeded_fixture(store, now, author1, author2):
    """Store holding doc1, doc2, doc3 created 1h, 2h and 30min before now."""
    store.save(Document(
        id="doc1",
        title="Introduction to Java",
        content="Java is a high-level, class-based, object-oriented programming language.",
        author=author1,
        created=now - timedelta(seconds=3600),
    ))
    store.save(Document(
        id="doc2",
        title="Advanced section",
        content="In this section, we dive deeper into Java Streams and Lambdas.",
        author=author2,
        created=now - timedelta(seconds=7200),
    ))
    store.save(Document(
        id="doc3",
        title="Java Streams",
        content="Streams are a new abstraction that lets you process data in a declarative way.",
        author=author1,
        created=now - timedelta(seconds=1800),
    ))
    return store
