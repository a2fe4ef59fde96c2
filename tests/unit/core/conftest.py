"""Shared fixtures for core unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.models import Author, Document


@pytest.fixture(name="t0")
def t0_fixture():
    return datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture(name="make_doc")
def make_doc_fixture(t0):
    """Factory for stored-looking Documents (id and created already set)."""
    counter = iter(range(1, 1000))

    def _make(title="Report-1", content="quarterly numbers", author_id="a1", created=None):
        return Document(
            id=str(next(counter)),
            title=title,
            content=content,
            author=Author(id=author_id, name=author_id.upper()),
            created=created or t0,
        )
    return _make
