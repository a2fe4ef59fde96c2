"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.crud.memory_repo import MemoryRepo
from docstore.models import Author, Document


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock: returns now, advancing by step after each call."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture(name="clock")
def clock_fixture():
    return FakeClock()


@pytest.fixture(name="repo")
def repo_fixture(clock):
    """Empty store with a fresh id counter and the fake clock."""
    return MemoryRepo(clock=clock)


@pytest.fixture(name="doc")
def doc_fixture():
    """A minimal unsaved Document."""
    return Document(title="Alpha", content="hello world", author=Author(id="u1", name="Ursula"))
