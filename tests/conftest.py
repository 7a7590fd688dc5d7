"""Root test configuration: shared store fixtures and loguru reset"""

import sys
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from loguru import logger

from docstore.core.models import Author, Document
from docstore.crud.memory_repo import DocumentStore


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests point loguru at CliRunner's stderr; restore the default sink afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture(name="clock")
def clock_fixture():
    """Deterministic clock: T0, T0+1m, T0+2m, ..."""
    ticks = count()
    return lambda: T0 + timedelta(minutes=next(ticks))


@pytest.fixture(name="store")
def store_fixture(clock):
    """Empty store with sequential ids and the deterministic clock."""
    ids = count(1)
    return DocumentStore(clock=clock, id_factory=lambda: f"doc-{next(ids)}")


@pytest.fixture(name="seeded")
def seeded_fixture(store):
    """Store holding three documents created at T0-1d, T0, and T0+1d."""
    alice = Author(id="a1", name="Alice")
    bob = Author(id="b2", name="Bob")
    store.save(Document(id="intro", title="Intro", content="hello world", author=alice, created=T0 - timedelta(days=1)))
    store.save(Document(id="guide", title="Guide to Foo", content="foo bar baz", author=bob, created=T0))
    store.save(Document(id="notes", title="FooBar notes", content="scratch", author=None, created=T0 + timedelta(days=1)))
    return store
