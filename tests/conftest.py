"""Shared fixtures for docproxy tests."""
import pytest

from docproxy.audit import AuditLog
from docproxy.core import DocumentProxy
from docproxy.models import User
from docproxy.store import DocumentStore


class CountingFactory:
    """Store factory that records how many stores it built."""

    def __init__(self, documents=None):
        self.documents = documents
        self.calls = 0
        self.stores = []

    def __call__(self):
        self.calls += 1
        store = DocumentStore(
            self.documents, init_delay=0, fetch_delay=0, update_delay=0
        )
        self.stores.append(store)
        return store

    @property
    def store(self):
        return self.stores[-1]


@pytest.fixture
def factory():
    return CountingFactory()


@pytest.fixture
def proxy(factory):
    return DocumentProxy(store_factory=factory, audit=AuditLog())


@pytest.fixture
def manager():
    return User("joao.silva", 5)


@pytest.fixture
def employee():
    return User("maria.santos", 2)
