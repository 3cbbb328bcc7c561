"""
docproxy.store
~~~~~~~~~~~~~~
In-memory stand-in for a slow document database.  Every call blocks for a
configurable delay so the cost of reaching it stays visible to callers.
The store trusts its caller: no authorization happens here.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Dict, Iterable, Optional

from .models import Document

log = logging.getLogger(__name__)


def default_documents() -> list[Document]:
    return [
        Document(
            "DOC001",
            "Q4 Financial Report",
            "Confidential financial report contents... (10 MB)",
            3,
        ),
        Document(
            "DOC002",
            "Market Strategy 2025",
            "Confidential strategic plans... (50 MB)",
            5,
        ),
        Document(
            "DOC003",
            "Employee Handbook",
            "Policies and procedures... (2 MB)",
            1,
        ),
    ]


class DocumentStore:
    def __init__(
        self,
        documents: Optional[Iterable[Document]] = None,
        *,
        init_delay: float = 1.0,
        fetch_delay: float = 0.5,
        update_delay: float = 0.3,
    ) -> None:
        self.fetch_delay = fetch_delay
        self.update_delay = update_delay
        self.fetch_count = 0
        self.update_count = 0
        self._lock = threading.Lock()

        log.info("opening document store connection")
        _pause(init_delay)

        seed = default_documents() if documents is None else documents
        self._table: Dict[str, Document] = {doc.id: doc for doc in seed}
        log.info("document store ready with %d documents", len(self._table))

    # ------------------------------------------------------------------ #
    # public
    # ------------------------------------------------------------------ #

    def fetch(self, document_id: str) -> Optional[Document]:
        """Return the stored document, or None when *document_id* is unknown."""
        log.info("loading %s from store", document_id)
        _pause(self.fetch_delay)
        with self._lock:
            self.fetch_count += 1
            doc = self._table.get(document_id)

        if doc is not None:
            log.debug("loaded %s (%d bytes)", document_id, doc.size_bytes)
        return doc

    def update(self, document_id: str, new_content: str) -> bool:
        """Replace the content of *document_id*.  False if it does not exist."""
        log.info("updating %s in store", document_id)
        _pause(self.update_delay)
        with self._lock:
            self.update_count += 1
            doc = self._table.get(document_id)
            if doc is None:
                return False
            self._table[document_id] = doc.with_content(new_content)
        return True

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._table

    def __len__(self) -> int:
        return len(self._table)


def _pause(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)
