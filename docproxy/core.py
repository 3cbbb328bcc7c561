"""
docproxy.core
~~~~~~~~~~~~~
Document proxy with lazy store access, caching, clearance checks and auditing.
Callers never talk to the store directly.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .acls import ClearanceChecker
from .audit import AuditEntry, AuditEvent, AuditLog
from .config import Config
from .models import Document, User
from .store import DocumentStore

log = logging.getLogger(__name__)


class Outcome(str, enum.Enum):
    GRANTED = "granted"
    DENIED = "denied"
    NOT_FOUND = "not_found"
    UPDATED = "updated"


@dataclass(frozen=True, slots=True)
class AccessResult:
    outcome: Outcome
    document_id: str
    document: Optional[Document] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.GRANTED, Outcome.UPDATED)


StoreFactory = Callable[[], DocumentStore]


def store_factory_from_config(cfg: Config) -> StoreFactory:
    def _factory() -> DocumentStore:
        return DocumentStore(
            init_delay=cfg.init_delay,
            fetch_delay=cfg.fetch_delay,
            update_delay=cfg.update_delay,
        )

    return _factory


class DocumentProxy:
    def __init__(
        self,
        store_factory: Optional[StoreFactory] = None,
        audit: Optional[AuditLog] = None,
        acl: Optional[ClearanceChecker] = None,
    ) -> None:
        self._store_factory = store_factory or DocumentStore
        self._store: Optional[DocumentStore] = None
        self._store_lock = threading.Lock()

        self._cache: Dict[str, Document] = {}
        self._generations: Dict[str, int] = {}  # bumped on every successful edit
        self._cache_lock = threading.RLock()

        self.audit = audit if audit is not None else AuditLog()
        self.acl = acl or ClearanceChecker()

    # ------------------------------------------------------------------ #
    # public
    # ------------------------------------------------------------------ #

    @property
    def store_initialized(self) -> bool:
        return self._store is not None

    def view(self, document_id: str, user: User) -> AccessResult:
        self._audit(AuditEvent.VIEW_ATTEMPT, user, document_id,
                    f"{user.username} attempted to VIEW {document_id}")

        with self._cache_lock:
            doc = self._cache.get(document_id)
            generation = self._generations.get(document_id, 0)

        if doc is not None:
            log.debug("cache hit for %s", document_id)
        else:
            doc = self._real.fetch(document_id)
            if doc is None:
                self._audit(AuditEvent.NOT_FOUND, user, document_id,
                            f"DOCUMENT NOT FOUND {document_id}")
                return AccessResult(Outcome.NOT_FOUND, document_id)
            with self._cache_lock:
                # an edit landed while fetching: the snapshot may predate it
                if self._generations.get(document_id, 0) == generation:
                    self._cache[document_id] = doc

        if not self.acl.permit(user, doc):
            self._audit(AuditEvent.DENIED, user, document_id,
                        f"ACCESS DENIED for {user.username} on {document_id} "
                        f"(level {user.clearance_level} < {doc.security_level})")
            return AccessResult(Outcome.DENIED, document_id)

        self._audit(AuditEvent.GRANTED, user, document_id,
                    f"ACCESS GRANTED for {user.username} on {document_id}")
        return AccessResult(Outcome.GRANTED, document_id, doc)

    def edit(self, document_id: str, user: User, new_content: str) -> AccessResult:
        self._audit(AuditEvent.EDIT_ATTEMPT, user, document_id,
                    f"{user.username} attempted to EDIT {document_id}")

        doc = self._cached(document_id)
        if doc is None:
            doc = self._real.fetch(document_id)
        if doc is None:
            self._audit(AuditEvent.NOT_FOUND, user, document_id,
                        f"EDIT REJECTED - DOCUMENT NOT FOUND {document_id}")
            return AccessResult(Outcome.NOT_FOUND, document_id)

        if not self.acl.permit(user, doc):
            self._audit(AuditEvent.DENIED, user, document_id,
                        f"EDIT DENIED for {user.username} on {document_id} "
                        f"(level {user.clearance_level} < {doc.security_level})")
            return AccessResult(Outcome.DENIED, document_id)

        if not self._real.update(document_id, new_content):
            self._audit(AuditEvent.NOT_FOUND, user, document_id,
                        f"EDIT REJECTED - DOCUMENT NOT FOUND {document_id}")
            return AccessResult(Outcome.NOT_FOUND, document_id)

        with self._cache_lock:
            self._generations[document_id] = self._generations.get(document_id, 0) + 1
            self._cache.pop(document_id, None)
        self._audit(AuditEvent.UPDATED, user, document_id,
                    f"EDIT OK by {user.username} on {document_id}")
        return AccessResult(Outcome.UPDATED, document_id)

    def audit_log(self) -> Tuple[AuditEntry, ...]:
        return self.audit.entries()

    def show_audit_log(self) -> List[str]:
        """Rendered audit lines in recorded order; printing is up to the caller."""
        return self.audit.lines()

    def cached_ids(self) -> List[str]:
        with self._cache_lock:
            return list(self._cache)

    # ------------------------------------------------------------------ #
    # private
    # ------------------------------------------------------------------ #

    @property
    def _real(self) -> DocumentStore:
        store = self._store
        if store is None:
            with self._store_lock:
                if self._store is None:
                    self._store = self._store_factory()
                store = self._store
        return store

    def _cached(self, document_id: str) -> Optional[Document]:
        with self._cache_lock:
            return self._cache.get(document_id)

    def _audit(self, event: AuditEvent, user: User, document_id: str, message: str) -> None:
        self.audit.record(event, user.username, document_id, message)
