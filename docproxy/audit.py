"""
docproxy.audit
~~~~~~~~~~~~~~
Append-only, insertion-ordered record of every access decision.  Entries are
kept in memory for inspection and, when a sink is attached, forwarded to it.
A failing sink never changes the outcome of the operation being audited.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

log = logging.getLogger(__name__)


class AuditEvent(str, enum.Enum):
    VIEW_ATTEMPT = "view_attempt"
    EDIT_ATTEMPT = "edit_attempt"
    GRANTED = "granted"
    DENIED = "denied"
    NOT_FOUND = "not_found"
    UPDATED = "updated"


@dataclass(frozen=True, slots=True)
class AuditEntry:
    timestamp: datetime
    event: AuditEvent
    username: str
    document_id: str
    message: str

    def __str__(self) -> str:
        return f"[{self.timestamp:%H:%M:%S}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event": self.event.value,
            "ts": self.timestamp.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "user": self.username,
            "doc": self.document_id,
            "msg": self.message,
        }


class AuditSink(Protocol):
    def emit(self, entry: AuditEntry) -> None: ...


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class AuditLog:
    def __init__(
        self,
        sink: Optional[AuditSink] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.sink = sink
        self._clock = clock
        self._entries: List[AuditEntry] = []
        self._lock = threading.Lock()

    def record(
        self,
        event: AuditEvent,
        username: str,
        document_id: str,
        message: str,
    ) -> AuditEntry:
        # sink sees entries in the same order as entries()
        with self._lock:
            entry = AuditEntry(self._clock(), event, username, document_id, message)
            self._entries.append(entry)
            if self.sink is not None:
                try:
                    self.sink.emit(entry)
                except Exception:  # noqa: BLE001
                    log.exception("audit sink failed for %s on %s", event.value, document_id)
        return entry

    def entries(self) -> Tuple[AuditEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    def lines(self) -> List[str]:
        return [str(e) for e in self.entries()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
