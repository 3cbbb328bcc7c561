"""
docproxy.logger
~~~~~~~~~~~~~~~
Audit sink: human-readable console lines *and* JSON lines with daily rotation.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .audit import AuditEntry, AuditEvent

LOGGER_NAME = "docproxy.audit.trail"


class _PlainFormatter(logging.Formatter):
    """ e.g. 2025-06-19T15:07:02Z alice DOC002 granted ACCESS GRANTED to alice on DOC002 """

    def format(self, record):  # type: ignore[override]
        d: Dict[str, Any] = record.msg if isinstance(record.msg, dict) else {}
        if not d or record.levelno >= logging.ERROR:
            return super().format(record)

        parts = [
            d.get("ts", "-"),
            d.get("user", "-"),
            d.get("doc", "-"),
            d.get("event", "-"),
            d.get("msg", ""),
        ]
        return " ".join(parts)


class _JSONFormatter(logging.Formatter):
    def format(self, record):  # type: ignore[override]
        return json.dumps(record.msg, separators=(",", ":"), ensure_ascii=False)


class AuditLogger:
    def __init__(
        self,
        basename: Optional[str | Path] = None,
        console: bool = True,
    ):
        root = logging.getLogger(LOGGER_NAME)
        root.setLevel(logging.INFO)
        root.propagate = False  # keep audit lines out of the root logger

        self._handlers: List[logging.Handler] = []

        if console:
            h = logging.StreamHandler(sys.stderr)
            h.setFormatter(_PlainFormatter())
            self._handlers.append(h)

        if basename is not None:
            basename = Path(basename).with_suffix("")  # docproxy_audit
            jsonl_file = basename.with_suffix(".jsonl")

            # json lines
            h = logging.handlers.TimedRotatingFileHandler(
                jsonl_file, when="midnight", backupCount=7, encoding="utf-8"
            )
            h.setFormatter(_JSONFormatter())
            self._handlers.append(h)

        if not self._handlers:
            self._handlers.append(logging.NullHandler())

        for h in self._handlers:
            root.addHandler(h)

        self.log = root

    def emit(self, entry: AuditEntry) -> None:
        level = logging.WARNING if entry.event is AuditEvent.DENIED else logging.INFO
        self.log.log(level, entry.to_dict())

    def close(self) -> None:
        for h in self._handlers:
            self.log.removeHandler(h)
            h.close()
        self._handlers.clear()
