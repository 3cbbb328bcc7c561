"""
docproxy.demo
~~~~~~~~~~~~~
Replays the reference scenario: a manager and an employee reading and
editing documents through the proxy, followed by the audit trail.
"""

from __future__ import annotations

from .audit import AuditLog
from .config import Config
from .core import AccessResult, DocumentProxy, store_factory_from_config
from .logger import AuditLogger
from .models import User


def run_demo(config: Config) -> DocumentProxy:
    sink = AuditLogger(
        config.log_path if config.audit_file else None,
        console=config.audit_console,
    )
    proxy = DocumentProxy(
        store_factory=store_factory_from_config(config),
        audit=AuditLog(sink=sink),
    )
    try:
        _scenario(proxy)
    finally:
        sink.close()
    return proxy


def _scenario(proxy: DocumentProxy) -> None:
    print("=== Confidential Document System (Proxy) ===")
    print(f"▸ store initialized: {proxy.store_initialized}")

    manager = User("joao.silva", 5)
    employee = User("maria.santos", 2)

    print("\n--- Manager reading a high-level document ---")
    _report(proxy.view("DOC002", manager))

    print("\n--- Employee trying the same document ---")
    _report(proxy.view("DOC002", employee))

    print("\n--- Manager reading again (cache) ---")
    _report(proxy.view("DOC002", manager))

    print("\n--- Employee reading an allowed document ---")
    _report(proxy.view("DOC003", employee))

    print("\n--- Manager editing a document ---")
    _report(proxy.edit("DOC003", manager, "Updated contents..."))

    print("\n--- Employee reading the edited document ---")
    _report(proxy.view("DOC003", employee))

    print("\n=== Audit Log ===")
    for line in proxy.show_audit_log():
        print(line)


def _report(result: AccessResult) -> None:
    if result.document is not None:
        doc = result.document
        print(f"✅ {result.outcome.value}: {doc.title} ({doc.size_bytes:,}B) {doc.content}")
    elif result.ok:
        print(f"✅ {result.outcome.value}: {result.document_id}")
    else:
        print(f"❌ {result.outcome.value}: {result.document_id}")
