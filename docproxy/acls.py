"""
docproxy.acls
~~~~~~~~~~~~~
Clearance rule shared by every document-returning path of the proxy.
A user may read or write a document when their clearance level is at
least the document's security level.
"""

from __future__ import annotations

from .models import Document, User


def has_access(user: User, document: Document) -> bool:
    return user.clearance_level >= document.security_level


class ClearanceChecker:
    def permit(self, user: User, document: Document) -> bool:  # noqa: D401
        """Return True if *user* may access *document*."""
        return has_access(user, document)
