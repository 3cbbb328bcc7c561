"""
docproxy.models
~~~~~~~~~~~~~~~
Value types shared by the store, the access policy and the proxy.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, slots=True)
class Document:
    id: str
    title: str
    content: str
    security_level: int
    size_bytes: int = field(init=False)

    def __post_init__(self) -> None:
        if self.security_level < 0:
            raise ValueError(f"security_level must be >= 0, got {self.security_level}")
        object.__setattr__(self, "size_bytes", len(self.content.encode("utf-8")))

    def with_content(self, content: str) -> "Document":
        """Copy of this document with *content* swapped in (size recomputed)."""
        return replace(self, content=content)


@dataclass(frozen=True, slots=True)
class User:
    username: str
    clearance_level: int

    def __post_init__(self) -> None:
        if self.clearance_level < 0:
            raise ValueError(f"clearance_level must be >= 0, got {self.clearance_level}")
