# textsearch/DB/api.py
from __future__ import annotations
from typing import Protocol

from ..models import Document


class DocumentStore(Protocol):
    def create(self, d: Document) -> None: ...
    def read(self, doc_id: int) -> Document: ...
    def count(self) -> int: ...
    def __contains__(self, doc_id: object) -> bool: ...
    def close(self) -> None: ...


def make_store(dsn: str) -> DocumentStore:
    """
    Factory:
      - memory:// -> MemoryStore
    Stores live only as long as the process; there is no on-disk backend.
    """
    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    raise ValueError(f"Unsupported store DSN: {dsn}")
