# textsearch/DB/memory_store.py
from __future__ import annotations
from typing import Dict
from .api import DocumentStore
from ..models import Document

class MemoryStore(DocumentStore):
    """Document id -> raw text. One row per id; create() overwrites."""
    def __init__(self) -> None:
        self._rows: Dict[int, Document] = {}

    def create(self, d: Document) -> None:
        self._rows[int(d.id)] = d

    def read(self, doc_id: int) -> Document:
        try:
            return self._rows[int(doc_id)]
        except KeyError:
            raise KeyError(doc_id)

    def count(self) -> int:
        return len(self._rows)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._rows

    def close(self) -> None:
        self._rows.clear()
