from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional

@dataclass(frozen=True)
class Document:
    id: int
    text: str                    # raw text exactly as ingested
    path: Optional[str] = None   # source file relative to its root, if loaded from disk

@dataclass(frozen=True)
class SearchResult:
    document_id: int
    score: float
    text: str

    def to_dict(self) -> dict:
        return asdict(self)
