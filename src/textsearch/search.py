from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple, Callable

from .models import SearchResult

log = logging.getLogger(__name__)


def rank(scores: Dict[int, float], top_k: Optional[int] = None) -> List[Tuple[int, float]]:
    """
    Order (document_id, score) pairs by score descending.
    Equal scores fall back to document id ascending so output is stable.
    """
    if top_k is not None and top_k <= 0:
        return []
    ordered = sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))
    if top_k is not None:
        ordered = ordered[:top_k]
    return ordered


def to_results(ranked: List[Tuple[int, float]], text_of: Callable[[int], Optional[str]]) -> List[SearchResult]:
    """Attach stored text to ranked pairs; ids missing from the store get an empty text."""
    out: List[SearchResult] = []
    for doc_id, score in ranked:
        text = text_of(doc_id)
        if text is None:
            log.warning("Scored document %d has no stored text", doc_id)
            text = ""
        out.append(SearchResult(document_id=doc_id, score=score, text=text))
    return out
