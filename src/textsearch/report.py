"""
Plain-text rendering of engine results for terminals and logs.

Every "empty" outcome (no results, no suggestions, unknown document) is
rendered as a message rather than raised.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from .models import SearchResult
from . import config as CFG


def format_score(score: float) -> str:
    return CFG.SCORE_FORMAT % score


def format_document(document_id: int, text: Optional[str]) -> str:
    if text is None:
        return "Document not found!"
    return f"Document {document_id}: {text}"


def format_results(query: str, results: Sequence[SearchResult], *, phrase: bool = False) -> str:
    if not results:
        return f'No results found for "{query}".'
    kind = "phrase " if phrase else ""
    lines: List[str] = [f'Search results for {kind}"{query}":']
    for r in results:
        lines.append(f"Document ID: {r.document_id} (Score: {format_score(r.score)})")
        lines.append(format_document(r.document_id, r.text))
    return "\n".join(lines)


def format_suggestions(prefix: str, words: Iterable[str]) -> str:
    words = list(words)
    if not words:
        return f'No autocomplete suggestions for "{prefix}".'
    return "\n".join([f'Autocomplete suggestions for "{prefix}":', *words])
