"""
textsearch: in-process text search.

Documents are split on whitespace and indexed twice: a character trie for
autocomplete and a term/document frequency table for TF-IDF ranking. The
SearchEngine keeps both consistent with a store of the raw texts.

Example Usage:
    from textsearch import SearchEngine

    engine = SearchEngine()
    engine.add_document(1, "Hello world, this is a simple search engine.")
    engine.add_document(2, "Hello again, this search engine indexes documents.")

    for r in engine.search("search"):
        print(r.document_id, r.score, r.text)
    print(engine.autocomplete("sear"))
"""

# src/textsearch/__init__.py
from .engine import SearchEngine
from .models import Document, SearchResult
from .DB.prefix_index import PrefixIndex
from .DB.relevance_index import RelevanceIndex

__version__ = "1.0.0"
__all__ = ["SearchEngine", "Document", "SearchResult", "PrefixIndex", "RelevanceIndex"]
