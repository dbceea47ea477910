# textsearch/engine.py
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from . import config as CFG
from .models import Document, SearchResult
from .normalize import tokenize
from .loader import iter_documents
from .search import rank, to_results
from .DB.prefix_index import PrefixIndex
from .DB.relevance_index import RelevanceIndex
from .DB.api import DocumentStore, make_store

log = logging.getLogger(__name__)


class SearchEngine:
    """
    Thin orchestration layer that keeps three structures consistent:
      - PrefixIndex:    word -> document ids, for autocomplete,
      - RelevanceIndex: word -> {document id -> count}, for TF-IDF ranking,
      - DocumentStore:  document id -> raw text, for display.

    Public API (used by CLI/Flask):
      * add_document(id, text) / add_documents(docs) / build(roots, ...)
      * search(query), search_phrase(phrase), autocomplete(prefix)
      * display_document(id), stats()
      * shutdown()

    Every public call holds one engine-wide lock, so a threaded server can
    share a single instance.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, accumulate_length: Optional[bool] = None) -> None:
        self._lock = threading.RLock()
        self.prefix_index = PrefixIndex()
        self.relevance_index = RelevanceIndex(accumulate_length=accumulate_length)
        self._store: Optional[DocumentStore] = make_store("memory://")
        self._next_id: int = CFG.FIRST_DOCUMENT_ID

    # ------------- ingestion -------------

    def add_document(self, document_id: int, text: str, *, path: Optional[str] = None) -> None:
        """
        Tokenize once and feed every structure. Re-adding an id overwrites the
        stored text while the relevance counts keep accumulating.
        """
        with self._lock:
            store = self._require_store()
            doc_id = int(document_id)
            tokens = tokenize(text)
            for tok in tokens:
                self.prefix_index.insert(tok, doc_id)
            self.relevance_index.add_tokens(doc_id, tokens)
            if doc_id in store:
                log.debug("Re-adding document %d", doc_id)
            store.create(Document(id=doc_id, text=text, path=path))
            self._next_id = max(self._next_id, doc_id + 1)
            log.debug("Indexed document %d (%d tokens)", doc_id, len(tokens))

    def add_documents(self, documents: Iterable[Document]) -> int:
        n = 0
        with self._lock:
            for d in documents:
                self.add_document(d.id, d.text, path=d.path)
                n += 1
        return n

    # /* ~~~ Ingest *.txt files from source folders ~~~ */
    def build(self, roots: Iterable[str], *, unit: Optional[str] = None, verbose: bool = False) -> int:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        roots = list(roots)
        if not roots:
            raise ValueError("build(): at least one root folder is required")

        with self._lock:
            log.info("Loading documents from %s (unit=%s)", roots, unit or CFG.TEXT_UNIT)
            n = self.add_documents(iter_documents(roots, unit=unit, start_id=self._next_id))
            log.info("Engine build() complete: documents=%d terms=%d",
                     self._require_store().count(), self.relevance_index.vocabulary_size)
        return n

    # ------------- query -------------

    def search(self, query: str, *, top_k: Optional[int] = None) -> List[SearchResult]:
        """Free-text search: union of query terms, summed TF-IDF. [] means no results."""
        with self._lock:
            self._require_store()
            scores = self.relevance_index.score_query(query)
            log.debug("search(%r): %d matching documents", query, len(scores))
            return to_results(rank(scores, top_k), self._text_of)

    def search_phrase(self, phrase: str, *, top_k: Optional[int] = None) -> List[SearchResult]:
        """Documents containing every phrase token (anywhere, any order). [] means no results."""
        with self._lock:
            self._require_store()
            scores = self.relevance_index.score_phrase(phrase)
            log.debug("search_phrase(%r): %d matching documents", phrase, len(scores))
            return to_results(rank(scores, top_k), self._text_of)

    def autocomplete(self, prefix: str) -> List[str]:
        """Indexed words starting with `prefix`, alphabetically. [] means no suggestions."""
        with self._lock:
            self._require_store()
            return sorted(self.prefix_index.prefix_expand(prefix))

    def lookup(self, word: str) -> set[int]:
        """Ids of documents containing exactly `word`."""
        with self._lock:
            self._require_store()
            return self.prefix_index.exact_lookup(word)

    def display_document(self, document_id: int) -> Optional[str]:
        """Stored raw text, or None when the id was never added."""
        with self._lock:
            return self._text_of(document_id)

    def stats(self) -> dict:
        with self._lock:
            store = self._require_store()
            return {
                "documents": store.count(),
                "documents_added": self.relevance_index.document_count,
                "terms": self.relevance_index.vocabulary_size,
                "trie_nodes": self.prefix_index.node_count,
            }

    # ------------- teardown -------------

    def shutdown(self) -> None:
        with self._lock:
            try:
                if self._store:
                    self._store.close()
            finally:
                self._store = None
                log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_store(self) -> DocumentStore:
        if self._store is None:
            raise RuntimeError("Engine has been shut down.")
        return self._store

    def _text_of(self, document_id: int) -> Optional[str]:
        store = self._require_store()
        try:
            return store.read(int(document_id)).text
        except KeyError:
            return None
