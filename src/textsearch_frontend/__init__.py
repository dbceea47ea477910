"""Shared start-up for the CLI and the Flask UI."""
from __future__ import annotations
import logging, time
from typing import List, Optional

from textsearch import SearchEngine
from textsearch.models import Document

log = logging.getLogger(__name__)

DEMO_DOCUMENTS: List[Document] = [
    Document(1, "Hello world, this is a simple search engine."),
    Document(2, "Hello again, this search engine indexes documents."),
    Document(3, "The world is full of data, and this engine searches through it."),
]

def initialize(roots: Optional[List[str]] = None,
               *,
               unit: Optional[str] = None,
               demo: bool = False,
               verbose: bool = False) -> SearchEngine:
    """
    Build a fresh engine from --roots folders and/or the demo documents.
    At least one source is required.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO)
    if not roots and not demo:
        raise ValueError("initialize(): pass roots, demo=True, or both")

    t0 = time.perf_counter()
    eng = SearchEngine()
    if demo:
        eng.add_documents(DEMO_DOCUMENTS)
        log.info("[demo] loaded %d sample documents", len(DEMO_DOCUMENTS))
    if roots:
        eng.build(roots, unit=unit, verbose=verbose)
    log.info("[ready] init complete in %.2fs", time.perf_counter() - t0)
    return eng
