from __future__ import annotations
import os
import logging
from typing import Iterable, Iterator, List, Optional

from .models import Document
from .config import TEXT_UNIT, FIRST_DOCUMENT_ID

log = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 500

def _iter_txt_files(roots: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield (root, path) for *.txt files recursively under each root, sorted per root."""
    for root in roots:
        root = os.path.abspath(root)
        found: List[str] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in filenames:
                if fn.lower().endswith(".txt"):
                    found.append(os.path.join(dirpath, fn))
        for path in sorted(found):
            yield root, path

def _rel(path: str, root: str) -> str:
    return os.path.relpath(path, root).replace("\\", "/")

def _yield_file_units(text: str, path_rel: str, start_id: int) -> Iterator[Document]:
    yield Document(id=start_id, text=text, path=path_rel)

def _yield_line_units(text: str, path_rel: str, start_id: int) -> Iterator[Document]:
    doc_id = start_id
    for raw in text.splitlines():
        if not raw.strip():
            continue
        yield Document(id=doc_id, text=raw, path=path_rel)
        doc_id += 1

def iter_documents(roots: List[str],
                   unit: Optional[str] = None,
                   start_id: Optional[int] = None) -> Iterator[Document]:
    """
    Scan roots for *.txt and yield Documents with sequential ids.
    unit: "file" (default) or "line".
    """
    unit = (unit or TEXT_UNIT).lower()
    if unit == "file":
        split = _yield_file_units
    elif unit == "line":
        split = _yield_line_units
    else:
        raise ValueError(f"Unknown text unit: {unit!r} (expected 'file' or 'line')")

    next_id = FIRST_DOCUMENT_ID if start_id is None else int(start_id)
    file_count = 0
    for root, path in _iter_txt_files(roots):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                text = f.read()
        except OSError as exc:
            log.warning("Skipping unreadable file %s: %s", path, exc)
            continue

        for d in split(text.rstrip("\r\n"), _rel(path, root), next_id):
            yield d
            next_id = d.id + 1

        file_count += 1
        if file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d", file_count)

    log.info("[done] files=%d next_id=%d", file_count, next_id)

def load_documents(roots: List[str], unit: Optional[str] = None, start_id: Optional[int] = None) -> List[Document]:
    return list(iter_documents(roots, unit=unit, start_id=start_id))
