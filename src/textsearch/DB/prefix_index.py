from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Set, Optional, Tuple

ROOT = 0

@dataclass
class _Node:
    children: Dict[str, int] = field(default_factory=dict)  # char -> arena index
    terminal: bool = False
    doc_ids: Set[int] = field(default_factory=set)

class PrefixIndex:
    """
    Character trie over indexed words.
    Nodes live in a flat arena and reference their children by index, so
    every node has exactly one parent and traversal never recurses.
    A terminal node carries the ids of every document that inserted the word
    ending there.
    """
    def __init__(self) -> None:
        self._nodes: List[_Node] = [_Node()]
        self._words: int = 0

    # -------- Build-time API --------
    def insert(self, word: str, document_id: int) -> None:
        cur = ROOT
        for ch in word:
            nxt = self._nodes[cur].children.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes.append(_Node())
                self._nodes[cur].children[ch] = nxt
            cur = nxt
        node = self._nodes[cur]
        if not node.terminal:
            node.terminal = True
            self._words += 1
        node.doc_ids.add(int(document_id))

    # -------- Query API --------
    def exact_lookup(self, word: str) -> Set[int]:
        idx = self._walk(word)
        if idx is None:
            return set()
        node = self._nodes[idx]
        return set(node.doc_ids) if node.terminal else set()

    def prefix_expand(self, prefix: str) -> List[str]:
        """
        All indexed words starting with `prefix` (the prefix itself included
        when it is a word). Order follows child enumeration and is not part
        of the contract.
        """
        start = self._walk(prefix)
        if start is None:
            return []
        out: List[str] = []
        stack: List[Tuple[int, str]] = [(start, prefix)]
        while stack:
            idx, word = stack.pop()
            node = self._nodes[idx]
            if node.terminal:
                out.append(word)
            for ch, child in node.children.items():
                stack.append((child, word + ch))
        return out

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        idx = self._walk(word)
        return idx is not None and self._nodes[idx].terminal

    def __len__(self) -> int:
        return self._words

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    # -------- internals --------
    def _walk(self, s: str) -> Optional[int]:
        cur = ROOT
        for ch in s:
            nxt = self._nodes[cur].children.get(ch)
            if nxt is None:
                return None
            cur = nxt
        return cur
