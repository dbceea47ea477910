from __future__ import annotations
import math
from collections import defaultdict
from typing import Dict, Iterable, Optional

from ..normalize import tokenize
from .. import config as CFG

class RelevanceIndex:
    """
    Term -> {document id -> occurrences} plus per-document token counts.
    Scores are TF-IDF, computed on demand:
        tf  = occurrences / document_length[doc]
        idf = ln(document_count / documents_containing(term))
    """
    def __init__(self, *, accumulate_length: Optional[bool] = None) -> None:
        self.term_frequency: Dict[str, Dict[int, int]] = defaultdict(dict)
        self.document_length: Dict[int, int] = {}
        self.document_count: int = 0
        self.accumulate_length = CFG.ACCUMULATE_LENGTH if accumulate_length is None else bool(accumulate_length)

    # ---- Build ----
    def add_document(self, document_id: int, text: str) -> None:
        self.add_tokens(document_id, tokenize(text))

    def add_tokens(self, document_id: int, tokens: Iterable[str]) -> None:
        """
        Count every token against `document_id`. Re-adding an id keeps
        accumulating term counts and bumps document_count again; its length
        is overwritten unless accumulate_length is set.
        """
        doc = int(document_id)
        n = 0
        for tok in tokens:
            postings = self.term_frequency[tok]
            postings[doc] = postings.get(doc, 0) + 1
            n += 1
        if self.accumulate_length:
            self.document_length[doc] = self.document_length.get(doc, 0) + n
        else:
            self.document_length[doc] = n
        self.document_count += 1

    # ---- Statistics ----
    def document_frequency(self, word: str) -> int:
        return len(self.term_frequency.get(word, ()))

    def inverse_document_frequency(self, word: str) -> float:
        df = self.document_frequency(word)
        if df == 0:
            return 0.0
        return math.log(self.document_count / df)

    # ---- Scoring ----
    def score_term(self, word: str) -> Dict[int, float]:
        postings = self.term_frequency.get(word)
        if not postings:
            return {}
        idf = self.inverse_document_frequency(word)
        out: Dict[int, float] = {}
        for doc, count in postings.items():
            length = self.document_length.get(doc, 0)
            tf = count / length if length else 0.0
            out[doc] = tf * idf
        return out

    def score_phrase(self, phrase: str) -> Dict[int, float]:
        """
        Documents containing every token of `phrase`, anywhere and in any
        order, scored by the sum of their per-token scores.
        """
        combined: Dict[int, float] = {}
        first = True
        for tok in tokenize(phrase):
            scores = self.score_term(tok)
            if first:
                combined = dict(scores)
                first = False
                continue
            for doc in list(combined):
                if doc in scores:
                    combined[doc] += scores[doc]
                else:
                    del combined[doc]
            if not combined:
                break
        return combined

    def score_query(self, query: str) -> Dict[int, float]:
        totals: Dict[int, float] = defaultdict(float)
        for tok in tokenize(query):
            for doc, score in self.score_term(tok).items():
                totals[doc] += score
        return dict(totals)

    # ---- Getters ----
    @property
    def vocabulary_size(self) -> int:
        return len(self.term_frequency)

    def __contains__(self, word: object) -> bool:
        return word in self.term_frequency
