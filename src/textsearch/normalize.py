from __future__ import annotations
from typing import List

def tokenize(text: str) -> List[str]:
    """
    Split on runs of whitespace. Tokens are kept byte-for-byte:
    no case folding, no punctuation stripping ("engine." != "engine").
    """
    if not text:
        return []
    return text.split()
