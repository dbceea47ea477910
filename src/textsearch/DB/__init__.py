from .prefix_index import PrefixIndex
from .relevance_index import RelevanceIndex
from .api import DocumentStore, make_store
from .memory_store import MemoryStore

__all__ = ["PrefixIndex", "RelevanceIndex", "DocumentStore", "MemoryStore", "make_store"]
