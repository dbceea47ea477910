import pytest

from textsearch.models import Document
from textsearch.DB.api import make_store
from textsearch.DB.memory_store import MemoryStore


def test_make_store_memory_is_empty():
    store = make_store("memory://")
    assert isinstance(store, MemoryStore)
    assert store.count() == 0


def test_make_store_rejects_other_dsns():
    with pytest.raises(ValueError):
        make_store("sqlite:///corpus.sqlite")


def test_create_overwrites_same_id():
    store = MemoryStore()
    store.create(Document(1, "first"))
    store.create(Document(1, "second", path="a.txt"))
    assert store.count() == 1
    assert 1 in store
    assert store.read(1) == Document(1, "second", path="a.txt")


def test_read_missing_raises_key_error():
    store = MemoryStore()
    with pytest.raises(KeyError):
        store.read(42)


def test_close_drops_rows():
    store = MemoryStore()
    store.create(Document(1, "a"))
    store.close()
    assert store.count() == 0
    assert 1 not in store
