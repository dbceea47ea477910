import math
import pytest
from textsearch import SearchEngine, SearchResult

def _seed() -> SearchEngine:
    eng = SearchEngine()
    eng.add_document(1, "Hello world, this is a simple search engine.")
    eng.add_document(2, "Hello again, this search engine indexes documents.")
    eng.add_document(3, "The world is full of data, and this engine searches through it.")
    return eng

@pytest.mark.e2e
def test_search_engine_matches_literal_token_only():
    eng = _seed()
    try:
        rows = eng.search("engine")
        # doc 1 holds "engine." which is a different token
        assert [r.document_id for r in rows] == [2, 3]
        assert rows[0].score == pytest.approx(math.log(3 / 2) / 7)
        assert rows[1].score == pytest.approx(math.log(3 / 2) / 12)
        assert rows[0].text == "Hello again, this search engine indexes documents."
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_search_hello_and_world():
    eng = _seed()
    try:
        assert [r.document_id for r in eng.search("Hello")] == [2, 1]
        world = eng.search("world")
        assert [r.document_id for r in world] == [3]
        assert world[0].score == pytest.approx(math.log(3) / 12)
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_phrase_search_engine():
    eng = _seed()
    try:
        rows = eng.search_phrase("search engine")
        assert [r.document_id for r in rows] == [2]
        assert rows[0].score == pytest.approx(2 * math.log(1.5) / 7)
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_autocomplete_sear_and_wor():
    eng = _seed()
    try:
        assert eng.autocomplete("sear") == ["search", "searches"]
        assert eng.autocomplete("wor") == ["world", "world,"]
        assert eng.autocomplete("zzz") == []
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_reads_are_repeatable():
    eng = _seed()
    try:
        assert eng.search("this engine") == eng.search("this engine")
        assert eng.search_phrase("Hello this") == eng.search_phrase("Hello this")
        assert eng.autocomplete("") == eng.autocomplete("")
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_no_results_is_an_empty_list():
    eng = _seed()
    try:
        assert eng.search("missing") == []
        assert eng.search_phrase("Hello missing") == []
        assert eng.search("") == []
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_result_rows_are_search_results():
    eng = _seed()
    try:
        for r in eng.search("Hello world"):
            assert isinstance(r, SearchResult)
            assert set(r.to_dict()) == {"document_id", "score", "text"}
    finally:
        eng.shutdown()
