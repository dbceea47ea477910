import json
from pathlib import Path
import pytest

from textsearch_frontend.__main__ import main


@pytest.mark.e2e
def test_cli_demo_queries(capsys):
    rc = main(["--demo", "--q", "engine", "--phrase", "search engine", "--complete", "sear", "--show", "4"])
    assert rc == 0
    out = capsys.readouterr().out
    assert 'Search results for "engine":' in out
    assert "Document ID: 2 (Score: 0.0579236)" in out
    assert 'Search results for phrase "search engine":' in out
    assert 'Autocomplete suggestions for "sear":\nsearch\nsearches' in out
    assert "Document not found!" in out


@pytest.mark.e2e
def test_cli_json_rows(capsys):
    rc = main(["--demo", "--json", "-k", "1", "--q", "Hello"])
    assert rc == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["document_id"] for r in rows] == [2]


@pytest.mark.e2e
def test_cli_roots(tmp_path: Path, capsys):
    root = tmp_path / "docs"; root.mkdir()
    (root / "x.txt").write_text("quick brown fox\n", encoding="utf-8")
    (root / "y.txt").write_text("lazy dog\n", encoding="utf-8")
    assert main(["--roots", str(root), "--q", "fox"]) == 0
    out = capsys.readouterr().out
    assert "Document 1: quick brown fox" in out


@pytest.mark.e2e
def test_cli_repl(monkeypatch, capsys):
    lines = iter([":complete wor", ":show 1", ":show x", "Hello", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))
    assert main(["--demo", "--repl"]) == 0
    out = capsys.readouterr().out
    assert "world," in out
    assert "Document 1: Hello world, this is a simple search engine." in out
    assert "not a document id: 'x'" in out
    assert 'Search results for "Hello":' in out


def test_cli_requires_a_source():
    with pytest.raises(SystemExit):
        main(["--q", "engine"])
