from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from textsearch import SearchEngine
from textsearch.config import TOP_K, MAX_TOP_K
from . import initialize

app = Flask(__name__)
_engine: SearchEngine | None = None

def _eng() -> SearchEngine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Run main() or assign web._engine first.")
    return _engine

def _top_k() -> int:
    k = request.args.get("k", TOP_K, type=int)
    return max(1, min(MAX_TOP_K, k))

# ---------- API ----------
@app.get("/api/search")
def api_search():
    q = request.args.get("q", "", type=str)
    if not q.strip():
        return jsonify([])
    rows = _eng().search(q, top_k=_top_k())
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/phrase")
def api_phrase():
    q = request.args.get("q", "", type=str)
    if not q.strip():
        return jsonify([])
    rows = _eng().search_phrase(q, top_k=_top_k())
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    if not q:
        return jsonify([])
    return jsonify(_eng().autocomplete(q))

@app.get("/api/documents/<int:doc_id>")
def api_document(doc_id: int):
    text = _eng().display_document(doc_id)
    if text is None:
        return jsonify({"error": "document not found", "id": doc_id}), 404
    return jsonify({"id": doc_id, "text": text})

@app.post("/api/documents")
def api_add_document():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "expected a JSON object with 'id' and 'text'"}), 400
    doc_id, text = body.get("id"), body.get("text")
    if isinstance(doc_id, bool) or not isinstance(doc_id, int) or not isinstance(text, str):
        return jsonify({"error": "'id' must be an integer and 'text' a string"}), 400
    _eng().add_document(doc_id, text)
    return jsonify({"id": doc_id}), 201

@app.get("/health")
def health():
    return jsonify({"ok": True, **_eng().stats()})

# ---------- UI ----------
@app.get("/")
def home():
    # One page, no external deps: ranked search on Enter, suggestions while typing.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Text Search • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:900px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
       background:#0b1117; color:var(--ink); outline:none; font-size:16px; box-sizing:border-box }
input:focus{ border-color:var(--accent) }
.sugg{ color:var(--muted); font-size:13px; margin:8px 0 }
.row{ display:grid; grid-template-columns:4rem 7rem 1fr; gap:10px; padding:10px 0; border-top:1px solid var(--border) }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Text Search</h1>
      <input id="q" type="text" placeholder="Type words, press Enter to rank…" autocomplete="off" autofocus />
      <div id="sugg" class="sugg"></div>
      <div id="out" class="empty">Start typing to see suggestions.</div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), sugg = document.querySelector("#sugg");
let t;
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function suggest(){
  const words = q.value.split(/\s+/), last = words[words.length - 1];
  if(!last){ sugg.textContent = ""; return; }
  const resp = await fetch(`/api/complete?q=${encodeURIComponent(last)}`);
  const data = await resp.json();
  sugg.textContent = data.length ? data.slice(0, 12).join(" · ") : "No suggestions.";
}
async function search(){
  const query = q.value.trim();
  if(!query){ out.className = "empty"; out.textContent = "Start typing to see suggestions."; return; }
  const resp = await fetch(`/api/search?q=${encodeURIComponent(query)}`);
  const data = await resp.json();
  if(!data.length){ out.className = "empty"; out.textContent = "No results."; return; }
  out.className = "";
  out.innerHTML = data.map(r => `
    <div class="row"><div class="small">#${r.document_id}</div>
    <div class="small">${r.score.toFixed(4)}</div><div>${esc(r.text)}</div></div>`).join("");
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(suggest, 150); });
q.addEventListener("keydown", ev => { if(ev.key === "Enter") search(); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of SearchEngine")
    ap.add_argument("--roots", nargs="+", default=[])
    ap.add_argument("--unit", choices=["file", "line"])
    ap.add_argument("--demo", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    if not args.roots and not args.demo:
        ap.error("one of --roots or --demo is required")

    global _engine
    _engine = initialize(args.roots, unit=args.unit, demo=args.demo, verbose=args.verbose)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
