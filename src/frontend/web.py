from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from fuzzmatch import FuzzMatchError, Matcher
from fuzzmatch.config import TOP_K
from .loader import load_candidates
from .ranking import rank

log = logging.getLogger(__name__)

app = Flask(__name__)
_candidates: list[str] = []
_matcher: Matcher = Matcher()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _request_matcher() -> Matcher:
    """Per-request flags override the server defaults."""
    return Matcher(
        case_sensitive=request.args.get("case_sensitive", _matcher.case_sensitive, type=_flag),
        normalize=request.args.get("normalize", _matcher.normalize, type=_flag),
    )


@app.errorhandler(FuzzMatchError)
def _bad_input(exc: FuzzMatchError):
    return jsonify({"error": str(exc)}), 400


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True, "candidates": len(_candidates)})


@app.get("/api/match")
def api_match():
    text = request.args.get("text", "", type=str)
    q = request.args.get("q", "", type=str)
    return jsonify(_request_matcher().match(text, q).to_dict())


@app.get("/api/score")
def api_score():
    text = request.args.get("text", "", type=str)
    q = request.args.get("q", "", type=str)
    return jsonify({"score": _request_matcher().score(text, q)})


@app.get("/api/rank")
def api_rank():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    if k < 0:
        return jsonify({"error": "k must be a non-negative integer"}), 400
    if not q:
        return jsonify([])
    rows = rank(q, _candidates, top_k=k, matcher=_request_matcher())
    return jsonify([r.to_dict() for r in rows])


@app.post("/api/rank")
def api_rank_post():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "expected a JSON object"}), 400
    pattern = body.get("pattern", "")
    candidates = body.get("candidates", [])
    k = body.get("k", TOP_K)
    if not isinstance(candidates, list):
        return jsonify({"error": "candidates must be a list of strings"}), 400
    if not isinstance(pattern, str):
        return jsonify({"error": "pattern must be a string"}), 400
    if k is not None and (isinstance(k, bool) or not isinstance(k, int) or k < 0):
        return jsonify({"error": "k must be a non-negative integer"}), 400
    case_sensitive = body.get("case_sensitive", _matcher.case_sensitive)
    normalize = body.get("normalize", _matcher.normalize)
    if not isinstance(case_sensitive, bool) or not isinstance(normalize, bool):
        return jsonify({"error": "case_sensitive and normalize must be booleans"}), 400
    matcher = Matcher(case_sensitive=case_sensitive, normalize=normalize)
    rows = rank(pattern, candidates, top_k=k, matcher=matcher)
    return jsonify([r.to_dict() for r in rows])


# ---------- UI ----------
@app.get("/")
def home():
    # Tiny page: server returns positions, client only wraps them.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Fuzzy match • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.row{ display:grid; grid-template-columns:3rem 5rem 1fr; gap:10px; padding:10px 14px; border-top:1px solid var(--border); }
.head{ font-weight:600; color:var(--muted) }
.mark{ color:var(--accent); font-weight:700 }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Fuzzy match</h1>
      <input id="q" type="text" placeholder="Type to filter…" autocomplete="off" autofocus />
      <div id="stats" class="meta">Ready.</div>
      <div class="row head"><div>#</div><div>Score</div><div>Candidate</div></div>
      <div id="out"></div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
let t;
function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
function highlight(text, positions){
  const hits = new Set(positions);
  return Array.from(text).map((ch, i) => hits.has(i) ? `<span class="mark">${esc(ch)}</span>` : esc(ch)).join("");
}
async function search(){
  const query = q.value;
  if(!query){ out.innerHTML = ""; stats.textContent = "Ready."; return; }
  const t0 = performance.now();
  const resp = await fetch(`/api/rank?q=${encodeURIComponent(query)}&k=20`);
  const data = await resp.json();
  stats.textContent = `Results: ${data.length} • ~${Math.round(performance.now() - t0)} ms`;
  out.innerHTML = data.map((r, i) => `
    <div class="row"><div>${i+1}</div><div class="mono">${r.score}</div><div>${highlight(r.text, r.positions)}</div></div>`).join("");
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 120); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the fuzzy matcher")
    ap.add_argument("--file", "-f", dest="files", nargs="+", default=[], help="Candidate files or folders")
    ap.add_argument("--case-sensitive", action="store_true")
    ap.add_argument("--no-normalize", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    global _candidates, _matcher
    try:
        _candidates = load_candidates(args.files)
    except FileNotFoundError as exc:
        ap.error(f"no such file or folder: {exc}")
    _matcher = Matcher(case_sensitive=args.case_sensitive, normalize=not args.no_normalize)
    log.info("Serving %d candidates with %r", len(_candidates), _matcher)

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
