from __future__ import annotations
import argparse
import threading
from flask import Flask, request, jsonify
from launcher.config import TOP_K
from launcher.commands import dispatch_text
from . import Session, initialize, row_dict, rows

app = Flask(__name__)
_session: Session | None = None
_lock = threading.Lock()   # dev server is threaded; the engine is single-mutator


def _not_ready():
    return jsonify({"ok": False, "error": "launcher not initialized"}), 503

# ---------- API ----------
@app.get("/api/health")
def api_health():
    if _session is None:
        return _not_ready()
    return jsonify({"ok": True, "candidates": len(_session.engine)})

@app.route("/api/query", methods=["GET", "POST"])
def api_query():
    if _session is None:
        return _not_ready()
    q = request.values.get("q", "", type=str)
    with _lock:
        dispatch_text(_session.engine, q)
        pending = _session.engine.level
    return jsonify({"query": q, "pending": pending.name.lower()})

@app.get("/api/results")
def api_results():
    if _session is None:
        return _not_ready()
    k = request.args.get("k", TOP_K, type=int)
    with _lock:
        level = _session.view.refresh()
        data = rows(max(1, k), _session)
    return jsonify({"level": level.name.lower(), "rows": data})

@app.post("/api/select")
def api_select():
    if _session is None:
        return _not_ready()
    position = request.values.get("position", -1, type=int)
    with _lock:
        try:
            cand = _session.view.select(position)
        except IndexError as e:
            return jsonify({"ok": False, "error": str(e)}), 404
    return jsonify({"ok": True, "selected": row_dict(position, cand)})

def main(argv=None) -> int:
    global _session
    ap = argparse.ArgumentParser(description="Run the Flask JSON API on top of the match engine")
    ap.add_argument("--records", required=True, help="JSON-lines file of app records")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    _session = initialize(args.records, verbose=args.verbose)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
