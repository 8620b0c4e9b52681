from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from wordy import config as CFG
from wordy.engine import Engine

app = Flask(__name__)
log = logging.getLogger(__name__)

# Largest request body accepted by /api/groupings
app.config["MAX_CONTENT_LENGTH"] = 16 * 1024 * 1024


def _request_text() -> str:
    if request.form.get("text") is not None:
        return request.form["text"]
    if request.is_json:
        body = request.get_json(silent=True) or {}
        return str(body.get("text", ""))
    return request.get_data(as_text=True)


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.post("/api/groupings")
def api_groupings():
    g = request.args.get("grouping", CFG.GROUPING, type=int)
    k = request.args.get("top", CFG.TOP, type=int)
    try:
        eng = Engine(group_size=g, top=k)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    words = eng.feed_text(_request_text())
    log.info("api_groupings: words=%d grouping=%d top=%d", words, g, k)
    return jsonify([{"grouping": r.grouping, "count": r.count} for r in eng.top()])


# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>wordy</title>
<style>
body{margin:24px auto;max-width:860px;font:16px/1.45 system-ui,sans-serif;background:#0b0f14;color:#cfd8e3}
textarea{width:100%;height:220px;background:#0b1117;color:#cfd8e3;border:1px solid #1c2530;border-radius:10px;padding:10px}
input{width:64px}
.row{display:grid;grid-template-columns:5rem 1fr;padding:6px 0;border-top:1px solid #1c2530}
.err{color:#ffb0b0}
</style>
</head>
<body>
  <h1>wordy</h1>
  <textarea id="text" placeholder="Paste text here"></textarea>
  <p>
    Grouping <input id="g" type="number" min="1" value="3" />
    Top <input id="k" type="number" min="1" value="100" />
    <button id="go">Count</button>
  </p>
  <div id="err" class="err"></div>
  <div id="out"></div>
<script>
const $ = (sel) => document.querySelector(sel);
$("#go").addEventListener("click", async ()=>{
  $("#err").textContent = "";
  const resp = await fetch(`/api/groupings?grouping=${$("#g").value}&top=${$("#k").value}`,
                           {method:"POST", headers:{"Content-Type":"text/plain"}, body:$("#text").value});
  const data = await resp.json();
  if(!resp.ok){ $("#err").textContent = data.error || `HTTP ${resp.status}`; return; }
  $("#out").innerHTML = data.map(r =>
    `<div class="row"><div>${r.count}</div><div>${r.grouping}</div></div>`).join("");
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the wordy Engine")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
