# -*- coding: utf-8 -*-

"""
Read-only browser for a scraped dataset (the JSON written by busho-scrape --out).

  DATA_JSON_PATH=out/kisai.json busho-viewer

Routes:
  /                         table of all characters
  /api/characters?q=...     JSON list, optional filter on 名前/読み
  /api/characters/<name>    one character
"""

import json
import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, render_template_string, request

from .log import get_logger

logger = get_logger(__name__)

# ------------------------------------------------------------
# DATA PATH (ENV overridable)
# ------------------------------------------------------------

DEFAULT_DATA_JSON_PATH = "characters_out.json"
DATA_JSON_PATH = os.getenv("DATA_JSON_PATH", DEFAULT_DATA_JSON_PATH)

NAME_KEY = "名前"
READING_KEY = "読み"

# Column order in the HTML table
COLUMNS = [
    "名前", "読み", "字", "統率", "武力", "知力", "政治", "魅力", "性格", "義理",
    "重視名声", "物欲", "戦略傾向", "奇才", "興味", "戦法", "特技", "没年",
]


# ------------------------------------------------------------
# LOAD + CACHE DATASET
# ------------------------------------------------------------

@lru_cache(maxsize=1)
def load_dataset() -> Dict[str, Any]:
    """
    Load once per process and keep in memory.
    """
    if not os.path.exists(DATA_JSON_PATH):
        raise FileNotFoundError(f"dataset not found: {DATA_JSON_PATH}")

    with open(DATA_JSON_PATH, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError("invalid dataset: root must be a list of characters")

    characters: List[Dict[str, Any]] = []
    by_name: Dict[str, Dict[str, Any]] = {}
    for ch in raw:
        if not isinstance(ch, dict):
            continue
        name = ch.get(NAME_KEY)
        if not isinstance(name, str) or not name.strip():
            continue
        characters.append(ch)
        by_name.setdefault(name.strip(), ch)

    return {"characters": characters, "by_name": by_name}


def _matches(ch: Dict[str, Any], q: str) -> bool:
    return any(q in str(ch.get(k) or "") for k in (NAME_KEY, READING_KEY))


# ------------------------------------------------------------
# FLASK APP
# ------------------------------------------------------------

app = Flask(__name__)

TEMPLATE = r"""
<!doctype html>
<html lang="ja">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>武将一覧</title>
  <style>
  :root{
    --bg: #0b0f19;
    --card:#111a2e;
    --text:#e6eaf2;
    --muted:#a8b3cf;
    --border: rgba(255,255,255,.10);
    --font: ui-sans-serif, system-ui, -apple-system, "Hiragino Sans", "Noto Sans JP", sans-serif;
  }
  body{ margin:0; background:var(--bg); color:var(--text); font-family:var(--font); }
  main{ padding: 24px; }
  h1{ font-size: 1.4rem; margin: 0 0 4px; }
  .sub{ color: var(--muted); margin: 0 0 18px; }
  .error{ border:1px solid #f87171; padding:12px; border-radius:12px; }
  table{ border-collapse: collapse; background: var(--card); font-size: .9rem; }
  th, td{ border:1px solid var(--border); padding: 6px 8px; text-align:left; vertical-align: top; }
  th{ color: var(--muted); font-weight: 600; }
  </style>
</head>
<body>
<main>
  <h1>武将一覧</h1>
  {% if error %}
    <div class="error">{{ error }}</div>
  {% else %}
    <p class="sub">{{ characters|length }}人</p>
    <table>
      <thead><tr>{% for c in columns %}<th>{{ c }}</th>{% endfor %}</tr></thead>
      <tbody>
      {% for ch in characters %}
        <tr>{% for c in columns %}<td>{{ ch.get(c, "") }}</td>{% endfor %}</tr>
      {% endfor %}
      </tbody>
    </table>
  {% endif %}
</main>
</body>
</html>
"""


def _render_page(characters: List[Dict[str, Any]], error: Optional[str] = None) -> str:
    return render_template_string(TEMPLATE, columns=COLUMNS, characters=characters, error=error)


@app.get("/")
def index() -> str:
    try:
        ds = load_dataset()
    except (OSError, ValueError):
        logger.exception("dataset not available")
        return _render_page([], error=f"Could not load dataset. Check DATA_JSON_PATH ({DATA_JSON_PATH}).")
    return _render_page(ds["characters"])


@app.get("/api/characters")
def api_characters():
    try:
        ds = load_dataset()
    except (OSError, ValueError):
        logger.exception("dataset not available")
        return jsonify({"ok": False, "error": "dataset not available"}), 500

    q = (request.args.get("q") or "").strip()
    out = [ch for ch in ds["characters"] if not q or _matches(ch, q)]
    return jsonify({"ok": True, "count": len(out), "characters": out})


@app.get("/api/characters/<name>")
def api_character(name: str):
    try:
        ds = load_dataset()
    except (OSError, ValueError):
        logger.exception("dataset not available")
        return jsonify({"ok": False, "error": "dataset not available"}), 500

    ch = ds["by_name"].get(name.strip())
    if not ch:
        return jsonify({"ok": False, "error": "not found"}), 404
    return jsonify({"ok": True, "character": ch})


def main() -> None:
    port = int(os.getenv("PORT", "8080"))
    app.run(host="0.0.0.0", port=port, debug=False)


if __name__ == "__main__":
    main()
