# portal/routes_menu.py
"""
Menu text API: runs the cleaning / extraction stages on posted text.

  POST /api/menu/clean   -> {"ok": true, "clean_text": "..."}
  POST /api/menu/parse   -> {"ok": true, "items": [...], "defects": [...]}
  POST /api/menu/render  -> {"ok": true, "formatted": "...", "items": [...]}

Body: JSON {"text": "...", "track_breakfast": false} or text/plain raw text.
The text is the raw PDF dump; parse/render clean it first.
"""

from __future__ import annotations

from typing import Optional, Tuple

from flask import Blueprint, jsonify, request

from menutext.menu_pipeline import clean_text, extract_items, render_menu

menu_api = Blueprint("menu_api", __name__, url_prefix="/api/menu")


def _error(msg: str, status: int = 400):
    return jsonify({"ok": False, "error": msg}), status


def _read_body() -> Tuple[Optional[str], bool]:
    """Return (text, track_breakfast); text is None when missing."""
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return None, False
        text = payload.get("text")
        return (text if isinstance(text, str) else None), bool(payload.get("track_breakfast"))
    raw = request.get_data(as_text=True)
    track = request.args.get("track_breakfast", "").lower() in ("1", "true", "yes")
    return (raw or None), track


@menu_api.post("/clean")
def clean():
    text, _ = _read_body()
    if text is None:
        return _error("Missing 'text' (JSON field or text/plain body).")
    return jsonify({"ok": True, "clean_text": clean_text(text)})


@menu_api.post("/parse")
def parse():
    text, track = _read_body()
    if text is None:
        return _error("Missing 'text' (JSON field or text/plain body).")
    result = extract_items(clean_text(text), track_breakfast=track)
    return jsonify({
        "ok": True,
        "items": [it.to_dict() for it in result.items],
        "defects": [d.to_dict() for d in result.defects],
    })


@menu_api.post("/render")
def render():
    text, track = _read_body()
    if text is None:
        return _error("Missing 'text' (JSON field or text/plain body).")
    result = extract_items(clean_text(text), track_breakfast=track)
    return jsonify({
        "ok": True,
        "formatted": render_menu(result.items, track_breakfast=track),
        "items": [it.to_dict() for it in result.items],
    })
