# routes/core.py
from flask import Blueprint, current_app, jsonify
from datetime import datetime, timezone

from menutext.sources.pdf_text import health as pdf_text_health

core_bp = Blueprint("core", __name__)


@core_bp.get("/")
def index():
    return jsonify({
        "service": "menutext",
        "endpoints": ["/health", "/api/menu/clean", "/api/menu/parse", "/api/menu/render"],
    })


@core_bp.get("/health")
def health():
    return jsonify({
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "ocr": pdf_text_health(current_app.config.get("MENU_SETTINGS")),
    })
