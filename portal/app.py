# portal/app.py
from flask import Flask, jsonify

import sys
from pathlib import Path

# Make project root importable so we can import menutext.*
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from menutext.config import Settings, configure_logging
from routes.core import core_bp
from portal.routes_menu import menu_api

# ------------------------
# App & Config
# ------------------------
settings = Settings.from_env()
configure_logging(settings.log_level)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 2 * 1024 * 1024        # raw text only
app.config["MENU_SETTINGS"] = settings

app.register_blueprint(core_bp)
app.register_blueprint(menu_api)


@app.errorhandler(413)
def too_large(_e):
    return jsonify({"ok": False, "error": "Body too large."}), 413


if __name__ == "__main__":
    app.run(debug=True)
