# menutext/config.py
"""
Runtime configuration.

Settings come from environment variables; a `.env` file at the repo root
is loaded first so TESSERACT_CMD / POPPLER_PATH / SMTP credentials work
without touching the shell profile. Real environment variables win over
values from `.env`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_TRUE_WORDS = {"1", "true", "yes", "on"}


def load_env_file(path: Optional[Path] = None) -> bool:
    """Load `.env` (repo root by default). Returns True if a file was read."""
    return load_dotenv(path or ROOT / ".env", override=False)


def _flag(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = (env.get(key) or "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE_WORDS


def _int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from e


def _str(env: Mapping[str, str], key: str, default: str = "") -> str:
    return (env.get(key) or "").strip() or default


@dataclass
class Settings:
    # source site + local store
    site_url: str = "http://www.weswings.com"
    doc_dir: str = "ww"
    clear: bool = False
    download: bool = True
    email: bool = True
    http_timeout: int = 30

    # parsing
    track_breakfast: bool = False
    workers: int = 1

    # notification
    email_to: str = ""
    email_from: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""

    # OCR fallback for PDFs without a text layer
    tesseract_cmd: str = ""
    poppler_path: str = ""
    tesseract_lang: str = "eng"
    tesseract_config: str = "--oem 1 --psm 6"
    ocr_dpi: int = 280

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            load_env_file()
            env = os.environ
        return cls(
            site_url=_str(env, "MENU_SITE_URL", cls.site_url).rstrip("/"),
            doc_dir=_str(env, "MENU_DOC_DIR", cls.doc_dir),
            clear=_flag(env, "MENU_CLEAR", cls.clear),
            download=_flag(env, "MENU_DOWNLOAD", cls.download),
            email=_flag(env, "MENU_EMAIL", cls.email),
            http_timeout=_int(env, "MENU_HTTP_TIMEOUT", cls.http_timeout),
            track_breakfast=_flag(env, "MENU_TRACK_BREAKFAST", cls.track_breakfast),
            workers=max(1, _int(env, "MENU_WORKERS", cls.workers)),
            email_to=_str(env, "MENU_EMAIL_TO"),
            email_from=_str(env, "MENU_EMAIL_FROM"),
            smtp_host=_str(env, "SMTP_HOST", cls.smtp_host),
            smtp_port=_int(env, "SMTP_PORT", cls.smtp_port),
            smtp_user=_str(env, "SMTP_USER"),
            smtp_password=env.get("SMTP_PASSWORD") or "",
            tesseract_cmd=_str(env, "TESSERACT_CMD"),
            poppler_path=_str(env, "POPPLER_PATH"),
            tesseract_lang=_str(env, "TESSERACT_LANG", cls.tesseract_lang),
            tesseract_config=_str(env, "TESSERACT_CONFIG", cls.tesseract_config),
            ocr_dpi=_int(env, "OCR_DPI", cls.ocr_dpi),
            log_level=_str(env, "LOG_LEVEL", cls.log_level).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format=LOG_FORMAT,
    )
