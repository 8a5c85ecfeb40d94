# menutext/sources/pdf_text.py
"""
PDF -> raw text.

Menus are published as PDFs with a text layer, so pdfminer's plain text
dump is the primary source (this is the "dirty" text the cleaning stage is
built around). Scanned menus without a text layer fall back to Tesseract
OCR over pdf2image rasters.

Public API:
- extract_pdf_text(path, ocr_fallback=True, settings=None) -> str
- health() -> tesseract + poppler availability
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytesseract
from pdf2image import convert_from_path
from pdfminer.high_level import extract_text
from PIL import Image, ImageOps

from menutext.config import Settings

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


class PdfTextError(Exception):
    """PDF missing or unreadable by every extractor."""


# =============================
# Poppler / Tesseract discovery
# =============================

def get_poppler_path(settings: Optional[Settings] = None) -> Optional[str]:
    path = (settings.poppler_path if settings else "") or os.getenv("POPPLER_PATH") or ""
    return path if path and os.path.isdir(path) else None


def configure_tesseract(settings: Optional[Settings] = None) -> str:
    """Point pytesseract at TESSERACT_CMD when set, else whatever is on PATH."""
    cmd = (settings.tesseract_cmd if settings else "") or os.getenv("TESSERACT_CMD") or ""
    if cmd and Path(cmd).exists():
        pytesseract.pytesseract.tesseract_cmd = cmd
        return cmd
    return shutil.which("tesseract") or ""


def health(settings: Optional[Settings] = None) -> Dict[str, Any]:
    cmd = configure_tesseract(settings)
    version: Optional[str] = None
    if cmd:
        try:
            version = str(pytesseract.get_tesseract_version())
        except (pytesseract.TesseractNotFoundError, OSError) as e:
            log.debug("tesseract version probe failed: %s", e)
    poppler = get_poppler_path(settings)
    return {
        "tesseract": {"cmd": cmd, "version": version, "found_on_disk": bool(version)},
        "poppler": {
            "path": poppler or "",
            "on_path": bool(poppler or shutil.which("pdftoppm")),
        },
    }


# =============================
# Extraction
# =============================

def _text_layer(path: Path) -> str:
    try:
        return extract_text(str(path)) or ""
    except Exception as e:
        raise PdfTextError(f"pdfminer failed on {path.name}: {e}") from e


def _ocr_page(img: Image.Image, settings: Settings) -> str:
    gray = ImageOps.grayscale(img)
    return pytesseract.image_to_string(
        gray,
        lang=settings.tesseract_lang,
        config=settings.tesseract_config,
    )


def _ocr_text(path: Path, settings: Settings) -> str:
    configure_tesseract(settings)
    try:
        pages: List[Image.Image] = convert_from_path(
            str(path), dpi=settings.ocr_dpi, poppler_path=get_poppler_path(settings)
        )
        return "\n".join(_ocr_page(im, settings) for im in pages)
    except Exception as e:
        raise PdfTextError(f"OCR fallback failed on {path.name}: {e}") from e


def extract_pdf_text(path: PathLike, ocr_fallback: bool = True,
                     settings: Optional[Settings] = None) -> str:
    p = Path(path)
    if not p.exists():
        raise PdfTextError(f"PDF not found: {p}")

    text = _text_layer(p)
    if text.strip() or not ocr_fallback:
        return text

    log.info("%s has no text layer; falling back to OCR", p.name)
    return _ocr_text(p, settings or Settings())
