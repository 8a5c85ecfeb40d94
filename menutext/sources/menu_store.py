# menutext/sources/menu_store.py
"""
Menu Store: on-disk documents keyed by menu name.

    <root>/pdf/<name>.pdf           current download
    <root>/pdf-archive/<name>.pdf   first copy ever seen (never cleared)
    <root>/dirty-txt/<name>.txt     raw PDF text dump
    <root>/clean-txt/<name>.txt     cleaning-stage output
    <root>/blog-txt/<name>.txt      formatted menu
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Dict, List, Union

log = logging.getLogger(__name__)

TEXT_KINDS: Dict[str, str] = {
    "dirty": "dirty-txt",
    "clean": "clean-txt",
    "blog": "blog-txt",
}
PDF_DIR = "pdf"
ARCHIVE_DIR = "pdf-archive"


class MenuStore:
    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    # ── paths ────────────────────────────────────────
    @property
    def pdf_dir(self) -> Path:
        return self.root / PDF_DIR

    @property
    def archive_dir(self) -> Path:
        return self.root / ARCHIVE_DIR

    def text_dir(self, kind: str) -> Path:
        try:
            return self.root / TEXT_KINDS[kind]
        except KeyError:
            raise ValueError(f"unknown text kind {kind!r}; expected one of {sorted(TEXT_KINDS)}")

    def pdf_path(self, name: str) -> Path:
        return self.pdf_dir / f"{name}.pdf"

    def archive_path(self, name: str) -> Path:
        return self.archive_dir / f"{name}.pdf"

    def text_path(self, kind: str, name: str) -> Path:
        return self.text_dir(kind) / f"{name}.txt"

    # ── layout ───────────────────────────────────────
    def ensure_dirs(self) -> None:
        for d in [self.pdf_dir, self.archive_dir] + [self.text_dir(k) for k in TEXT_KINDS]:
            d.mkdir(parents=True, exist_ok=True)

    def clear(self) -> None:
        """Remove everything generated, leaving the archive intact."""
        for d in [self.pdf_dir] + [self.text_dir(k) for k in TEXT_KINDS]:
            if d.exists():
                shutil.rmtree(d)
        log.info("cleared %s (archive kept)", self.root)

    # ── pdfs ─────────────────────────────────────────
    def has_pdf(self, name: str) -> bool:
        return self.pdf_path(name).exists()

    def pdf_names(self) -> List[str]:
        if not self.pdf_dir.exists():
            return []
        return sorted(p.stem for p in self.pdf_dir.glob("*.pdf"))

    def save_pdf(self, name: str, data: bytes) -> Path:
        path = self.pdf_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        archive = self.archive_path(name)
        if not archive.exists():
            archive.parent.mkdir(parents=True, exist_ok=True)
            archive.write_bytes(data)
            log.info("archived %s", archive)
        return path

    # ── text ─────────────────────────────────────────
    def write_text(self, kind: str, name: str, text: str) -> Path:
        path = self.text_path(kind, name)
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" as written on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return path

    def read_text(self, kind: str, name: str) -> str:
        with open(self.text_path(kind, name), "r", encoding="utf-8", newline="") as f:
            return f.read()
