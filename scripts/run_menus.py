#!/usr/bin/env python3
"""
Daily menu run.

- Downloads new menu PDFs from the site (or reuses the ones already stored)
- Dumps their raw text, cleans it, parses items and formats the blog text
- Writes dirty / clean / blog text files next to the PDFs
- Emails each formatted menu

Usage:
    python scripts/run_menus.py [--root ww] [--clear] [--no-download] [--no-email]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from menutext.config import Settings, configure_logging
from menutext.menu_pipeline import process_documents
from menutext.sources.menu_fetcher import FetchError, MenuFetcher
from menutext.sources.menu_store import MenuStore
from menutext.sources.notifier import NotifyError, send_menu_email
from menutext.sources.pdf_text import PdfTextError, extract_pdf_text

log = logging.getLogger("run_menus")


def download_new(fetcher: MenuFetcher, store: MenuStore) -> List[str]:
    """Download every linked menu not already in the store; return their names."""
    names = [n for n in fetcher.list_menu_names() if not store.has_pdf(n)]
    saved: List[str] = []
    for name in names:
        try:
            store.save_pdf(name, fetcher.download(name))
        except FetchError as e:
            log.error("%s: download failed: %s", name, e)
            continue
        saved.append(name)
    return saved


def run(settings: Settings, store: MenuStore,
        fetcher: Optional[MenuFetcher] = None,
        notify: Callable[[Settings, str, str], object] = send_menu_email) -> int:
    """Returns the number of menus that failed somewhere along the way."""
    failures = 0
    if settings.clear:
        store.clear()
    store.ensure_dirs()

    if settings.download:
        fetcher = fetcher or MenuFetcher(settings.site_url, timeout=settings.http_timeout)
        try:
            names = download_new(fetcher, store)
        except FetchError as e:
            log.error("could not list menus: %s", e)
            return 1
    else:
        names = store.pdf_names()

    raw_texts = {}
    for name in names:
        try:
            raw = extract_pdf_text(store.pdf_path(name), settings=settings)
        except PdfTextError as e:
            log.error("%s: %s", name, e)
            failures += 1
            continue
        store.write_text("dirty", name, raw)
        log.info("%s --> %s", store.pdf_path(name), store.text_path("dirty", name))
        raw_texts[name] = raw

    results = process_documents(
        raw_texts,
        track_breakfast=settings.track_breakfast,
        max_workers=settings.workers,
    )

    for name, result in results.items():
        store.write_text("clean", name, result.clean_text)
        store.write_text("blog", name, result.formatted)
        log.info("%s --> %s", store.text_path("clean", name), store.text_path("blog", name))

        if not settings.email:
            continue
        try:
            notify(settings, name, result.formatted)
        except NotifyError as e:
            log.error("%s: %s", name, e)
            failures += 1

    return failures


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Download, clean and republish daily menus.")
    ap.add_argument("--root", default=defaults.doc_dir, help="document directory")
    ap.add_argument("--clear", action="store_true", default=defaults.clear,
                    help="remove generated files first (archive is kept)")
    ap.add_argument("--no-download", dest="download", action="store_false",
                    default=defaults.download, help="use PDFs already on disk")
    ap.add_argument("--no-email", dest="email", action="store_false",
                    default=defaults.email, help="skip notification emails")
    ap.add_argument("--track-breakfast", action="store_true",
                    default=defaults.track_breakfast,
                    help="give breakfast specials their own section")
    ap.add_argument("--workers", type=int, default=defaults.workers)
    ap.add_argument("--log-level", default=defaults.log_level)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)
    settings.doc_dir = args.root
    settings.clear = args.clear
    settings.download = args.download
    settings.email = args.email
    settings.track_breakfast = args.track_breakfast
    settings.workers = max(1, args.workers)
    settings.log_level = args.log_level
    configure_logging(settings.log_level)

    failures = run(settings, MenuStore(settings.doc_dir))
    if failures:
        log.warning("%d menu(s) failed", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
