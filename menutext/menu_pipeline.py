# menutext/menu_pipeline.py
"""
Menu Pipeline: raw extracted text -> clean text -> items -> formatted text.

    raw text
      -> filter_lines        (artifacts, weekday header)
      -> normalize_headers   (canonical section titles)
      -> segment_items       (one blank-delimited block per item)
    = clean text
      -> parse_items         (MenuItem records + per-item defects)
      -> format_menu         (### Lunch / ### Dinner blog text)

Every stage is a pure function over an immutable Document, and documents
share no state, so a batch can be spread over threads (process_documents).
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Mapping

from menutext.menu_formatter import BREAKFAST_PERIODS, DEFAULT_PERIODS, format_menu
from menutext.menu_types import Document, MenuItem, MenuResult, ParseResult
from menutext.parsers.header_normalizer import normalize_headers
from menutext.parsers.item_parser import parse_items
from menutext.parsers.item_segmenter import segment_items
from menutext.parsers.line_filter import filter_lines
from menutext.parsers.text_lines import join_document, split_document

log = logging.getLogger(__name__)


def clean_document(doc: Iterable[str]) -> Document:
    return segment_items(normalize_headers(filter_lines(doc)))


def clean_text(raw: str) -> str:
    return join_document(clean_document(split_document(raw)))


def extract_items(clean: str, track_breakfast: bool = False) -> ParseResult:
    return parse_items(split_document(clean), track_breakfast=track_breakfast)


def render_menu(items: Iterable[MenuItem], track_breakfast: bool = False) -> str:
    periods = BREAKFAST_PERIODS if track_breakfast else DEFAULT_PERIODS
    return format_menu(items, periods)


def process_document(doc_id: str, raw_text: str,
                     track_breakfast: bool = False) -> MenuResult:
    cleaned = clean_text(raw_text)
    parsed = extract_items(cleaned, track_breakfast=track_breakfast)
    formatted = render_menu(parsed.items, track_breakfast=track_breakfast)
    if parsed.defects:
        log.warning("%s: %d malformed item(s) skipped", doc_id, len(parsed.defects))
    if not parsed.items:
        log.warning("%s: no menu items found", doc_id)
    log.info("%s: %d items", doc_id, len(parsed.items))
    return MenuResult(
        doc_id=doc_id,
        clean_text=cleaned,
        items=parsed.items,
        defects=parsed.defects,
        formatted=formatted,
    )


def process_documents(docs: Mapping[str, str], track_breakfast: bool = False,
                      max_workers: int = 1) -> Dict[str, MenuResult]:
    """Run every document independently; result keys follow input order."""
    ids = list(docs)
    if max_workers <= 1 or len(ids) <= 1:
        return {d: process_document(d, docs[d], track_breakfast) for d in ids}

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {
            d: pool.submit(process_document, d, docs[d], track_breakfast)
            for d in ids
        }
        return {d: futures[d].result() for d in ids}
