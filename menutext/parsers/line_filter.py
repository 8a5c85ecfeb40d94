# menutext/parsers/line_filter.py
"""
Line Filter: first cleaning pass.

Drops lines that carry no menu content:
  - artifact fragments of at most two characters ("a", "12") that the
    PDF text dump scatters around the page, except deliberate "\\n" blanks
  - the day-of-week header ("Monday Lunch Menu ...") of the daily page
"""

from __future__ import annotations

import logging
from typing import Iterable

from menutext.menu_types import Document
from menutext.parsers.text_lines import NEWLINE, content_of

log = logging.getLogger(__name__)

WEEKDAYS = (
    "monday", "tuesday", "wednesday", "thursday",
    "friday", "saturday", "sunday",
)

MAX_ARTIFACT_LEN = 2


def is_artifact_line(line: str) -> bool:
    return line != NEWLINE and len(content_of(line)) <= MAX_ARTIFACT_LEN


def is_weekday_header(line: str) -> bool:
    low = line.lower()
    return any(low.startswith(day) for day in WEEKDAYS)


def filter_lines(doc: Iterable[str]) -> Document:
    lines = tuple(doc)
    kept = tuple(
        ln for ln in lines
        if not is_artifact_line(ln) and not is_weekday_header(ln)
    )
    log.debug("line filter: %d -> %d lines", len(lines), len(kept))
    return kept
