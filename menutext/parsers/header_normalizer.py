# menutext/parsers/header_normalizer.py
"""
Header Normalizer: canonicalizes meal-section header lines.

The PDF dump sometimes scatters header letters across lines or drops some,
so a line counts as a header when it is made *only* of characters from the
canonical title (plus the newline). Matching lines are rewritten to the
exact title followed by a blank line so the segmenter and parser can anchor
on them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from menutext.menu_types import Document
from menutext.parsers.text_lines import NEWLINE, is_blank

log = logging.getLogger(__name__)

LUNCH_HEADER = "Lunch Specials"
BREAKFAST_HEADER = "Breakfast Specials"
DINNER_HEADER = "Dinner Entrees"

# Match order matters: a line like "Specials" fits both lunch and breakfast.
SECTION_HEADERS = (LUNCH_HEADER, BREAKFAST_HEADER, DINNER_HEADER)


def just_contains(text: str, chars: str) -> bool:
    """True when every character of `text` occurs in `chars`."""
    return all(c in chars for c in text)


def normalize_header_line(line: str) -> str:
    if is_blank(line):
        return line
    for title in SECTION_HEADERS:
        if just_contains(line, title + NEWLINE):
            return title + NEWLINE + NEWLINE
    return line


def header_title(line: str) -> Optional[str]:
    """Canonical title this line names exactly, else None."""
    text = line.strip()
    return text if text in SECTION_HEADERS else None


def normalize_headers(doc: Iterable[str]) -> Document:
    out = tuple(normalize_header_line(ln) for ln in doc)
    log.debug("header normalizer: %d headers",
              sum(1 for ln in out if header_title(ln)))
    return out
