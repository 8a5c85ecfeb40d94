# menutext/parsers/item_segmenter.py
"""
Item Segmenter: one blank-line-delimited paragraph per menu item.

Boundaries in the raw dump are unreliable: a blank line may or may not sit
where an item starts, and consecutive items are often glued together. The
segmenter therefore works in two passes:

  Step A  insert_boundaries    force a blank line before every detected item
                               start (and before any "Dinner" line)
  Step B  collapse_boundaries  drop every blank line that is not directly in
                               front of an item start / "Dinner" line
  Step C  terminate            make sure the last item is closed by a blank

Item starts are found with a heuristic (is_item_first_line). It misfires on
dollar amounts inside descriptions ("choice of two $1 sides - ... $3");
such blocks come out mis-segmented rather than raising.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from menutext.menu_types import Document
from menutext.parsers.price_parser import is_float_round_trip
from menutext.parsers.text_lines import NEWLINE, is_blank

log = logging.getLogger(__name__)

LEADER_PRICE_MARK = ".. $"
NAME_DESC_SEP = " - "
DINNER_MARK = "Dinner"


def is_item_first_line(line: str) -> bool:
    """
    Heuristic: does `line` open a new menu item?

    Common form:      Name Name - ............. $XX.xx
    Occasional form:  Name Name - description description $XX.xx
    """
    if LEADER_PRICE_MARK in line:
        return True
    if NAME_DESC_SEP in line and "$" in line:
        # guard against "$" inside descriptive text
        return is_float_round_trip(line.split("$")[-1].strip())
    return False


def starts_new_block(line: str) -> bool:
    return is_item_first_line(line) or DINNER_MARK in line


def _preceded_by_blank(lines: Document, i: int) -> bool:
    if i == 0:
        return True
    prev = lines[i - 1]
    return is_blank(prev) or (NEWLINE + NEWLINE) in prev


def insert_boundaries(doc: Iterable[str]) -> Document:
    lines = tuple(doc)
    out: List[str] = []
    for i, line in enumerate(lines):
        if not _preceded_by_blank(lines, i) and starts_new_block(line):
            out.append(NEWLINE)
        out.append(line)
    return tuple(out)


def collapse_boundaries(doc: Iterable[str]) -> Document:
    lines = tuple(doc)
    last = len(lines) - 1
    out: List[str] = []
    for i, line in enumerate(lines):
        if not is_blank(line) or i == last or starts_new_block(lines[i + 1]):
            out.append(line)
    return tuple(out)


def terminate(doc: Iterable[str]) -> Document:
    lines = tuple(doc)
    if not lines or is_blank(lines[-1]):
        return lines
    return lines + (NEWLINE,)


def segment_items(doc: Iterable[str]) -> Document:
    lines = tuple(doc)
    out = terminate(collapse_boundaries(insert_boundaries(lines)))
    log.debug("item segmenter: %d -> %d lines (%d blocks)",
              len(lines), len(out), sum(1 for ln in out if is_blank(ln)))
    return out
