# menutext/parsers/item_parser.py
"""
Item Parser: segmented text -> structured MenuItem records.

Input is the segmenter's output: one blank-line-delimited block per item,
with the canonical section headers on their own lines. The parser is a
small explicit state machine:

  state     COLLECTING_LUNCH | COLLECTING_DINNER | COLLECTING_BREAKFAST
  buffer    lines of the item being accumulated

  "Dinner Entrees" header   -> COLLECTING_DINNER (buffer kept)
  blank line                flush buffer (finalize item)
  other non-header line     append to buffer
  anything else             ignored

"Breakfast Specials" is recognized as a header but, by default, does not
change the meal period: breakfast items are reported as lunch. Passing
track_breakfast=True gives breakfast its own period and lets "Lunch
Specials" switch back to lunch; those two switches flush the buffer first.

A block whose first line has no "$" price cannot be finalized; it is
reported as a MalformedItemError in ParseResult.defects and parsing
continues with the next block.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable, List

from menutext.menu_types import MalformedItemError, MealPeriod, MenuItem, ParseResult
from menutext.parsers.header_normalizer import (
    BREAKFAST_HEADER,
    DINNER_HEADER,
    LUNCH_HEADER,
    header_title,
)
from menutext.parsers.item_segmenter import NAME_DESC_SEP
from menutext.parsers.price_parser import price_after_dollar
from menutext.parsers.text_lines import is_blank, join_document, split_document

log = logging.getLogger(__name__)

_DOT_RUN_RX = re.compile(r"\.+")
_WS_RUN_RX = re.compile(r" +")
LEADER_SEP = " . "


class ParserState(Enum):
    COLLECTING_LUNCH = MealPeriod.LUNCH
    COLLECTING_DINNER = MealPeriod.DINNER
    COLLECTING_BREAKFAST = MealPeriod.BREAKFAST

    @property
    def meal(self) -> MealPeriod:
        return self.value


# ── Field extraction ─────────────────────────────────

def _description_seed(first: str) -> str:
    """
    Description text carried on the first line: after the last " - " and
    before the leader dots. Lines without " - " carry none.
    """
    squeezed = _DOT_RUN_RX.sub(".", first)
    if NAME_DESC_SEP not in squeezed:
        return ""
    tail = squeezed.split(NAME_DESC_SEP)[-1]
    # leading space so a tail that opens on the leader (". $9.50") yields ""
    return (" " + tail).split(LEADER_SEP)[0]


def _item_name(first: str) -> str:
    return first.split(".")[0].split(NAME_DESC_SEP)[0].strip()


def _item_description(lines: List[str]) -> str:
    parts = [_description_seed(lines[0])] + list(lines[1:])
    text = " ".join(parts).replace("\n", " ")
    return _WS_RUN_RX.sub(" ", text).strip()


def build_item(lines: List[str], meal: MealPeriod) -> MenuItem:
    """Finalize one buffered block. Raises MalformedItemError when unpriced."""
    if not lines:
        raise MalformedItemError("empty item block")
    first = lines[0]
    if "$" not in first:
        raise MalformedItemError("no '$' price marker", lines)
    price = price_after_dollar(first)
    if price is None:
        raise MalformedItemError("no number after '$'", lines)
    return MenuItem(
        name=_item_name(first),
        description=_item_description(lines),
        price=price,
        meal=meal,
    )


# ── State machine ────────────────────────────────────

class ItemParser:
    def __init__(self, track_breakfast: bool = False):
        self.track_breakfast = track_breakfast
        self.state = ParserState.COLLECTING_LUNCH
        self.buffer: List[str] = []
        self.result = ParseResult()

    def _transition(self, title: str) -> None:
        if title == DINNER_HEADER:
            # no flush: a block still open here is finalized as dinner
            self.state = ParserState.COLLECTING_DINNER
            return
        if not self.track_breakfast:
            return
        if title == BREAKFAST_HEADER:
            target = ParserState.COLLECTING_BREAKFAST
        elif title == LUNCH_HEADER:
            target = ParserState.COLLECTING_LUNCH
        else:
            return
        self.flush()
        self.state = target

    def flush(self) -> None:
        if not self.buffer:
            return
        block, self.buffer = self.buffer, []
        try:
            item = build_item(block, self.state.meal)
        except MalformedItemError as e:
            log.warning("skipping malformed menu item: %s", e)
            self.result.defects.append(e)
            return
        self.result.items.append(item)

    def feed(self, line: str) -> None:
        title = header_title(line)
        if title:
            self._transition(title)
        elif is_blank(line):
            self.flush()
        else:
            self.buffer.append(line)

    def finish(self) -> ParseResult:
        self.flush()
        return self.result


def parse_items(doc: Iterable[str], track_breakfast: bool = False) -> ParseResult:
    """Parse a segmented Document (or its lines) into MenuItems."""
    # re-split so "Dinner Entrees\n\n" reads as header + blank line
    lines = split_document(join_document(doc))
    parser = ItemParser(track_breakfast=track_breakfast)
    for line in lines:
        parser.feed(line)
    result = parser.finish()
    log.debug("item parser: %d items, %d defects",
              len(result.items), len(result.defects))
    return result
