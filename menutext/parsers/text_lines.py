# menutext/parsers/text_lines.py
"""
Line helpers shared by every cleaning pass.

Raw text becomes a Document exactly once, here: terminators are normalized
to "\\n" and every line (including a final unterminated one) ends with one.
"""

from __future__ import annotations

from typing import Iterable

from menutext.menu_types import Document

NEWLINE = "\n"


def split_document(text: str) -> Document:
    if not text:
        return ()
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return tuple(ln if ln.endswith(NEWLINE) else ln + NEWLINE
                 for ln in normalized.splitlines(keepends=True))


def join_document(lines: Iterable[str]) -> str:
    return "".join(lines)


def is_blank(line: str) -> bool:
    return not line.strip()


def content_of(line: str) -> str:
    """Line text without its terminator."""
    return line.rstrip("\r\n")
