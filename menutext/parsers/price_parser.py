"""
Price Parser
Lenient reading of "$" price fields and the float round-trip check used by
the item-first-line heuristic.
"""

import math
import re
from decimal import Decimal

# Leading unsigned number; anything after it is ignored ("9.50\n" -> 9.50, "5.x" -> 5)
LEADING_NUMBER_RE = re.compile(r"\s*(\d+(?:\.\d+)?|\.\d+)")


def read_price(text):
    """Return the Decimal that leads `text`, or None when no number leads it."""
    if not text:
        return None
    m = LEADING_NUMBER_RE.match(text)
    if not m:
        return None
    return Decimal(m.group(1))


def price_after_dollar(line):
    """Price in the field after the first "$" of `line` (up to the next "$")."""
    if "$" not in line:
        return None
    field = line.split("$")[1]
    return read_price(field)


def is_float_round_trip(text):
    """
    True when `text` reads as a finite float that prints back as itself:
    "12.5" and "7.0" pass; "7", "22.00", "1e3", "nan" and "12.5 ea" do not.
    """
    if not text:
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value) and str(value) == text
