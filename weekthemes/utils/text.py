"""
text.py
-------------------
Text utilities for cleaning lines scraped from the theme list page.

The page is hand-edited in WordPress, so the same line can arrive with
non-breaking spaces, typographic dashes or doubled whitespace. Every line
goes through normalize() before classification.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import List, Optional

# ----- Constants -----
CANONICAL_DASH = "\u2013"
"""En dash; en and em dashes are both folded into it."""

MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

_FANCY_DASHES = re.compile("[\u2013\u2014]")
_WHITESPACE = re.compile(r"\s+")
_ORDINAL_SUFFIX = re.compile(r"(st|nd|rd|th)$", re.IGNORECASE)


# ----- Line normalizer -----
def normalize(raw: str) -> str:
    """
    Canonicalize one raw line.

    - NBSP becomes a plain space
    - en/em dashes become CANONICAL_DASH
    - whitespace runs collapse to one space
    - surrounding whitespace is trimmed

    Examples:
        >>> normalize("13th\\u00a0\\u2014  Love ")
        '13th – Love'
        >>> normalize("   ")
        ''
    """
    text = raw.replace("\u00a0", " ")
    text = _FANCY_DASHES.sub(CANONICAL_DASH, text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def split_lines(block: str) -> List[str]:
    """
    Split a text block on newlines, normalize each line and drop empty ones.

    The block itself is not collapsed first; that would merge its lines.
    """
    lines = (normalize(line) for line in block.splitlines())
    return [line for line in lines if line]


# ----- Dates in prose -----
def month_to_num(name: Optional[str]) -> Optional[int]:
    """
    Full English month name to its number, case-insensitive.

    Examples:
        >>> month_to_num("September")
        9
        >>> month_to_num("Sept") is None
        True
    """
    if not name:
        return None
    try:
        return MONTHS.index(name.lower()) + 1
    except ValueError:
        return None


def strip_ordinal(token: str) -> Optional[int]:
    """
    Day token with an optional ordinal suffix to an int.

    Examples:
        >>> strip_ordinal("21st")
        21
        >>> strip_ordinal("x") is None
        True
    """
    digits = _ORDINAL_SUFFIX.sub("", token.strip())
    if not digits.isascii() or not digits.isdigit():
        return None
    return int(digits)


# ----- Display -----
def format_long_date(value) -> str:
    """Render a date as e.g. 'Monday, September 1, 2025'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"
