"""
Utilities package for weekthemes.

- text: Line normalization, month names, ordinals
- weeks: Week alignment and "today" reducers

Import commonly-used utilities directly from this package:
    from weekthemes.utils import normalize, monday_of
"""

# Text utilities
from .text import (
    CANONICAL_DASH,
    MONTHS,
    normalize,
    split_lines,
    month_to_num,
    strip_ordinal,
    format_long_date,
)

# Week alignment
from .weeks import (
    monday_of,
    next_monday_from,
    week_key,
    local_today,
    utc_today,
)

__all__ = [
    # Text
    "CANONICAL_DASH",
    "MONTHS",
    "normalize",
    "split_lines",
    "month_to_num",
    "strip_ordinal",
    "format_long_date",
    # Weeks
    "monday_of",
    "next_monday_from",
    "week_key",
    "local_today",
    "utc_today",
]
