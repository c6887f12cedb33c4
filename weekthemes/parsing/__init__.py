"""
Parsing of the theme list article text.
"""

from .line_parser import (
    Candidate,
    MonthHeader,
    ParseResult,
    ParseState,
    Skipped,
    SkipReason,
    classify_line,
    parse_lines,
)

__all__ = [
    "Candidate",
    "MonthHeader",
    "ParseResult",
    "ParseState",
    "Skipped",
    "SkipReason",
    "classify_line",
    "parse_lines",
]
