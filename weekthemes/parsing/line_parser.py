#!/usr/bin/env python3
"""
line_parser.py
-------------------

Turns the normalized lines of the theme list article into dated
candidates.

The article is a loose list grouped under month headers:

    September 2025
    1st: Cover art
    8th – Love
    15th June – Cover        (inline month, this line only)

Each line is classified in order:

    1. Month header   "September 2025"   -> updates ParseState
    2. Dated entry    "1st: Cover art"   -> Candidate or SkipReason
    3. Anything else                     -> SkipReason.UNRECOGNIZED

Nothing here raises on malformed content. Lines that cannot be resolved
to a full date are reported as Skipped with a reason so that trace mode
can show what was dropped and why.

Usage:
    from weekthemes.parsing.line_parser import parse_lines

    result = parse_lines(["September 2025", "1st: Cover art"])
    result.candidates  # [Candidate(date=date(2025, 9, 1), theme='Cover art')]
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Union

# ---- Local imports ----
from weekthemes.utils.text import month_to_num, normalize, strip_ordinal


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Patterns -----
MONTH_HEADER = re.compile(r"^([A-Za-z]+)\s+(\d{4})$", re.ASCII)

# Matches:
#   "13th – Love ..."
#   "1st January: Cover ..."
#   "5th June – Cover ..."
#   "20th: Something ..."   (month comes from header)
DATE_LINE = re.compile(
    r"^(\d{1,2}(?:st|nd|rd|th)?)\s*([A-Za-z]+)?\s*[:\u2013-]\s*(.+)$",
    re.ASCII | re.IGNORECASE,
)


# ----- Types -----
class SkipReason(str, Enum):
    """Why a line produced no candidate."""

    UNRECOGNIZED = "unrecognized"
    UNKNOWN_HEADER_MONTH = "unknown-header-month"
    MISSING_DAY = "missing-day"
    MISSING_MONTH = "missing-month"
    UNKNOWN_MONTH = "unknown-month"
    MISSING_YEAR = "missing-year"
    INVALID_DATE = "invalid-date"


class Candidate(NamedTuple):
    """A dated theme found in the source, before deduplication."""

    date: date
    theme: str


@dataclass(frozen=True)
class Skipped:
    """A dropped line with its reason and 1-based position."""

    line: str
    reason: SkipReason
    line_number: int = 0


@dataclass(frozen=True)
class MonthHeader:
    """A recognised month header."""

    month: int
    year: int


LineResult = Union[Candidate, MonthHeader, Skipped]


@dataclass
class ParseState:
    """
    Month context carried across one parse run.

    Only month headers change it. Inline months on dated lines are
    per-line overrides and leave it untouched.
    """

    current_month: Optional[int] = None
    current_year: Optional[int] = None

    def reset(self) -> None:
        self.current_month = None
        self.current_year = None

    def apply(self, header: MonthHeader) -> None:
        self.current_month = header.month
        self.current_year = header.year


@dataclass
class ParseResult:
    """Candidates in document order plus every dropped line."""

    candidates: List[Candidate] = field(default_factory=list)
    skipped: List[Skipped] = field(default_factory=list)
    headers: int = 0
    lines_seen: int = 0

    def skipped_for(self, reason: SkipReason) -> List[Skipped]:
        return [s for s in self.skipped if s.reason is reason]


# ----- Classification -----
def classify_line(line: str, state: ParseState) -> LineResult:
    """
    Classify one normalized line against the current state.

    Pure: the caller applies a returned MonthHeader to the state.
    """
    header = MONTH_HEADER.match(line)
    if header:
        month = month_to_num(header.group(1))
        if month is None:
            return Skipped(line, SkipReason.UNKNOWN_HEADER_MONTH)
        return MonthHeader(month=month, year=int(header.group(2)))

    entry = DATE_LINE.match(line)
    if not entry:
        return Skipped(line, SkipReason.UNRECOGNIZED)

    day = strip_ordinal(entry.group(1))
    inline_month = entry.group(2)
    theme = normalize(entry.group(3))

    if inline_month:
        month = month_to_num(inline_month)
        if month is None:
            return Skipped(line, SkipReason.UNKNOWN_MONTH)
    else:
        month = state.current_month

    if not day:
        return Skipped(line, SkipReason.MISSING_DAY)
    if month is None:
        return Skipped(line, SkipReason.MISSING_MONTH)
    if state.current_year is None:
        return Skipped(line, SkipReason.MISSING_YEAR)

    try:
        entry_date = date(state.current_year, month, day)
    except ValueError:
        return Skipped(line, SkipReason.INVALID_DATE)

    return Candidate(entry_date, theme)


def parse_lines(
    lines: Iterable[str],
    state: Optional[ParseState] = None,
    verbose: bool = False,
) -> ParseResult:
    """
    Fold normalized lines into candidates, carrying month context.

    Args:
        lines: Lines in document order; each is normalized again and
            empty ones are ignored
        state: Starting context (a fresh ParseState if None)
        verbose: Log every dropped line at DEBUG

    Returns:
        ParseResult with candidates and skipped lines
    """
    state = state if state is not None else ParseState()
    result = ParseResult()

    for number, raw in enumerate(lines, start=1):
        line = normalize(raw)
        if not line:
            continue
        result.lines_seen += 1

        outcome = classify_line(line, state)
        if isinstance(outcome, MonthHeader):
            state.apply(outcome)
            result.headers += 1
        elif isinstance(outcome, Candidate):
            result.candidates.append(outcome)
        else:
            skipped = Skipped(outcome.line, outcome.reason, number)
            result.skipped.append(skipped)
            if verbose:
                logger.debug(
                    f"Skip ({skipped.reason.value}) line {number}: {line!r} "
                    f"[month={state.current_month}, year={state.current_year}]"
                )

    return result
