#!/usr/bin/env python3
"""
theme_record.py
-------------------

Defines the ThemeRecord dataclass: one weekly theme keyed by its date.

Records serialize to the JSON shape published in themes.json:

    {"date": "2025-09-01", "theme": "Cover art"}
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping

# ---- Local imports ----
from weekthemes.core.exceptions import ValidationError


@dataclass(frozen=True)
class ThemeRecord:
    """
    A single theme of the calendar.

    Attributes:
        date (date): Calendar date the theme belongs to (no time of day).
        theme (str): Human-readable theme text, trimmed.
    """

    date: date
    theme: str

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> Dict[str, str]:
        return {"date": self.iso_date, "theme": self.theme}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThemeRecord:
        """
        Build a record from a {"date", "theme"} mapping.

        Raises:
            ValidationError: If a field is missing or the date is not YYYY-MM-DD
        """
        for field_name in ("date", "theme"):
            if field_name not in data:
                raise ValidationError(f"Missing required field: '{field_name}'")

        raw_date = data["date"]
        if not isinstance(raw_date, str):
            raise ValidationError(f"Invalid date value: {raw_date!r}")
        try:
            parsed = date.fromisoformat(raw_date)
        except ValueError as e:
            raise ValidationError(
                f"Invalid date format: expected YYYY-MM-DD, got {raw_date!r}"
            ) from e

        return cls(date=parsed, theme=str(data["theme"]).strip())
