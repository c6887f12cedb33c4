"""
Dataclasses for weekthemes records.

- ThemeRecord: One theme keyed by its calendar date
"""

from .theme_record import ThemeRecord

__all__ = ["ThemeRecord"]
