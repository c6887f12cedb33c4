"""
Builders for weekthemes.

- ThemeSetBuilder: Article lines -> canonical record set
- build_records: Deduplicate and sort dated candidates
"""

from .base import BaseBuilder, BuilderStats
from .record_builder import IngestStats, ThemeSetBuilder, build_records

__all__ = [
    "BaseBuilder",
    "BuilderStats",
    "IngestStats",
    "ThemeSetBuilder",
    "build_records",
]
