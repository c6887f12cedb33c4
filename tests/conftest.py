"""
conftest.py
-----------
Shared pytest fixtures for weekthemes tests.

Provides fixtures for:
- Temporary directories
- Sample article lines and HTML
- Sample record sets on disk
"""
import json
import pytest
from pathlib import Path
from datetime import date
from tempfile import TemporaryDirectory

from weekthemes.dataclasses.theme_record import ThemeRecord


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Article Content -----

@pytest.fixture
def article_lines():
    """Normalized lines as they come out of the theme list article."""
    return [
        "Themes for the coming months are below.",
        "September 2025",
        "1st: Cover art",
        "8th – Love",
        "15th June – Cover",
        "22nd: Poison",
        "October 2025",
        "6th – Trains",
        "13th: Islands",
        "Smarch 2025",
        "20th: Still October",
    ]


@pytest.fixture
def article_html():
    """WordPress page wrapping the article lines."""
    return """<!doctype html>
<html><body>
<nav><p>1st: Not a theme</p></nav>
<article>
  <h1 class="entry-title">#MurderEveryMonday Theme List</h1>
  <div class="entry-content">
    <p>Themes for the coming months are below.</p>
    <p><strong>September&nbsp;2025</strong></p>
    <p>1st: Cover art<br>8th &mdash; Love</p>
    <ul><li>ignored list</li></ul>
    <li>15th June &ndash; Cover</li>
    <div>22nd:   Poison</div>
    <h2>Ignored heading</h2>
    <p>October 2025</p>
    <p>6th - Trains</p>
  </div>
</article>
</body></html>
"""


# ----- Sample Records -----

def create_sample_records():
    """Factory for a small sorted record set."""
    return (
        ThemeRecord(date(2025, 9, 1), "Cover art"),
        ThemeRecord(date(2025, 9, 8), "Love"),
        ThemeRecord(date(2025, 9, 15), "Poison"),
    )


@pytest.fixture
def sample_records():
    return create_sample_records()


@pytest.fixture
def themes_file(tmp_dir, sample_records):
    """themes.json holding the sample records."""
    path = tmp_dir / "themes.json"
    path.write_text(
        json.dumps([r.to_dict() for r in sample_records], indent=2),
        encoding="utf-8",
    )
    return path
