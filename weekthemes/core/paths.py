#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the weekthemes project.

All project paths are defined here as Path objects, relative to the
project root directory.

The project structure:
    ROOT/
    ├── weekthemes/     # Package source
    ├── public/         # Published record set (themes.json)
    └── logs/           # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/weekthemes/core/paths.py.

    Returns:
        Path object for project root
    """
    current_file = Path(__file__).resolve()

    # Navigate up: paths.py -> core/ -> weekthemes/ -> ROOT/
    return current_file.parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "weekthemes"

# ---- Published data ----
PUBLIC_DIR = ROOT / "public"
THEMES_JSON = PUBLIC_DIR / "themes.json"

# ---- Configuration ----
CONFIG_PATH = ROOT / "weekthemes.yaml"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
