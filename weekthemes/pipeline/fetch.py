#!/usr/bin/env python3
"""
fetch.py
--------
Fetch the theme list page and isolate its article text.

WordPress puts the post body in `.entry-content`, usually inside an
<article>. Only the direct paragraph-like children of that block are
read; navigation, sidebars and comments never reach the parser.

Programmatic API:
    from weekthemes.pipeline.fetch import fetch_html, extract_lines
    lines = extract_lines(fetch_html(url))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List

# --- Third party imports ---
import requests
from bs4 import BeautifulSoup
from ftfy import fix_text  # type: ignore

# --- Local imports ---
from weekthemes.core.exceptions import FetchError
from weekthemes.utils.text import split_lines


BLOCK_TAGS = {"p", "div", "li"}


def fetch_html(url: str, user_agent: str = "weekthemes-bot", timeout: float = 30.0) -> str:
    """
    GET the source page.

    Raises:
        FetchError: On transport errors or a non-2xx status
    """
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Fetch failed for {url}: {e}") from e

    if not response.ok:
        raise FetchError(f"Fetch failed {response.status_code} for {url}")
    return response.text


def extract_lines(html: str) -> List[str]:
    """
    Pull normalized text lines out of the article body, in document order.

    Raises:
        FetchError: If the page has no `.entry-content` block
    """
    soup = BeautifulSoup(html, "html.parser")
    content = soup.select_one("article .entry-content") or soup.select_one(
        ".entry-content"
    )
    if content is None:
        raise FetchError("No .entry-content block found in page")

    lines: List[str] = []
    for element in content.find_all(True, recursive=False):
        if element.name.lower() not in BLOCK_TAGS:
            continue
        # <br> inside a paragraph separates entries
        for br in element.find_all("br"):
            br.replace_with("\n")
        # Repair mojibake but keep the source punctuation verbatim
        lines.extend(split_lines(fix_text(element.get_text(), uncurl_quotes=False)))
    return lines
