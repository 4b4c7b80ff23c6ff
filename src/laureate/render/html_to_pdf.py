#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import atexit
import logging
from pathlib import Path

from playwright.sync_api import Browser, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

logger = logging.getLogger(__name__)

_PLAYWRIGHT: Playwright | None = None
_BROWSER: Browser | None = None


def close_browser() -> None:
    global _BROWSER, _PLAYWRIGHT
    browser = _BROWSER
    playwright = _PLAYWRIGHT
    _BROWSER = None
    _PLAYWRIGHT = None
    if browser is not None:
        browser.close()
    if playwright is not None:
        playwright.stop()


def _get_browser() -> Browser:
    global _BROWSER, _PLAYWRIGHT
    if _BROWSER is not None:
        return _BROWSER
    logger.debug("launching headless chromium")
    _PLAYWRIGHT = sync_playwright().start()
    try:
        _BROWSER = _PLAYWRIGHT.chromium.launch()
    except PlaywrightError as exc:
        _PLAYWRIGHT.stop()
        _PLAYWRIGHT = None
        raise RuntimeError(
            "PDF output needs Playwright's chromium; run `playwright install chromium`"
        ) from exc
    atexit.register(close_browser)
    return _BROWSER


def render_html_to_pdf(html: str, output_path: str | Path) -> Path:
    """Print ``html`` to a PDF; page size comes from the document's ``@page`` rule."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    browser = _get_browser()
    page = browser.new_page()
    try:
        page.set_content(html, wait_until="networkidle")
        page.emulate_media(media="print")
        page.pdf(
            path=str(output_path),
            print_background=True,
            prefer_css_page_size=True,
            margin={"top": "0mm", "right": "0mm", "bottom": "0mm", "left": "0mm"},
        )
    finally:
        page.close()
    return output_path


__all__ = ["close_browser", "render_html_to_pdf"]
