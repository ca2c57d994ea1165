"""PNG export for Claude Code Wrapped.

Renders the generated HTML report in headless Chromium and saves a
screenshot of the dashboard. Playwright is an optional dependency
(``pip install claude-code-wrapped[png]`` then ``playwright install chromium``)
and is only imported when an export is requested.
"""

import time
from pathlib import Path
from typing import Optional

from .constants import (
    EXPORT_CONTENT_SELECTOR,
    EXPORT_FONT_WAIT_MS,
    EXPORT_SCALE_FACTOR,
    EXPORT_VIEWPORT_HEIGHT,
    EXPORT_VIEWPORT_WIDTH,
    HTML_FILE_PREFIX,
)
from .exceptions import ExportError
from .logger import log

CHROMIUM_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

# Injected before the screenshot: freeze animations, hide interactive chrome.
SCREENSHOT_CSS = """
*, *::before, *::after {
    animation: none !important;
    transition: none !important;
}
.export-btn, .bg-animation {
    display: none !important;
}
"""


def check_browser_available() -> bool:
    """Check whether a headless Chromium can be launched.

    Returns False when Playwright is not installed or its browser binary
    is missing.
    """
    try:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright
    except ImportError:
        log.debug("Playwright is not installed")
        return False

    try:
        with sync_playwright() as pw:
            browser = pw.chromium.launch(headless=True, args=CHROMIUM_ARGS)
            browser.close()
        return True
    except PlaywrightError as e:
        log.debug("Headless Chromium unavailable: {}", e)
        return False


def export_to_png(
    html_path: Path, year: int, output_dir: Optional[Path] = None
) -> Path:
    """Screenshot the report's dashboard to a PNG file.

    Args:
        html_path: Path of the HTML report to render
        year: Reporting year, used in the output file name
        output_dir: Directory to save into (default: the home directory)

    Returns:
        Path of the written ``claude-code-wrapped-<year>-<ms>.png``

    Raises:
        ExportError: If Playwright is missing, the browser fails, or the
            page has no dashboard element
    """
    try:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright
    except ImportError as e:
        raise ExportError("PNG export requires Playwright: pip install playwright") from e

    output_dir = Path(output_dir) if output_dir else Path.home()
    output_path = output_dir / f"{HTML_FILE_PREFIX}-{year}-{int(time.time() * 1000)}.png"

    try:
        with sync_playwright() as pw:
            browser = pw.chromium.launch(headless=True, args=CHROMIUM_ARGS)
            try:
                page = browser.new_page(
                    viewport={"width": EXPORT_VIEWPORT_WIDTH, "height": EXPORT_VIEWPORT_HEIGHT},
                    device_scale_factor=EXPORT_SCALE_FACTOR,
                )
                page.goto(Path(html_path).resolve().as_uri(), wait_until="networkidle")
                page.add_style_tag(content=SCREENSHOT_CSS)

                # Let web fonts settle
                page.wait_for_timeout(EXPORT_FONT_WAIT_MS)

                content = page.query_selector(EXPORT_CONTENT_SELECTOR)
                if content is None:
                    raise ExportError(
                        f"Could not find {EXPORT_CONTENT_SELECTOR} in {html_path}"
                    )
                content.screenshot(path=str(output_path), type="png")
            finally:
                browser.close()
    except PlaywrightError as e:
        raise ExportError(f"PNG export failed: {e}") from e

    log.debug("Wrote PNG export to {}", output_path)
    return output_path
