"""Page renderers returning the JSON-LD script texts of a web page."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional

import requests
from bs4 import BeautifulSoup
from playwright.async_api import Browser, async_playwright

from .config import ScraperConfig

LOGGER = logging.getLogger(__name__)

LD_JSON_SELECTOR = 'script[type="application/ld+json"]'
_COLLECT_TEXT_SCRIPT = "elements => elements.map(element => element.textContent)"

Renderer = Callable[[str, ScraperConfig], List[str]]


async def collect_ld_json_with_playwright(url: str, config: ScraperConfig) -> List[str]:
    """Render ``url`` in headless Chromium and return its JSON-LD script texts.

    The browser is closed exactly once, whether navigation succeeds or not.
    """

    async with async_playwright() as p:
        browser: Browser = await p.chromium.launch(
            headless=config.headless, args=list(config.browser_args)
        )
        try:
            context = await browser.new_context(user_agent=config.user_agent)
            page = await context.new_page()

            LOGGER.info("Navigating to page...")
            await page.goto(
                url, wait_until=config.wait_until, timeout=config.navigation_timeout_ms
            )

            LOGGER.info("Extracting JSON-LD data...")
            texts = await page.eval_on_selector_all(LD_JSON_SELECTOR, _COLLECT_TEXT_SCRIPT)
        finally:
            await browser.close()

    return [text if text is not None else "" for text in texts]


def ld_json_texts_from_html(html: str) -> List[str]:
    """Return the text of every JSON-LD script in ``html``, in document order."""

    soup = BeautifulSoup(html, "html.parser")
    return [tag.get_text() for tag in soup.select(LD_JSON_SELECTOR)]


def collect_ld_json_static(
    url: str, config: ScraperConfig, session: Optional[Any] = None
) -> List[str]:
    """Fetch ``url`` without a browser and return its JSON-LD script texts.

    Scripts injected by client-side JavaScript are not seen by this renderer.
    """

    http = session or requests
    LOGGER.info("Fetching page without browser...")
    response = http.get(
        url,
        headers={"User-Agent": config.user_agent},
        timeout=config.navigation_timeout_seconds,
    )
    response.raise_for_status()

    LOGGER.info("Extracting JSON-LD data...")
    return ld_json_texts_from_html(response.text)


def _run_playwright_renderer(url: str, config: ScraperConfig) -> List[str]:
    """Run the async Playwright renderer from synchronous code."""

    return asyncio.run(collect_ld_json_with_playwright(url, config))


def collect_ld_json_scripts(url: str, config: ScraperConfig) -> List[str]:
    """Collect JSON-LD script texts from ``url`` with the configured renderer."""

    if config.renderer == "static":
        return collect_ld_json_static(url, config)
    return _run_playwright_renderer(url, config)
