"""High level orchestration for scraping the offers of a single page."""
from __future__ import annotations

import logging
from typing import Optional

from .config import ScraperConfig
from .extractor import extract_offers
from .models import ScrapeResult
from .renderer import Renderer, collect_ld_json_scripts

LOGGER = logging.getLogger(__name__)


def run_scrape(
    url: str, config: ScraperConfig, render: Optional[Renderer] = None
) -> ScrapeResult:
    """Render ``url`` and extract the offers of its first JSON-LD event.

    :class:`~offer_core.models.ExtractionError` and rendering errors propagate
    to the caller.
    """

    LOGGER.info("Scraping URL: %s", url)
    render_fn = render or collect_ld_json_scripts
    script_texts = render_fn(url, config)
    LOGGER.info("Found %d JSON-LD block(s) on %s", len(script_texts), url)

    offers = extract_offers(script_texts)
    LOGGER.info("Extracted %d offer(s) from %s", len(offers), url)
    return ScrapeResult(url=url, offers=offers)
