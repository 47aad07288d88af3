"""Tests for the render-then-extract workflow."""
from __future__ import annotations

import logging
from typing import List

import pytest

from offer_core import NoOffersFound, NoStructuredDataFound, ScrapeResult, ScraperConfig, run_scrape


def _renderer(texts: List[str]):
    calls: List[str] = []

    def render(url: str, config: ScraperConfig) -> List[str]:
        calls.append(url)
        return texts

    return render, calls


def test_run_scrape_returns_offers_payload(caplog: pytest.LogCaptureFixture) -> None:
    render, calls = _renderer(
        [
            '{"@type": "WebSite"}',
            '{"@type": "Event", "offers": [{"name": "GA", "price": "45.00", '
            '"priceCurrency": "USD", "inventoryLevel": "12"}]}',
        ]
    )

    with caplog.at_level(logging.INFO, logger="offer_core.workflow"):
        result = run_scrape("https://tickets.example.com/e/1", ScraperConfig(), render=render)

    assert calls == ["https://tickets.example.com/e/1"]
    assert isinstance(result, ScrapeResult)
    assert result.to_dict() == {
        "offers": [
            {"name": "GA", "price": "45.00", "priceCurrency": "USD", "inventoryLevel": "12"}
        ]
    }
    assert any("Scraping URL: https://tickets.example.com/e/1" in r.message for r in caplog.records)


def test_run_scrape_propagates_extraction_errors() -> None:
    render, _ = _renderer([])
    with pytest.raises(NoStructuredDataFound):
        run_scrape("https://example.com", ScraperConfig(), render=render)

    render, _ = _renderer(['{"@type": "Product", "offers": [{"price": 1}]}'])
    with pytest.raises(NoOffersFound):
        run_scrape("https://example.com", ScraperConfig(), render=render)


def test_run_scrape_propagates_render_errors() -> None:
    def render(url: str, config: ScraperConfig) -> List[str]:
        raise RuntimeError("browser crashed")

    with pytest.raises(RuntimeError, match="browser crashed"):
        run_scrape("https://example.com", ScraperConfig(), render=render)
