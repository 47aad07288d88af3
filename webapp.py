"""Flask based backend exposing the JSON-LD offer scraper."""
from __future__ import annotations

import logging
from threading import BoundedSemaphore

from flask import Flask, jsonify, request
from flask_cors import CORS

from offer_core import NoOffersFound, NoStructuredDataFound, ScrapeResult, ScraperConfig, create_config, run_scrape

CONFIG: ScraperConfig = create_config()

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=getattr(logging, CONFIG.log_level, logging.INFO))

app = Flask(__name__)
app.json.sort_keys = False
CORS(app, send_wildcard=True)


class RenderGate:
    """Bounds the number of browser sessions rendering pages at the same time."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self._slots = BoundedSemaphore(limit)

    def scrape(self, url: str, config: ScraperConfig) -> ScrapeResult:
        with self._slots:
            return run_scrape(url, config)


render_gate = RenderGate(CONFIG.max_concurrent_renders)


@app.route("/api/scrape")
def scrape():
    url = (request.args.get("url") or "").strip()
    if not url:
        return jsonify({"error": "URL is required"}), 400

    try:
        result = render_gate.scrape(url, CONFIG)
    except NoStructuredDataFound as exc:
        LOGGER.info("No JSON-LD data on %s", url)
        return jsonify({"error": exc.message}), 404
    except NoOffersFound as exc:
        LOGGER.info("No event offers on %s", url)
        return jsonify({"error": exc.message}), 404
    except Exception as exc:
        LOGGER.exception("Scraping error: %s", exc)
        return jsonify({"error": "Failed to scrape the website", "details": str(exc)}), 500

    return jsonify(result.to_dict())


if __name__ == "__main__":
    LOGGER.info("Server running on port %s", CONFIG.port)
    app.run(host=CONFIG.host, port=CONFIG.port)
