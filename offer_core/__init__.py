"""Offer core package exposing the JSON-LD offer scraping pipeline."""
from .config import ScraperConfig, create_config, create_config_from_env, create_config_from_mapping
from .extractor import extract_offers
from .models import (
    ExtractionError,
    ExtractionErrorKind,
    MISSING,
    NoOffersFound,
    NoStructuredDataFound,
    OfferRecord,
    ScrapeResult,
)
from .workflow import run_scrape

__all__ = [
    "ExtractionError",
    "ExtractionErrorKind",
    "MISSING",
    "NoOffersFound",
    "NoStructuredDataFound",
    "OfferRecord",
    "ScrapeResult",
    "ScraperConfig",
    "create_config",
    "create_config_from_env",
    "create_config_from_mapping",
    "extract_offers",
    "run_scrape",
]
