"""Shared data structures used across rendering and extraction."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class _Missing:
    """Marker for a field the source node did not define."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class OfferRecord:
    """A single ticket offer normalised from a JSON-LD ``Offer`` node.

    :data:`MISSING` marks a field that was absent from the source node;
    ``None`` is a JSON ``null`` and is kept.
    """

    name: Any = MISSING
    price: Any = MISSING
    price_currency: Any = MISSING
    availability: Any = MISSING
    inventory_level: Any = "0"
    valid_from: Any = MISSING

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON payload of the offer, omitting absent fields."""

        payload = {
            "name": self.name,
            "price": self.price,
            "priceCurrency": self.price_currency,
            "availability": self.availability,
            "inventoryLevel": self.inventory_level,
            "validFrom": self.valid_from,
        }
        return {key: value for key, value in payload.items() if value is not MISSING}


@dataclass(frozen=True)
class ScrapeResult:
    """Result returned by :func:`offer_core.workflow.run_scrape`."""

    url: str
    offers: Tuple[OfferRecord, ...]

    def to_dict(self) -> Dict[str, object]:
        return {"offers": [offer.to_dict() for offer in self.offers]}


class ExtractionErrorKind(Enum):
    MALFORMED_SCRIPT = "MalformedScript"
    NO_STRUCTURED_DATA_FOUND = "NoStructuredDataFound"
    NO_OFFERS_FOUND = "NoOffersFound"


class ExtractionError(Exception):
    """Base class for extraction failures surfaced to the caller."""

    kind: ExtractionErrorKind
    default_message = "Offer extraction failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NoStructuredDataFound(ExtractionError):
    """Raised when none of the JSON-LD blocks could be parsed."""

    kind = ExtractionErrorKind.NO_STRUCTURED_DATA_FOUND
    default_message = "No JSON-LD data found"


class NoOffersFound(ExtractionError):
    """Raised when no ``Event`` node with offers exists in the parsed data."""

    kind = ExtractionErrorKind.NO_OFFERS_FOUND
    default_message = "No offers found in JSON-LD data"
