"""Extraction of ticket offers from JSON-LD script blocks.

The extractor is a pure function: it performs no I/O, holds no state and never
logs. Individual blocks that fail to parse are dropped silently; only the two
aggregate conditions (nothing parsed, no event with offers) are reported, as
:class:`~offer_core.models.NoStructuredDataFound` and
:class:`~offer_core.models.NoOffersFound`.
"""
from __future__ import annotations

import json
import math
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .models import MISSING, NoOffersFound, NoStructuredDataFound, OfferRecord

EVENT_TYPE = "Event"
DEFAULT_INVENTORY_LEVEL = "0"


def _reject_constant(value: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {value}")


def _is_falsy(value: Any) -> bool:
    """Mirror JavaScript truthiness for decoded JSON values.

    Empty lists and objects are truthy in JavaScript, unlike in Python.
    """

    if value is None or value is False:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value == ""
    return False


def parse_script_block(text: Any) -> Optional[Any]:
    """Parse one JSON-LD block, returning ``None`` when it is unusable."""

    if not isinstance(text, str):
        return None
    try:
        node = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if _is_falsy(node):
        return None
    return node


def parse_script_blocks(script_texts: Iterable[Any]) -> List[Optional[Any]]:
    """Parse every block; the result has one entry per input, ``None`` for failures."""

    return [parse_script_block(text) for text in script_texts]


def flatten_nodes(parsed: Iterable[Any]) -> List[Any]:
    """Flatten parsed blocks one level deep, keeping document order."""

    nodes: List[Any] = []
    for entry in parsed:
        if isinstance(entry, list):
            nodes.extend(entry)
        else:
            nodes.append(entry)
    return nodes


def _has_offers(value: Any) -> bool:
    if isinstance(value, (list, dict)):
        return len(value) > 0
    return not _is_falsy(value)


def is_event_with_offers(node: Any) -> bool:
    """Return ``True`` for an ``Event`` node carrying a non-empty ``offers`` field.

    ``@type`` is compared by exact equality, so ``["Event", "Thing"]`` does not match.
    """

    if not isinstance(node, Mapping):
        return False
    return node.get("@type") == EVENT_TYPE and _has_offers(node.get("offers"))


def find_event_node(nodes: Iterable[Any]) -> Optional[Mapping[str, Any]]:
    for node in nodes:
        if is_event_with_offers(node):
            return node
    return None


def offer_from_node(node: Any) -> OfferRecord:
    """Build an :class:`OfferRecord` from one entry of an event's ``offers``."""

    if not isinstance(node, Mapping):
        node = {}
    inventory_level = node.get("inventoryLevel")
    if _is_falsy(inventory_level):
        inventory_level = DEFAULT_INVENTORY_LEVEL
    return OfferRecord(
        name=node.get("name", MISSING),
        price=node.get("price", MISSING),
        price_currency=node.get("priceCurrency", MISSING),
        availability=node.get("availability", MISSING),
        inventory_level=inventory_level,
        valid_from=node.get("validFrom", MISSING),
    )


def _as_sequence(offers: Any) -> Sequence[Any]:
    if isinstance(offers, list):
        return offers
    return [offers]


def normalise_offers(event: Mapping[str, Any]) -> Tuple[OfferRecord, ...]:
    """Map every offer of ``event`` to a record, preserving order and length."""

    return tuple(offer_from_node(offer) for offer in _as_sequence(event.get("offers")))


def extract_offers(script_texts: Iterable[Any]) -> Tuple[OfferRecord, ...]:
    """Return the offers of the first JSON-LD ``Event`` found in ``script_texts``.

    Raises:
        NoStructuredDataFound: if no block could be parsed (including no blocks).
        NoOffersFound: if no parsed node is an ``Event`` with offers.
    """

    parsed = [node for node in parse_script_blocks(script_texts) if node is not None]
    if not parsed:
        raise NoStructuredDataFound()

    event = find_event_node(flatten_nodes(parsed))
    if event is None:
        raise NoOffersFound()
    return normalise_offers(event)

