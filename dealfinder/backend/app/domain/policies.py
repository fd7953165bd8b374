# app/domain/policies.py
from __future__ import annotations

import logging
from typing import Any, Iterable

from .parsing import parse_max_price, parse_price
from .types import RawListing

log = logging.getLogger(__name__)

RECENT_LISTING_MAX_DAYS = 2


def resolve_price_ceiling(max_price: Any) -> int | None:
    """
    Returns the ceiling to filter on, or None for "no filter".
    A ceiling that does not parse as an integer is treated as absent.
    """
    ceiling = parse_max_price(max_price)
    if ceiling is None and max_price not in (None, "") and str(max_price).strip():
        log.warning(f"Ignoring unparseable maxPrice={max_price!r}")
    return ceiling


def within_price_ceiling(listing: RawListing, ceiling: int | None) -> bool:
    if ceiling is None:
        return True
    price = parse_price(listing.price)
    # malformed prices can't be shown to satisfy the ceiling
    if price is None:
        return False
    return price <= ceiling


def apply_price_ceiling(listings: Iterable[RawListing], max_price: Any) -> list[RawListing]:
    ceiling = resolve_price_ceiling(max_price)
    return [it for it in listings if within_price_ceiling(it, ceiling)]
