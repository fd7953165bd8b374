# app/adapters/ingestion/stub_json.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ...config import settings
from ...domain.errors import DataSourceError
from ...domain.parsing import get_first, parse_price, to_condition, to_int
from ...domain.policies import apply_price_ceiling
from ...domain.types import RawListing
from .base import ListingSource

log = logging.getLogger(__name__)


def _as_list_of_dicts(payload: Any) -> list[dict[str, Any]]:
    """
    Accept either:
      - list[dict]
      - {"value": list[dict]} (OData-style envelope)
    """
    if isinstance(payload, list):
        return [x for x in payload if isinstance(x, dict)]
    if isinstance(payload, dict):
        v = payload.get("value")
        if isinstance(v, list):
            return [x for x in v if isinstance(x, dict)]
    return []


def _coerce_str(x: Any) -> str | None:
    if x is None:
        return None
    s = str(x).strip()
    return s if s else None


@dataclass
class StubJsonListingSource(ListingSource):
    """
    Offline listing source for development/testing.

    Reads listing dicts from one fixture file, by default:
      backend/data/stub_listings/listings.json

    Keys may be canonical (title, price, location, condition, description,
    listedDaysAgo) or the loose variants handled in _canonicalize.
    """

    fixtures_path: Path

    @classmethod
    def from_settings(cls) -> "StubJsonListingSource":
        # uvicorn is typically launched from backend/, so the default path is relative to it
        return cls(fixtures_path=Path(settings.STUB_LISTINGS_PATH))

    def _load(self) -> list[dict[str, Any]]:
        try:
            raw = json.loads(self.fixtures_path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise DataSourceError(f"stub listings file not found: {self.fixtures_path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise DataSourceError(f"stub listings file unreadable: {self.fixtures_path}: {e}") from e
        return _as_list_of_dicts(raw)

    async def fetch(
        self,
        *,
        query: str,
        location: str | None = None,
        max_price: str | None = None,
    ) -> list[RawListing]:
        q = query.strip().lower()
        out: list[RawListing] = []

        for it in self._load():
            listing = self._canonicalize(it, fallback_location=location)
            if listing is None:
                continue
            if q and q not in listing.title.lower():
                continue
            out.append(listing)

        return apply_price_ceiling(out, max_price)

    # -------------------------
    # Canonicalization
    # -------------------------

    def _canonicalize(self, it: dict[str, Any], *, fallback_location: str | None) -> RawListing | None:
        title = _coerce_str(get_first(it, "title", "Title", "name"))
        if not title:
            log.debug(f"skipping stub item without title: {it!r}")
            return None

        raw_price = get_first(it, "price", "Price", "listPrice", "ListPrice")
        price = parse_price(raw_price)

        raw_condition = get_first(it, "condition", "Condition")
        condition = to_condition(raw_condition)

        days = to_int(get_first(it, "listedDaysAgo", "listed_days_ago", "daysOnMarket"))

        # Malformed price/condition pass through untouched so the scorer can fail soft per item.
        return RawListing(
            title=title,
            price=price if price is not None else raw_price,
            location=_coerce_str(get_first(it, "location", "Location", "city", "City"))
            or _coerce_str(fallback_location)
            or "",
            condition=condition if condition is not None else raw_condition,
            description=_coerce_str(get_first(it, "description", "Description")) or "",
            listed_days_ago=days if days is not None and days >= 0 else None,
        )
