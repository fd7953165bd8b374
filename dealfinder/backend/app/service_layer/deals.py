# app/service_layer/deals.py
from __future__ import annotations

import logging
import random
from typing import Sequence

from ..config import settings
from ..domain.errors import DataSourceError, DealFinderError, ValidationError
from ..domain.ranking import detail_url, rank, to_deal
from ..domain.rules import DEFAULT_RULES, ScoringRule
from ..domain.scoring import score_listings
from ..domain.types import Deal, RawListing

from ..adapters.ingestion.base import ListingSource
from ..adapters.ingestion.stub_json import StubJsonListingSource
from ..adapters.ingestion.synthetic import SyntheticListingSource

log = logging.getLogger(__name__)


def build_listing_source() -> ListingSource:
    """
    Provider builder that will NOT brick local dev.

    Unknown sources -> synthetic in dev/local/test, error in prod-like.
    """
    src = (settings.LISTING_SOURCE or "").strip()

    if src == "synthetic":
        return SyntheticListingSource.from_settings()
    if src == "stub_json":
        return StubJsonListingSource.from_settings()

    if settings.ENV.lower() in ("dev", "local", "test"):
        log.warning(f"Unknown LISTING_SOURCE={src!r}; falling back to synthetic")
        return SyntheticListingSource.from_settings()

    raise ValueError(f"Unknown LISTING_SOURCE={src!r}. Use synthetic or stub_json.")


def score_deals(
    listings: Sequence[RawListing],
    *,
    limit: int | None = None,
    rules: Sequence[ScoringRule] = DEFAULT_RULES,
    rng: random.Random | None = None,
    url_base: str | None = None,
) -> list[Deal]:
    """
    Score the whole batch (the average price needs all of it), keep the top
    `limit` by score, and attach a synthesized detail link to each.
    """
    n = settings.TOP_DEALS_LIMIT if limit is None else limit
    base = url_base or settings.MARKETPLACE_ITEM_URL_BASE

    top = rank(score_listings(listings, rules=rules), limit=n)
    return [to_deal(s, url=detail_url(base, rng)) for s in top]


async def find_deals(
    source: ListingSource,
    *,
    query: str | None,
    location: str | None = None,
    max_price: str | None = None,
    limit: int | None = None,
) -> list[Deal]:
    if not query or not query.strip():
        raise ValidationError("Query is required")

    try:
        listings = await source.fetch(query=query.strip(), location=location, max_price=max_price)
    except DealFinderError:
        raise
    except Exception as e:
        raise DataSourceError(f"{type(source).__name__} failed: {e}") from e

    deals = score_deals(listings, limit=limit)
    log.info(f"find_deals query={query!r}: {len(listings)} candidates -> {len(deals)} deals")
    return deals
