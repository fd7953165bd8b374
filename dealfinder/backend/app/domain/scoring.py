# app/domain/scoring.py
from __future__ import annotations

import logging
from typing import Sequence

from .errors import ScoringError
from .parsing import parse_price
from .rules import DEFAULT_RULES, ScoringContext, ScoringRule
from .types import RawListing, ScoredListing

log = logging.getLogger(__name__)

BASE_SCORE = 5
MAX_SCORE = 10

PRICE_UNAVAILABLE = "Price unavailable - unable to compare with market value."


def average_price(listings: Sequence[RawListing]) -> float | None:
    """Mean of the parseable prices; None when there are none."""
    prices = [p for p in (parse_price(it.price) for it in listings) if p is not None]
    if not prices:
        return None
    return sum(prices) / len(prices)


def _apply_rule(rule: ScoringRule, listing: RawListing, price: int, ctx: ScoringContext):
    try:
        return rule.evaluate(listing, price, ctx)
    except Exception as e:
        raise ScoringError(f"rule {rule.name!r} failed for {listing.title!r}: {e}") from e


def score_listing(
    listing: RawListing,
    ctx: ScoringContext | None,
    *,
    rules: Sequence[ScoringRule] = DEFAULT_RULES,
) -> ScoredListing:
    """
    Base 5 plus the additive deltas of every rule that hits, capped at 10.
    Fragments are joined in rule order.

    A listing whose price does not parse scores exactly the base.
    """
    price = parse_price(listing.price)
    if price is None or ctx is None:
        log.warning(f"Unparseable price {listing.price!r} on {listing.title!r}; scoring at base")
        return ScoredListing(listing=listing, deal_score=BASE_SCORE, reasoning=PRICE_UNAVAILABLE)

    score = BASE_SCORE
    reasoning = ""
    for rule in rules:
        try:
            hit = _apply_rule(rule, listing, price, ctx)
        except ScoringError as e:
            log.warning(str(e))
            continue
        if hit is None:
            continue
        score += hit.delta
        reasoning += hit.fragment

    return ScoredListing(
        listing=listing,
        deal_score=min(MAX_SCORE, score),
        reasoning=reasoning.rstrip(),
    )


def score_listings(
    listings: Sequence[RawListing],
    *,
    rules: Sequence[ScoringRule] = DEFAULT_RULES,
) -> list[ScoredListing]:
    if not listings:
        return []
    avg = average_price(listings)
    ctx = ScoringContext(avg_price=avg) if avg is not None else None
    return [score_listing(it, ctx, rules=rules) for it in listings]
