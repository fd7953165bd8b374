# app/domain/rules.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol

from .policies import RECENT_LISTING_MAX_DAYS
from .types import Condition, RawListing


@dataclass(frozen=True)
class ScoringContext:
    """Batch-level facts a rule may compare a listing against."""

    avg_price: float


@dataclass(frozen=True)
class RuleHit:
    delta: int
    fragment: str


class ScoringRule(Protocol):
    name: str

    def evaluate(self, listing: RawListing, price: int, ctx: ScoringContext) -> RuleHit | None:
        ...


def js_round(x: float) -> int:
    # half rounds up, also for negatives (-2.5 -> -2)
    return int(math.floor(x + 0.5))


@dataclass(frozen=True)
class PredicateRule:
    name: str
    predicate: Callable[[RawListing], bool]
    delta: int
    fragment: str

    def evaluate(self, listing: RawListing, price: int, ctx: ScoringContext) -> RuleHit | None:
        if self.predicate(listing):
            return RuleHit(self.delta, self.fragment)
        return None


@dataclass(frozen=True)
class PriceTierRule:
    """
    Always hits, exactly one tier:
      price < avg * 0.7 -> +2
      price < avg * 0.9 -> +1
      otherwise         -> +0
    """

    name: str = "price_tier"
    excellent_ratio: float = 0.7
    good_ratio: float = 0.9

    def evaluate(self, listing: RawListing, price: int, ctx: ScoringContext) -> RuleHit | None:
        avg = ctx.avg_price
        if avg > 0 and price < avg * self.excellent_ratio:
            pct = js_round(((avg - price) / avg) * 100)
            return RuleHit(2, f"Excellent price - {pct}% below average. ")
        if avg > 0 and price < avg * self.good_ratio:
            return RuleHit(1, "Good price - below average market value. ")
        return RuleHit(0, "Fair price - in line with market value. ")


@dataclass(frozen=True)
class ConditionRule:
    name: str = "condition"

    def evaluate(self, listing: RawListing, price: int, ctx: ScoringContext) -> RuleHit | None:
        condition = listing.condition
        if condition in (Condition.like_new, Condition.excellent):
            return RuleHit(2, "Item is in excellent condition. ")
        if condition == Condition.very_good:
            return RuleHit(1, "Item is in very good condition. ")
        return None


def _is_recent(listing: RawListing) -> bool:
    days = listing.listed_days_ago
    return days is not None and days <= RECENT_LISTING_MAX_DAYS


def _mentions_packaging(listing: RawListing) -> bool:
    # case-sensitive on purpose: "Box" does not count
    d = listing.description or ""
    return "box" in d or "accessories" in d


def _mentions_urgency(listing: RawListing) -> bool:
    d = (listing.description or "").lower()
    return "must sell" in d or "moving" in d


DEFAULT_RULES: tuple[ScoringRule, ...] = (
    PriceTierRule(),
    ConditionRule(),
    PredicateRule("recency", _is_recent, 1, "Recently listed - act fast! "),
    PredicateRule("packaging", _mentions_packaging, 1, "Includes extras or original packaging. "),
    # text only, no score delta
    PredicateRule("urgency", _mentions_urgency, 0, "Seller is motivated - good negotiation opportunity. "),
)
