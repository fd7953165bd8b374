# app/domain/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Condition(str, Enum):
    like_new = "Like New"
    good = "Good"
    very_good = "Very Good"
    excellent = "Excellent"
    fair = "Fair"


@dataclass(frozen=True)
class RawListing:
    """
    Unscored candidate coming out of a listing source.

    price is whole currency units; "$123" only exists on the wire.
    Adapters may let a malformed price, an unknown condition or a missing
    listed_days_ago through; the scorer fails soft on each of them.
    """

    title: str
    price: int | str | None
    location: str
    condition: Condition | str | None
    description: str = ""
    listed_days_ago: int | None = 0


@dataclass(frozen=True)
class Deal:
    title: str
    price: int | str | None
    location: str
    condition: Condition | str | None
    deal_score: int
    reasoning: str
    url: str


@dataclass(frozen=True)
class ScoredListing:
    listing: RawListing
    deal_score: int
    reasoning: str
