# app/domain/ranking.py
from __future__ import annotations

import random
import string
from typing import Sequence

from .types import Deal, ScoredListing

DEFAULT_LIMIT = 5

_BASE36 = string.digits + string.ascii_lowercase


def detail_url(base: str, rng: random.Random | None = None, *, length: int = 9) -> str:
    """Opaque, path-style link. No uniqueness or persistence guarantee."""
    r = rng or random
    token = "".join(r.choice(_BASE36) for _ in range(length))
    return f"{base.rstrip('/')}/{token}"


def rank(scored: Sequence[ScoredListing], *, limit: int = DEFAULT_LIMIT) -> list[ScoredListing]:
    """
    Highest score first. sorted() is stable, so equal scores keep input order.
    """
    if limit <= 0:
        return []
    ordered = sorted(scored, key=lambda s: s.deal_score, reverse=True)
    return ordered[:limit]


def to_deal(s: ScoredListing, *, url: str) -> Deal:
    it = s.listing
    return Deal(
        title=it.title,
        price=it.price,
        location=it.location,
        condition=it.condition,
        deal_score=s.deal_score,
        reasoning=s.reasoning,
        url=url,
    )
