# app/adapters/ingestion/synthetic.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from ...config import settings
from ...domain.policies import apply_price_ceiling
from ...domain.types import Condition, RawListing
from .base import ListingSource

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingTemplate:
    title: str  # str.format template, {q} is the query
    price_min: int
    price_max: int  # inclusive
    default_location: str
    condition: Condition
    description: str
    listed_days_ago: int


# Rotation chosen so every scoring rule fires for at least one candidate.
TEMPLATES: tuple[ListingTemplate, ...] = (
    ListingTemplate(
        title="{q} - Excellent Condition",
        price_min=100,
        price_max=599,
        default_location="San Francisco, CA",
        condition=Condition.like_new,
        description="Barely used, no scratches, comes with original box and accessories",
        listed_days_ago=2,
    ),
    ListingTemplate(
        title="{q} - Great Deal!",
        price_min=50,
        price_max=349,
        default_location="Oakland, CA",
        condition=Condition.good,
        description="Works perfectly, minor cosmetic wear, great price",
        listed_days_ago=1,
    ),
    ListingTemplate(
        title="{q} Bundle - Must Sell",
        price_min=150,
        price_max=549,
        default_location="Berkeley, CA",
        condition=Condition.very_good,
        description="Moving sale, includes extras, quick pickup needed",
        listed_days_ago=5,
    ),
    ListingTemplate(
        title="Premium {q}",
        price_min=200,
        price_max=799,
        default_location="San Jose, CA",
        condition=Condition.excellent,
        description="Top condition, well maintained, all original parts",
        listed_days_ago=7,
    ),
    ListingTemplate(
        title="{q} - Price Reduced!",
        price_min=75,
        price_max=324,
        default_location="Palo Alto, CA",
        condition=Condition.fair,
        description="Some wear and tear, fully functional, motivated seller",
        listed_days_ago=10,
    ),
)


@dataclass
class SyntheticListingSource(ListingSource):
    """
    Offline stand-in for a marketplace search.

    Builds one candidate per template with a random price in the template's
    range. Pass a seeded Random for reproducible output.
    """

    rng: random.Random = field(default_factory=random.Random)
    templates: tuple[ListingTemplate, ...] = TEMPLATES

    @classmethod
    def from_settings(cls) -> "SyntheticListingSource":
        return cls(rng=random.Random(settings.RANDOM_SEED))

    def generate(self, query: str, location: str | None = None, max_price: str | None = None) -> list[RawListing]:
        loc = (location or "").strip()
        items = [
            RawListing(
                title=t.title.format(q=query),
                price=self.rng.randint(t.price_min, t.price_max),
                location=loc or t.default_location,
                condition=t.condition,
                description=t.description,
                listed_days_ago=t.listed_days_ago,
            )
            for t in self.templates
        ]
        out = apply_price_ceiling(items, max_price)
        log.debug(f"synthetic source: {len(items)} generated, {len(out)} within ceiling")
        return out

    async def fetch(
        self,
        *,
        query: str,
        location: str | None = None,
        max_price: str | None = None,
    ) -> list[RawListing]:
        return self.generate(query, location, max_price)
