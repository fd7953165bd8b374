# app/entrypoints/api/deps.py
from __future__ import annotations

from ...adapters.ingestion.base import ListingSource
from ...service_layer.deals import build_listing_source


def get_listing_source() -> ListingSource:
    # fresh per request, sources hold their own rng and no shared state
    return build_listing_source()
