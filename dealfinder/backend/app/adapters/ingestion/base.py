# app/adapters/ingestion/base.py
from __future__ import annotations

from typing import Protocol

from ...domain.types import RawListing


class ListingSource(Protocol):
    """
    The seam for plugging in a real marketplace backend.

    Contract: return RawListings already filtered by the price ceiling,
    or raise DataSourceError. Anything doing network I/O owns its own
    timeout/retry policy.
    """

    async def fetch(
        self,
        *,
        query: str,
        location: str | None,
        max_price: str | None,
    ) -> list[RawListing]:
        raise NotImplementedError
