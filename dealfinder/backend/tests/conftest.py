# tests/conftest.py
import random

import httpx
import pytest

from app.domain.types import Condition, RawListing
from app.entrypoints.api.deps import get_listing_source
from app.entrypoints.fastapi_app import create_app


class _FixedListingSource:
    """Returns the listings it was built with; records the calls it got."""

    def __init__(self, listings=None, exc: Exception | None = None):
        self.listings = list(listings or [])
        self.exc = exc
        self.calls: list[dict] = []

    async def fetch(self, *, query, location=None, max_price=None):
        self.calls.append({"query": query, "location": location, "max_price": max_price})
        if self.exc is not None:
            raise self.exc
        return list(self.listings)


class _MinRandom(random.Random):
    """Always picks the bottom of every price range."""

    def randint(self, a, b):
        return a


class _MaxRandom(random.Random):
    def randint(self, a, b):
        return b


@pytest.fixture
def make_listing():
    def _make(
        price=200,
        *,
        title="Test item",
        location="San Francisco, CA",
        condition=Condition.good,
        description="",
        listed_days_ago=10,
    ) -> RawListing:
        return RawListing(
            title=title,
            price=price,
            location=location,
            condition=condition,
            description=description,
            listed_days_ago=listed_days_ago,
        )

    return _make


@pytest.fixture
def make_source():
    def _make(listings=None, exc: Exception | None = None) -> _FixedListingSource:
        return _FixedListingSource(listings, exc=exc)

    return _make


@pytest.fixture
def fixed_source(make_source):
    return make_source()


@pytest.fixture
def min_rng():
    return _MinRandom()


@pytest.fixture
def max_rng():
    return _MaxRandom()


@pytest.fixture
def app(fixed_source):
    app = create_app()
    app.dependency_overrides[get_listing_source] = lambda: fixed_source
    return app


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
