# scripts/smoke_find_deals.py
import asyncio
import os

from app.logging_setup import configure_logging
from app.schemas import DealOut
from app.service_layer.deals import build_listing_source, find_deals


async def main():
    configure_logging()
    deals = await find_deals(
        build_listing_source(),
        query=os.environ.get("QUERY", "iPhone 13"),
        location=os.environ.get("LOCATION") or None,
        max_price=os.environ.get("MAX_PRICE") or None,
    )
    for d in deals:
        out = DealOut.from_deal(d)
        print(out.dealScore, out.price, out.title, "|", out.reasoning)


if __name__ == "__main__":
    asyncio.run(main())
