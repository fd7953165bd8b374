# app/entrypoints/api/routers/deals.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_listing_source
from ....adapters.ingestion.base import ListingSource
from ....schemas import DealOut, ErrorOut, FindDealsRequest, FindDealsResponse
from ....service_layer.deals import find_deals

router = APIRouter(prefix="/api", tags=["deals"])


@router.post(
    "/find-deals",
    response_model=FindDealsResponse,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def find_deals_route(
    body: FindDealsRequest,
    source: ListingSource = Depends(get_listing_source),
) -> FindDealsResponse:
    deals = await find_deals(
        source,
        query=body.query,
        location=body.location,
        max_price=body.max_price,
    )
    return FindDealsResponse(deals=[DealOut.from_deal(d) for d in deals])
